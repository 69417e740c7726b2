"""
Shopping list store for Recipe Keeper.

The list is an ordered sequence of items. Out-of-range indices, duplicate
adds and empty input are treated as no-ops, not errors: they usually come
from a UI action racing a state change.
"""

from dataclasses import replace
from typing import Any, Iterable, List, Optional

from models import ShoppingListItem, ShoppingList, RecoveryResult, MergeResult, copy_shopping_list
from utils import get_config, get_logger, is_non_empty_string, normalize_key
from .collection_store import CollectionStore, Clock
from .merge_service import merge_shopping_lists
from .serialization import encode_shopping_list
from .storage_service import KeyValueStorage
from .validation_service import validate_shopping_list

logger = get_logger(__name__)


class ShoppingListService(CollectionStore[ShoppingList]):
    """Store for the ordered shopping list"""

    collection_name = "shopping list"
    reset_note = ("Your shopping list could not be read and was reset. "
                  "A backup copy of the damaged data was kept.")

    def __init__(self, storage: Optional[KeyValueStorage] = None, key: Optional[str] = None,
                 clock: Optional[Clock] = None):
        super().__init__(storage, key or get_config().shopping_list_key, clock)

    def _empty(self) -> ShoppingList:
        return []

    def _validate(self, raw: Any) -> RecoveryResult[ShoppingList]:
        return validate_shopping_list(raw)

    def _encode(self, collection: ShoppingList) -> str:
        return encode_shopping_list(collection)

    def _snapshot(self, collection: ShoppingList) -> ShoppingList:
        return copy_shopping_list(collection)

    def _in_range(self, items: ShoppingList, index: int) -> bool:
        return 0 <= index < len(items)

    def add_items(self, texts: Iterable[str]) -> ShoppingList:
        """
        Append new items in input order.
        Texts are trimmed; empty texts and texts already on the list
        (case-insensitive) are skipped.
        """
        items = self._current()
        known_keys = {item.comparison_key for item in items}
        added = 0

        for text in texts:
            cleaned = text.strip()
            if not cleaned or normalize_key(cleaned) in known_keys:
                continue
            items.append(ShoppingListItem(text=cleaned))
            known_keys.add(normalize_key(cleaned))
            added += 1

        if not added:
            return items

        logger.info(f"Added {added} item(s) to the shopping list")
        return self._commit(items)

    def update_item(self, index: int, item: ShoppingListItem) -> ShoppingList:
        """Replace the item at `index`; an out-of-range index or blank text leaves the list unchanged"""
        items = self._current()
        if not self._in_range(items, index):
            logger.debug(f"Ignoring update of out-of-range index {index}")
            return items
        if not is_non_empty_string(item.text):
            logger.debug("Ignoring update with empty item text")
            return items

        items[index] = replace(item)
        return self._commit(items)

    def toggle_item(self, index: int) -> ShoppingList:
        """Flip the checked state of the item at `index`"""
        items = self._current()
        if not self._in_range(items, index):
            return items

        items[index] = items[index].toggled()
        return self._commit(items)

    def remove_item(self, index: int) -> ShoppingList:
        """Remove the item at `index`; out-of-range is a no-op"""
        items = self._current()
        if not self._in_range(items, index):
            return items

        del items[index]
        return self._commit(items)

    def clear_checked(self) -> ShoppingList:
        """Remove every checked item, keeping the order of the rest"""
        items = self._current()
        remaining = [item for item in items if not item.checked]
        if len(remaining) == len(items):
            return items

        logger.info(f"Cleared {len(items) - len(remaining)} checked item(s)")
        return self._commit(remaining)

    def clear_all(self) -> ShoppingList:
        """Empty the list"""
        logger.info("Cleared the shopping list")
        return self._commit([])

    def reorder(self, items: List[ShoppingListItem]) -> ShoppingList:
        """
        Replace the whole list with a caller-supplied permutation.
        The order comes from a drag gesture in the UI and is trusted as-is.
        """
        return self._commit(copy_shopping_list(items))

    def find_item(self, text: str) -> Optional[int]:
        """Index of the item whose text matches case-insensitively, or None"""
        key = normalize_key(text)
        for index, item in enumerate(self._current()):
            if item.comparison_key == key:
                return index
        return None

    def merge(self, existing: ShoppingList, imported: ShoppingList) -> MergeResult[ShoppingList]:
        """Append imported items that are not already on the list"""
        return merge_shopping_lists(existing, imported)
