"""
Validation and recovery for persisted and imported collections.

Both validators are pure functions that never raise. They return a
best-effort valid collection plus an optional note describing what had to be
discarded.
"""

from typing import Any, Optional, Tuple

from models import Recipe, Favorites, ShoppingListItem, ShoppingList, RecoveryResult
from models.recipe_models import (
    RECIPE_NAME_FIELD, INGREDIENTS_FIELD, DATE_ADDED_FIELD, MENU_NAME_FIELD, FAVORITED_BY_FIELD
)
from utils import get_logger, is_non_empty_string, pluralize

logger = get_logger(__name__)


FAVORITES_RESET_NOTE = "Favorites data had an invalid format and was reset to an empty collection."
SHOPPING_LIST_RESET_NOTE = "Shopping list data had an invalid format and was reset to an empty list."


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _recover_recipe(entry: Any) -> Tuple[Optional[Recipe], int]:
    """
    Build a Recipe from a raw entry.
    Returns (None, 0) for entries that cannot be kept, otherwise the recipe
    and the number of optional fields that had to be cleared.
    """
    if not isinstance(entry, dict):
        return None, 0
    if not is_non_empty_string(entry.get(RECIPE_NAME_FIELD)):
        return None, 0
    if not _is_string_list(entry.get(INGREDIENTS_FIELD)):
        return None, 0

    data = dict(entry)
    repairs = 0

    # Legacy entries without dateAdded are kept as-is
    if DATE_ADDED_FIELD in data and not isinstance(data[DATE_ADDED_FIELD], str):
        del data[DATE_ADDED_FIELD]
        repairs += 1
    if MENU_NAME_FIELD in data and not isinstance(data[MENU_NAME_FIELD], str):
        del data[MENU_NAME_FIELD]
        repairs += 1
    if FAVORITED_BY_FIELD in data and not _is_string_list(data[FAVORITED_BY_FIELD]):
        del data[FAVORITED_BY_FIELD]
        repairs += 1

    return Recipe.from_dict(data), repairs


def _favorites_note(dropped_categories: int, dropped_recipes: int) -> Optional[str]:
    parts = []
    if dropped_recipes:
        parts.append(pluralize(dropped_recipes, "invalid favorite entry", "invalid favorite entries"))
    if dropped_categories:
        parts.append(pluralize(dropped_categories, "invalid favorite category", "invalid favorite categories"))
    if not parts:
        return None
    return "Removed " + " and ".join(parts) + "."


def validate_favorites(raw: Any) -> RecoveryResult[Favorites]:
    """
    Validate a decoded Favorites value.

    A valid value maps non-empty category names to lists of recipes; each
    recipe needs a non-empty `recipeName` and an `ingredients` list of
    strings. Categories that are not lists and recipes that fail those checks
    are dropped. A category whose recipes were all dropped stays, empty.

    Args:
        raw: Decoded JSON value; absence of stored data is handled by the caller

    Returns:
        RecoveryResult with the recovered Favorites and an optional note
    """
    if not isinstance(raw, dict):
        logger.warning(f"Favorites data is a {type(raw).__name__}, not a mapping; resetting")
        return RecoveryResult(value={}, note=FAVORITES_RESET_NOTE, was_reset=True)

    favorites: Favorites = {}
    dropped_categories = 0
    dropped_recipes = 0
    repaired = 0

    for category, entries in raw.items():
        if not is_non_empty_string(category):
            logger.warning("Skipping favorite category with an empty name")
            dropped_categories += 1
            continue

        if not isinstance(entries, list):
            logger.warning(f"Skipping corrupted category '{category}' (not a list)")
            dropped_categories += 1
            continue

        recipes = []
        for index, entry in enumerate(entries):
            recipe, repairs = _recover_recipe(entry)
            if recipe is None:
                logger.warning(f"Dropping invalid recipe at index {index} in category '{category}'")
                dropped_recipes += 1
                continue
            repaired += repairs
            recipes.append(recipe)

        favorites[category] = recipes

    if repaired:
        logger.info(f"Silently repaired {repaired} recipe field(s)")

    return RecoveryResult(
        value=favorites,
        note=_favorites_note(dropped_categories, dropped_recipes),
        discarded_count=dropped_categories + dropped_recipes,
        repaired_count=repaired
    )


def _recover_item(entry: Any) -> Tuple[Optional[ShoppingListItem], int]:
    if not isinstance(entry, dict):
        return None, 0
    text = entry.get("text")
    if not is_non_empty_string(text):
        return None, 0

    repairs = 0
    checked = entry.get("checked")
    if not isinstance(checked, bool):
        # Missing or malformed checked state defaults to unchecked
        checked = False
        repairs += 1
    if set(entry) - {"text", "checked"}:
        repairs += 1

    return ShoppingListItem(text=text, checked=checked), repairs


def validate_shopping_list(raw: Any) -> RecoveryResult[ShoppingList]:
    """
    Validate a decoded shopping list.

    A valid value is a list of objects with a non-empty string `text`; other
    elements are dropped and a missing `checked` defaults to False.
    """
    if not isinstance(raw, list):
        logger.warning(f"Shopping list data is a {type(raw).__name__}, not a list; resetting")
        return RecoveryResult(value=[], note=SHOPPING_LIST_RESET_NOTE, was_reset=True)

    items: ShoppingList = []
    dropped = 0
    repaired = 0

    for index, entry in enumerate(raw):
        item, repairs = _recover_item(entry)
        if item is None:
            logger.warning(f"Dropping invalid shopping list item at index {index}")
            dropped += 1
            continue
        repaired += repairs
        items.append(item)

    note = None
    if dropped:
        note = "Removed " + pluralize(dropped, "invalid shopping list item") + "."

    return RecoveryResult(value=items, note=note, discarded_count=dropped, repaired_count=repaired)
