"""
Shopping list models for Recipe Keeper.

The shopping list is an ordered sequence: order is user-controlled through
drag-reordering and must survive persistence round trips.
"""

from dataclasses import dataclass, replace
from typing import List, Dict, Any

from utils.text_utils import normalize_key


@dataclass
class ShoppingListItem:
    """Individual item in the shopping list"""
    text: str
    checked: bool = False

    @property
    def comparison_key(self) -> str:
        """Identity for dedup and merge; checked state is ignored"""
        return normalize_key(self.text)

    def toggled(self) -> 'ShoppingListItem':
        """Copy of the item with its checked state flipped"""
        return replace(self, checked=not self.checked)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "checked": self.checked}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShoppingListItem':
        return cls(text=data["text"], checked=bool(data.get("checked", False)))


ShoppingList = List[ShoppingListItem]


def shopping_list_to_dicts(items: ShoppingList) -> List[Dict[str, Any]]:
    """Persisted form of a whole shopping list"""
    return [item.to_dict() for item in items]


def copy_shopping_list(items: ShoppingList) -> ShoppingList:
    """Independent snapshot of a shopping list"""
    return [replace(item) for item in items]
