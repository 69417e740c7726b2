"""
Backup envelope for import/export.

Both parts are independently optional, so a partial backup is still valid.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .recipe_models import Favorites, favorites_to_dict
from .shopping_models import ShoppingList, shopping_list_to_dicts

BACKUP_FORMAT_VERSION = 1

FAVORITES_FIELD = "favorites"
SHOPPING_LIST_FIELD = "shoppingList"


@dataclass
class BackupData:
    """Optional Favorites snapshot and optional shopping list"""
    favorites: Optional[Favorites] = None
    shopping_list: Optional[ShoppingList] = None
    exported_at: Optional[str] = None
    version: int = BACKUP_FORMAT_VERSION

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"version": self.version}
        if self.exported_at:
            data["exportedAt"] = self.exported_at
        if self.favorites is not None:
            data[FAVORITES_FIELD] = favorites_to_dict(self.favorites)
        if self.shopping_list is not None:
            data[SHOPPING_LIST_FIELD] = shopping_list_to_dicts(self.shopping_list)
        return data
