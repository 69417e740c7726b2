"""
Result models returned by the collection stores.

Recovery and merge outcomes are plain values, never exceptions.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from .recipe_models import Favorites
from .shopping_models import ShoppingList

T = TypeVar("T")


@dataclass
class RecoveryResult(Generic[T]):
    """
    Best-effort valid collection produced by validation.
    `note` is a human-readable description of what was discarded, if anything.
    """
    value: T
    note: Optional[str] = None
    discarded_count: int = 0
    repaired_count: int = 0
    was_reset: bool = False

    @property
    def needs_healing(self) -> bool:
        """True when the persisted form differs from the recovered value"""
        return self.was_reset or self.discarded_count > 0 or self.repaired_count > 0


@dataclass
class LoadResult(Generic[T]):
    """Collection read from storage plus an optional recovery note"""
    collection: T
    note: Optional[str] = None


@dataclass
class MergeResult(Generic[T]):
    """Merged collection and the number of net-new entries it gained"""
    merged: T
    new_count: int = 0


@dataclass
class MoveResult:
    """Outcome of moving a recipe between favorite categories"""
    favorites: Favorites
    success: bool
    message: Optional[str] = None


@dataclass
class ImportResult:
    """Outcome of importing a backup into both stores"""
    favorites: Favorites
    shopping_list: ShoppingList
    new_recipes_count: int = 0
    new_items_count: int = 0
    notes: List[str] = field(default_factory=list)

    def get_status_summary(self) -> str:
        """Human-readable summary for the import notification"""
        summary = (f"Imported {self.new_recipes_count} new recipe(s) and "
                   f"{self.new_items_count} new shopping list item(s).")
        if self.notes:
            summary += " " + " ".join(self.notes)
        return summary
