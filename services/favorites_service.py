"""
Favorites store for Recipe Keeper.

Handles the categorized collection of saved recipes: loading with recovery,
adding, removing and moving recipes, category management, and merging an
imported backup. Every mutation persists the full collection and returns a
new snapshot.
"""

import copy
from dataclasses import replace
from typing import Any, List, Optional

from models import (
    Recipe, Favorites, RecoveryResult, MergeResult, MoveResult,
    copy_favorites, find_recipe_index
)
from utils import get_config, get_logger, is_non_empty_string, normalize_key
from .collection_store import CollectionStore, Clock
from .merge_service import merge_favorites
from .serialization import encode_favorites
from .storage_service import KeyValueStorage
from .validation_service import validate_favorites

logger = get_logger(__name__)


class FavoritesService(CollectionStore[Favorites]):
    """
    Store for Favorites: category name -> ordered recipes.
    Recipe names are matched case-insensitively within a category.
    """

    collection_name = "favorites"
    reset_note = ("Your favorite recipes could not be read and were reset. "
                  "A backup copy of the damaged data was kept.")

    def __init__(self, storage: Optional[KeyValueStorage] = None, key: Optional[str] = None,
                 clock: Optional[Clock] = None):
        super().__init__(storage, key or get_config().favorites_key, clock)

    def _empty(self) -> Favorites:
        return {}

    def _validate(self, raw: Any) -> RecoveryResult[Favorites]:
        return validate_favorites(raw)

    def _encode(self, collection: Favorites) -> str:
        return encode_favorites(collection)

    def _snapshot(self, collection: Favorites) -> Favorites:
        return copy_favorites(collection)

    # Recipe operations

    def add_recipe_to_favorites(self, recipe: Recipe, category: str) -> Favorites:
        """
        Add a recipe to a category, creating the category if needed.

        A recipe with the same name already in the category is replaced in
        place and keeps its original dateAdded; otherwise the recipe is
        stamped with the current time and appended.
        """
        favorites = self._current()

        if not is_non_empty_string(category) or not is_non_empty_string(recipe.recipe_name):
            logger.debug("Ignoring add with an empty category or recipe name")
            return favorites

        recipes = favorites.setdefault(category, [])
        to_save = copy.deepcopy(recipe)
        index = find_recipe_index(recipes, recipe.recipe_name)

        if index != -1:
            original = recipes[index]
            to_save.date_added = original.date_added or self.clock().isoformat()
            recipes[index] = to_save
            logger.info(f"Updated '{recipe.recipe_name}' in '{category}'")
        else:
            to_save.date_added = self.clock().isoformat()
            recipes.append(to_save)
            logger.info(f"Added '{recipe.recipe_name}' to '{category}'")

        return self._commit(favorites)

    def remove_recipe_from_favorites(self, recipe_name: str, category: str) -> Favorites:
        """Remove a recipe; a category left empty is removed as well"""
        favorites = self._current()

        recipes = favorites.get(category)
        if recipes is None:
            return favorites

        index = find_recipe_index(recipes, recipe_name)
        if index == -1:
            return favorites

        del recipes[index]
        if not recipes:
            del favorites[category]
        logger.info(f"Removed '{recipe_name}' from '{category}'")
        return self._commit(favorites)

    def move_recipe(self, recipe_name: str, from_category: str, to_category: str) -> MoveResult:
        """
        Move a recipe between categories.
        Fails without saving when the source or recipe is missing or the
        destination already holds a recipe with that name.
        """
        favorites = self._current()

        source = favorites.get(from_category)
        if source is None:
            return MoveResult(favorites, False, f"Category '{from_category}' was not found.")

        index = find_recipe_index(source, recipe_name)
        if index == -1:
            return MoveResult(favorites, False,
                              f"Recipe '{recipe_name}' was not found in '{from_category}'.")

        if not is_non_empty_string(to_category) or to_category == from_category:
            return MoveResult(favorites, False, "Choose a different destination category.")

        if find_recipe_index(favorites.get(to_category, []), recipe_name) != -1:
            return MoveResult(favorites, False,
                              f"A recipe named '{recipe_name}' already exists in '{to_category}'.")

        moved = source.pop(index)
        if not source:
            del favorites[from_category]
        favorites.setdefault(to_category, []).append(moved)

        logger.info(f"Moved '{recipe_name}' from '{from_category}' to '{to_category}'")
        return MoveResult(self._commit(favorites), True)

    def update_recipe_categories(self, recipe: Recipe, categories: List[str]) -> Favorites:
        """
        Make a recipe belong to exactly the given categories.
        Copies are added where missing and removed from deselected categories.
        """
        favorites = self._current()
        if not is_non_empty_string(recipe.recipe_name):
            logger.debug("Ignoring category update for a recipe without a name")
            return favorites

        key = normalize_key(recipe.recipe_name)
        targets = [category for category in dict.fromkeys(categories) if is_non_empty_string(category)]

        current = [category for category, recipes in favorites.items()
                   if any(r.comparison_key == key for r in recipes)]
        if not current:
            logger.warning(f"Recipe '{recipe.recipe_name}' is not in favorites yet; adding it")

        for category in targets:
            if category in current:
                continue
            to_save = copy.deepcopy(recipe)
            to_save.date_added = recipe.date_added or self.clock().isoformat()
            favorites.setdefault(category, []).append(to_save)

        for category in current:
            if category in targets:
                continue
            favorites[category] = [r for r in favorites[category] if r.comparison_key != key]
            if not favorites[category]:
                del favorites[category]

        return self._commit(favorites)

    def update_favorite_status(self, recipe_name: str, category: str, user_ids: List[str]) -> Favorites:
        """Replace the list of users who marked a recipe as their favorite"""
        favorites = self._current()

        recipes = favorites.get(category)
        index = find_recipe_index(recipes, recipe_name) if recipes else -1
        if index == -1:
            return favorites

        recipes[index] = replace(recipes[index], favorited_by=list(user_ids))
        return self._commit(favorites)

    # Category operations

    def remove_category(self, category: str) -> Favorites:
        """Delete a category and all of its recipes"""
        favorites = self._current()
        if category not in favorites:
            return favorites

        removed = favorites.pop(category)
        logger.info(f"Removed category '{category}' with {len(removed)} recipe(s)")
        return self._commit(favorites)

    def remove_menu_from_favorites(self, menu_name: str, category: str) -> Favorites:
        """Remove every recipe of a saved menu from a category"""
        favorites = self._current()
        recipes = favorites.get(category)
        if recipes is None:
            return favorites

        remaining = [r for r in recipes if r.menu_name != menu_name]
        if len(remaining) == len(recipes):
            return favorites

        if remaining:
            favorites[category] = remaining
        else:
            del favorites[category]
        logger.info(f"Removed menu '{menu_name}' from '{category}'")
        return self._commit(favorites)

    # Import

    def merge(self, existing: Favorites, imported: Favorites) -> MergeResult[Favorites]:
        """Merge imported Favorites into existing ones; existing recipes win"""
        return merge_favorites(existing, imported)

    def get_categories(self) -> List[str]:
        return list(self._current().keys())
