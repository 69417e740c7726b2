"""
Recipe models for Recipe Keeper.

A recipe is opaque to the store beyond its name, its ingredient lines and the
moment it was favorited. Everything else the application attaches to a recipe
(description, instructions, images, ratings...) travels untouched in `extra`
and is written back as it was read.
"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from utils.text_utils import normalize_key


# Persisted (camelCase) field names
RECIPE_NAME_FIELD = "recipeName"
INGREDIENTS_FIELD = "ingredients"
DATE_ADDED_FIELD = "dateAdded"
MENU_NAME_FIELD = "menuName"
FAVORITED_BY_FIELD = "favoritedBy"

KNOWN_FIELDS = (
    RECIPE_NAME_FIELD,
    INGREDIENTS_FIELD,
    DATE_ADDED_FIELD,
    MENU_NAME_FIELD,
    FAVORITED_BY_FIELD,
)


@dataclass
class Recipe:
    """
    Recipe as stored in Favorites.
    `date_added` is set exactly once, when the recipe is first favorited.
    """
    recipe_name: str
    ingredients: List[str] = field(default_factory=list)
    date_added: Optional[str] = None  # ISO-8601
    menu_name: Optional[str] = None  # set when the recipe came from a saved menu
    favorited_by: Optional[List[str]] = None  # user ids
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def comparison_key(self) -> str:
        """Case-insensitive identity of the recipe within a category"""
        return normalize_key(self.recipe_name)

    @property
    def is_favorited(self) -> bool:
        """A freshly generated recipe has no dateAdded until it is saved"""
        return self.date_added is not None

    def matches_name(self, name: str) -> bool:
        return self.comparison_key == normalize_key(name)

    def to_dict(self) -> Dict[str, Any]:
        """Persisted form; optional fields are only written when set"""
        data = copy.deepcopy(self.extra)
        data[RECIPE_NAME_FIELD] = self.recipe_name
        data[INGREDIENTS_FIELD] = list(self.ingredients)
        if self.date_added is not None:
            data[DATE_ADDED_FIELD] = self.date_added
        if self.menu_name is not None:
            data[MENU_NAME_FIELD] = self.menu_name
        if self.favorited_by is not None:
            data[FAVORITED_BY_FIELD] = list(self.favorited_by)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Recipe':
        """
        Build a recipe from its persisted form.
        Expects data that already passed validation.
        """
        extra = {key: copy.deepcopy(value) for key, value in data.items() if key not in KNOWN_FIELDS}
        favorited_by = data.get(FAVORITED_BY_FIELD)
        return cls(
            recipe_name=data[RECIPE_NAME_FIELD],
            ingredients=list(data.get(INGREDIENTS_FIELD, [])),
            date_added=data.get(DATE_ADDED_FIELD),
            menu_name=data.get(MENU_NAME_FIELD),
            favorited_by=list(favorited_by) if favorited_by is not None else None,
            extra=extra
        )


# Category name -> ordered recipes. Dicts keep insertion order, which is
# the category order shown to the user.
Favorites = Dict[str, List[Recipe]]


def favorites_to_dict(favorites: Favorites) -> Dict[str, List[Dict[str, Any]]]:
    """Persisted form of a whole Favorites collection"""
    return {
        category: [recipe.to_dict() for recipe in recipes]
        for category, recipes in favorites.items()
    }


def copy_favorites(favorites: Favorites) -> Favorites:
    """Independent snapshot of a Favorites collection"""
    return copy.deepcopy(favorites)


def find_recipe_index(recipes: List[Recipe], name: str) -> int:
    """Index of the first recipe matching `name` case-insensitively, or -1"""
    for index, recipe in enumerate(recipes):
        if recipe.matches_name(name):
            return index
    return -1
