"""
Data models for Recipe Keeper.

This module contains the Favorites and Shopping List collection models, the
backup envelope, and the result types returned by the collection stores.
"""

from .recipe_models import Recipe, Favorites, favorites_to_dict, copy_favorites, find_recipe_index
from .shopping_models import ShoppingListItem, ShoppingList, shopping_list_to_dicts, copy_shopping_list
from .backup_models import BackupData
from .result_models import RecoveryResult, LoadResult, MergeResult, MoveResult, ImportResult

__all__ = [
    'Recipe',
    'Favorites',
    'favorites_to_dict',
    'copy_favorites',
    'find_recipe_index',
    'ShoppingListItem',
    'ShoppingList',
    'shopping_list_to_dicts',
    'copy_shopping_list',
    'BackupData',
    'RecoveryResult',
    'LoadResult',
    'MergeResult',
    'MoveResult',
    'ImportResult'
]
