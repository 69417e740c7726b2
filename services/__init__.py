"""
Services package for Recipe Keeper.

Contains the storage providers, the Favorites and Shopping List stores,
validation and recovery, the merge engine, and backup import/export.
"""

from .exceptions import RecipeKeeperError, StorageError, CodecError
from .storage_service import KeyValueStorage, InMemoryStorage, SQLiteStorage, get_storage_service
from .validation_service import validate_favorites, validate_shopping_list
from .merge_service import merge_favorites, merge_shopping_lists
from .favorites_service import FavoritesService
from .shopping_list_service import ShoppingListService
from .backup_service import BackupService


def get_favorites_service() -> FavoritesService:
    """Factory function to get favorites service instance"""
    return FavoritesService(get_storage_service())


def get_shopping_list_service() -> ShoppingListService:
    """Factory function to get shopping list service instance"""
    return ShoppingListService(get_storage_service())


def get_backup_service() -> BackupService:
    """Factory function to get backup service instance"""
    return BackupService(get_favorites_service(), get_shopping_list_service())


__all__ = [
    'RecipeKeeperError',
    'StorageError',
    'CodecError',
    'KeyValueStorage',
    'InMemoryStorage',
    'SQLiteStorage',
    'get_storage_service',
    'validate_favorites',
    'validate_shopping_list',
    'merge_favorites',
    'merge_shopping_lists',
    'FavoritesService',
    'ShoppingListService',
    'BackupService',
    'get_favorites_service',
    'get_shopping_list_service',
    'get_backup_service'
]
