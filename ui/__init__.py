"""
UI components for Recipe Keeper.

Contains Streamlit-based pages for favorites, the shopping list, and backup
import/export. Pages hold the latest store snapshot in session state.
"""

from .favorites_view import FavoritesInterface, create_favorites_interface
from .shopping_list_view import ShoppingListInterface, create_shopping_list_interface
from .data_management import DataManagementInterface, create_data_management_interface

__all__ = [
    'FavoritesInterface',
    'create_favorites_interface',
    'ShoppingListInterface',
    'create_shopping_list_interface',
    'DataManagementInterface',
    'create_data_management_interface'
]
