"""
Favorites UI for Recipe Keeper.

Shows saved recipes grouped by category with remove and move actions. The
current Favorites snapshot lives in session state and is replaced by every
value the store returns.
"""

import streamlit as st
from typing import Optional

from models import Favorites, Recipe
from services import FavoritesService, StorageError, get_favorites_service
from utils import get_logger

logger = get_logger(__name__)

FAVORITES_SNAPSHOT_KEY = "favorites_snapshot"


class FavoritesInterface:
    """Favorites page: browse, remove and reorganize saved recipes"""

    def __init__(self, favorites_service: Optional[FavoritesService] = None):
        self.favorites_service = favorites_service or get_favorites_service()

        # Session state keys
        self.FAVORITES_KEY = FAVORITES_SNAPSHOT_KEY
        self.MOVING_RECIPE_KEY = "moving_recipe"

    def get_favorites(self) -> Favorites:
        """Current snapshot, loaded once per session"""
        if self.FAVORITES_KEY not in st.session_state:
            result = self.favorites_service.load()
            st.session_state[self.FAVORITES_KEY] = result.collection
            if result.note:
                st.info(f"ℹ️ {result.note}")
        return st.session_state[self.FAVORITES_KEY]

    def set_favorites(self, favorites: Favorites) -> None:
        st.session_state[self.FAVORITES_KEY] = favorites

    def render_favorites_page(self) -> None:
        """Render the favorites page"""
        st.header("⭐ Favorite Recipes")
        favorites = self.get_favorites()

        if not favorites:
            st.info("You haven't saved any recipes yet.")
            return

        for category, recipes in favorites.items():
            with st.expander(f"📂 {category} ({len(recipes)})", expanded=True):
                if not recipes:
                    st.caption("No recipes in this category.")
                for recipe in recipes:
                    self._render_recipe_row(recipe, category, favorites)

                if st.button("🗑️ Delete category", key=f"delete_category_{category}"):
                    self._run(lambda: self.favorites_service.remove_category(category))
                    st.rerun()

    def _render_recipe_row(self, recipe: Recipe, category: str, favorites: Favorites) -> None:
        row_key = f"{category}_{recipe.recipe_name}"
        col1, col2, col3 = st.columns([4, 1, 1])

        with col1:
            st.markdown(f"**{recipe.recipe_name}**")
            if recipe.date_added:
                st.caption(f"Saved {recipe.date_added[:10]}")
            if recipe.ingredients:
                st.markdown(", ".join(recipe.ingredients))

        with col2:
            if st.button("↪️ Move", key=f"move_{row_key}"):
                st.session_state[self.MOVING_RECIPE_KEY] = (recipe.recipe_name, category)

        with col3:
            if st.button("🗑️ Remove", key=f"remove_{row_key}"):
                self._run(lambda: self.favorites_service.remove_recipe_from_favorites(
                    recipe.recipe_name, category))
                st.rerun()

        if st.session_state.get(self.MOVING_RECIPE_KEY) == (recipe.recipe_name, category):
            self._render_move_form(recipe, category, favorites)

    def _render_move_form(self, recipe: Recipe, category: str, favorites: Favorites) -> None:
        with st.form(key=f"move_form_{category}_{recipe.recipe_name}"):
            others = [name for name in self.favorites_service.get_categories() if name != category]
            target = st.selectbox("Existing category", options=[""] + others)
            new_category = st.text_input("...or a new category")
            submitted = st.form_submit_button("Move")

        if submitted:
            destination = new_category.strip() or target
            try:
                result = self.favorites_service.move_recipe(recipe.recipe_name, category, destination)
            except StorageError as e:
                st.error(f"❌ Could not save favorites: {e}")
                return
            if result.success:
                self.set_favorites(result.favorites)
                st.session_state.pop(self.MOVING_RECIPE_KEY, None)
                st.success(f"✅ Moved '{recipe.recipe_name}' to '{destination}'")
                st.rerun()
            else:
                st.warning(result.message)

    def _run(self, operation) -> None:
        """Run a store mutation and keep the returned snapshot"""
        try:
            self.set_favorites(operation())
        except StorageError as e:
            logger.error(f"Favorites update failed: {e}")
            st.error(f"❌ Could not save favorites: {e}")


def create_favorites_interface(favorites_service: Optional[FavoritesService] = None) -> FavoritesInterface:
    """Factory function to create favorites interface"""
    return FavoritesInterface(favorites_service)
