"""
Shopping list UI for Recipe Keeper.
"""

import streamlit as st
from typing import Optional

from models import ShoppingList, ShoppingListItem
from services import ShoppingListService, StorageError, get_shopping_list_service
from utils import get_logger

logger = get_logger(__name__)

SHOPPING_LIST_SNAPSHOT_KEY = "shopping_list_snapshot"


class ShoppingListInterface:
    """Shopping list page: add, check off, edit, reorder and clear items"""

    def __init__(self, shopping_list_service: Optional[ShoppingListService] = None):
        self.shopping_list_service = shopping_list_service or get_shopping_list_service()
        self.SHOPPING_LIST_KEY = SHOPPING_LIST_SNAPSHOT_KEY

    def get_items(self) -> ShoppingList:
        if self.SHOPPING_LIST_KEY not in st.session_state:
            result = self.shopping_list_service.load()
            st.session_state[self.SHOPPING_LIST_KEY] = result.collection
            if result.note:
                st.info(f"ℹ️ {result.note}")
        return st.session_state[self.SHOPPING_LIST_KEY]

    def set_items(self, items: ShoppingList) -> None:
        st.session_state[self.SHOPPING_LIST_KEY] = items

    def render_shopping_list_page(self) -> None:
        """Render the shopping list page"""
        st.header("🛒 Shopping List")

        with st.form(key="add_shopping_items", clear_on_submit=True):
            text = st.text_area("Add items (one per line)")
            if st.form_submit_button("➕ Add"):
                self._run(lambda: self.shopping_list_service.add_items(text.splitlines()))
                st.rerun()

        items = self.get_items()
        if not items:
            st.info("Your shopping list is empty.")
            return

        for index, item in enumerate(items):
            self._render_item_row(index, item, items)

        col1, col2 = st.columns(2)
        with col1:
            if st.button("🧹 Clear checked", key="clear_checked"):
                self._run(self.shopping_list_service.clear_checked)
                st.success("✅ Checked items cleared.")
                st.rerun()
        with col2:
            if st.button("🗑️ Clear all", key="clear_all"):
                if st.session_state.get("confirm_clear_all", False):
                    self._run(self.shopping_list_service.clear_all)
                    st.session_state.pop("confirm_clear_all", None)
                    st.rerun()
                else:
                    st.session_state["confirm_clear_all"] = True
                    st.warning("Click clear all again to confirm")

    def _render_item_row(self, index: int, item: ShoppingListItem, items: ShoppingList) -> None:
        col1, col2, col3, col4, col5 = st.columns([1, 5, 1, 1, 1])

        with col1:
            checked = st.checkbox("done", value=item.checked, key=f"check_{index}_{item.text}",
                                  label_visibility="collapsed")
            if checked != item.checked:
                self._run(lambda: self.shopping_list_service.toggle_item(index))
                st.rerun()

        with col2:
            edited = st.text_input("item", value=item.text, key=f"text_{index}_{item.text}",
                                   label_visibility="collapsed")
            if edited.strip() and edited != item.text:
                self._run(lambda: self.shopping_list_service.update_item(
                    index, ShoppingListItem(text=edited.strip(), checked=item.checked)))
                st.rerun()

        with col3:
            if index > 0 and st.button("⬆️", key=f"up_{index}"):
                self._move(items, index, index - 1)
        with col4:
            if index < len(items) - 1 and st.button("⬇️", key=f"down_{index}"):
                self._move(items, index, index + 1)
        with col5:
            if st.button("🗑️", key=f"remove_{index}"):
                self._run(lambda: self.shopping_list_service.remove_item(index))
                st.rerun()

    def _move(self, items: ShoppingList, source: int, target: int) -> None:
        reordered = list(items)
        reordered.insert(target, reordered.pop(source))
        self._run(lambda: self.shopping_list_service.reorder(reordered))
        st.rerun()

    def _run(self, operation) -> None:
        try:
            self.set_items(operation())
        except StorageError as e:
            logger.error(f"Shopping list update failed: {e}")
            st.error(f"❌ Could not save the shopping list: {e}")


def create_shopping_list_interface(shopping_list_service: Optional[ShoppingListService] = None) -> ShoppingListInterface:
    """Factory function to create shopping list interface"""
    return ShoppingListInterface(shopping_list_service)
