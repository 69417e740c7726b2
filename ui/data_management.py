"""
Backup export/import UI for Recipe Keeper.

The file download and upload happen here; the backup service only sees text.
"""

import streamlit as st
from datetime import datetime
from typing import Optional

from services import BackupService, StorageError, get_backup_service
from utils import get_logger
from .favorites_view import FAVORITES_SNAPSHOT_KEY
from .shopping_list_view import SHOPPING_LIST_SNAPSHOT_KEY

logger = get_logger(__name__)


class DataManagementInterface:
    """Export the collections to a backup file or merge one back in"""

    def __init__(self, backup_service: Optional[BackupService] = None):
        self.backup_service = backup_service or get_backup_service()

    def render_data_management_page(self) -> None:
        st.header("💾 Backup & Restore")

        st.subheader("Export")
        try:
            backup_json = self.backup_service.export_json()
        except StorageError as e:
            st.error(f"❌ Could not read your data: {e}")
            return

        st.download_button(
            "⬇️ Download backup",
            data=backup_json,
            file_name=f"recipe_keeper_backup_{datetime.now():%Y%m%d_%H%M}.json",
            mime="application/json"
        )

        st.subheader("Import")
        st.caption("Imported recipes and items are added to what you have; nothing is overwritten.")
        uploaded = st.file_uploader("Backup file", type=["json"])
        if uploaded is not None and st.button("⬆️ Import backup"):
            text = uploaded.getvalue().decode("utf-8", errors="replace")
            try:
                result = self.backup_service.import_backup(text)
            except StorageError as e:
                logger.error(f"Import failed: {e}")
                st.error(f"❌ Import failed: {e}")
                return

            st.session_state[FAVORITES_SNAPSHOT_KEY] = result.favorites
            st.session_state[SHOPPING_LIST_SNAPSHOT_KEY] = result.shopping_list
            st.success(f"✅ {result.get_status_summary()}")


def create_data_management_interface(backup_service: Optional[BackupService] = None) -> DataManagementInterface:
    """Factory function to create data management interface"""
    return DataManagementInterface(backup_service)
