#!/usr/bin/env python3
"""
Recipe Keeper - Main Application Entry Point

Hosts the Favorites and Shopping List stores behind a small Streamlit UI.
Run with: streamlit run main.py
"""

import sys
import streamlit as st
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from services import StorageError, get_favorites_service, get_shopping_list_service, get_backup_service
from ui import create_favorites_interface, create_shopping_list_interface, create_data_management_interface
from utils import get_config, setup_logging


def get_interfaces():
    """Build the page interfaces once per session"""
    if 'interfaces' not in st.session_state:
        setup_logging()
        favorites_service = get_favorites_service()
        shopping_list_service = get_shopping_list_service()
        st.session_state.interfaces = {
            'favorites': create_favorites_interface(favorites_service),
            'shopping_list': create_shopping_list_interface(shopping_list_service),
            'data': create_data_management_interface(get_backup_service()),
        }
    return st.session_state.interfaces


def main():
    """Main application entry point"""
    st.set_page_config(
        page_title="Recipe Keeper",
        page_icon="🍳",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    st.title("🍳 Recipe Keeper")

    try:
        interfaces = get_interfaces()
    except StorageError as e:
        st.error(f"❌ Storage is not available: {e}")
        return

    config = get_config()
    if config.debug_mode:
        st.sidebar.caption(f"Storage: {config.storage_backend} ({config.database_path})")

    page = st.sidebar.radio("Go to", ["⭐ Favorites", "🛒 Shopping List", "💾 Backup"])

    try:
        if page == "⭐ Favorites":
            interfaces['favorites'].render_favorites_page()
        elif page == "🛒 Shopping List":
            interfaces['shopping_list'].render_shopping_list_page()
        else:
            interfaces['data'].render_data_management_page()
    except StorageError as e:
        st.error(f"❌ Could not load your data: {e}")


if __name__ == "__main__":
    main()
