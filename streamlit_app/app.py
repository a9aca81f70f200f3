"""
Recipe Catalog - Streamlit Frontend Main Entry Point.

This page lists recipes (newest first) in a three-column grid with a search
box. Searching filters by title or description on the backend; the search
runs when the input is committed (Enter or focus change), so typing does not
fire a request per keystroke.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
The recipe detail page lives in `pages/01_📖_Recipe.py`.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from utils.api_client import get_health_status, list_recipes
from ui.cards import render_recipe_card
from ui.feedback import show_empty_state, show_error, working_spinner
from ui.styles import load_global_styles

GRID_COLUMNS = 3

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Catalog",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()

with st.sidebar:
    st.markdown("### 🍳 **Recipe Catalog**")
    st.divider()
    with st.expander("System status", expanded=False):
        backend_status = get_health_status()
        if backend_status:
            st.markdown("**Backend:** 🟢")
            st.markdown(f"**Database:** {'🟢' if backend_status.get('db_ok') else '🔴'}")
        else:
            st.markdown("**Backend:** 🔴")
            st.caption("Start the API with `uvicorn api.main:app`.")

st.markdown("<h1 style='text-align:center;'>Discover Amazing Recipes</h1>", unsafe_allow_html=True)

_, search_col, _ = st.columns([1, 2, 1])
with search_col:
    search_term = st.text_input(
        "Search recipes",
        key="recipe_search",
        placeholder="Search recipes...",
        label_visibility="collapsed",
    )
searching = bool(search_term.strip())

with working_spinner("Searching…" if searching else "Loading recipes…"):
    recipes = list_recipes(search=search_term if searching else None)

if recipes is None:
    if show_error("Failed to load recipes", retry_key="retry_list"):
        st.rerun()
elif not recipes:
    show_empty_state("No recipes found.", "Try a different search term." if searching else None)
else:
    for start in range(0, len(recipes), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS, gap="medium")
        for column, recipe in zip(columns, recipes[start:start + GRID_COLUMNS]):
            with column:
                render_recipe_card(recipe)
