"""
Recipe card rendering for the list page.
"""

import html
from typing import Any, Dict

import streamlit as st

from utils.recipe_display import (
    FALLBACK_IMAGE_URL,
    difficulty_badge_html,
    format_cooking_time,
    image_url_or_fallback,
    is_liked,
)

DETAIL_PAGE = "pages/01_📖_Recipe.py"
SELECTED_RECIPE_KEY = "selected_recipe_id"


def render_recipe_card(recipe: Dict[str, Any]) -> None:
    """
    Render one recipe tile with image, title, description, cooking time,
    difficulty badge and a "View Recipe" button that opens the detail page.
    """
    title = html.escape(recipe.get("title") or "Untitled recipe")
    description = html.escape(recipe.get("description") or "")
    image_url = html.escape(image_url_or_fallback(recipe), quote=True)
    liked_marker = " ❤️" if is_liked(recipe) else ""

    st.markdown(
        f"""
        <div class="recipe-card">
            <img src="{image_url}" alt="{title}" onerror="this.onerror=null;this.src='{FALLBACK_IMAGE_URL}';">
            <div class="recipe-card__body">
                <h3>{title}{liked_marker}</h3>
                <div class="recipe-card__description">{description}</div>
                <div class="recipe-card__meta">
                    <span>⏱️ {format_cooking_time(recipe.get("cooking_time"))}</span>
                    {difficulty_badge_html(recipe.get("difficulty"))}
                </div>
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    if st.button("View Recipe", key=f"view_recipe_{recipe['id']}", use_container_width=True, type="primary"):
        st.session_state[SELECTED_RECIPE_KEY] = recipe["id"]
        st.query_params["id"] = str(recipe["id"])
        st.switch_page(DETAIL_PAGE)
