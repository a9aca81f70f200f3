"""
UI Styling and Components Module.

This module provides global CSS styling, recipe card rendering and feedback
states for the Recipe Catalog Streamlit app.
"""

from ui.styles import load_global_styles
from ui.feedback import show_error, show_empty_state, working_spinner

__all__ = [
    "load_global_styles",
    "show_error",
    "show_empty_state",
    "working_spinner",
]
