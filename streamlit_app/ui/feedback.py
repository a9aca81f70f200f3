"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, and loading indicators
across all pages in a consistent manner.
"""

from contextlib import contextmanager
from typing import Optional
import streamlit as st


def show_error(message: str, hint: Optional[str] = None, retry_key: Optional[str] = None) -> bool:
    """
    Display a standardized error message with optional hint and retry button.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
        retry_key: When given, render a "Retry" button with this widget key

    Returns:
        True if the retry button was clicked
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")
    if retry_key:
        return st.button("Retry", key=retry_key, type="primary")
    return False


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Loading recipes…"):
            recipes = list_recipes()

    Args:
        label: Spinner label text (default: "Working…")
    """
    with st.spinner(label):
        yield
