"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend should go through functions in this module.

Key principles:
- Centralized error handling for network issues
- Graceful degradation when backend is unavailable
- Functions return parsed JSON (dict/list) or None on error, never raise

# NOTE: When adding new endpoints, follow this pattern:
    - Create a function that takes parameters needed for the endpoint
    - Use requests.get/post with a timeout
    - Return parsed JSON or None on error
    - Report errors via st.error or st.warning for user visibility
"""

import os
from typing import Any, Dict, List, Optional

import requests
import streamlit as st

DEFAULT_TIMEOUT = 10


def get_backend_url() -> str:
    """
    Get the backend API base URL from environment variable or use default.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000 for local development.
    """
    url = os.getenv("BACKEND_URL", "http://localhost:8000")
    return url.rstrip("/")


def _error_message(response: requests.Response) -> str:
    """Extract the {"error": ...} message from a backend response, if any."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return response.reason


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        The /health payload ({"status": "ok", "db_ok": ..., ...}) or None if
        the backend is unreachable or unhealthy.
    """
    try:
        response = requests.get(f"{get_backend_url()}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException:
        return None
    except ValueError:
        return None

    return data if data.get("status") == "ok" else None


def list_recipes(
    search: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> Optional[List[Dict[str, Any]]]:
    """
    List recipe summaries, newest first.

    Args:
        search: Optional search term (matched against title and description)
        limit: Optional page size (backend default: 20)
        offset: Optional number of recipes to skip

    Returns:
        List of recipe summary dicts (id, title, description, cooking_time,
        difficulty, image_url, created_at, liked_at), or None on error.
    """
    params: Dict[str, Any] = {}
    if search:
        params["search"] = search
    if limit is not None:
        params["limit"] = limit
    if offset is not None:
        params["offset"] = offset

    try:
        response = requests.get(f"{get_backend_url()}/recipes", params=params, timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.Timeout:
        st.error("Request timed out. The backend may be slow or unreachable.")
        return None
    except requests.exceptions.ConnectionError:
        st.error("Could not connect to backend. Please check that the backend is running.")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"An error occurred while loading recipes: {str(e)}")
        return None

    if not response.ok:
        st.error(f"Failed to load recipes: {_error_message(response)}")
        return None
    return response.json()


def get_recipe(recipe_id: int) -> Optional[Dict[str, Any]]:
    """
    Get a full recipe.

    Returns:
        Recipe dict, or None if it doesn't exist or the request failed.
        A missing recipe is reported with st.warning, other failures with st.error.
    """
    try:
        response = requests.get(f"{get_backend_url()}/recipes/{recipe_id}", timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.RequestException as e:
        st.error(f"Could not load recipe: {str(e)}")
        return None

    if response.status_code == 404:
        st.warning("Recipe not found.")
        return None
    if not response.ok:
        st.error(f"Failed to load recipe: {_error_message(response)}")
        return None
    return response.json()


def set_recipe_liked(recipe_id: int, liked: bool) -> Optional[Dict[str, Any]]:
    """
    Like or unlike a recipe.

    Args:
        recipe_id: Recipe identifier
        liked: True calls POST /recipes/{id}/like, False calls /unlike

    Returns:
        The updated recipe dict, or None on error.
    """
    action = "like" if liked else "unlike"
    try:
        response = requests.post(f"{get_backend_url()}/recipes/{recipe_id}/{action}", timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.RequestException as e:
        st.error(f"Failed to {action} recipe: {str(e)}")
        return None

    if not response.ok:
        st.error(f"Failed to {action} recipe: {_error_message(response)}")
        return None
    return response.json()


def toggle_like(recipe: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Like an unliked recipe or unlike a liked one; returns the updated recipe."""
    return set_recipe_liked(recipe["id"], liked=recipe.get("liked_at") is None)
