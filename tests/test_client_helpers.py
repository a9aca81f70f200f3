"""
Tests for the Streamlit client's display helpers and API client.

The API client is exercised with requests and streamlit patched out, so no
backend or Streamlit runtime is needed.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from streamlit_app.utils import api_client
from streamlit_app.utils.recipe_display import (
    DEFAULT_DIFFICULTY_COLOR,
    DIFFICULTY_COLORS,
    FALLBACK_IMAGE_URL,
    difficulty_badge_html,
    difficulty_colors,
    format_cooking_time,
    format_created_at,
    format_liked_at,
    image_url_or_fallback,
    is_liked,
)


class TestRecipeDisplay:
    @pytest.mark.parametrize("label", ["easy", "EASY", " Easy "])
    def test_difficulty_is_case_insensitive(self, label):
        assert difficulty_colors(label) == DIFFICULTY_COLORS["easy"]

    @pytest.mark.parametrize("label", [None, "", "extreme"])
    def test_unknown_difficulty_uses_default(self, label):
        assert difficulty_colors(label) == DEFAULT_DIFFICULTY_COLOR

    def test_badge_shows_lowercase_label(self):
        assert ">hard</span>" in difficulty_badge_html("Hard")

    @pytest.mark.parametrize("recipe", [{}, {"image_url": None}, {"image_url": "  "}])
    def test_missing_image_uses_fallback(self, recipe):
        assert image_url_or_fallback(recipe) == FALLBACK_IMAGE_URL

    def test_image_url_is_used_when_present(self):
        assert image_url_or_fallback({"image_url": "https://example.com/a.jpg"}) == "https://example.com/a.jpg"

    @pytest.mark.parametrize(
        "minutes,expected",
        [(25, "25 min"), (60, "1 h"), (90, "1 h 30 min"), (0, "-"), (None, "-")],
    )
    def test_format_cooking_time(self, minutes, expected):
        assert format_cooking_time(minutes) == expected

    def test_liked_state(self):
        assert is_liked({"liked_at": "2024-01-15T10:30:00"})
        assert not is_liked({"liked_at": None})
        assert format_liked_at({"liked_at": "2024-01-15T10:30:00"}) == "15 Jan 2024"
        assert format_liked_at({"liked_at": None}) is None

    def test_format_created_at(self):
        assert format_created_at({"created_at": "2024-01-03T12:00:00Z"}) == "03 Jan 2024"
        assert format_created_at({}) == "-"


def _response(status_code, payload):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload
    response.reason = "Error"
    response.text = ""
    return response


@pytest.fixture
def mock_st():
    with patch.object(api_client, "st") as st:
        yield st


class TestApiClient:
    def test_list_recipes_sends_only_given_params(self, mock_st, monkeypatch):
        monkeypatch.setenv("BACKEND_URL", "http://backend:8000/")
        with patch.object(api_client.requests, "get", return_value=_response(200, [])) as get:
            assert api_client.list_recipes(search="tofu") == []

        get.assert_called_once_with(
            "http://backend:8000/recipes", params={"search": "tofu"}, timeout=api_client.DEFAULT_TIMEOUT
        )

    def test_list_recipes_reports_backend_error(self, mock_st):
        with patch.object(api_client.requests, "get", return_value=_response(500, {"error": "Failed to fetch recipes"})):
            assert api_client.list_recipes() is None

        mock_st.error.assert_called_once()
        assert "Failed to fetch recipes" in mock_st.error.call_args[0][0]

    def test_list_recipes_handles_connection_error(self, mock_st):
        with patch.object(api_client.requests, "get", side_effect=requests.exceptions.ConnectionError()):
            assert api_client.list_recipes() is None
        mock_st.error.assert_called_once()

    def test_get_recipe_not_found_warns(self, mock_st):
        with patch.object(api_client.requests, "get", return_value=_response(404, {"error": "Recipe not found"})):
            assert api_client.get_recipe(9999) is None

        mock_st.warning.assert_called_once_with("Recipe not found.")
        mock_st.error.assert_not_called()

    @pytest.mark.parametrize("liked_at,action", [(None, "like"), ("2024-01-15T10:30:00", "unlike")])
    def test_toggle_like_calls_matching_endpoint(self, mock_st, monkeypatch, liked_at, action):
        monkeypatch.setenv("BACKEND_URL", "http://backend:8000")
        updated = {"id": 7, "liked_at": None if liked_at else "2024-01-15T10:30:00"}

        with patch.object(api_client.requests, "post", return_value=_response(200, updated)) as post:
            assert api_client.toggle_like({"id": 7, "liked_at": liked_at}) == updated

        post.assert_called_once_with(f"http://backend:8000/recipes/7/{action}", timeout=api_client.DEFAULT_TIMEOUT)
