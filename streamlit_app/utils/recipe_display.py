"""
Display helpers for recipes.

Pure functions (no Streamlit calls) so they can be unit tested:
- difficulty styling, compared case-insensitively
- image URL with a fallback for missing images
- short formatting helpers for cards
"""

from datetime import datetime
from typing import Any, Dict, Optional

FALLBACK_IMAGE_URL = "https://images.unsplash.com/photo-1495521821757-a1efb6729352?w=400"

# Badge colors (background, text) per difficulty
DIFFICULTY_COLORS = {
    "easy": ("#dcfce7", "#166534"),
    "medium": ("#fef9c3", "#854d0e"),
    "hard": ("#fee2e2", "#991b1b"),
}
DEFAULT_DIFFICULTY_COLOR = ("#f3f4f6", "#1f2937")


def difficulty_colors(difficulty: Optional[str]) -> tuple:
    """Return (background, text) colors for a difficulty label."""
    if not difficulty:
        return DEFAULT_DIFFICULTY_COLOR
    return DIFFICULTY_COLORS.get(difficulty.strip().lower(), DEFAULT_DIFFICULTY_COLOR)


def difficulty_badge_html(difficulty: Optional[str]) -> str:
    background, color = difficulty_colors(difficulty)
    label = (difficulty or "unknown").strip().lower()
    return (
        f'<span class="recipe-badge" style="background:{background};color:{color};">'
        f"{label}</span>"
    )


def image_url_or_fallback(recipe: Dict[str, Any]) -> str:
    """Use the recipe's image_url, or the fallback image when it is missing or blank."""
    url = recipe.get("image_url")
    if isinstance(url, str) and url.strip():
        return url.strip()
    return FALLBACK_IMAGE_URL


def format_cooking_time(minutes: Optional[int]) -> str:
    """Format cooking time, e.g. 25 -> '25 min', 90 -> '1 h 30 min'."""
    if not minutes or minutes <= 0:
        return "-"
    hours, rest = divmod(int(minutes), 60)
    if not hours:
        return f"{rest} min"
    if not rest:
        return f"{hours} h"
    return f"{hours} h {rest} min"


def is_liked(recipe: Dict[str, Any]) -> bool:
    return recipe.get("liked_at") is not None


def _format_date(value: Any) -> Optional[str]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).strftime("%d %b %Y")
    except ValueError:
        return str(value)


def format_liked_at(recipe: Dict[str, Any]) -> Optional[str]:
    """Human-readable liked_at (e.g. '15 Jan 2024'), or None if not liked."""
    return _format_date(recipe.get("liked_at"))


def format_created_at(recipe: Dict[str, Any]) -> str:
    """Date the recipe was added (e.g. '03 Jan 2024'), or '-' if unknown."""
    return _format_date(recipe.get("created_at")) or "-"
