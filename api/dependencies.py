"""
FastAPI dependencies shared by the routers.

The recipe store and the paging limits live on app.state (set by
api.main.create_app); routes receive them through these functions instead of
importing a module-level store.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Query, Request

from catalog.db import MAX_OFFSET
from catalog.store import RecipeStore


@dataclass(frozen=True)
class Page:
    """Validated limit/offset for list queries."""
    limit: int
    offset: int


def get_store(request: Request) -> RecipeStore:
    """Return the recipe store attached to the running app."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Recipe store is not configured; was the app started through its lifespan?")
    return store


def get_page(
    request: Request,
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of recipes to return"),
    offset: int = Query(0, ge=0, le=MAX_OFFSET, description="Number of recipes to skip"),
) -> Page:
    """
    Parse limit/offset query parameters.

    Non-integer, negative or out-of-range values are rejected by FastAPI's validation (422).
    A missing limit falls back to the configured default; a limit above the
    configured maximum is rejected rather than silently truncated.

    Raises:
        HTTPException 422: If limit exceeds the configured maximum
    """
    default_limit = request.app.state.default_limit
    max_limit = request.app.state.max_limit

    if limit is None:
        limit = default_limit
    if limit > max_limit:
        raise HTTPException(
            status_code=422,
            detail=f"limit: Input should be less than or equal to {max_limit}",
        )
    return Page(limit=limit, offset=offset)
