"""
Recipes router.

Endpoints:
- GET /recipes - List recipe summaries, newest first, with optional search
- GET /recipes/{recipe_id} - Get a full recipe
- POST /recipes/{recipe_id}/like - Mark a recipe as liked
- POST /recipes/{recipe_id}/unlike - Clear a recipe's liked state

Errors are raised as catalog exceptions (RecipeNotFound, StoreError) and
turned into {"error": "..."} responses by the handlers in api.errors.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import Page, get_page, get_store
from api.schemas import ErrorResponse, Recipe, RecipeSummary
from catalog.store import RecipeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])

_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Recipe not found"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}


@router.get(
    "",
    response_model=List[RecipeSummary],
    summary="List recipes",
    description="List recipes ordered by creation time (newest first). When `search` is given, only recipes "
                "whose title or description contains it (case-insensitive) are returned.",
    responses={422: {"model": ErrorResponse}, 500: _ERROR_RESPONSES[500]},
)
async def list_recipes(
    search: Optional[str] = Query(None, description="Case-insensitive substring of title or description"),
    page: Page = Depends(get_page),
    store: RecipeStore = Depends(get_store),
) -> List[RecipeSummary]:
    """
    List recipe summaries.

    Args:
        search: Optional search term; blank means no filter
        page: Validated limit/offset
        store: Recipe store

    Returns:
        List of recipe summaries (without ingredients and instructions)
    """
    recipes = await store.list_recipes(search=search, limit=page.limit, offset=page.offset)
    logger.debug(f"Listed {len(recipes)} recipes (search={search!r}, limit={page.limit}, offset={page.offset})")
    return recipes


@router.get(
    "/{recipe_id}",
    response_model=Recipe,
    summary="Get a recipe",
    responses=_ERROR_RESPONSES,
)
async def get_recipe(recipe_id: int, store: RecipeStore = Depends(get_store)) -> Recipe:
    return await store.get_recipe(recipe_id)


@router.post(
    "/{recipe_id}/like",
    response_model=Recipe,
    summary="Like a recipe",
    description="Set liked_at to the current time and return the updated recipe. No request body.",
    responses=_ERROR_RESPONSES,
)
async def like_recipe(recipe_id: int, store: RecipeStore = Depends(get_store)) -> Recipe:
    return await store.like(recipe_id)


@router.post(
    "/{recipe_id}/unlike",
    response_model=Recipe,
    summary="Unlike a recipe",
    description="Clear liked_at and return the updated recipe. No request body.",
    responses=_ERROR_RESPONSES,
)
async def unlike_recipe(recipe_id: int, store: RecipeStore = Depends(get_store)) -> Recipe:
    return await store.unlike(recipe_id)
