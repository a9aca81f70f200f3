"""
Recipe store access layer.

RecipeStore translates the three logical catalog operations into
parameterized SQL against the recipes table:
- list_recipes: projection ordered newest first, optional substring search
- get_recipe: full row by primary key
- set_liked: set liked_at to the store's current time, or clear it

The store is constructed around an AsyncEngine and is passed explicitly to
whoever needs it (the FastAPI app keeps it on app.state). Every operation
opens its own session from the engine's pool and releases it when done.

All user-supplied values reach the database as bound parameters.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy import func, or_, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from .db import MAX_RECIPE_ID, SUMMARY_COLUMNS, Base, RecipeRow, create_engine_from_url, recipes_table
from .errors import RecipeNotFound, StoreError
from .models import Recipe, RecipeSummary

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


class RecipeStore:
    """Query layer over the recipes table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._sessions = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    @classmethod
    def from_url(cls, url: str, **engine_kwargs: Any) -> "RecipeStore":
        """Build a store with a new engine for ``url``."""
        return cls(create_engine_from_url(url, **engine_kwargs))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def list_recipes(
        self,
        search: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[RecipeSummary]:
        """
        List recipe summaries ordered by creation time, newest first.

        Args:
            search: Optional term; when non-blank, only recipes whose title or
                    description contains it (case-insensitive, literal
                    substring) are returned
            limit: Maximum number of recipes to return
            offset: Number of recipes to skip

        Returns:
            List of RecipeSummary (no ingredients or instructions)

        Raises:
            StoreError: If the query fails
        """
        stmt = select(*SUMMARY_COLUMNS)

        # A blank term means no filter; any other term is matched exactly as given
        if search and search.strip():
            # autoescape makes % and _ in the term match literally
            stmt = stmt.where(
                or_(
                    RecipeRow.title.icontains(search, autoescape=True),
                    RecipeRow.description.icontains(search, autoescape=True),
                )
            )

        stmt = (
            stmt.order_by(RecipeRow.created_at.desc(), RecipeRow.id.desc())
            .limit(limit)
            .offset(offset)
        )

        try:
            async with self._sessions() as session:
                result = await session.execute(stmt)
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise _store_failure("Failed to fetch recipes", e) from e

        return [RecipeSummary.model_validate(dict(row)) for row in rows]

    async def get_recipe(self, recipe_id: int) -> Recipe:
        """
        Fetch a single recipe by id.

        Raises:
            RecipeNotFound: If no recipe has this id
            StoreError: If the query fails
        """
        if not _is_storable_id(recipe_id):
            raise RecipeNotFound(recipe_id)

        try:
            async with self._sessions() as session:
                row = await session.get(RecipeRow, recipe_id)
                recipe = Recipe.model_validate(row) if row is not None else None
        except SQLAlchemyError as e:
            raise _store_failure("Failed to fetch recipe", e) from e

        if recipe is None:
            raise RecipeNotFound(recipe_id)
        return recipe

    async def set_liked(self, recipe_id: int, liked: bool) -> Recipe:
        """
        Set or clear the liked state of a recipe and return the updated row.

        Liking stamps liked_at with the store's current time (so liking twice
        moves the timestamp forward); unliking sets it to NULL. The existence
        check and the update are a single UPDATE ... RETURNING statement, so
        a row deleted concurrently is reported as not found rather than
        half-updated. Concurrent like/unlike on the same row is last write
        wins.

        Args:
            recipe_id: Recipe identifier
            liked: True to like, False to unlike

        Returns:
            The updated Recipe

        Raises:
            RecipeNotFound: If no recipe has this id
            StoreError: If the update fails
        """
        if not _is_storable_id(recipe_id):
            raise RecipeNotFound(recipe_id)

        stmt = (
            update(recipes_table)
            .where(recipes_table.c.id == recipe_id)
            .values(liked_at=func.now() if liked else None)
            .returning(*recipes_table.c)
        )

        try:
            async with self._sessions.begin() as session:
                result = await session.execute(stmt)
                row = result.mappings().first()
        except SQLAlchemyError as e:
            action = "like" if liked else "unlike"
            raise _store_failure(f"Failed to {action} recipe", e) from e

        if row is None:
            raise RecipeNotFound(recipe_id)

        logger.info(f"Recipe {recipe_id} {'liked' if liked else 'unliked'}")
        return Recipe.model_validate(dict(row))

    async def like(self, recipe_id: int) -> Recipe:
        return await self.set_liked(recipe_id, True)

    async def unlike(self, recipe_id: int) -> Recipe:
        return await self.set_liked(recipe_id, False)

    async def ping(self) -> bool:
        """Return True if the store answers a trivial query."""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    async def init_schema(self) -> None:
        """
        Create the recipes table if it doesn't exist.

        Safe to call multiple times.

        Raises:
            StoreError: If table creation fails
        """
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise _store_failure("Failed to initialize database tables", e) from e
        logger.info("Database tables initialized (or already exist)")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()


def _is_storable_id(recipe_id: int) -> bool:
    """Ids outside the id column's range can't match a row (and overflow the drivers)."""
    return -MAX_RECIPE_ID - 1 <= recipe_id <= MAX_RECIPE_ID


def _store_failure(message: str, exc: Exception) -> StoreError:
    logger.error(f"{message}: {exc}")
    return StoreError(message)
