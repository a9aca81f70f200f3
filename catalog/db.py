"""
Database table definition and engine construction for the recipe catalog.

The catalog talks to a relational store through SQLAlchemy's asyncio
extension. One AsyncEngine (and therefore one connection pool) is created per
process and handed to RecipeStore; nothing in this module holds a global
engine.

Supported URLs:
- postgresql+asyncpg://... (production)
- sqlite+aiosqlite:///path/to/file.db (local development and tests)

Plain postgres:// and postgresql:// URLs, as handed out by most hosting
platforms, are rewritten to the asyncpg driver.
"""

import logging
from typing import Any

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

logger = logging.getLogger(__name__)

Base = declarative_base()


class RecipeRow(Base):
    """Recipes table - one row per recipe."""
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    ingredients = Column(JSON, nullable=False, default=list)  # List of strings
    instructions = Column(JSON, nullable=False, default=list)  # List of strings
    cooking_time = Column(Integer, nullable=False)  # Minutes
    difficulty = Column(String(20), nullable=False)
    servings = Column(Integer, nullable=False)
    image_url = Column(String(1000), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    liked_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("cooking_time > 0", name="ck_recipes_cooking_time_positive"),
        CheckConstraint("servings > 0", name="ck_recipes_servings_positive"),
    )


recipes_table = RecipeRow.__table__

# recipes.id is a 32-bit INTEGER on PostgreSQL; larger ids cannot exist
MAX_RECIPE_ID = 2**31 - 1

# Largest OFFSET accepted by list queries
MAX_OFFSET = 2**31 - 1

# Columns returned by the list endpoint (no ingredients/instructions/servings)
SUMMARY_COLUMNS = (
    RecipeRow.id,
    RecipeRow.title,
    RecipeRow.description,
    RecipeRow.cooking_time,
    RecipeRow.difficulty,
    RecipeRow.image_url,
    RecipeRow.created_at,
    RecipeRow.liked_at,
)


def normalize_database_url(url: str) -> str:
    """
    Rewrite a database URL so it uses an asyncio driver.

    Args:
        url: Database URL from configuration

    Returns:
        URL with postgres schemes mapped to postgresql+asyncpg and plain
        sqlite mapped to sqlite+aiosqlite. Other URLs are returned unchanged.
    """
    if url.startswith("postgres://"):
        return "postgresql+asyncpg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+asyncpg://" + url[len("postgresql://"):]
    if url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + url[len("sqlite://"):]
    return url


def create_engine_from_url(url: str, **engine_kwargs: Any) -> AsyncEngine:
    """
    Create the async engine (and its connection pool) for the given URL.

    Args:
        url: Database URL; see normalize_database_url for accepted schemes
        **engine_kwargs: Extra keyword arguments for create_async_engine
                         (echo, poolclass, pool_size, ...)

    Returns:
        AsyncEngine bound to the store
    """
    engine_kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using
    engine = create_async_engine(normalize_database_url(url), **engine_kwargs)
    logger.info(f"Database engine created for dialect '{engine.dialect.name}'")
    return engine
