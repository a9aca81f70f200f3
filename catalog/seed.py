"""
Load recipes into the store from a JSON file.

Recipes are never created through the API; this loader is how a development
or demo database gets its rows. The file holds a JSON array of recipe
objects with the fields of catalog.models.NewRecipe. created_at is assigned
by the database and liked_at starts out NULL.

Usage:
    python -m catalog.seed recipes.json
    python -m catalog.seed recipes.json --reset   # delete existing rows first
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError
from sqlalchemy import delete, insert

from .db import recipes_table
from .models import NewRecipe
from .store import RecipeStore

logger = logging.getLogger(__name__)


def parse_recipes(records: Iterable[Dict[str, Any]]) -> List[NewRecipe]:
    """
    Validate raw recipe records.

    Raises:
        ValueError: If any record is invalid; the message names its position
    """
    parsed = []
    for index, record in enumerate(records):
        try:
            parsed.append(NewRecipe.model_validate(record))
        except ValidationError as e:
            raise ValueError(f"Invalid recipe at index {index}: {e}") from e
    return parsed


async def load_recipes(store: RecipeStore, recipes: List[NewRecipe], reset: bool = False) -> int:
    """
    Insert recipes into the store in one transaction.

    Args:
        store: Target store
        recipes: Validated recipes to insert
        reset: Delete all existing recipes first

    Returns:
        Number of recipes inserted
    """
    async with store.engine.begin() as conn:
        if reset:
            await conn.execute(delete(recipes_table))
            logger.info("Deleted existing recipes")
        if recipes:
            await conn.execute(insert(recipes_table), [recipe.model_dump() for recipe in recipes])

    logger.info(f"Loaded {len(recipes)} recipes")
    return len(recipes)


async def _run(path: Path, database_url: str, reset: bool) -> int:
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array of recipes")

    recipes = parse_recipes(records)
    store = RecipeStore.from_url(database_url)
    try:
        await store.init_schema()
        return await load_recipes(store, recipes, reset=reset)
    finally:
        await store.dispose()


def main(argv: Optional[List[str]] = None) -> None:
    from api.config import DatabaseConfig, configure_logging

    configure_logging()

    parser = argparse.ArgumentParser(description="Load recipes from a JSON file into the catalog database.")
    parser.add_argument("path", type=Path, help="JSON file containing an array of recipes")
    parser.add_argument("--reset", action="store_true", help="Delete existing recipes before loading")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    args = parser.parse_args(argv)

    database_url = args.database_url or DatabaseConfig.get_url()
    count = asyncio.run(_run(args.path, database_url, args.reset))
    print(f"Loaded {count} recipes into {DatabaseConfig.redact(database_url)}")


if __name__ == "__main__":
    main()
