"""
Shared fixtures for the recipe catalog tests.

Each test gets its own SQLite file. The schema and seed rows are written with
a synchronous SQLAlchemy engine; the store under test reads the same file
through aiosqlite.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert
from sqlalchemy.pool import NullPool

from api.main import create_app
from catalog.db import Base, recipes_table
from catalog.store import RecipeStore

SEED_RECIPES = [
    {
        "id": 1,
        "title": "Pasta",
        "description": "Simple weeknight tomato pasta",
        "ingredients": ["200g spaghetti", "1 can tomatoes", "2 cloves garlic"],
        "instructions": ["Boil the pasta.", "Simmer the sauce.", "Combine and serve."],
        "cooking_time": 20,
        "difficulty": "easy",
        "servings": 2,
        "image_url": "https://example.com/pasta.jpg",
        "created_at": datetime(2024, 1, 1, 12, 0, 0),
        "liked_at": None,
    },
    {
        "id": 2,
        "title": "Spicy Tofu Stir-Fry",
        "description": "Crispy tofu with vegetables in a chili garlic sauce",
        "ingredients": ["400g firm tofu", "1 red pepper", "2 tbsp chili garlic sauce"],
        "instructions": ["Press and cube the tofu.", "Fry until golden.", "Toss with the sauce."],
        "cooking_time": 25,
        "difficulty": "Medium",
        "servings": 3,
        "image_url": None,
        "created_at": datetime(2024, 1, 2, 12, 0, 0),
        "liked_at": None,
    },
    {
        "id": 3,
        "title": "100% Rye Bread",
        "description": "Dense sourdough loaf",
        "ingredients": [],
        "instructions": [],
        "cooking_time": 240,
        "difficulty": "hard",
        "servings": 12,
        "image_url": "https://example.com/rye.jpg",
        "created_at": datetime(2024, 1, 3, 12, 0, 0),
        "liked_at": datetime(2024, 2, 1, 8, 30, 0),
    },
]


def sqlite_file_url(path, driver: str = "aiosqlite") -> str:
    return f"sqlite+{driver}:///{path}"


@pytest.fixture
def db_path(tmp_path):
    """SQLite file with the recipes table and SEED_RECIPES."""
    path = tmp_path / "recipes.db"
    engine = create_engine(sqlite_file_url(path, driver="pysqlite"))
    try:
        Base.metadata.create_all(engine)
        with engine.begin() as conn:
            conn.execute(insert(recipes_table), SEED_RECIPES)
    finally:
        engine.dispose()
    return path


@pytest.fixture
def make_store():
    """Factory for a RecipeStore over an arbitrary SQLite file."""

    def _make_store(path) -> RecipeStore:
        return RecipeStore.from_url(sqlite_file_url(path), poolclass=NullPool)

    return _make_store


@pytest.fixture
def store(db_path, make_store):
    """RecipeStore over the seeded database."""
    return make_store(db_path)


@pytest.fixture
def app(store):
    return create_app(store, default_limit=20, max_limit=100)


@pytest.fixture
def client(app):
    """Test client for an app with the seeded store injected."""
    with TestClient(app) as test_client:
        yield test_client
