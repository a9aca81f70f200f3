"""
Configuration management for the Recipe Catalog.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production, .env will not exist, but load_dotenv() is safe to call and will no-op.
Environment variables from the hosting platform will be used instead.

Environment Variables:
- DATABASE_URL: Optional, defaults to "sqlite+aiosqlite:///./recipes.db"
- DB_ECHO: Optional, log every SQL statement when "true"
- RECIPES_INIT_SCHEMA: Optional, create the recipes table at startup when "true"
- RECIPES_DEFAULT_LIMIT: Optional, default page size for GET /recipes (default: 20)
- RECIPES_MAX_LIMIT: Optional, largest accepted page size for GET /recipes (default: 100)
- LOG_LEVEL: Optional, defaults to "INFO"
- PORT: Optional, port for `python -m api` (default: 8000)
- BACKEND_URL: Optional, backend URL used by the Streamlit client (defaults to http://localhost:8000)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./recipes.db"

_TRUTHY = {"1", "true", "yes", "on"}


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    This function locates the project root by going up from this file's location
    (api/config.py -> project root) and loads .env if it exists.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise RuntimeError(f"Environment variable {name} must be an integer, got {value!r}") from None


class DatabaseConfig:
    """Configuration for the recipe store."""

    @staticmethod
    def get_url() -> str:
        """
        Get the database URL from environment.

        Returns:
            DATABASE_URL or the local SQLite default
        """
        return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL

    @staticmethod
    def get_echo() -> bool:
        return _get_bool("DB_ECHO")

    @staticmethod
    def should_init_schema() -> bool:
        """Whether the app should create the recipes table at startup."""
        return _get_bool("RECIPES_INIT_SCHEMA")

    @staticmethod
    def redact(url: str) -> str:
        """Return ``url`` with any password hidden, for logging."""
        try:
            return make_url(url).render_as_string(hide_password=True)
        except ArgumentError:
            return "<invalid database url>"


class ListConfig:
    """Paging limits for GET /recipes."""

    @staticmethod
    def get_default_limit() -> int:
        return _get_int("RECIPES_DEFAULT_LIMIT", 20)

    @staticmethod
    def get_max_limit() -> int:
        return _get_int("RECIPES_MAX_LIMIT", 100)


class ServerConfig:
    """Configuration for running the API process."""

    @staticmethod
    def get_port() -> int:
        return _get_int("PORT", 8000)

    @staticmethod
    def get_log_level() -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """
    Configure root logging from LOG_LEVEL.

    Call once at process start (API entrypoint, seed script).
    """
    log_level = getattr(logging, ServerConfig.get_log_level(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )

    # Quiet noisy third-party loggers while keeping our app logs
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def validate_required_config() -> None:
    """
    Validate configuration values that would otherwise fail at request time.

    Raises:
        RuntimeError: If any configuration value is invalid
    """
    problems = []

    default_limit = ListConfig.get_default_limit()
    max_limit = ListConfig.get_max_limit()
    if max_limit < 1:
        problems.append(f"RECIPES_MAX_LIMIT must be at least 1 (got {max_limit})")
    if not 1 <= default_limit <= max(max_limit, 1):
        problems.append(
            f"RECIPES_DEFAULT_LIMIT must be between 1 and RECIPES_MAX_LIMIT (got {default_limit})"
        )

    try:
        make_url(DatabaseConfig.get_url())
    except ArgumentError:
        problems.append("DATABASE_URL is not a valid database URL")

    if problems:
        raise RuntimeError(
            "Invalid configuration:\n" + "\n".join(f"  - {problem}" for problem in problems)
        )
