"""
Tests for environment-driven configuration and database URL handling.
"""

import pytest

from api.config import (
    DEFAULT_DATABASE_URL,
    DatabaseConfig,
    ListConfig,
    ServerConfig,
    validate_required_config,
)
from catalog.db import normalize_database_url


class TestDatabaseUrl:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("postgres://u:p@db:5432/recipes", "postgresql+asyncpg://u:p@db:5432/recipes"),
            ("postgresql://u:p@db/recipes", "postgresql+asyncpg://u:p@db/recipes"),
            ("postgresql+asyncpg://u:p@db/recipes", "postgresql+asyncpg://u:p@db/recipes"),
            ("sqlite:///./recipes.db", "sqlite+aiosqlite:///./recipes.db"),
            ("sqlite+aiosqlite:///./recipes.db", "sqlite+aiosqlite:///./recipes.db"),
        ],
    )
    def test_normalize_database_url(self, url, expected):
        assert normalize_database_url(url) == expected

    def test_default_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        assert DatabaseConfig.get_url() == DEFAULT_DATABASE_URL

    def test_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/recipes")
        assert DatabaseConfig.get_url() == "postgresql://u:p@db/recipes"

    def test_redact_hides_password(self):
        redacted = DatabaseConfig.redact("postgresql://user:secret@db/recipes")
        assert "secret" not in redacted
        assert "user" in redacted


class TestListConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RECIPES_DEFAULT_LIMIT", raising=False)
        monkeypatch.delenv("RECIPES_MAX_LIMIT", raising=False)

        assert ListConfig.get_default_limit() == 20
        assert ListConfig.get_max_limit() == 100

    def test_non_integer_value_raises(self, monkeypatch):
        monkeypatch.setenv("RECIPES_MAX_LIMIT", "lots")

        with pytest.raises(RuntimeError, match="RECIPES_MAX_LIMIT"):
            ListConfig.get_max_limit()

    def test_validate_rejects_default_above_max(self, monkeypatch):
        monkeypatch.setenv("RECIPES_DEFAULT_LIMIT", "50")
        monkeypatch.setenv("RECIPES_MAX_LIMIT", "10")

        with pytest.raises(RuntimeError, match="RECIPES_DEFAULT_LIMIT"):
            validate_required_config()

    def test_validate_accepts_defaults(self, monkeypatch):
        for name in ("RECIPES_DEFAULT_LIMIT", "RECIPES_MAX_LIMIT", "DATABASE_URL"):
            monkeypatch.delenv(name, raising=False)

        validate_required_config()


def test_boolean_flags(monkeypatch):
    monkeypatch.setenv("RECIPES_INIT_SCHEMA", "TRUE")
    monkeypatch.setenv("DB_ECHO", "0")

    assert DatabaseConfig.should_init_schema() is True
    assert DatabaseConfig.get_echo() is False


def test_log_level_is_uppercased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert ServerConfig.get_log_level() == "DEBUG"
