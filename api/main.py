"""
FastAPI application for the Recipe Catalog API.

This module defines the REST API for the recipe catalog:
- GET /recipes: List recipes (newest first) with optional search, limit and offset
- GET /recipes/{id}: Get a single recipe with ingredients and instructions
- POST /recipes/{id}/like: Mark a recipe as liked
- POST /recipes/{id}/unlike: Clear a recipe's liked state
- GET /health: Health check including a database ping

The recipe routes are also served under /api (e.g. /api/recipes), the prefix
used by the browser client.

Every error response has the shape {"error": "<message>"}.

Run the API with:
    uvicorn api.main:app --reload
or:
    python -m api

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, FastAPI

from api.config import DatabaseConfig, ListConfig, configure_logging, validate_required_config
from api.dependencies import get_store
from api.errors import register_exception_handlers
from api.routers import recipes
from api.schemas import ApiInfo, HealthResponse
from catalog.store import RecipeStore

logger = logging.getLogger(__name__)

API_NAME = "Recipe Catalog API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Backend API for listing, searching, viewing and liking recipes"


def create_app(
    store: Optional[RecipeStore] = None,
    *,
    default_limit: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Optional recipe store. When None, the app builds one from
               DATABASE_URL at startup and disposes it at shutdown. An
               injected store is used as-is and left open.
        default_limit: Page size when GET /recipes has no limit
                       (default: RECIPES_DEFAULT_LIMIT)
        max_limit: Largest accepted limit (default: RECIPES_MAX_LIMIT)

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        owns_store = app.state.store is None

        if owns_store:
            validate_required_config()
            database_url = DatabaseConfig.get_url()
            app.state.store = RecipeStore.from_url(database_url, echo=DatabaseConfig.get_echo())
            logger.info(f"Recipe store configured for {DatabaseConfig.redact(database_url)}")

        if DatabaseConfig.should_init_schema():
            await app.state.store.init_schema()

        try:
            yield
        finally:
            if owns_store:
                await app.state.store.dispose()
                app.state.store = None
                logger.info("Recipe store closed")

    app = FastAPI(
        title=API_NAME,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "recipes",
                "description": "List, search, view, like and unlike recipes.",
            },
            {
                "name": "health",
                "description": "Health check and monitoring endpoints.",
            },
        ],
    )

    app.state.store = store
    app.state.default_limit = default_limit if default_limit is not None else ListConfig.get_default_limit()
    app.state.max_limit = max_limit if max_limit is not None else ListConfig.get_max_limit()
    app.state.started_at = time.time()

    register_exception_handlers(app)

    app.include_router(recipes.router)
    app.include_router(recipes.router, prefix="/api", include_in_schema=False)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(store: RecipeStore = Depends(get_store)) -> HealthResponse:
        """
        Health check endpoint for monitoring and status checks.

        Always returns 200 OK if the endpoint is reachable; db_ok reports
        whether the store answered.
        """
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc),
            uptime_seconds=int(time.time() - app.state.started_at),
            db_ok=await store.ping(),
        )

    @app.get("/", response_model=ApiInfo)
    async def root() -> ApiInfo:
        """Root endpoint providing API information."""
        return ApiInfo(name=API_NAME, version=API_VERSION, description=API_DESCRIPTION, docs="/docs")

    return app


app = create_app()
