"""
Exception handlers that shape every error response as {"error": "..."}.

- RecipeNotFound -> 404 "Recipe not found"
- StoreError -> 500 with the store's public message; the database cause is
  logged by the store and never sent to the client
- RequestValidationError -> 422 naming the first invalid parameter
- HTTPException -> its own status code and detail
- anything else -> 500 "Something went wrong!"
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.schemas import GENERIC_ERROR_MESSAGE, NOT_FOUND_MESSAGE
from catalog.errors import RecipeNotFound, StoreError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def recipe_not_found_handler(request: Request, exc: RecipeNotFound) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: recipe {exc.recipe_id} not found")
    return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.public_message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return error_response(422, "Invalid request")

    first = errors[0]
    # loc is e.g. ("query", "limit") or ("path", "recipe_id")
    field = str(first.get("loc", ["request"])[-1])
    return error_response(422, f"{field}: {first.get('msg', 'invalid value')}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on ``app``."""
    app.add_exception_handler(RecipeNotFound, recipe_not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
