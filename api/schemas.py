"""
Pydantic schemas for FastAPI request and response models.

The recipe payloads themselves (Recipe, RecipeSummary) are the catalog's
domain models and are re-exported here so routes import every response model
from one place. This module adds the envelopes that only exist at the HTTP
layer:
- ErrorResponse: uniform {"error": "..."} body for 4xx/5xx responses
- HealthResponse: body of GET /health
- ApiInfo: body of GET /
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from catalog.models import Recipe, RecipeSummary

NOT_FOUND_MESSAGE = "Recipe not found"
GENERIC_ERROR_MESSAGE = "Something went wrong!"


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-2xx response."""
    error: str = Field(..., description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": NOT_FOUND_MESSAGE}}
    )


class HealthResponse(BaseModel):
    """Health check payload."""
    status: str = Field(..., description="Always 'ok' when the API process is reachable")
    timestamp: datetime = Field(..., description="Current server time (UTC)")
    uptime_seconds: int = Field(..., ge=0, description="Seconds since the app was created")
    db_ok: bool = Field(..., description="Whether the recipe store answered a trivial query")


class ApiInfo(BaseModel):
    name: str
    version: str
    description: str
    docs: str


__all__ = [
    "ApiInfo",
    "ErrorResponse",
    "GENERIC_ERROR_MESSAGE",
    "HealthResponse",
    "NOT_FOUND_MESSAGE",
    "Recipe",
    "RecipeSummary",
]
