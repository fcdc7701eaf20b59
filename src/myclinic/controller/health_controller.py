"""Basic health check endpoint.

This module provides a simple health check endpoint for monitoring
service availability and the loaded schema catalogue.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from myclinic.validation import default_registry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Overall service status (healthy/unhealthy)
        schemas: Number of registered request schemas
        error: Error message if unhealthy
    """

    status: str = Field(..., description="Overall service status")
    schemas: Optional[int] = Field(None, description="Registered request schemas")
    error: Optional[str] = Field(None, description="Error message if unhealthy")

    class Config:
        json_schema_extra = {
            "examples": [
                {"status": "healthy", "schemas": 8},
                {"status": "unhealthy", "error": "No request schemas registered"},
            ]
        }


@router.get("/", include_in_schema=False)
async def root_redirect() -> RedirectResponse:
    """Redirect root path to /health."""
    return RedirectResponse(url="/health")


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Service Health Check",
    description="Verifies service availability and that request schemas are loaded.",
)
async def health_check(request: Request) -> HealthResponse:
    """Basic health check endpoint.

    Args:
        request: FastAPI request

    Returns:
        Health status with the schema count
    """
    registry = getattr(request.app.state, "schema_registry", default_registry)
    schema_count = len(registry)

    if schema_count == 0:
        logger.error("Health check failed: no request schemas registered")
        return HealthResponse(
            status="unhealthy", error="No request schemas registered"
        )

    return HealthResponse(status="healthy", schemas=schema_count)
