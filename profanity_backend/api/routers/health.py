"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: profanity_backend.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from profanity_backend.api.deps import ServiceCache, get_service_cache


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    cache: ServiceCache = Depends(get_service_cache),
):
    """Report whether the similarity index client has been initialized."""
    if cache.is_ready:
        return HealthResponse(status="healthy", message="Vector store accessible")
    return JSONResponse(
        status_code=503,
        content=HealthResponse(
            status="unavailable",
            message="Vector store not initialized",
        ).model_dump(),
    )
