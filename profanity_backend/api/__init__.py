"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import classify_router, health_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(classify_router)

__all__ = ["api_router"]
