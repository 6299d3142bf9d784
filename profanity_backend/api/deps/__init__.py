"""FastAPI dependency providers."""

from profanity_backend.api.deps.dependencies import (
    ServiceCache,
    get_classifier,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_classifier",
    "get_service_cache",
    "get_settings_dependency",
]
