"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, profanity_backend.api, profanity_backend.observability, profanity_backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from profanity_backend import __version__
from profanity_backend.api import api_router
from profanity_backend.api.deps import get_service_cache
from profanity_backend.api.error_handling import register_exception_handlers
from profanity_backend.api.routers.classify import classify_message
from profanity_backend.configs import get_settings
from profanity_backend.observability.logger import configure_logging
from profanity_backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and builds the shared vector store, similarity client
    and classifier once, before the first request.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        _ = cache.classifier
        logger.info(
            "Application startup complete: classifier initialized",
            extra={"store_type": get_settings().vector_store.store_type},
        )
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    cache.clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Profanity Classification API",
        description="Vector-similarity profanity detection for short messages",
        version=__version__,
        debug=get_settings().debug,
        lifespan=lifespan,
    )

    # Added first = innermost, so request logs carry the correlation ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")
    app.add_api_route(
        "/",
        classify_message,
        methods=["POST"],
        tags=["classification"],
        include_in_schema=False,
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "profanity_backend.main:app",
        host="0.0.0.0",
        port=8000,
    )
