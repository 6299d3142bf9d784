"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from profanity_backend.observability.correlation import get_correlation_id
from profanity_backend.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id"]
