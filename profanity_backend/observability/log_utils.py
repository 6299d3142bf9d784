"""
Helpers for logging with user text kept out of the records.

Messages and chunks reach logs only as short previews; structured context
is flattened to strings so any formatter can render it.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

PREVIEW_LENGTH = 80


def safe_log_value(value: Any, max_length: int = PREVIEW_LENGTH) -> str:
    """
    Render a value as a bounded string for log context.

    Collections are summarized by size instead of content.

    Args:
        value: Value to render
        max_length: Longest string kept before truncating

    Returns:
        str: Loggable representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    text = value if isinstance(value, str) else str(value)
    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log `message` at `level` with every context value passed through safe_log_value."""
    logger.log(
        level,
        message,
        extra={key: safe_log_value(val) for key, val in context.items()},
    )


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log a failure with its traceback, type and bounded context.

    Used by the HTTP error handlers for every response that hides the real
    error behind a generic message.
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, extra=extra, exc_info=exc)
