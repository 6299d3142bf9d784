"""
Correlation ID context.

Manages correlation ID propagation across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar, Token

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def bind_correlation_id(correlation_id: str) -> Token:
    """Set correlation ID and return the token needed to restore the previous one."""
    return correlation_id_ctx.set(correlation_id)


def reset_correlation_id(token: Token) -> None:
    correlation_id_ctx.reset(token)


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID (empty outside a request)
    """
    return correlation_id_ctx.get()
