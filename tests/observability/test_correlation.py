"""Unit tests for correlation ID propagation and log record injection."""

import logging

from profanity_backend.observability.correlation import (
    bind_correlation_id,
    get_correlation_id,
    reset_correlation_id,
)
from profanity_backend.observability.logger import CorrelationIdFilter


def test_bind_and_reset_restore_previous_value():
    token = bind_correlation_id("req-1")

    assert get_correlation_id() == "req-1"

    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_nested_binds_unwind_in_order():
    outer = bind_correlation_id("outer")
    inner = bind_correlation_id("inner")

    reset_correlation_id(inner)
    assert get_correlation_id() == "outer"

    reset_correlation_id(outer)
    assert get_correlation_id() == ""


def test_filter_injects_correlation_id():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    token = bind_correlation_id("req-2")
    try:
        CorrelationIdFilter().filter(record)
    finally:
        reset_correlation_id(token)

    assert record.correlation_id == "req-2"


def test_filter_uses_placeholder_outside_requests():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    CorrelationIdFilter().filter(record)

    assert record.correlation_id == "-"
