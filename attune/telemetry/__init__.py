"""Telemetry helpers and metrics."""

from .metrics import (
    BATCH_ITEMS,
    ERROR_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    REQUESTS_IN_FLIGHT,
    UNMATCHED_ROUTE,
    UPSTREAM_CALLS,
    UPSTREAM_LATENCY,
    observe_request,
    record_batch_item,
    record_upstream_call,
)

__all__ = [
    "BATCH_ITEMS",
    "ERROR_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "REQUESTS_IN_FLIGHT",
    "UNMATCHED_ROUTE",
    "UPSTREAM_CALLS",
    "UPSTREAM_LATENCY",
    "observe_request",
    "record_batch_item",
    "record_upstream_call",
]
