"""Prometheus metrics for HTTP traffic, upstream AI calls and batch items."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

UNMATCHED_ROUTE = "unmatched"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    # Batch endpoints make one upstream call per item, so the tail is long.
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0),
)

REQUESTS_IN_FLIGHT = Gauge(
    "http_requests_in_flight",
    "Requests currently being handled",
    ("method",),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

UPSTREAM_CALLS = Counter(
    "app_upstream_calls_total",
    "Calls issued to third-party AI services",
    ("service", "outcome"),
)

UPSTREAM_LATENCY = Histogram(
    "app_upstream_call_duration_seconds",
    "Round-trip time of calls to third-party AI services",
    ("service",),
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 15.0, 30.0),
)

BATCH_ITEMS = Counter(
    "app_batch_items_total",
    "Items processed by the batch endpoints",
    ("endpoint", "outcome"),
)


def observe_request(
    method: str,
    route: str | None,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request.

    Requests that matched no route share one label so arbitrary paths cannot
    grow the label set.
    """

    route_label = route or UNMATCHED_ROUTE
    REQUEST_COUNT.labels(method=method, route=route_label, status=str(status_code)).inc()
    REQUEST_LATENCY.labels(method=method, route=route_label).observe(max(duration_seconds, 0))

    if status_code >= 500:
        ERROR_COUNTER.labels(method=method, route=route_label).inc()


def record_upstream_call(
    service: str,
    *,
    success: bool,
    duration_seconds: float | None = None,
) -> None:
    """Count one call to an upstream service and, when timed, its latency."""

    UPSTREAM_CALLS.labels(
        service=service,
        outcome="success" if success else "error",
    ).inc()
    if duration_seconds is not None:
        UPSTREAM_LATENCY.labels(service=service).observe(duration_seconds)


def record_batch_item(endpoint: str, *, success: bool) -> None:
    BATCH_ITEMS.labels(endpoint=endpoint, outcome="success" if success else "error").inc()
