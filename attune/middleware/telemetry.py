"""Prometheus instrumentation for every request."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from attune.telemetry import REQUESTS_IN_FLIGHT, observe_request


def route_template(request: Request) -> str | None:
    """Return the matched route pattern (``/api/tasks/{task_slug}``), if any."""

    route = request.scope.get("route")
    return getattr(route, "path", None) or None


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Count requests by route template and track how many are in flight."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        method = request.method
        in_flight = REQUESTS_IN_FLIGHT.labels(method=method)
        in_flight.inc()
        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            in_flight.dec()
            observe_request(
                method,
                route_template(request),
                status_code,
                time.perf_counter() - start_time,
            )
