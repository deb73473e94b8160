"""
Metrics middleware for Prometheus.
"""

import re
import time
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.metrics import http_request_duration_seconds, http_requests_total

_NUMERIC_SEGMENT = re.compile(r"/\d+(?=/|$)")


def endpoint_label(request: HttpRequest) -> str:
    """
    Label a request by its URL pattern so ids do not explode cardinality.

    Falls back to the path with numeric segments collapsed when the
    request never reached URL resolution.
    """
    match = getattr(request, "resolver_match", None)
    if match is not None and match.route:
        return "/" + match.route
    return _NUMERIC_SEGMENT.sub("/{id}", request.path)


class MetricsMiddleware:
    """Records request count and latency per method, endpoint and status."""

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process request and record metrics."""
        started = time.perf_counter()
        status_code = 500
        try:
            response = self.get_response(request)
            status_code = response.status_code
            return response
        finally:
            endpoint = endpoint_label(request)
            http_requests_total.labels(
                method=request.method, endpoint=endpoint, status_code=status_code
            ).inc()
            http_request_duration_seconds.labels(method=request.method, endpoint=endpoint).observe(
                time.perf_counter() - started
            )
