"""
Observability middleware.

Correlates every request with an id, logs one structured line per
request and stamps tracing headers on the response.
"""

import logging
import time
import uuid
from typing import Any, Callable, Dict, Optional, Tuple

from django.http import HttpRequest, HttpResponse
from opentelemetry import trace
from opentelemetry.trace import format_span_id, format_trace_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _current_trace_ids() -> Tuple[Optional[str], Optional[str]]:
    context = trace.get_current_span().get_span_context()
    if not context.is_valid:
        return None, None
    return format_trace_id(context.trace_id), format_span_id(context.span_id)


def _outcome(status_code: int) -> str:
    if status_code >= 500:
        return "server_error"
    if status_code >= 400:
        return "client_error"
    return "success"


class ObservabilityMiddleware:
    """
    Middleware for request observability.

    An incoming X-Correlation-ID is reused, otherwise one is generated.
    The admin or activation code the request was authenticated as is
    logged once the auth middleware has run.
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Run the request and log its outcome.

        Args:
            request: HTTP request

        Returns:
            HTTP response with correlation and trace headers
        """
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.correlation_id = correlation_id  # type: ignore

        trace_id, span_id = _current_trace_ids()
        if trace_id:
            request.trace_id = trace_id  # type: ignore

        context = self._base_context(request, correlation_id, trace_id, span_id)
        logger.debug("Request started", extra=context)

        started = time.perf_counter()
        try:
            response = self.get_response(request)
        except Exception as e:
            context.update(
                request_status="exception",
                error_type=type(e).__name__,
                duration_ms=self._elapsed_ms(started),
            )
            logger.error("Request failed: %s", e, extra=context, exc_info=True)
            raise

        duration_ms = self._elapsed_ms(started)
        outcome = _outcome(response.status_code)
        context.update(
            request_status=outcome,
            status_code=response.status_code,
            duration_ms=duration_ms,
            **self._identity(request),
        )
        self._log(outcome, context)

        response[CORRELATION_HEADER] = correlation_id
        response["X-Request-Duration"] = f"{duration_ms / 1000:.3f}"
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)

    @staticmethod
    def _base_context(
        request: HttpRequest,
        correlation_id: str,
        trace_id: Optional[str],
        span_id: Optional[str],
    ) -> Dict[str, Any]:
        context: Dict[str, Any] = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.path,
            "remote_addr": request.META.get("REMOTE_ADDR"),
        }
        if trace_id:
            context["trace_id"] = trace_id
            context["span_id"] = span_id
        return context

    @staticmethod
    def _identity(request: HttpRequest) -> Dict[str, int]:
        """Ids attached by the bearer token middleware, if any."""
        identity = {}
        for attribute in ("admin_id", "code_id"):
            value = getattr(request, attribute, None)
            if value:
                identity[attribute] = value
        return identity

    @staticmethod
    def _log(outcome: str, context: Dict[str, Any]) -> None:
        if outcome == "server_error":
            logger.error("Request completed with server error", extra=context)
        elif outcome == "client_error":
            logger.warning("Request completed with client error", extra=context)
        else:
            logger.info("Request completed", extra=context)
