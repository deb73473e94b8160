"""
API exception handlers.

This module provides custom exception handling for REST API responses.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    AuthenticationException,
    DomainException,
    DuplicateCodeError,
    ExpiredCodeError,
    InvalidCodeError,
    NotFoundError,
    PersistenceError,
    QuotaExceededError,
    ValidationError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

# Most specific classes first
DOMAIN_STATUS_CODES = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidCodeError, status.HTTP_403_FORBIDDEN),
    (ExpiredCodeError, status.HTTP_403_FORBIDDEN),
    (QuotaExceededError, status.HTTP_409_CONFLICT),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (DuplicateCodeError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, trace_id)
    elif isinstance(exc, DRFValidationError):
        response = validation_error_response(exc.detail)
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = str(exc.default_code).upper().replace("-", "_")
        response.data = {
            "error": {"code": code, "message": response.data.get("detail", exc.default_detail)}
        }
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _endpoint(context: Dict[str, Any]) -> str:
    view = context.get("view")
    return view.__class__.__name__ if view else "unknown"


def status_code_for(exc: DomainException) -> int:
    """
    Map a domain exception to its HTTP status code.

    Args:
        exc: Domain exception

    Returns:
        HTTP status code (400 for unmapped domain errors)
    """
    for exc_type, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status_code_for(exc)
    errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()

    if status_code >= 500:
        logger.error(
            "Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id}
        )
        message = (
            "Failed to create activation code"
            if isinstance(exc, DuplicateCodeError)
            else exc.message
        )
    else:
        logger.warning(
            "Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id}
        )
        message = exc.message
    return Response({"error": {"code": exc.code, "message": message}}, status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    errors_total.labels(error_type=type(exc).__name__, endpoint=_endpoint(context)).inc()
    return Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def validation_error_response(errors: Any) -> Response:
    """
    Build the 400 response for rejected request data.

    Args:
        errors: Serializer errors

    Returns:
        Response with a VALIDATION_ERROR body
    """
    return Response(
        {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "details": errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )
