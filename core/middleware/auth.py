"""
Bearer token authentication middleware.

This middleware validates admin tokens for the admin API
and activation-code tokens for the app API.
"""

import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from core.domain.exceptions import AuthenticationException
from core.security.tokens import build_token_service

logger = logging.getLogger(__name__)

ADMIN_API_PREFIX = "/api/v1/admin/"
APP_API_PREFIX = "/api/v1/app/"
PUBLIC_PATHS = (
    "/api/v1/admin/login",
    "/api/v1/app/activate",
)


def _unauthorized(code: str, message: str) -> JsonResponse:
    return JsonResponse({"error": {"code": code, "message": message}}, status=401)


class BearerTokenAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for bearer token authentication.

    This middleware:
    1. Verifies admin tokens for admin APIs (/api/v1/admin/*)
    2. Verifies activation-code tokens for app APIs (/api/v1/app/*)
    3. Returns 401 Unauthorized if authentication fails

    Code validity is not checked here; the app handlers re-check it
    on every call.
    """

    def __init__(self, get_response):
        """Initialize middleware with a token service built from settings."""
        super().__init__(get_response)
        self.token_service = build_token_service()

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate authentication.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        path = request.path.rstrip("/")
        if path in PUBLIC_PATHS:
            return None

        if request.path.startswith(ADMIN_API_PREFIX):
            return self._authenticate(request, self.token_service.verify_admin_token, "admin_id")

        if request.path.startswith(APP_API_PREFIX):
            return self._authenticate(request, self.token_service.verify_code_token, "code_id")

        return None

    def _extract_bearer_token(self, request: HttpRequest) -> Optional[str]:
        """
        Extract the token from an "Authorization: Bearer <token>" header.

        Returns:
            Token string or None if the header is missing or malformed
        """
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return token.strip()

    def _authenticate(self, request: HttpRequest, verify, attribute: str) -> Optional[HttpResponse]:
        """
        Verify the bearer token and attach the bound id to the request.

        Args:
            request: HTTP request
            verify: Token verifier for the path's signing domain
            attribute: Request attribute receiving the bound id

        Returns:
            HttpResponse with 401 if auth fails, None if successful
        """
        token = self._extract_bearer_token(request)
        if token is None:
            return _unauthorized(
                "MISSING_TOKEN", "Missing token. Provide an 'Authorization: Bearer' header."
            )

        try:
            bound_id = verify(token)
        except AuthenticationException as e:
            logger.warning("Rejected token for %s: %s", request.path, e.message)
            return _unauthorized(e.code, e.message)

        setattr(request, attribute, bound_id)
        return None
