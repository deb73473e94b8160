"""
Token issuance and verification.

Two independent signing domains are maintained: administrator tokens and
activation-code ("app") tokens. Each domain signs with its own secret and
stamps its own subject tag, and each verifier only accepts its own domain.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import jwt

from core.domain.exceptions import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"
APP_SUBJECT = "app"
BOUND_ID_CLAIM = "bid"
REQUIRED_CLAIMS = ["sub", BOUND_ID_CLAIM, "iat", "exp", "iss"]
DEFAULT_TOKEN_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class TokenSettings:
    """Secret material and lifetime policy for the token service."""

    admin_secret: str
    app_secret: str
    ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    algorithm: str = "HS256"
    issuer: str = "activation-code-service"

    def __post_init__(self):
        """Validate token settings."""
        if not self.admin_secret or not self.app_secret:
            raise ValueError("Both admin and app token secrets are required")
        if self.admin_secret == self.app_secret:
            raise ValueError("Admin and app token secrets must differ")
        if self.ttl_seconds < 1:
            raise ValueError("Token TTL must be at least one second")

    @classmethod
    def from_django_settings(cls, settings=None) -> "TokenSettings":
        """
        Build token settings from Django settings.

        Args:
            settings: Settings object (defaults to django.conf.settings)

        Returns:
            TokenSettings instance
        """
        if settings is None:
            from django.conf import settings
        return cls(
            admin_secret=settings.JWT_ADMIN_SECRET,
            app_secret=settings.JWT_APP_SECRET,
            ttl_seconds=int(getattr(settings, "TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS)),
            issuer=getattr(settings, "TOKEN_ISSUER", "activation-code-service"),
        )


@dataclass(frozen=True)
class IssuedToken:
    """A freshly minted token and its lifetime."""

    token: str
    expires_at: datetime
    expires_in: int


class TokenService:
    """Issues and verifies admin and activation-code scoped tokens."""

    def __init__(self, settings: TokenSettings):
        """Store the token settings used for every signing operation."""
        self._settings = settings

    @property
    def ttl_seconds(self) -> int:
        """Lifetime of issued tokens in seconds."""
        return self._settings.ttl_seconds

    def issue_admin_token(self, admin_id: int, issued_at: Optional[int] = None) -> IssuedToken:
        """
        Issue a token bound to an administrator.

        Args:
            admin_id: Administrator id
            issued_at: Unix timestamp to issue at (defaults to now)

        Returns:
            IssuedToken
        """
        return self._issue(ADMIN_SUBJECT, admin_id, self._settings.admin_secret, issued_at)

    def issue_code_token(self, code_id: int, issued_at: Optional[int] = None) -> IssuedToken:
        """
        Issue a token bound to an activation code.

        Args:
            code_id: Activation code id
            issued_at: Unix timestamp to issue at (defaults to now)

        Returns:
            IssuedToken
        """
        return self._issue(APP_SUBJECT, code_id, self._settings.app_secret, issued_at)

    def verify_admin_token(self, token: str) -> int:
        """
        Verify an administrator token.

        Returns:
            The administrator id bound to the token

        Raises:
            InvalidTokenError: Bad signature, malformed, or not an admin token
            ExpiredTokenError: Past the embedded expiry
        """
        return self._verify(token, ADMIN_SUBJECT, self._settings.admin_secret)

    def verify_code_token(self, token: str) -> int:
        """
        Verify an activation-code token.

        Returns:
            The activation code id bound to the token

        Raises:
            InvalidTokenError: Bad signature, malformed, or not an app token
            ExpiredTokenError: Past the embedded expiry
        """
        return self._verify(token, APP_SUBJECT, self._settings.app_secret)

    def _issue(
        self, subject: str, bound_id: int, secret: str, issued_at: Optional[int]
    ) -> IssuedToken:
        now = int(time.time()) if issued_at is None else int(issued_at)
        expires = now + self._settings.ttl_seconds
        payload: Dict[str, Any] = {
            "iss": self._settings.issuer,
            "sub": subject,
            BOUND_ID_CLAIM: int(bound_id),
            "iat": now,
            "exp": expires,
        }
        token = jwt.encode(payload, secret, algorithm=self._settings.algorithm)
        return IssuedToken(
            token=token,
            expires_at=datetime.fromtimestamp(expires, tz=timezone.utc),
            expires_in=self._settings.ttl_seconds,
        )

    def _verify(self, token: str, subject: str, secret: str) -> int:
        if not token:
            raise InvalidTokenError("Token is empty")
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.algorithm],
                issuer=self._settings.issuer,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.PyJWTError as e:
            logger.debug("Rejected %s token: %s", subject, e)
            raise InvalidTokenError()

        if payload.get("sub") != subject:
            raise InvalidTokenError(f"Token was not issued for the {subject} domain")

        bound_id = payload.get(BOUND_ID_CLAIM)
        if not isinstance(bound_id, int) or isinstance(bound_id, bool) or bound_id < 1:
            raise InvalidTokenError("Token is not bound to a valid id")
        return bound_id


def build_token_service() -> TokenService:
    """Construct a TokenService from the running Django settings."""
    return TokenService(TokenSettings.from_django_settings())
