"""
Unit tests for TokenService.
"""

import time

import jwt
import pytest

from core.domain.exceptions import ExpiredTokenError, InvalidTokenError
from core.security.tokens import TokenService, TokenSettings


class TestTokenSettings:
    """Tests for TokenSettings validation."""

    def test_secrets_must_differ(self):
        """Test identical secrets are rejected."""
        with pytest.raises(ValueError):
            TokenSettings(admin_secret="same", app_secret="same")

    @pytest.mark.parametrize("admin_secret,app_secret", [("", "app"), ("admin", "")])
    def test_secrets_required(self, admin_secret, app_secret):
        """Test empty secrets are rejected."""
        with pytest.raises(ValueError):
            TokenSettings(admin_secret=admin_secret, app_secret=app_secret)

    def test_ttl_must_be_positive(self):
        """Test a non-positive TTL is rejected."""
        with pytest.raises(ValueError):
            TokenSettings(admin_secret="a", app_secret="b", ttl_seconds=0)


class TestTokenService:
    """Tests for TokenService."""

    def test_admin_round_trip(self, token_service):
        """Test an admin token verifies to its administrator id."""
        issued = token_service.issue_admin_token(7)

        assert token_service.verify_admin_token(issued.token) == 7
        assert issued.expires_in == 24 * 60 * 60

    def test_code_round_trip(self, token_service):
        """Test an app token verifies to its code id."""
        issued = token_service.issue_code_token(42)

        assert token_service.verify_code_token(issued.token) == 42

    def test_expires_at_matches_ttl(self, token_service):
        """Test expires_at is issued_at plus the TTL."""
        issued_at = int(time.time())
        issued = token_service.issue_code_token(1, issued_at=issued_at)

        assert int(issued.expires_at.timestamp()) == issued_at + token_service.ttl_seconds

    def test_admin_token_rejected_by_app_verifier(self, token_service):
        """Test admin tokens are not accepted in the app domain."""
        issued = token_service.issue_admin_token(1)

        with pytest.raises(InvalidTokenError):
            token_service.verify_code_token(issued.token)

    def test_app_token_rejected_by_admin_verifier(self, token_service):
        """Test app tokens are not accepted in the admin domain."""
        issued = token_service.issue_code_token(1)

        with pytest.raises(InvalidTokenError):
            token_service.verify_admin_token(issued.token)

    def test_expired_token(self, token_service):
        """Test a token past its expiry raises ExpiredTokenError."""
        issued_at = int(time.time()) - token_service.ttl_seconds - 60
        issued = token_service.issue_code_token(1, issued_at=issued_at)

        with pytest.raises(ExpiredTokenError):
            token_service.verify_code_token(issued.token)

    def test_tampered_token(self, token_service):
        """Test a modified signature is rejected."""
        token = token_service.issue_admin_token(1).token
        head, payload, signature = token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

        with pytest.raises(InvalidTokenError):
            token_service.verify_admin_token(".".join([head, payload, flipped]))

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_malformed_token(self, token_service, token):
        """Test malformed tokens are rejected."""
        with pytest.raises(InvalidTokenError):
            token_service.verify_code_token(token)

    def test_token_signed_with_other_secret(self, token_service):
        """Test a token from a different secret is rejected."""
        other = TokenService(TokenSettings(admin_secret="x-admin", app_secret="x-app"))
        token = other.issue_code_token(1).token

        with pytest.raises(InvalidTokenError):
            token_service.verify_code_token(token)

    def test_missing_bound_id(self, token_settings, token_service):
        """Test a correctly signed token without a bound id is rejected."""
        now = int(time.time())
        token = jwt.encode(
            {"iss": token_settings.issuer, "sub": "app", "iat": now, "exp": now + 60},
            token_settings.app_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            token_service.verify_code_token(token)

    def test_non_positive_bound_id(self, token_settings, token_service):
        """Test a bound id below 1 is rejected."""
        now = int(time.time())
        token = jwt.encode(
            {"iss": token_settings.issuer, "sub": "app", "bid": 0, "iat": now, "exp": now + 60},
            token_settings.app_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            token_service.verify_code_token(token)
