"""
Unit tests for ActivationCode domain entity.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from activation_codes.domain.activation_code import MAX_DURATION_DAYS, ActivationCode
from core.domain.exceptions import ExpiredCodeError, InvalidCodeError, ValidationError
from core.domain.value_objects import CodeStatus, CodeValidity


class TestActivationCodeEntity:
    """Tests for ActivationCode domain entity."""

    def test_create_activation_code(self):
        """Test creating an activation code entity."""
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)

        code = ActivationCode.create(duration_days=30, max_accounts=5, current_time=now)

        assert code.id is None
        assert len(code.code) == 18
        assert code.status == CodeStatus.ENABLED
        assert code.max_accounts == 5
        assert code.expires_at == now + timedelta(days=30)
        assert code.created_at == now
        assert code.accounts == ()
        assert code.used_accounts == 0
        assert code.remaining_accounts == 5

    def test_create_with_explicit_code(self):
        """Test creating with a caller-supplied code string."""
        code = ActivationCode.create(duration_days=1, max_accounts=1, code="ABCDEF0123456789XY")

        assert code.code == "ABCDEF0123456789XY"

    @pytest.mark.parametrize("duration", [0, -1, "7", 1.5, True, MAX_DURATION_DAYS + 1, 10**7])
    def test_create_rejects_bad_duration(self, duration):
        """Test that duration must be an integer within the allowed range of days."""
        with pytest.raises(ValidationError):
            ActivationCode.create(duration_days=duration, max_accounts=1)

    @pytest.mark.parametrize("max_accounts", [0, 101, -5, "3", False])
    def test_create_rejects_bad_quota(self, max_accounts):
        """Test that quota must lie in 1..100."""
        with pytest.raises(ValidationError):
            ActivationCode.create(duration_days=1, max_accounts=max_accounts)

    def test_quota_bounds_are_inclusive(self):
        """Test quota boundaries 1 and 100 are accepted."""
        assert ActivationCode.create(duration_days=1, max_accounts=1).max_accounts == 1
        assert ActivationCode.create(duration_days=1, max_accounts=100).max_accounts == 100

    def test_unrepresentable_expiry_rejected(self):
        """Test an expiry past the calendar limit is a validation error."""
        near_end = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)

        with pytest.raises(ValidationError):
            ActivationCode.create(duration_days=2, max_accounts=1, current_time=near_end)

    def test_naive_expiry_rejected(self):
        """Test that a naive expiry datetime is rejected."""
        with pytest.raises(ValueError):
            ActivationCode(
                id=None,
                code="X" * 18,
                expires_at=datetime(2030, 1, 1),
                max_accounts=1,
                status=CodeStatus.ENABLED,
                created_at=datetime.now(timezone.utc),
                updated_at=datetime.now(timezone.utc),
            )

    def test_validity_valid(self):
        """Test a fresh enabled code is valid."""
        code = ActivationCode.create(duration_days=1, max_accounts=1)

        assert code.validity() == CodeValidity.VALID
        assert code.is_valid() is True
        code.ensure_usable()

    def test_validity_expired(self):
        """Test a code past its expiry is expired."""
        now = datetime.now(timezone.utc)
        code = ActivationCode.create(duration_days=1, max_accounts=1, current_time=now)

        later = now + timedelta(days=1, seconds=1)

        assert code.validity(later) == CodeValidity.EXPIRED
        assert code.is_valid(later) is False
        with pytest.raises(ExpiredCodeError):
            code.ensure_usable(later)

    def test_expiry_instant_is_still_valid(self):
        """Test that the code is usable exactly at expires_at."""
        now = datetime.now(timezone.utc)
        code = ActivationCode.create(duration_days=1, max_accounts=1, current_time=now)

        assert code.validity(code.expires_at) == CodeValidity.VALID

    def test_disabled_takes_precedence_over_expired(self):
        """Test a disabled and expired code reports disabled."""
        now = datetime.now(timezone.utc)
        code = ActivationCode.create(duration_days=1, max_accounts=1, current_time=now)
        disabled = code.with_status(CodeStatus.DISABLED)
        later = now + timedelta(days=2)

        assert disabled.validity(later) == CodeValidity.DISABLED
        with pytest.raises(InvalidCodeError):
            disabled.ensure_usable(later)

    def test_with_status_same_status_returns_self(self):
        """Test setting the current status is a no-op."""
        code = ActivationCode.create(duration_days=1, max_accounts=1)

        assert code.with_status(CodeStatus.ENABLED) is code

    def test_reenable_restores_validity(self):
        """Test disable then enable brings a code back."""
        code = ActivationCode.create(duration_days=1, max_accounts=1)

        restored = code.with_status(CodeStatus.DISABLED).with_status(CodeStatus.ENABLED)

        assert restored.is_valid() is True

    def test_remaining_accounts(self, sample_account):
        """Test remaining slots derive from attached accounts."""
        code = ActivationCode.create(duration_days=1, max_accounts=2)
        with_one = replace(code, accounts=(sample_account,))

        assert with_one.used_accounts == 1
        assert with_one.remaining_accounts == 1
