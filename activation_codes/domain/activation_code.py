"""
ActivationCode domain entity.

This is the core domain entity representing an activation code.
It contains business logic and is independent of infrastructure.
"""

import secrets
import string
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from activation_codes.domain.account import Account
from core.domain.exceptions import ExpiredCodeError, InvalidCodeError, ValidationError
from core.domain.value_objects import CodeStatus, CodeValidity

ACTIVATION_CODE_ALPHABET = string.digits + string.ascii_uppercase
ACTIVATION_CODE_LENGTH = 18
MAX_ACCOUNTS_LIMIT = 100
MAX_DURATION_DAYS = 36500


def generate_activation_code(length: int = ACTIVATION_CODE_LENGTH) -> str:
    """
    Generate an activation code from [0-9A-Z] using a CSPRNG.

    Args:
        length: Number of characters

    Returns:
        Generated activation code string
    """
    return "".join(secrets.choice(ACTIVATION_CODE_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class ActivationCode:
    """
    ActivationCode domain entity.

    Expiry is never stored as a flag: it is derived from expires_at
    against the clock every time validity is evaluated.
    """

    id: Optional[int]
    code: str
    expires_at: datetime
    max_accounts: int
    status: CodeStatus
    created_at: datetime
    updated_at: datetime
    accounts: Tuple[Account, ...] = ()

    def __post_init__(self):
        """Validate activation code entity."""
        if not self.code or len(self.code.strip()) == 0:
            raise ValueError("Activation code cannot be empty")
        if self.max_accounts < 1:
            raise ValueError("Max accounts must be at least 1")
        if self.expires_at.tzinfo is None:
            raise ValueError("Expiry must be timezone-aware")

    @classmethod
    def create(
        cls,
        duration_days: int,
        max_accounts: int,
        code: Optional[str] = None,
        current_time: Optional[datetime] = None,
    ) -> "ActivationCode":
        """
        Create a new, enabled ActivationCode entity with no accounts.

        Args:
            duration_days: Days until the code expires (1 to MAX_DURATION_DAYS)
            max_accounts: Account quota (1 to 100)
            code: Optional code string (generated if not provided)
            current_time: Creation time (defaults to now)

        Returns:
            ActivationCode entity instance

        Raises:
            ValidationError: If duration or quota is out of range
        """
        if (
            isinstance(duration_days, bool)
            or not isinstance(duration_days, int)
            or not 1 <= duration_days <= MAX_DURATION_DAYS
        ):
            raise ValidationError(f"Duration must be between 1 and {MAX_DURATION_DAYS} days")
        if (
            isinstance(max_accounts, bool)
            or not isinstance(max_accounts, int)
            or not 1 <= max_accounts <= MAX_ACCOUNTS_LIMIT
        ):
            raise ValidationError(f"Max accounts must be between 1 and {MAX_ACCOUNTS_LIMIT}")

        now = current_time or datetime.now(timezone.utc)
        try:
            expires_at = now + timedelta(days=duration_days)
        except OverflowError as e:
            raise ValidationError("Duration is too large") from e
        return cls(
            id=None,
            code=code or generate_activation_code(),
            expires_at=expires_at,
            max_accounts=max_accounts,
            status=CodeStatus.ENABLED,
            created_at=now,
            updated_at=now,
        )

    @property
    def used_accounts(self) -> int:
        """Number of accounts registered under this code."""
        return len(self.accounts)

    @property
    def remaining_accounts(self) -> int:
        """Number of account slots still free."""
        return max(0, self.max_accounts - self.used_accounts)

    def is_expired(self, current_time: Optional[datetime] = None) -> bool:
        """
        Check whether the code is past its expiry.

        Args:
            current_time: Current time (defaults to now)

        Returns:
            True if expires_at lies before current_time
        """
        check_time = current_time or datetime.now(timezone.utc)
        return self.expires_at < check_time

    def validity(self, current_time: Optional[datetime] = None) -> CodeValidity:
        """
        Evaluate the validity state machine.

        A disabled code reports DISABLED even when it is also expired.

        Args:
            current_time: Current time (defaults to now)

        Returns:
            CodeValidity
        """
        if self.status == CodeStatus.DISABLED:
            return CodeValidity.DISABLED
        if self.is_expired(current_time):
            return CodeValidity.EXPIRED
        return CodeValidity.VALID

    def is_valid(self, current_time: Optional[datetime] = None) -> bool:
        """Check if the code can currently be used."""
        return self.validity(current_time) == CodeValidity.VALID

    def ensure_usable(self, current_time: Optional[datetime] = None) -> None:
        """
        Raise the matching error unless the code is currently valid.

        Raises:
            InvalidCodeError: If the code is disabled
            ExpiredCodeError: If the code is expired
        """
        validity = self.validity(current_time)
        if validity == CodeValidity.DISABLED:
            raise InvalidCodeError()
        if validity == CodeValidity.EXPIRED:
            raise ExpiredCodeError()

    def with_status(self, status: CodeStatus) -> "ActivationCode":
        """
        Create a new ActivationCode instance with the given status.

        Returns:
            Same instance when the status is unchanged, otherwise a copy
        """
        if status == self.status:
            return self
        return replace(self, status=status, updated_at=datetime.now(timezone.utc))
