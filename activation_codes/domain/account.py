"""
Account domain entity.

An Account holds the credentials of one linked third-party account,
registered under an activation code.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Account:
    """
    Account domain entity.

    Credential fields are opaque secrets: they are stored and returned
    as given, and are kept out of repr() so they never reach the logs.
    """

    id: Optional[int]
    activation_code_id: Optional[int]
    email: str
    email_password: str = field(repr=False)
    service_password: str = field(repr=False)
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    created_at: datetime

    def __post_init__(self):
        """Validate account entity."""
        if not self.email:
            raise ValueError("Account email is required")

    @classmethod
    def create(
        cls,
        email: str,
        email_password: str,
        service_password: str,
        access_token: str,
        refresh_token: str,
    ) -> "Account":
        """
        Create a new, not yet registered Account entity.

        Args:
            email: Account email
            email_password: Password of the email mailbox
            service_password: Password of the linked service account
            access_token: Service access token
            refresh_token: Service refresh token

        Returns:
            Account entity instance
        """
        return cls(
            id=None,
            activation_code_id=None,
            email=email,
            email_password=email_password,
            service_password=service_password,
            access_token=access_token,
            refresh_token=refresh_token,
            created_at=datetime.now(timezone.utc),
        )
