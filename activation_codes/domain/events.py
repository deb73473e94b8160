"""
Activation code domain events.

Domain events represent something that happened in the activation code domain.
"""
from dataclasses import dataclass
from datetime import datetime

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ActivationCodeCreated(DomainEvent):
    """Event raised when an administrator creates an activation code."""

    code_id: int
    max_accounts: int
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class ActivationCodeRedeemed(DomainEvent):
    """Event raised when an activation code is exchanged for an app token."""

    code_id: int


@dataclass(frozen=True, kw_only=True)
class ActivationCodeStatusChanged(DomainEvent):
    """Event raised when an administrator sets a code's status."""

    code_id: int
    status: str


@dataclass(frozen=True, kw_only=True)
class AccountRegistered(DomainEvent):
    """Event raised when an account is registered under a code."""

    code_id: int
    account_id: int
    max_accounts: int


@dataclass(frozen=True, kw_only=True)
class AccountQuotaRejected(DomainEvent):
    """Event raised when a registration is refused because the quota is full."""

    code_id: int
    max_accounts: int
