"""
Administrator domain events.
"""
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class AdministratorLoggedIn(DomainEvent):
    """Event raised when an administrator logs in successfully."""

    admin_id: int
    username: str
