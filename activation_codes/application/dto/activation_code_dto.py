"""
Activation code DTOs for API responses.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from activation_codes.domain.account import Account
from activation_codes.domain.activation_code import ActivationCode


@dataclass
class AccountDTO:
    """DTO for a registered account, credentials included."""

    id: int
    activation_code_id: int
    email: str
    email_password: str = field(repr=False)
    service_password: str = field(repr=False)
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    created_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDTO":
        """Build the DTO from an Account entity."""
        return cls(
            id=account.id,
            activation_code_id=account.activation_code_id,
            email=account.email,
            email_password=account.email_password,
            service_password=account.service_password,
            access_token=account.access_token,
            refresh_token=account.refresh_token,
            created_at=account.created_at,
        )


@dataclass
class ActivationCodeDTO:
    """DTO for an activation code with its accounts."""

    id: int
    code: str
    expires_at: datetime
    max_accounts: int
    used_accounts: int
    status: str
    created_at: datetime
    updated_at: datetime
    accounts: List[AccountDTO]

    @classmethod
    def from_entity(cls, activation_code: ActivationCode) -> "ActivationCodeDTO":
        """Build the DTO from an ActivationCode entity."""
        return cls(
            id=activation_code.id,
            code=activation_code.code,
            expires_at=activation_code.expires_at,
            max_accounts=activation_code.max_accounts,
            used_accounts=activation_code.used_accounts,
            status=activation_code.status.value,
            created_at=activation_code.created_at,
            updated_at=activation_code.updated_at,
            accounts=[AccountDTO.from_entity(a) for a in activation_code.accounts],
        )


@dataclass
class ActivationCodePageDTO:
    """DTO for one page of activation codes."""

    items: List[ActivationCodeDTO]
    total: int
    page: int
    page_size: int
    total_pages: int


@dataclass
class UpdateCodeStatusResponseDTO:
    """DTO for status update acknowledgement."""

    id: int
    status: str
    message: str


@dataclass
class RedeemResponseDTO:
    """DTO for redeem response: the app token and the code's expiry."""

    token: str = field(repr=False)
    expires_at: datetime
    token_expires_at: datetime
    token_expires_in: int


@dataclass
class CodeInfoDTO:
    """DTO for code usage information."""

    code: str
    expires_at: datetime
    max_accounts: int
    used_accounts: int
    status: str
