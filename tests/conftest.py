"""
Pytest configuration and shared fixtures.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

import pytest
from asgiref.sync import async_to_sync

from activation_codes.domain.account import Account
from activation_codes.domain.activation_code import ActivationCode
from activation_codes.infrastructure.repositories.django_activation_code_repository import (
    DjangoActivationCodeRepository,
)
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from administrators.infrastructure.repositories.django_administrator_repository import (
    DjangoAdministratorRepository,
)
from core.domain.exceptions import (
    ActivationCodeNotFoundError,
    DuplicateCodeError,
    QuotaExceededError,
)
from core.domain.value_objects import CodeStatus
from core.security.tokens import TokenService, TokenSettings, build_token_service

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


class InMemoryActivationCodeRepository(ActivationCodeRepository):
    """Dict-backed repository for handler tests that do not need a database."""

    def __init__(self):
        self.codes: Dict[int, ActivationCode] = {}
        self.accounts: Dict[int, List[Account]] = {}
        self._next_code_id = 1
        self._next_account_id = 1

    async def create(self, activation_code: ActivationCode) -> ActivationCode:
        if any(c.code == activation_code.code for c in self.codes.values()):
            raise DuplicateCodeError()
        saved = ActivationCode(
            id=self._next_code_id,
            code=activation_code.code,
            expires_at=activation_code.expires_at,
            max_accounts=activation_code.max_accounts,
            status=activation_code.status,
            created_at=activation_code.created_at,
            updated_at=activation_code.updated_at,
        )
        self._next_code_id += 1
        self.codes[saved.id] = saved
        self.accounts[saved.id] = []
        return saved

    def _with_accounts(self, activation_code: ActivationCode) -> ActivationCode:
        return replace(activation_code, accounts=tuple(self.accounts[activation_code.id]))

    async def find_by_id(self, code_id: int) -> Optional[ActivationCode]:
        code = self.codes.get(code_id)
        return self._with_accounts(code) if code else None

    async def find_by_code(self, code: str) -> Optional[ActivationCode]:
        for activation_code in self.codes.values():
            if activation_code.code == code:
                return self._with_accounts(activation_code)
        return None

    async def list_paged(self, offset: int, limit: int) -> Tuple[List[ActivationCode], int]:
        ordered = sorted(self.codes.values(), key=lambda c: (c.created_at, c.id), reverse=True)
        return [self._with_accounts(c) for c in ordered[offset : offset + limit]], len(ordered)

    async def update_status(self, code_id: int, status: CodeStatus) -> bool:
        code = self.codes.get(code_id)
        if code is None:
            return False
        self.codes[code_id] = code.with_status(status)
        return True

    async def count_accounts_for_code(self, code_id: int) -> int:
        return len(self.accounts.get(code_id, []))

    async def add_account_if_under_quota(
        self, code_id: int, account: Account, max_accounts: int
    ) -> Account:
        code = self.codes.get(code_id)
        if code is None:
            raise ActivationCodeNotFoundError()
        code.ensure_usable()
        if len(self.accounts[code_id]) >= max_accounts:
            raise QuotaExceededError()
        saved = replace(account, id=self._next_account_id, activation_code_id=code_id)
        self._next_account_id += 1
        self.accounts[code_id].append(saved)
        return saved

    async def find_accounts_for_code(self, code_id: int) -> List[Account]:
        return list(self.accounts.get(code_id, []))


@pytest.fixture
def token_settings():
    """Fixture for TokenSettings with distinct test secrets."""
    return TokenSettings(admin_secret="unit-admin-secret", app_secret="unit-app-secret")


@pytest.fixture
def token_service(token_settings):
    """Fixture for TokenService."""
    return TokenService(token_settings)


@pytest.fixture
def memory_repository():
    """Fixture for the in-memory ActivationCodeRepository."""
    return InMemoryActivationCodeRepository()


@pytest.fixture
def activation_code_repository():
    """Fixture for ActivationCodeRepository."""
    return DjangoActivationCodeRepository()


@pytest.fixture
def administrator_repository():
    """Fixture for AdministratorRepository."""
    return DjangoAdministratorRepository()


@pytest.fixture
def sample_account():
    """Fixture for a sample Account entity."""
    return Account.create(
        email="user@example.com",
        email_password="mail-pass",
        service_password="service-pass",
        access_token="access-token",
        refresh_token="refresh-token",
    )


def make_account(index: int = 0) -> Account:
    """Build a distinct Account entity."""
    return Account.create(
        email=f"user{index}@example.com",
        email_password=f"mail-pass-{index}",
        service_password=f"service-pass-{index}",
        access_token=f"access-{index}",
        refresh_token=f"refresh-{index}",
    )


@pytest.fixture
def account_factory():
    """Fixture returning make_account."""
    return make_account


@pytest.fixture
def save_code(activation_code_repository):
    """Fixture returning a helper that saves a code and returns the stored entity."""

    def _save(
        duration_days: int = 30,
        max_accounts: int = 3,
        status: CodeStatus = CodeStatus.ENABLED,
        expires_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
    ) -> ActivationCode:
        code = ActivationCode.create(duration_days=duration_days, max_accounts=max_accounts)
        if expires_at is not None:
            code = replace(code, expires_at=expires_at)
        if created_at is not None:
            code = replace(code, created_at=created_at, updated_at=created_at)
        saved = async_to_sync(activation_code_repository.create)(code)
        if status != CodeStatus.ENABLED:
            async_to_sync(activation_code_repository.update_status)(saved.id, status)
            saved = async_to_sync(activation_code_repository.find_by_id)(saved.id)
        return saved

    return _save


@pytest.fixture
def db_code(db, save_code):
    """Fixture for an enabled ActivationCode saved in database."""
    return save_code()


@pytest.fixture
def db_expired_code(db, save_code):
    """Fixture for an expired ActivationCode saved in database."""
    return save_code(expires_at=datetime.now(timezone.utc) - timedelta(minutes=1))


@pytest.fixture
def db_administrator(db, administrator_repository):
    """Fixture for an Administrator saved in database."""
    return async_to_sync(administrator_repository.create)(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def configured_token_service():
    """Fixture for the TokenService the running app verifies with."""
    return build_token_service()


@pytest.fixture
def admin_headers(db_administrator, configured_token_service):
    """Fixture for an admin Authorization header."""
    token = configured_token_service.issue_admin_token(db_administrator.id).token
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


@pytest.fixture
def app_headers(db_code, configured_token_service):
    """Fixture for an app Authorization header bound to db_code."""
    token = configured_token_service.issue_code_token(db_code.id).token
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}
