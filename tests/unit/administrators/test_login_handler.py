"""
Unit tests for LoginAdministratorHandler.
"""

from datetime import datetime, timezone
from typing import Optional

import pytest

from administrators.application.commands.login_administrator import LoginAdministratorCommand
from administrators.application.handlers.login_administrator_handler import (
    LoginAdministratorHandler,
)
from administrators.domain.administrator import Administrator
from administrators.ports.administrator_repository import AdministratorRepository
from core.domain.exceptions import InvalidCredentialsError


class StaticAdministratorRepository(AdministratorRepository):
    """Repository holding a single administrator."""

    def __init__(self, username: str, password: str):
        self.administrator = Administrator(
            id=3, username=username, created_at=datetime.now(timezone.utc)
        )
        self._password = password

    async def find_by_username(self, username: str) -> Optional[Administrator]:
        return self.administrator if username == self.administrator.username else None

    async def verify_password(self, admin_id: int, raw_password: str) -> bool:
        return admin_id == self.administrator.id and raw_password == self._password

    async def create(self, username: str, raw_password: str) -> Administrator:
        raise NotImplementedError


@pytest.mark.asyncio
class TestLoginAdministratorHandler:
    """Tests for LoginAdministratorHandler."""

    async def test_login_success(self, token_service):
        """Test valid credentials yield an admin token."""
        handler = LoginAdministratorHandler(
            StaticAdministratorRepository("root", "pw"), token_service
        )

        result = await handler.handle(LoginAdministratorCommand(username="root", password="pw"))

        assert token_service.verify_admin_token(result.token) == 3
        assert result.expires_in == token_service.ttl_seconds

    @pytest.mark.parametrize("username,password", [("root", "wrong"), ("ghost", "pw")])
    async def test_login_rejected(self, token_service, username, password):
        """Test unknown users and bad passwords fail the same way."""
        handler = LoginAdministratorHandler(
            StaticAdministratorRepository("root", "pw"), token_service
        )

        with pytest.raises(InvalidCredentialsError):
            await handler.handle(LoginAdministratorCommand(username=username, password=password))
