"""
LoginAdministratorHandler.

Handler for administrator login.
"""

import logging

from administrators.application.commands.login_administrator import LoginAdministratorCommand
from administrators.application.dto.login_dto import LoginResponseDTO
from administrators.domain.events import AdministratorLoggedIn
from administrators.ports.administrator_repository import AdministratorRepository
from core.domain.exceptions import InvalidCredentialsError
from core.infrastructure.events import event_bus
from core.security.tokens import TokenService

logger = logging.getLogger(__name__)


class LoginAdministratorHandler:
    """Handler for LoginAdministratorCommand."""

    def __init__(
        self,
        administrator_repository: AdministratorRepository,
        token_service: TokenService,
    ):
        """Initialize handler with repository and token service."""
        self.administrator_repository = administrator_repository
        self.token_service = token_service

    async def handle(self, command: LoginAdministratorCommand) -> LoginResponseDTO:
        """
        Handle login command.

        Unknown usernames and wrong passwords fail with the same error.

        Args:
            command: LoginAdministratorCommand

        Returns:
            LoginResponseDTO with an admin token

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        administrator = await self.administrator_repository.find_by_username(command.username)
        if administrator is None or not await self.administrator_repository.verify_password(
            administrator.id, command.password
        ):
            logger.info("Rejected login for username %r", command.username)
            raise InvalidCredentialsError()

        issued = self.token_service.issue_admin_token(administrator.id)

        await event_bus.publish(
            AdministratorLoggedIn(
                aggregate_id=str(administrator.id),
                admin_id=administrator.id,
                username=administrator.username,
            )
        )

        return LoginResponseDTO(
            token=issued.token,
            expires_at=issued.expires_at,
            expires_in=issued.expires_in,
        )
