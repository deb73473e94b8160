"""
RegisterAccountHandler.

Handler for registering an account under an activation code.
"""

import logging

from activation_codes.application.commands.register_account import RegisterAccountCommand
from activation_codes.application.dto.activation_code_dto import AccountDTO
from activation_codes.domain.account import Account
from activation_codes.domain.events import AccountQuotaRejected, AccountRegistered
from activation_codes.domain.services import ActivationCodeGuard, QuotaManager
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.domain.exceptions import QuotaExceededError
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class RegisterAccountHandler:
    """Handler for RegisterAccountCommand."""

    def __init__(self, activation_code_repository: ActivationCodeRepository):
        """Initialize handler with repository."""
        self.activation_code_repository = activation_code_repository

    async def handle(self, command: RegisterAccountCommand) -> AccountDTO:
        """
        Handle register account command.

        Args:
            command: RegisterAccountCommand

        Returns:
            AccountDTO of the registered account

        Raises:
            ActivationCodeNotFoundError: If the code is absent or soft-deleted
            InvalidCodeError: If the code is disabled
            ExpiredCodeError: If the code is expired
            QuotaExceededError: If the code has no free account slot
            PersistenceError: If the store fails
        """
        activation_code = await ActivationCodeGuard.resolve_usable(
            command.code_id, self.activation_code_repository
        )

        account = Account.create(
            email=command.email,
            email_password=command.email_password,
            service_password=command.service_password,
            access_token=command.access_token,
            refresh_token=command.refresh_token,
        )

        try:
            saved = await QuotaManager.register_account(
                activation_code, account, self.activation_code_repository
            )
        except QuotaExceededError:
            logger.info("Account quota reached for activation code %s", activation_code.id)
            await event_bus.publish(
                AccountQuotaRejected(
                    aggregate_id=str(activation_code.id),
                    code_id=activation_code.id,
                    max_accounts=activation_code.max_accounts,
                )
            )
            raise

        await event_bus.publish(
            AccountRegistered(
                aggregate_id=str(activation_code.id),
                code_id=activation_code.id,
                account_id=saved.id,
                max_accounts=activation_code.max_accounts,
            )
        )

        return AccountDTO.from_entity(saved)
