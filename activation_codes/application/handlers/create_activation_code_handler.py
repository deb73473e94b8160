"""
CreateActivationCodeHandler.

Handler for creating activation codes.
"""

import logging

from activation_codes.application.commands.create_activation_code import (
    CreateActivationCodeCommand,
)
from activation_codes.application.dto.activation_code_dto import ActivationCodeDTO
from activation_codes.domain.activation_code import (
    ACTIVATION_CODE_LENGTH,
    ActivationCode,
    generate_activation_code,
)
from activation_codes.domain.events import ActivationCodeCreated
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class CreateActivationCodeHandler:
    """Handler for CreateActivationCodeCommand."""

    def __init__(
        self,
        activation_code_repository: ActivationCodeRepository,
        code_length: int = ACTIVATION_CODE_LENGTH,
    ):
        """Initialize handler with repository and code length."""
        self.activation_code_repository = activation_code_repository
        self.code_length = code_length

    async def handle(self, command: CreateActivationCodeCommand) -> ActivationCodeDTO:
        """
        Handle create activation code command.

        Args:
            command: CreateActivationCodeCommand

        Returns:
            ActivationCodeDTO of the new, enabled code

        Raises:
            ValidationError: If duration or quota is out of range
            DuplicateCodeError: If the generated code already exists
            PersistenceError: If the store fails
        """
        activation_code = ActivationCode.create(
            duration_days=command.duration_days,
            max_accounts=command.max_accounts,
            code=generate_activation_code(self.code_length),
        )
        saved = await self.activation_code_repository.create(activation_code)

        logger.info(
            "Activation code %s created (max_accounts=%d, expires_at=%s)",
            saved.id,
            saved.max_accounts,
            saved.expires_at.isoformat(),
        )

        await event_bus.publish(
            ActivationCodeCreated(
                aggregate_id=str(saved.id),
                code_id=saved.id,
                max_accounts=saved.max_accounts,
                expires_at=saved.expires_at,
            )
        )

        return ActivationCodeDTO.from_entity(saved)
