"""
RedeemActivationCodeHandler.

Handler for exchanging an activation code for an app token.
"""

import logging

from activation_codes.application.commands.redeem_activation_code import (
    RedeemActivationCodeCommand,
)
from activation_codes.application.dto.activation_code_dto import RedeemResponseDTO
from activation_codes.domain.events import ActivationCodeRedeemed
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.domain.exceptions import ActivationCodeNotFoundError
from core.infrastructure.events import event_bus
from core.security.tokens import TokenService

logger = logging.getLogger(__name__)


class RedeemActivationCodeHandler:
    """Handler for RedeemActivationCodeCommand."""

    def __init__(
        self,
        activation_code_repository: ActivationCodeRepository,
        token_service: TokenService,
    ):
        """Initialize handler with repository and token service."""
        self.activation_code_repository = activation_code_repository
        self.token_service = token_service

    async def handle(self, command: RedeemActivationCodeCommand) -> RedeemResponseDTO:
        """
        Handle redeem command.

        Redeeming does not consume quota; the same code may be redeemed
        any number of times while it stays valid.

        Args:
            command: RedeemActivationCodeCommand

        Returns:
            RedeemResponseDTO with a token bound to the code

        Raises:
            ActivationCodeNotFoundError: If no code matches exactly
            InvalidCodeError: If the code is disabled
            ExpiredCodeError: If the code is expired
        """
        activation_code = await self.activation_code_repository.find_by_code(command.code)
        if activation_code is None:
            raise ActivationCodeNotFoundError()

        activation_code.ensure_usable()

        issued = self.token_service.issue_code_token(activation_code.id)
        logger.info("Activation code %s redeemed", activation_code.id)

        await event_bus.publish(
            ActivationCodeRedeemed(
                aggregate_id=str(activation_code.id),
                code_id=activation_code.id,
            )
        )

        return RedeemResponseDTO(
            token=issued.token,
            expires_at=activation_code.expires_at,
            token_expires_at=issued.expires_at,
            token_expires_in=issued.expires_in,
        )
