"""
UpdateCodeStatusHandler.

Handler for enabling and disabling activation codes.
"""

from activation_codes.application.commands.update_code_status import UpdateCodeStatusCommand
from activation_codes.application.dto.activation_code_dto import UpdateCodeStatusResponseDTO
from activation_codes.domain.events import ActivationCodeStatusChanged
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.domain.exceptions import ActivationCodeNotFoundError
from core.domain.value_objects import CodeStatus
from core.infrastructure.events import event_bus


class UpdateCodeStatusHandler:
    """Handler for UpdateCodeStatusCommand."""

    def __init__(self, activation_code_repository: ActivationCodeRepository):
        """Initialize handler with repository."""
        self.activation_code_repository = activation_code_repository

    async def handle(self, command: UpdateCodeStatusCommand) -> UpdateCodeStatusResponseDTO:
        """
        Handle update status command.

        Setting a code to the status it already has succeeds and leaves
        it unchanged.

        Args:
            command: UpdateCodeStatusCommand

        Returns:
            UpdateCodeStatusResponseDTO

        Raises:
            ValidationError: If the status is not enabled or disabled
            ActivationCodeNotFoundError: If the code does not exist
            PersistenceError: If the store fails
        """
        new_status = CodeStatus.parse(command.status)

        updated = await self.activation_code_repository.update_status(command.code_id, new_status)
        if not updated:
            raise ActivationCodeNotFoundError()

        await event_bus.publish(
            ActivationCodeStatusChanged(
                aggregate_id=str(command.code_id),
                code_id=command.code_id,
                status=new_status.value,
            )
        )

        return UpdateCodeStatusResponseDTO(
            id=command.code_id,
            status=new_status.value,
            message="Status updated successfully",
        )
