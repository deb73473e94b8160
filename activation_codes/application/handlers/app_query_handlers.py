"""
Handlers for app read operations on the caller's activation code.

Every query re-validates the code, so a code disabled or expired after
its token was issued stops working immediately.
"""

from typing import List

from activation_codes.application.dto.activation_code_dto import AccountDTO, CodeInfoDTO
from activation_codes.application.queries.get_code_accounts import GetCodeAccountsQuery
from activation_codes.application.queries.get_code_info import GetCodeInfoQuery
from activation_codes.domain.services import ActivationCodeGuard
from activation_codes.ports.activation_code_repository import ActivationCodeRepository


class GetCodeAccountsHandler:
    """Handler for GetCodeAccountsQuery."""

    def __init__(self, activation_code_repository: ActivationCodeRepository):
        """Initialize handler with repository."""
        self.activation_code_repository = activation_code_repository

    async def handle(self, query: GetCodeAccountsQuery) -> List[AccountDTO]:
        """
        Handle get accounts query.

        Returns:
            Accounts in registration order

        Raises:
            ActivationCodeNotFoundError: If the code is absent or soft-deleted
            InvalidCodeError: If the code is disabled
            ExpiredCodeError: If the code is expired
        """
        activation_code = await ActivationCodeGuard.resolve_usable(
            query.code_id, self.activation_code_repository
        )
        accounts = await self.activation_code_repository.find_accounts_for_code(activation_code.id)
        return [AccountDTO.from_entity(account) for account in accounts]


class GetCodeInfoHandler:
    """Handler for GetCodeInfoQuery."""

    def __init__(self, activation_code_repository: ActivationCodeRepository):
        """Initialize handler with repository."""
        self.activation_code_repository = activation_code_repository

    async def handle(self, query: GetCodeInfoQuery) -> CodeInfoDTO:
        """Handle get code info query."""
        activation_code = await ActivationCodeGuard.resolve_usable(
            query.code_id, self.activation_code_repository
        )
        return CodeInfoDTO(
            code=activation_code.code,
            expires_at=activation_code.expires_at,
            max_accounts=activation_code.max_accounts,
            used_accounts=activation_code.used_accounts,
            status=activation_code.status.value,
        )
