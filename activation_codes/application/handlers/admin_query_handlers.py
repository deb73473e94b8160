"""
Handlers for administrator read operations on activation codes.
"""

from activation_codes.application.dto.activation_code_dto import (
    ActivationCodeDTO,
    ActivationCodePageDTO,
)
from activation_codes.application.queries.get_activation_code import GetActivationCodeQuery
from activation_codes.application.queries.list_activation_codes import ListActivationCodesQuery
from activation_codes.domain.services import ActivationCodeGuard
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.domain.value_objects import PageRequest

DEFAULT_MAX_PAGE_SIZE = 100


class GetActivationCodeHandler:
    """Handler for GetActivationCodeQuery."""

    def __init__(self, activation_code_repository: ActivationCodeRepository):
        """Initialize handler with repository."""
        self.activation_code_repository = activation_code_repository

    async def handle(self, query: GetActivationCodeQuery) -> ActivationCodeDTO:
        """
        Handle get activation code query.

        Disabled and expired codes are returned as-is.

        Raises:
            ActivationCodeNotFoundError: If the code is absent or soft-deleted
        """
        activation_code = await ActivationCodeGuard.resolve_by_id(
            query.code_id, self.activation_code_repository
        )
        return ActivationCodeDTO.from_entity(activation_code)


class ListActivationCodesHandler:
    """Handler for ListActivationCodesQuery."""

    def __init__(
        self,
        activation_code_repository: ActivationCodeRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ):
        """Initialize handler with repository and page size ceiling."""
        self.activation_code_repository = activation_code_repository
        self.max_page_size = max_page_size

    async def handle(self, query: ListActivationCodesQuery) -> ActivationCodePageDTO:
        """
        Handle list activation codes query.

        Args:
            query: ListActivationCodesQuery

        Returns:
            ActivationCodePageDTO, newest codes first
        """
        page_request = PageRequest.normalize(query.page, query.page_size, self.max_page_size)
        codes, total = await self.activation_code_repository.list_paged(
            page_request.offset, page_request.limit
        )
        return ActivationCodePageDTO(
            items=[ActivationCodeDTO.from_entity(code) for code in codes],
            total=total,
            page=page_request.page,
            page_size=page_request.page_size,
            total_pages=page_request.total_pages(total),
        )
