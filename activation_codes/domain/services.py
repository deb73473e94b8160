"""
Activation code domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""

from datetime import datetime
from typing import Optional

from activation_codes.domain.account import Account
from activation_codes.domain.activation_code import ActivationCode
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.domain.exceptions import ActivationCodeNotFoundError


class ActivationCodeGuard:
    """Domain service resolving codes and gating them on live validity."""

    @staticmethod
    async def resolve_by_id(
        code_id: int,
        repository: ActivationCodeRepository,
    ) -> ActivationCode:
        """
        Load a code by id without checking validity.

        Raises:
            ActivationCodeNotFoundError: If the code is absent or soft-deleted
        """
        activation_code = await repository.find_by_id(code_id)
        if activation_code is None:
            raise ActivationCodeNotFoundError()
        return activation_code

    @staticmethod
    async def resolve_usable(
        code_id: int,
        repository: ActivationCodeRepository,
        current_time: Optional[datetime] = None,
    ) -> ActivationCode:
        """
        Load a code by id and require it to be currently valid.

        Args:
            code_id: Activation code id
            repository: Activation code repository
            current_time: Time to evaluate expiry at (defaults to now)

        Returns:
            The valid ActivationCode

        Raises:
            ActivationCodeNotFoundError: If the code is absent or soft-deleted
            InvalidCodeError: If the code is disabled
            ExpiredCodeError: If the code is expired
        """
        activation_code = await ActivationCodeGuard.resolve_by_id(code_id, repository)
        activation_code.ensure_usable(current_time)
        return activation_code


class QuotaManager:
    """Domain service for managing the account quota of a code."""

    @staticmethod
    async def remaining_slots(
        activation_code: ActivationCode,
        repository: ActivationCodeRepository,
    ) -> int:
        """
        Count free account slots from the store.

        Args:
            activation_code: ActivationCode entity
            repository: Activation code repository

        Returns:
            Number of accounts that can still be registered
        """
        used = await repository.count_accounts_for_code(activation_code.id)
        return max(0, activation_code.max_accounts - used)

    @staticmethod
    async def register_account(
        activation_code: ActivationCode,
        account: Account,
        repository: ActivationCodeRepository,
    ) -> Account:
        """
        Register an account under a code.

        The pre-check here gives a fast rejection; the repository repeats
        validity and quota checks under lock before inserting.

        Args:
            activation_code: A currently valid ActivationCode
            account: Account entity to register
            repository: Activation code repository

        Returns:
            Saved Account entity

        Raises:
            InvalidCodeError: If the code is disabled
            ExpiredCodeError: If the code is expired
            QuotaExceededError: If the quota is used up
        """
        activation_code.ensure_usable()
        return await repository.add_account_if_under_quota(
            activation_code.id, account, activation_code.max_accounts
        )
