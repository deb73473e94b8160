"""
ActivationCode repository port (interface).

This defines the contract for activation code persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from activation_codes.domain.account import Account
from activation_codes.domain.activation_code import ActivationCode
from core.domain.value_objects import CodeStatus


class ActivationCodeRepository(ABC):
    """
    Abstract repository for ActivationCode entities and their accounts.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Soft-deleted rows are invisible to every operation.
    """

    @abstractmethod
    async def create(self, activation_code: ActivationCode) -> ActivationCode:
        """
        Persist a new activation code.

        Args:
            activation_code: ActivationCode entity without an id

        Returns:
            Saved activation code entity with its assigned id

        Raises:
            DuplicateCodeError: If the code string already exists
            PersistenceError: If the store fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, code_id: int) -> Optional[ActivationCode]:
        """
        Find an activation code by ID, accounts included.

        Args:
            code_id: Activation code id

        Returns:
            ActivationCode entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[ActivationCode]:
        """
        Find an activation code by its exact code string.

        Args:
            code: Activation code string

        Returns:
            ActivationCode entity or None if not found
        """
        pass

    @abstractmethod
    async def list_paged(self, offset: int, limit: int) -> Tuple[List[ActivationCode], int]:
        """
        List activation codes, newest first.

        Args:
            offset: Number of rows to skip
            limit: Maximum number of rows to return

        Returns:
            Tuple of (codes with accounts, total number of codes)
        """
        pass

    @abstractmethod
    async def update_status(self, code_id: int, status: CodeStatus) -> bool:
        """
        Set the status of an activation code.

        Args:
            code_id: Activation code id
            status: New status

        Returns:
            True if the code exists, False otherwise
        """
        pass

    @abstractmethod
    async def count_accounts_for_code(self, code_id: int) -> int:
        """
        Count accounts registered under a code.

        Args:
            code_id: Activation code id

        Returns:
            Number of accounts
        """
        pass

    @abstractmethod
    async def add_account_if_under_quota(
        self, code_id: int, account: Account, max_accounts: int
    ) -> Account:
        """
        Atomically check the quota and insert an account.

        The count and the insert happen in one transaction that holds an
        exclusive lock on the code, so concurrent callers are serialized.

        Args:
            code_id: Activation code id
            account: Account entity to register
            max_accounts: Quota to enforce

        Returns:
            Saved account entity

        Raises:
            ActivationCodeNotFoundError: If the code vanished
            InvalidCodeError: If the locked code is disabled
            ExpiredCodeError: If the locked code is expired
            QuotaExceededError: If the quota is already used up
            PersistenceError: If the store fails
        """
        pass

    @abstractmethod
    async def find_accounts_for_code(self, code_id: int) -> List[Account]:
        """
        Find all accounts registered under a code, in registration order.

        Args:
            code_id: Activation code id

        Returns:
            List of Account entities
        """
        pass
