"""
Administrator repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import Optional

from administrators.domain.administrator import Administrator


class AdministratorRepository(ABC):
    """Abstract repository for Administrator entities."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Administrator]:
        """
        Find an administrator by username.

        Args:
            username: Administrator username

        Returns:
            Administrator entity or None if not found
        """
        pass

    @abstractmethod
    async def verify_password(self, admin_id: int, raw_password: str) -> bool:
        """
        Check a password against the stored hash.

        Args:
            admin_id: Administrator id
            raw_password: Password to check

        Returns:
            True if the password matches
        """
        pass

    @abstractmethod
    async def create(self, username: str, raw_password: str) -> Administrator:
        """
        Create an administrator with a hashed password.

        Args:
            username: Unique username
            raw_password: Password to hash and store

        Returns:
            Saved Administrator entity

        Raises:
            ValidationError: If the username is taken
        """
        pass
