"""
Django implementation of AdministratorRepository port.
"""

from typing import Optional

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction

from administrators.domain.administrator import Administrator
from administrators.infrastructure.models import Administrator as AdministratorModel
from administrators.ports.administrator_repository import AdministratorRepository
from core.domain.exceptions import ValidationError
from core.infrastructure.database import persistence_errors


class DjangoAdministratorRepository(AdministratorRepository):
    """Django ORM implementation of AdministratorRepository."""

    def _to_domain(self, model: AdministratorModel) -> Administrator:
        return Administrator(
            id=model.id,
            username=model.username,
            created_at=model.created_at,
        )

    async def find_by_username(self, username: str) -> Optional[Administrator]:
        """
        Find an administrator by username.

        Args:
            username: Administrator username

        Returns:
            Administrator entity or None if not found
        """

        def _find():
            with persistence_errors("find administrator"):
                # pylint: disable=no-member
                model = AdministratorModel.objects.filter(username=username).first()
                return self._to_domain(model) if model else None

        return await sync_to_async(_find)()

    async def verify_password(self, admin_id: int, raw_password: str) -> bool:
        """
        Check a password against the stored hash.

        Args:
            admin_id: Administrator id
            raw_password: Password to check

        Returns:
            True if the password matches
        """

        def _verify():
            with persistence_errors("verify administrator password"):
                # pylint: disable=no-member
                model = AdministratorModel.objects.filter(id=admin_id).first()
                return bool(model and model.check_password(raw_password))

        return await sync_to_async(_verify)()

    async def create(self, username: str, raw_password: str) -> Administrator:
        """
        Create an administrator with a hashed password.

        Raises:
            ValidationError: If the username is taken
        """

        def _create():
            with persistence_errors("create administrator"):
                model = AdministratorModel(username=username)
                model.set_password(raw_password)
                try:
                    with transaction.atomic():
                        model.save()
                except IntegrityError as e:
                    raise ValidationError(f"Administrator '{username}' already exists") from e
                return self._to_domain(model)

        return await sync_to_async(_create)()
