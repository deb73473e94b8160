"""
Django implementation of ActivationCodeRepository port.

This adapter converts between domain entities and Django ORM models.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from asgiref.sync import sync_to_async
from django.db import IntegrityError, transaction
from django.db.models import Prefetch

from activation_codes.domain.account import Account
from activation_codes.domain.activation_code import ActivationCode
from activation_codes.infrastructure.models import Account as AccountModel
from activation_codes.infrastructure.models import ActivationCode as ActivationCodeModel
from activation_codes.ports.activation_code_repository import ActivationCodeRepository
from core.domain.exceptions import (
    ActivationCodeNotFoundError,
    DuplicateCodeError,
    QuotaExceededError,
)
from core.domain.value_objects import CodeStatus
from core.infrastructure.database import persistence_errors
from core.infrastructure.locks import KeyedLock

# Serializes registrations per code within this process. The row lock
# taken by select_for_update does the same across processes on backends
# that support it.
_registration_locks = KeyedLock()


def _with_accounts(queryset):
    return queryset.prefetch_related(
        Prefetch("accounts", queryset=AccountModel.objects.order_by("id"))
    )


class DjangoActivationCodeRepository(ActivationCodeRepository):
    """
    Django ORM implementation of ActivationCodeRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Wraps ORM calls so store failures surface as PersistenceError
    3. Enforces the account quota inside a locked transaction
    """

    def __init__(self, lock_timeout: float = 10.0):
        """
        Initialize repository.

        Args:
            lock_timeout: Seconds to wait for a concurrent registration
        """
        self.lock_timeout = lock_timeout

    def _account_to_domain(self, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            activation_code_id=model.activation_code_id,
            email=model.email,
            email_password=model.email_password,
            service_password=model.service_password,
            access_token=model.access_token,
            refresh_token=model.refresh_token,
            created_at=model.created_at,
        )

    def _to_domain(self, model: ActivationCodeModel, with_accounts: bool = True) -> ActivationCode:
        """
        Convert Django model to domain entity.

        Args:
            model: Django ActivationCode model
            with_accounts: Whether prefetched accounts should be attached

        Returns:
            ActivationCode domain entity
        """
        accounts = ()
        if with_accounts:
            accounts = tuple(self._account_to_domain(a) for a in model.accounts.all())
        return ActivationCode(
            id=model.id,
            code=model.code,
            expires_at=model.expires_at,
            max_accounts=model.max_accounts,
            status=CodeStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
            accounts=accounts,
        )

    async def create(self, activation_code: ActivationCode) -> ActivationCode:
        """
        Persist a new activation code.

        Args:
            activation_code: ActivationCode entity without an id

        Returns:
            Saved activation code entity

        Raises:
            DuplicateCodeError: If the code string already exists
            PersistenceError: If the store fails
        """

        def _create():
            with persistence_errors("create activation code"):
                try:
                    with transaction.atomic():
                        # pylint: disable=no-member
                        model = ActivationCodeModel.objects.create(
                            code=activation_code.code,
                            expires_at=activation_code.expires_at,
                            max_accounts=activation_code.max_accounts,
                            status=activation_code.status.value,
                            created_at=activation_code.created_at,
                        )
                except IntegrityError as e:
                    raise DuplicateCodeError() from e
            return self._to_domain(model, with_accounts=False)

        return await sync_to_async(_create)()

    async def find_by_id(self, code_id: int) -> Optional[ActivationCode]:
        """
        Find an activation code by ID.

        Args:
            code_id: Activation code id

        Returns:
            ActivationCode entity or None if not found
        """

        def _find():
            with persistence_errors("find activation code"):
                # pylint: disable=no-member
                model = _with_accounts(ActivationCodeModel.objects.filter(id=code_id)).first()
                return self._to_domain(model) if model else None

        return await sync_to_async(_find)()

    async def find_by_code(self, code: str) -> Optional[ActivationCode]:
        """
        Find an activation code by its exact code string.

        Args:
            code: Activation code string

        Returns:
            ActivationCode entity or None if not found
        """

        def _find():
            with persistence_errors("find activation code"):
                # pylint: disable=no-member
                model = _with_accounts(ActivationCodeModel.objects.filter(code=code)).first()
                return self._to_domain(model) if model else None

        return await sync_to_async(_find)()

    async def list_paged(self, offset: int, limit: int) -> Tuple[List[ActivationCode], int]:
        """
        List activation codes, newest first.

        Args:
            offset: Number of rows to skip
            limit: Maximum number of rows to return

        Returns:
            Tuple of (codes, total)
        """

        def _list():
            with persistence_errors("list activation codes"):
                # pylint: disable=no-member
                queryset = ActivationCodeModel.objects.order_by("-created_at", "-id")
                total = queryset.count()
                models = list(_with_accounts(queryset)[offset : offset + limit])
                return [self._to_domain(model) for model in models], total

        return await sync_to_async(_list)()

    async def update_status(self, code_id: int, status: CodeStatus) -> bool:
        """
        Set the status of an activation code.

        Args:
            code_id: Activation code id
            status: New status

        Returns:
            True if the code exists, False otherwise
        """

        def _update():
            with persistence_errors("update activation code status"):
                # pylint: disable=no-member
                updated = ActivationCodeModel.objects.filter(id=code_id).update(
                    status=status.value, updated_at=datetime.now(timezone.utc)
                )
                return updated > 0

        return await sync_to_async(_update)()

    async def count_accounts_for_code(self, code_id: int) -> int:
        """
        Count accounts registered under a code.

        Args:
            code_id: Activation code id

        Returns:
            Number of accounts
        """

        def _count():
            with persistence_errors("count accounts"):
                # pylint: disable=no-member
                return AccountModel.objects.filter(activation_code_id=code_id).count()

        return await sync_to_async(_count)()

    async def add_account_if_under_quota(
        self, code_id: int, account: Account, max_accounts: int
    ) -> Account:
        """
        Atomically check the quota and insert an account.

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

        def _add():
            with _registration_locks.hold(code_id, timeout=self.lock_timeout):
                with persistence_errors("register account"):
                    with transaction.atomic():
                        # pylint: disable=no-member
                        locked = (
                            ActivationCodeModel.objects.select_for_update()
                            .filter(id=code_id)
                            .first()
                        )
                        if locked is None:
                            raise ActivationCodeNotFoundError()
                        # Status or expiry may have changed since the caller checked.
                        self._to_domain(locked, with_accounts=False).ensure_usable()

                        quota = min(max_accounts, locked.max_accounts)
                        used = AccountModel.objects.filter(activation_code_id=code_id).count()
                        if used >= quota:
                            raise QuotaExceededError()

                        model = AccountModel.objects.create(
                            activation_code_id=code_id,
                            email=account.email,
                            email_password=account.email_password,
                            service_password=account.service_password,
                            access_token=account.access_token,
                            refresh_token=account.refresh_token,
                            created_at=account.created_at,
                        )
            return self._account_to_domain(model)

        return await sync_to_async(_add)()

    async def find_accounts_for_code(self, code_id: int) -> List[Account]:
        """
        Find all accounts registered under a code, in registration order.

        Args:
            code_id: Activation code id

        Returns:
            List of Account entities
        """

        def _find():
            with persistence_errors("find accounts"):
                # pylint: disable=no-member
                models = list(
                    AccountModel.objects.filter(activation_code_id=code_id).order_by("id")
                )
                return [self._account_to_domain(model) for model in models]

        return await sync_to_async(_find)()
