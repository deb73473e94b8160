"""
Integration tests for DjangoActivationCodeRepository.
"""

from datetime import datetime, timedelta, timezone

import pytest
from asgiref.sync import async_to_sync

from activation_codes.domain.activation_code import ActivationCode
from activation_codes.infrastructure.models import Account as AccountModel
from activation_codes.infrastructure.models import ActivationCode as ActivationCodeModel
from core.domain.exceptions import (
    DuplicateCodeError,
    ExpiredCodeError,
    InvalidCodeError,
    QuotaExceededError,
)
from core.domain.value_objects import CodeStatus


@pytest.mark.django_db
@pytest.mark.integration
class TestActivationCodeRepository:
    """Integration tests for the activation code repository."""

    def test_create_and_find(self, activation_code_repository, db_code):
        """Test a saved code can be found by id and by code."""
        by_id = async_to_sync(activation_code_repository.find_by_id)(db_code.id)
        by_code = async_to_sync(activation_code_repository.find_by_code)(db_code.code)

        assert by_id.code == db_code.code
        assert by_code.id == db_code.id
        assert by_id.status == CodeStatus.ENABLED
        assert by_id.expires_at.tzinfo is not None

    def test_duplicate_code_rejected(self, activation_code_repository, db_code):
        """Test inserting an existing code string raises DuplicateCodeError."""
        clash = ActivationCode.create(duration_days=1, max_accounts=1, code=db_code.code)

        with pytest.raises(DuplicateCodeError):
            async_to_sync(activation_code_repository.create)(clash)

    def test_find_missing(self, activation_code_repository):
        """Test unknown ids and codes return None."""
        assert async_to_sync(activation_code_repository.find_by_id)(999999) is None
        assert async_to_sync(activation_code_repository.find_by_code)("NOPE") is None

    def test_soft_deleted_code_is_invisible(self, activation_code_repository, db_code):
        """Test a soft-deleted code behaves as not found."""
        ActivationCodeModel.objects.get(id=db_code.id).soft_delete()

        assert async_to_sync(activation_code_repository.find_by_id)(db_code.id) is None
        assert async_to_sync(activation_code_repository.find_by_code)(db_code.code) is None
        assert ActivationCodeModel.all_objects.filter(id=db_code.id).exists()

    def test_soft_deleted_accounts_are_not_counted(
        self, activation_code_repository, db_code, account_factory
    ):
        """Test soft-deleted accounts free their quota slot."""
        saved = async_to_sync(activation_code_repository.add_account_if_under_quota)(
            db_code.id, account_factory(0), db_code.max_accounts
        )
        AccountModel.objects.get(id=saved.id).soft_delete()

        assert async_to_sync(activation_code_repository.count_accounts_for_code)(db_code.id) == 0
        assert async_to_sync(activation_code_repository.find_accounts_for_code)(db_code.id) == []

    def test_update_status(self, activation_code_repository, db_code):
        """Test status updates persist and repeat without error."""
        update = async_to_sync(activation_code_repository.update_status)

        assert update(db_code.id, CodeStatus.DISABLED) is True
        assert update(db_code.id, CodeStatus.DISABLED) is True
        found = async_to_sync(activation_code_repository.find_by_id)(db_code.id)
        assert found.status == CodeStatus.DISABLED

    def test_update_status_missing(self, activation_code_repository):
        """Test updating an unknown id reports False."""
        assert (
            async_to_sync(activation_code_repository.update_status)(999999, CodeStatus.ENABLED)
            is False
        )

    def test_list_paged(self, activation_code_repository, save_code):
        """Test 25 codes paginate into 3 pages, newest first."""
        base = datetime.now(timezone.utc) - timedelta(hours=1)
        saved = [save_code(created_at=base + timedelta(minutes=i)) for i in range(25)]

        first, total = async_to_sync(activation_code_repository.list_paged)(0, 10)
        last, _ = async_to_sync(activation_code_repository.list_paged)(20, 10)

        assert total == 25
        assert first[0].id == saved[-1].id
        assert len(last) == 5
        assert last[-1].id == saved[0].id

    def test_quota_enforced(self, activation_code_repository, save_code, account_factory):
        """Test the insert fails once the quota is used up."""
        code = save_code(max_accounts=2)
        add = async_to_sync(activation_code_repository.add_account_if_under_quota)

        add(code.id, account_factory(0), code.max_accounts)
        add(code.id, account_factory(1), code.max_accounts)
        with pytest.raises(QuotaExceededError):
            add(code.id, account_factory(2), code.max_accounts)

        assert async_to_sync(activation_code_repository.count_accounts_for_code)(code.id) == 2

    def test_accounts_attached_in_order(
        self, activation_code_repository, save_code, account_factory
    ):
        """Test found codes carry their accounts in registration order."""
        code = save_code(max_accounts=3)
        add = async_to_sync(activation_code_repository.add_account_if_under_quota)
        for index in range(3):
            add(code.id, account_factory(index), code.max_accounts)

        found = async_to_sync(activation_code_repository.find_by_id)(code.id)

        assert found.used_accounts == 3
        assert [a.email for a in found.accounts] == [
            "user0@example.com",
            "user1@example.com",
            "user2@example.com",
        ]
        assert found.accounts[0].access_token == "access-0"

    def test_insert_rechecks_status(self, activation_code_repository, save_code, account_factory):
        """Test a code disabled after the caller's check rejects the insert."""
        code = save_code(status=CodeStatus.DISABLED)

        with pytest.raises(InvalidCodeError):
            async_to_sync(activation_code_repository.add_account_if_under_quota)(
                code.id, account_factory(0), code.max_accounts
            )

    def test_insert_rechecks_expiry(
        self, activation_code_repository, db_expired_code, account_factory
    ):
        """Test an expired code rejects the insert."""
        with pytest.raises(ExpiredCodeError):
            async_to_sync(activation_code_repository.add_account_if_under_quota)(
                db_expired_code.id, account_factory(0), db_expired_code.max_accounts
            )
