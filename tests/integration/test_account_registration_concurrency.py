"""
Integration tests for concurrent account registration.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from asgiref.sync import async_to_sync
from django.db import connections

from activation_codes.application.commands.register_account import RegisterAccountCommand
from activation_codes.application.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from activation_codes.infrastructure.models import Account as AccountModel
from core.domain.exceptions import QuotaExceededError

WORKERS = 50


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
class TestConcurrentRegistration:
    """Registrations racing for the last free slot."""

    def _register_many(self, activation_code_repository, code_id, attempts):
        handler = RegisterAccountHandler(activation_code_repository)

        def _register(index):
            command = RegisterAccountCommand(
                code_id=code_id,
                email=f"racer{index}@example.com",
                email_password="mail",
                service_password="service",
                access_token="access",
                refresh_token="refresh",
            )
            try:
                async_to_sync(handler.handle)(command)
                return "ok"
            except QuotaExceededError:
                return "quota"
            finally:
                connections.close_all()

        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            return list(executor.map(_register, range(attempts)))

    def test_single_free_slot(self, activation_code_repository, save_code):
        """Test exactly one of 50 concurrent registrations wins one slot."""
        code = save_code(max_accounts=1)

        results = self._register_many(activation_code_repository, code.id, WORKERS)

        assert results.count("ok") == 1
        assert results.count("quota") == WORKERS - 1
        assert AccountModel.objects.filter(activation_code_id=code.id).count() == 1

    def test_never_exceeds_quota(self, activation_code_repository, save_code):
        """Test concurrent registrations fill the quota exactly."""
        code = save_code(max_accounts=5)

        results = self._register_many(activation_code_repository, code.id, WORKERS)

        assert results.count("ok") == 5
        assert AccountModel.objects.filter(activation_code_id=code.id).count() == 5
