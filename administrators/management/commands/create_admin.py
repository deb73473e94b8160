"""
Django management command to create an administrator.

Falls back to DEFAULT_ADMIN_USERNAME / DEFAULT_ADMIN_PASSWORD from settings
when no arguments are given. Running it twice is harmless.
"""

import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from administrators.infrastructure.repositories.django_administrator_repository import (
    DjangoAdministratorRepository,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to create an administrator."""

    help = "Create an administrator account (idempotent)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--username",
            type=str,
            default=None,
            help="Administrator username (default: DEFAULT_ADMIN_USERNAME)",
        )
        parser.add_argument(
            "--password",
            type=str,
            default=None,
            help="Administrator password (default: DEFAULT_ADMIN_PASSWORD)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        username = options["username"] or getattr(settings, "DEFAULT_ADMIN_USERNAME", "")
        password = options["password"] or getattr(settings, "DEFAULT_ADMIN_PASSWORD", "")
        if not username or not password:
            raise CommandError("Both a username and a password are required")

        created = async_to_sync(self.create_administrator)(username, password)
        if created:
            # pylint: disable=no-member
            self.stdout.write(self.style.SUCCESS(f"Created administrator: {username}"))
        else:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Administrator '{username}' already exists"))

    async def create_administrator(self, username: str, password: str) -> bool:
        """Create the administrator unless it exists. Returns True when created."""
        repository = DjangoAdministratorRepository()
        if await repository.find_by_username(username) is not None:
            return False
        administrator = await repository.create(username, password)
        logger.info("Administrator %s created", administrator.id)
        return True
