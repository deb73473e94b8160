"""
App configuration for the core module.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """App configuration wiring observability and event handlers at startup."""

    name = "core"
    verbose_name = "Core"

    def ready(self):
        """Called when Django starts."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()

        if getattr(settings, "OTEL_ENABLED", False):
            from core.instrumentation import setup_opentelemetry

            setup_opentelemetry()
