"""
Event handlers for domain events.

These handlers process domain events for side effects
like audit logging and metrics.
"""

import logging

from activation_codes.domain.events import (
    AccountQuotaRejected,
    AccountRegistered,
    ActivationCodeCreated,
    ActivationCodeRedeemed,
    ActivationCodeStatusChanged,
)
from administrators.domain.events import AdministratorLoggedIn
from core import metrics
from core.domain.events import DomainEvent, EventHandler

logger = logging.getLogger(__name__)

AUDITED_EVENTS = (
    ActivationCodeCreated,
    ActivationCodeRedeemed,
    ActivationCodeStatusChanged,
    AccountRegistered,
    AccountQuotaRejected,
    AdministratorLoggedIn,
)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every domain event to the "audit" logger.
    """

    def __init__(self):
        """Initialize handler with the audit logger."""
        self.audit_logger = logging.getLogger("audit")

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        self.audit_logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


class MetricsEventHandler(EventHandler):
    """Event handler updating Prometheus counters."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event by incrementing the matching counter.

        Args:
            event: Domain event
        """
        if isinstance(event, ActivationCodeCreated):
            metrics.activation_codes_created_total.inc()
        elif isinstance(event, ActivationCodeRedeemed):
            metrics.activation_codes_redeemed_total.inc()
        elif isinstance(event, ActivationCodeStatusChanged):
            metrics.activation_code_status_changes_total.labels(status=event.status).inc()
        elif isinstance(event, AccountRegistered):
            metrics.accounts_registered_total.inc()
        elif isinstance(event, AccountQuotaRejected):
            metrics.account_quota_rejections_total.inc()
        elif isinstance(event, AdministratorLoggedIn):
            metrics.admin_logins_total.inc()


def register_event_handlers():
    """Register all event handlers with the event bus. Safe to call repeatedly."""
    from core.infrastructure.events import event_bus

    if event_bus.has_subscribers(ActivationCodeCreated):
        return

    audit_handler = AuditLogEventHandler()
    metrics_handler = MetricsEventHandler()

    for event_type in AUDITED_EVENTS:
        event_bus.subscribe(event_type, audit_handler)
        event_bus.subscribe(event_type, metrics_handler)

    logger.info("Event handlers registered")
