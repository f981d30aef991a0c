"""Building and publishing notifications to the notification exchange."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from asmm8.models import (
    Notification,
    NotificationChannel,
    NotificationEvent,
    NotificationMetadata,
    RoleType,
)

logger = logging.getLogger(__name__)

NOTIFICATION_EXCHANGE = "notification"


class _Publisher(Protocol):
    def publish_to_exchange(
        self, exchange: str, routing_key: str, payload: Any, source: str
    ) -> None: ...


def build_notification(
    event_type: NotificationEvent, severity: str, user_role: RoleType, message: str
) -> Notification:
    """A notification for the web app channel."""
    metadata = NotificationMetadata(
        severity=severity,
        channeltype=NotificationChannel.APP,
        eventtype=event_type,
    )
    return Notification(type=event_type, message=message, metadata=metadata, userrole=user_role)


def publish_notification(
    publisher: _Publisher,
    routing_key: str,
    event_type: NotificationEvent,
    severity: str,
    user_role: RoleType,
    source: str,
    message: str,
) -> None:
    """Publish a notification with ``routing_key``; raises RuntimeError on failure.

    Routing keys such as ``app.*.*`` reach the web app only, while
    ``email.*.*`` or ``#.urgent`` also reach e-mail.
    """
    notification = build_notification(event_type, severity, user_role, message)
    try:
        publisher.publish_to_exchange(
            NOTIFICATION_EXCHANGE, routing_key, notification.to_dict(), source
        )
    except Exception as exc:
        logger.error("Failed to publish notification: %s", exc)
        raise RuntimeError(f"failed to publish notification: {exc}") from exc


class NotificationHelper:
    """Shortcuts for the notification kinds the service sends."""

    def __init__(self, publisher: _Publisher) -> None:
        self.publisher = publisher

    def publish_security_notification_admin(self, message: str, severity: str, source: str) -> None:
        publish_notification(
            self.publisher, f"app.security.{severity}", NotificationEvent.SECURITY,
            severity, RoleType.ADMIN, source, message,
        )

    def publish_security_notification_user(self, message: str, severity: str, source: str) -> None:
        publish_notification(
            self.publisher, f"app.security.{severity}", NotificationEvent.SECURITY,
            severity, RoleType.USER, source, message,
        )

    def publish_sys_error_notification(self, message: str, severity: str, source: str) -> None:
        publish_notification(
            self.publisher, f"app.error.{severity}", NotificationEvent.ERROR,
            severity, RoleType.ADMIN, source, message,
        )

    def publish_sys_warning_notification(self, message: str, severity: str, source: str) -> None:
        publish_notification(
            self.publisher, f"app.warning.{severity}", NotificationEvent.WARNING,
            severity, RoleType.ADMIN, source, message,
        )