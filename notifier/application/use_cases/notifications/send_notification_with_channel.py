"""Use case for creating a notification and delivering it right away."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from notifier.application.dispatcher import ChannelDispatcher
from notifier.domain.entities import (
    DeliveryOutcome,
    Notification,
    NotificationChannel,
    NotificationStatus,
)
from notifier.infrastructure.repositories import NotificationRepository

from .send_bulk_notifications import DEFAULT_SUBJECT

logger = logging.getLogger(__name__)


def send_notification_with_channel(
    session: Session,
    *,
    recipient_id: str,
    content: str,
    category: str,
    channel: NotificationChannel | str,
    dispatcher: ChannelDispatcher,
    subject: str | None = None,
    recipient_email: str | None = None,
    recipient_phone: str | None = None,
) -> tuple[Notification, DeliveryOutcome]:
    """Store a pending notification, deliver it and record the outcome.

    The notification is written before delivery so an attempt is always
    traceable; its status then moves to ``sent`` or ``failed``.
    """

    repository = NotificationRepository(session)
    notification = repository.create(
        Notification(
            recipient_id=recipient_id,
            content=content,
            category=category,
            channel=channel,
        )
    )

    outcome = dispatcher.dispatch(
        notification.channel,
        content,
        subject=subject or DEFAULT_SUBJECT,
        email=recipient_email,
        phone=recipient_phone,
        text_content=content,
    )

    if outcome.success:
        notification.status = NotificationStatus.SENT
    else:
        notification.status = NotificationStatus.FAILED
        logger.warning(
            "Delivery of notification %s over %s failed: %s",
            notification.id,
            notification.channel.value,
            outcome.error,
        )

    return repository.save(notification), outcome


__all__ = ["send_notification_with_channel"]
