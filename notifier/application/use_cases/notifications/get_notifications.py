"""Use cases for reading stored notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import Notification
from notifier.domain.errors import NotificationNotFoundError
from notifier.infrastructure.repositories import NotificationRepository


def get_notification(session: Session, notification_id: str) -> Notification:
    """Return the notification identified by ``notification_id`` or raise an error."""

    notification = NotificationRepository(session).get(notification_id)
    if notification is None:
        raise NotificationNotFoundError()
    return notification


def list_notifications(
    session: Session, *, skip: int = 0, limit: int = 100
) -> Sequence[Notification]:
    """Return notifications, newest first."""

    return NotificationRepository(session).list(skip=skip, limit=limit)


def list_recipient_notifications(session: Session, recipient_id: str) -> Sequence[Notification]:
    return NotificationRepository(session).list_for_recipient(recipient_id)


def count_recipient_notifications(session: Session, recipient_id: str) -> int:
    return NotificationRepository(session).count_for_recipient(recipient_id)
