"""Use cases for marking notifications read, unread or canceled."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from notifier.domain.entities import Notification
from notifier.domain.errors import NotificationNotFoundError
from notifier.infrastructure.repositories import NotificationRepository


def _apply(
    session: Session, notification_id: str, action: Callable[[Notification], None]
) -> Notification:
    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotificationNotFoundError()
    action(notification)
    return repository.save(notification)


def read_notification(session: Session, notification_id: str) -> Notification:
    return _apply(session, notification_id, Notification.read)


def unread_notification(session: Session, notification_id: str) -> Notification:
    return _apply(session, notification_id, Notification.unread)


def cancel_notification(session: Session, notification_id: str) -> Notification:
    return _apply(session, notification_id, Notification.cancel)


__all__ = ["cancel_notification", "read_notification", "unread_notification"]
