"""Use case for recording a notification without delivering it."""

from sqlalchemy.orm import Session

from notifier.domain.entities import Notification, NotificationChannel
from notifier.infrastructure.repositories import NotificationRepository


def create_notification(
    session: Session,
    *,
    recipient_id: str,
    content: str,
    category: str,
    channel: NotificationChannel | str = NotificationChannel.EMAIL,
) -> Notification:
    """Persist a new ``pending`` notification."""

    if not content.strip():
        raise ValueError("Notification content cannot be empty")
    if not category.strip():
        raise ValueError("Notification category cannot be empty")

    notification = Notification(
        recipient_id=recipient_id,
        content=content,
        category=category.strip(),
        channel=channel,
    )
    return NotificationRepository(session).create(notification)
