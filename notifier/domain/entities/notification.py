"""Domain entity representing one notification sent or attempted to a recipient."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from uuid import uuid4

from notifier.utils import ensure_app_timezone, now_in_app_timezone


class NotificationChannel(str, Enum):
    """Delivery medium of a notification."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class NotificationStatus(str, Enum):
    """Delivery state of a notification."""

    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


_ONE_TICK = timedelta(microseconds=1)


class Notification:
    """Message instance addressed to a single recipient.

    Every mutator refreshes :attr:`updated_at`. Read, unread and cancel may be
    applied in any order; the entity does not enforce a lifecycle.
    """

    def __init__(
        self,
        *,
        recipient_id: str,
        content: str,
        category: str,
        channel: NotificationChannel | str | None = None,
        status: NotificationStatus | str | None = None,
        read_at: datetime | None = None,
        canceled_at: datetime | None = None,
        bulk_notification_id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        id: str | None = None,
    ) -> None:
        self._id = id or str(uuid4())
        self._recipient_id = recipient_id
        self._content = content
        self._category = category
        self._channel = NotificationChannel(channel or NotificationChannel.EMAIL)
        self._status = NotificationStatus(status or NotificationStatus.PENDING)
        self._read_at = ensure_app_timezone(read_at)
        self._canceled_at = ensure_app_timezone(canceled_at)
        self._bulk_notification_id = bulk_notification_id
        self._created_at = ensure_app_timezone(created_at) or now_in_app_timezone()
        self._updated_at = ensure_app_timezone(updated_at) or now_in_app_timezone()

    def __repr__(self) -> str:
        return (
            f"Notification(id={self._id!r}, recipient_id={self._recipient_id!r}, "
            f"channel={self._channel.value!r}, status={self._status.value!r})"
        )

    def _touch(self) -> datetime:
        now = now_in_app_timezone()
        if now <= self._updated_at:
            now = self._updated_at + _ONE_TICK
        self._updated_at = now
        return now

    @property
    def id(self) -> str:
        return self._id

    @property
    def recipient_id(self) -> str:
        return self._recipient_id

    @recipient_id.setter
    def recipient_id(self, value: str) -> None:
        self._recipient_id = value
        self._touch()

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self._content = value
        self._touch()

    @property
    def category(self) -> str:
        return self._category

    @category.setter
    def category(self, value: str) -> None:
        self._category = value
        self._touch()

    @property
    def channel(self) -> NotificationChannel:
        return self._channel

    @channel.setter
    def channel(self, value: NotificationChannel | str) -> None:
        self._channel = NotificationChannel(value)
        self._touch()

    @property
    def status(self) -> NotificationStatus:
        return self._status

    @status.setter
    def status(self, value: NotificationStatus | str) -> None:
        self._status = NotificationStatus(value)
        self._touch()

    @property
    def bulk_notification_id(self) -> str | None:
        return self._bulk_notification_id

    @bulk_notification_id.setter
    def bulk_notification_id(self, value: str | None) -> None:
        self._bulk_notification_id = value
        self._touch()

    @property
    def read_at(self) -> datetime | None:
        return self._read_at

    @property
    def canceled_at(self) -> datetime | None:
        return self._canceled_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def read(self) -> None:
        """Mark the notification as read."""

        self._read_at = self._touch()

    def unread(self) -> None:
        """Clear the read marker."""

        self._read_at = None
        self._touch()

    def cancel(self) -> None:
        """Mark the notification as canceled; repeated calls move the timestamp."""

        self._canceled_at = self._touch()


__all__ = ["Notification", "NotificationChannel", "NotificationStatus"]
