"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from notifier.domain.entities import NotificationChannel, NotificationStatus

from .base import CamelModel


class NotificationCreate(CamelModel):
    """Payload used to record a notification without delivering it."""

    recipient_id: str = Field(..., min_length=1, max_length=64)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=50)
    channel: NotificationChannel = NotificationChannel.EMAIL


class NotificationSendRequest(CamelModel):
    """Payload used to create a notification and deliver it immediately."""

    recipient_id: str = Field(..., min_length=1, max_length=64)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=50)
    channel: Literal["email", "sms", "push"]
    subject: str | None = None
    recipient_email: str | None = None
    recipient_phone: str | None = None


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: str
    recipient_id: str
    content: str
    category: str
    channel: NotificationChannel
    status: NotificationStatus
    read_at: datetime | None = None
    canceled_at: datetime | None = None
    bulk_notification_id: str | None = None
    created_at: datetime
    updated_at: datetime


class DeliveryRead(CamelModel):
    success: bool
    message_id: str | None = None
    error: str | None = None


class NotificationSendResponse(CamelModel):
    notification: NotificationRead
    delivery: DeliveryRead


class NotificationCount(CamelModel):
    count: int


__all__ = [
    "DeliveryRead",
    "NotificationCount",
    "NotificationCreate",
    "NotificationRead",
    "NotificationSendRequest",
    "NotificationSendResponse",
]
