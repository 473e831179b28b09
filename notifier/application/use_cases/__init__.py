"""Aggregate application use cases."""

from .notifications import send_bulk_notifications, send_notification_with_channel

__all__ = [
    "send_bulk_notifications",
    "send_notification_with_channel",
]
