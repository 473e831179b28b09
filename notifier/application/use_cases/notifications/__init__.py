"""Use cases for creating, sending and tracking notifications."""

from .create_notification import create_notification
from .get_notifications import (
    count_recipient_notifications,
    get_notification,
    list_notifications,
    list_recipient_notifications,
)
from .send_bulk_notifications import (
    send_bulk_from_rows,
    send_bulk_notifications,
    send_bulk_to_all_recipients,
)
from .send_notification_with_channel import send_notification_with_channel
from .update_notification_state import (
    cancel_notification,
    read_notification,
    unread_notification,
)

__all__ = [
    "cancel_notification",
    "count_recipient_notifications",
    "create_notification",
    "get_notification",
    "list_notifications",
    "list_recipient_notifications",
    "read_notification",
    "send_bulk_from_rows",
    "send_bulk_notifications",
    "send_bulk_to_all_recipients",
    "send_notification_with_channel",
    "unread_notification",
]
