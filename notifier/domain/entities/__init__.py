"""Domain entities exposed by the application."""

from .bulk_dispatch import (
    BulkDispatchRequest,
    BulkDispatchResult,
    BulkRecipient,
    RecipientOutcome,
)
from .delivery import DeliveryOutcome
from .notification import Notification, NotificationChannel, NotificationStatus
from .recipient import Recipient
from .template import Template

__all__ = [
    "BulkDispatchRequest",
    "BulkDispatchResult",
    "BulkRecipient",
    "DeliveryOutcome",
    "Notification",
    "NotificationChannel",
    "NotificationStatus",
    "Recipient",
    "RecipientOutcome",
    "Template",
]
