from .bulk_notification import (
    BulkNotificationRequest,
    BulkNotificationResponse,
    BulkRecipientIn,
    BulkSendByCsvRequest,
    BulkSendToAllRequest,
    RecipientOutcomeRead,
)
from .notification import (
    DeliveryRead,
    NotificationCount,
    NotificationCreate,
    NotificationRead,
    NotificationSendRequest,
    NotificationSendResponse,
)
from .provider import SmsBalanceRead
from .recipient import RecipientCreate, RecipientRead, RecipientUpdate
from .template import TemplateCreate, TemplateRead, TemplateUpdate

__all__ = [
    "BulkNotificationRequest",
    "BulkNotificationResponse",
    "BulkRecipientIn",
    "BulkSendByCsvRequest",
    "BulkSendToAllRequest",
    "DeliveryRead",
    "NotificationCount",
    "NotificationCreate",
    "NotificationRead",
    "NotificationSendRequest",
    "NotificationSendResponse",
    "RecipientCreate",
    "RecipientOutcomeRead",
    "RecipientRead",
    "RecipientUpdate",
    "SmsBalanceRead",
    "TemplateCreate",
    "TemplateRead",
    "TemplateUpdate",
]
