"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .recipient import RecipientModel
from .template import TemplateModel

__all__ = [
    "NotificationModel",
    "RecipientModel",
    "TemplateModel",
]
