"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .recipient_repository import RecipientRepository
from .template_repository import TemplateRepository

__all__ = [
    "NotificationRepository",
    "RecipientRepository",
    "TemplateRepository",
]
