"""Use cases for managing notification recipients."""

from .create_recipient import create_recipient
from .delete_recipient import delete_recipient
from .get_recipient import get_recipient
from .list_recipients import list_recipients
from .update_recipient import update_recipient

__all__ = [
    "create_recipient",
    "delete_recipient",
    "get_recipient",
    "list_recipients",
    "update_recipient",
]
