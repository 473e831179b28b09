"""Domain entity representing a stored notification recipient."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Recipient:
    """Contact details of a person that can receive notifications."""

    id: str | None
    name: str
    email: str
    phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Recipient"]
