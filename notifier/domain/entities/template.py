"""Domain entity representing a reusable message template."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Template:
    """Subject and body with ``{placeholder}`` variables."""

    id: str | None
    name: str
    subject: str
    html_body: str
    text_body: str | None = None
    variables: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Template"]
