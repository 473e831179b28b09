"""Ephemeral request and report objects used by bulk dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field

from .notification import NotificationChannel


@dataclass
class BulkRecipient:
    """Target of a bulk send with optional contact data and variable overrides."""

    recipient_id: str
    email: str | None = None
    phone: str | None = None
    variables: dict[str, str] = field(default_factory=dict)


@dataclass
class BulkDispatchRequest:
    """Everything needed to render and send one message to many recipients.

    ``template_id`` takes precedence over the inline ``template_content`` and
    ``template_subject`` when it resolves to a stored template.
    """

    channel: NotificationChannel
    recipients: list[BulkRecipient]
    template_id: str | None = None
    template_content: str | None = None
    template_subject: str | None = None
    variables: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RecipientOutcome:
    """Per-recipient line of a bulk dispatch report."""

    recipient_id: str
    success: bool
    message_id: str | None = None
    error: str | None = None


@dataclass
class BulkDispatchResult:
    """Aggregate report; ``success`` is true when at least one message went out."""

    success: bool
    sent_count: int
    failed_count: int
    results: list[RecipientOutcome] = field(default_factory=list)


__all__ = [
    "BulkDispatchRequest",
    "BulkDispatchResult",
    "BulkRecipient",
    "RecipientOutcome",
]
