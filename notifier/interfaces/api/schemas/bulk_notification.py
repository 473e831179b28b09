"""Schemas for bulk notification endpoints.

Field names follow the camelCase contract used by the dashboard, e.g.
``templateId`` and ``sentCount``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Field, model_validator

from notifier.domain.entities import BulkDispatchRequest, BulkRecipient, NotificationChannel

from .base import CamelModel

BulkChannel = Literal["email", "sms"]


def _stringify_scalar(value: Any) -> Any:
    if isinstance(value, (bool, int, float)):
        return str(value)
    return value


# Numbers and booleans are accepted and rendered as their text form.
VariableValue = Annotated[str, BeforeValidator(_stringify_scalar)]


class _TemplateReference(CamelModel):
    template_id: str | None = None
    template_content: str | None = None
    template_subject: str | None = None
    channel: BulkChannel
    variables: dict[str, VariableValue] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _require_content_source(self):
        if not self.template_id and not self.template_content:
            raise ValueError("Either templateId or templateContent must be provided")
        return self


class BulkRecipientIn(CamelModel):
    recipient_id: str = Field(..., min_length=1, max_length=64)
    email: str | None = None
    phone: str | None = None
    variables: dict[str, VariableValue] = Field(default_factory=dict)


class BulkNotificationRequest(_TemplateReference):
    """Payload used to send one message to an explicit list of recipients."""

    recipients: list[BulkRecipientIn] = Field(..., min_length=1)

    def to_domain(self) -> BulkDispatchRequest:
        return BulkDispatchRequest(
            channel=NotificationChannel(self.channel),
            recipients=[
                BulkRecipient(
                    recipient_id=recipient.recipient_id,
                    email=recipient.email,
                    phone=recipient.phone,
                    variables=dict(recipient.variables),
                )
                for recipient in self.recipients
            ],
            template_id=self.template_id,
            template_content=self.template_content,
            template_subject=self.template_subject,
            variables=dict(self.variables),
        )


class BulkSendToAllRequest(_TemplateReference):
    """Payload used to send one message to every stored recipient."""


class BulkSendByCsvRequest(_TemplateReference):
    """Payload carrying CSV rows already parsed into JSON objects by the client."""

    csv_data: list[dict[str, Any]] = Field(..., min_length=1)


class RecipientOutcomeRead(CamelModel):
    recipient_id: str
    success: bool
    message_id: str | None = None
    error: str | None = None


class BulkNotificationResponse(CamelModel):
    success: bool
    sent_count: int
    failed_count: int
    results: list[RecipientOutcomeRead] = Field(default_factory=list)


__all__ = [
    "BulkChannel",
    "BulkNotificationRequest",
    "BulkNotificationResponse",
    "BulkRecipientIn",
    "BulkSendByCsvRequest",
    "BulkSendToAllRequest",
    "RecipientOutcomeRead",
]
