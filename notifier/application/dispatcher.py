"""Route rendered messages to the delivery provider of their channel."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from notifier.application.rendering import strip_html
from notifier.domain.entities import DeliveryOutcome, NotificationChannel

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Failed to send"


class EmailSender(Protocol):
    def send_email(
        self,
        to: str,
        subject: str,
        html_content: str,
        text_content: str | None = None,
    ) -> Any: ...


class SmsSender(Protocol):
    def send_sms(self, to: str, message: str) -> Any: ...


def _missing_contact(channel: str) -> DeliveryOutcome:
    return DeliveryOutcome.failed(f"No {channel} contact information")


def _read_result(result: Any) -> tuple[bool, Any, Any, Any]:
    """Return ``(success, message_id, error, provider_data)`` from a provider result.

    Providers answer either with an object exposing attributes or with a
    mapping such as ``{"success": True, "messageId": "abc"}``.
    """

    if isinstance(result, Mapping):
        message_id = result.get("messageId", result.get("message_id"))
        provider_data = result.get("providerData", result.get("provider_data"))
        return bool(result.get("success")), message_id, result.get("error"), provider_data
    return (
        bool(getattr(result, "success", False)),
        getattr(result, "message_id", None),
        getattr(result, "error", None),
        getattr(result, "provider_data", None),
    )


def _normalize(result: Any) -> DeliveryOutcome:
    """Convert a provider result into a :class:`DeliveryOutcome`."""

    if result is None:
        return DeliveryOutcome.failed(DEFAULT_FAILURE_MESSAGE)
    success, message_id, error, provider_data = _read_result(result)
    if success:
        return DeliveryOutcome(
            success=True,
            message_id=str(message_id) if message_id else None,
            provider_data=provider_data,
        )
    return DeliveryOutcome.failed(str(error) if error else DEFAULT_FAILURE_MESSAGE)


class ChannelDispatcher:
    """Deliver one message through the email or SMS provider.

    Provider exceptions never escape :meth:`dispatch`; they are logged and
    returned as failed outcomes. The ``push`` channel is accepted but only
    returns a synthetic success, there is no push integration.
    """

    def __init__(self, email_sender: EmailSender, sms_sender: SmsSender) -> None:
        self.email_sender = email_sender
        self.sms_sender = sms_sender

    def dispatch(
        self,
        channel: NotificationChannel | str,
        content: str,
        *,
        subject: str = "Notification",
        email: str | None = None,
        phone: str | None = None,
        text_content: str | None = None,
    ) -> DeliveryOutcome:
        try:
            resolved = NotificationChannel(channel)
        except ValueError:
            return DeliveryOutcome.failed(f"Unsupported channel: {channel}")

        if resolved is NotificationChannel.PUSH:
            return DeliveryOutcome(success=True)

        if resolved is NotificationChannel.EMAIL:
            if not email:
                return _missing_contact(resolved.value)
            return self._invoke(
                resolved,
                email,
                lambda: self.email_sender.send_email(email, subject, content, text_content),
            )

        if not phone:
            return _missing_contact(resolved.value)
        plain_message = strip_html(content)
        return self._invoke(
            resolved, phone, lambda: self.sms_sender.send_sms(phone, plain_message)
        )

    @staticmethod
    def _invoke(channel: NotificationChannel, target: str, send) -> DeliveryOutcome:
        try:
            result = send()
        except Exception as exc:
            logger.exception("Unexpected %s provider error for %s", channel.value, target)
            return DeliveryOutcome.failed(str(exc) or DEFAULT_FAILURE_MESSAGE)
        return _normalize(result)

    def sms_balance(self) -> DeliveryOutcome:
        """Ask the SMS provider for the account balance."""

        get_balance = getattr(self.sms_sender, "get_balance", None)
        if not callable(get_balance):
            return DeliveryOutcome.failed("SMS provider does not report a balance")
        return self._invoke(NotificationChannel.SMS, "balance", get_balance)

    def close(self) -> None:
        """Release connections held by providers that keep one open."""

        for sender in (self.email_sender, self.sms_sender):
            close = getattr(sender, "close", None)
            if callable(close):
                close()


__all__ = [
    "ChannelDispatcher",
    "DEFAULT_FAILURE_MESSAGE",
    "EmailSender",
    "SmsSender",
]
