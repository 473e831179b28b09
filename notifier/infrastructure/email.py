"""Email delivery through the SendGrid REST API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

logger = logging.getLogger(__name__)

_NOT_CONFIGURED = "Email delivery is not configured"


@dataclass(frozen=True)
class EmailDeliveryResult:
    """Outcome of a single SendGrid send request."""

    success: bool
    message_id: str | None = None
    error: str | None = None


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                field = item.get("field")
                if message and field:
                    messages.append(f"{field}: {message}")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_failure(status_code: Any, body: Any) -> str:
    details = _extract_sendgrid_error_details(body)
    if status_code and details:
        return f"SendGrid request failed with status {status_code}: {details}"
    if status_code:
        return f"SendGrid request failed with status {status_code}"
    if details:
        return f"SendGrid request failed: {details}"
    return "SendGrid request failed"


def _extract_message_id(response: Any) -> str | None:
    headers = getattr(response, "headers", None)
    if not headers:
        return None
    try:
        value = headers.get("X-Message-Id")
    except AttributeError:
        return None
    return str(value) if value else None


class SendGridEmailSender:
    """Send HTML (and optional plain text) emails from a fixed sender address."""

    def __init__(
        self,
        *,
        api_key: str | None,
        sender: str | None,
        client: SendGridAPIClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.sender = sender
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.sender)

    def _get_client(self) -> SendGridAPIClient:
        if self._client is None:
            self._client = SendGridAPIClient(self.api_key)
        return self._client

    def send_email(
        self,
        to: str,
        subject: str,
        html_content: str,
        text_content: str | None = None,
    ) -> EmailDeliveryResult:
        """Send one email and report whether SendGrid accepted it."""

        if not self.is_configured:
            logger.info("SendGrid configuration incomplete; skipping email to %s", to)
            return EmailDeliveryResult(success=False, error=_NOT_CONFIGURED)

        message = Mail(
            from_email=self.sender,
            to_emails=to,
            subject=subject,
            html_content=html_content,
            plain_text_content=text_content,
        )

        try:
            response = self._get_client().send(message)
        except Exception as exc:
            error = _describe_failure(
                getattr(exc, "status_code", None), getattr(exc, "body", None)
            )
            if error == "SendGrid request failed":
                error = str(exc) or error
            logger.error("Error sending email to %s via SendGrid: %s", to, error)
            return EmailDeliveryResult(success=False, error=error)

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            error = _describe_failure(status_code, getattr(response, "body", None))
            logger.error("SendGrid rejected email to %s: %s", to, error)
            return EmailDeliveryResult(success=False, error=error)

        message_id = _extract_message_id(response)
        logger.info("Email accepted by SendGrid for %s (message id %s)", to, message_id)
        return EmailDeliveryResult(success=True, message_id=message_id)


__all__ = ["EmailDeliveryResult", "SendGridEmailSender"]
