"""SMS delivery through the TextSMS HTTP gateway."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_SMS_API_URL = "https://api.textsms.co.ke/api/v3"


@dataclass(frozen=True)
class SmsDeliveryResult:
    """Outcome of a single gateway request."""

    success: bool
    provider_data: Any = None
    message_id: str | None = None
    error: str | None = None


def _extract_message_id(data: Any) -> str | None:
    """Pull the gateway message id out of a ``sendsms`` response body."""

    if not isinstance(data, dict):
        return None
    responses = data.get("responses")
    if not isinstance(responses, list) or not responses:
        return None
    first = responses[0]
    if not isinstance(first, dict):
        return None
    value = first.get("messageid") or first.get("message_id")
    return str(value) if value else None


class TextSmsSender:
    """Send plain text messages with a bearer-authenticated JSON API."""

    def __init__(
        self,
        *,
        api_key: str | None,
        partner_id: str | None = None,
        sender_id: str = "BIRDVIEW",
        base_url: str = DEFAULT_SMS_API_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.partner_id = partner_id
        self.sender_id = sender_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def send_sms(self, to: str, message: str) -> SmsDeliveryResult:
        """Send ``message`` to the phone number ``to``."""

        if not self.is_configured:
            logger.info("SMS gateway configuration incomplete; skipping SMS to %s", to)
            return SmsDeliveryResult(success=False, error="SMS delivery is not configured")

        payload = {
            "sender_id": self.sender_id,
            "to": to,
            "message": message,
            "partner_id": self.partner_id,
        }
        try:
            response = self._get_client().post(
                f"{self.base_url}/sendsms", json=payload, headers=self._headers()
            )
            response.raise_for_status()
            data = response.json() if response.content else None
        except httpx.HTTPStatusError as exc:
            error = f"HTTP {exc.response.status_code}: {exc.response.text[:200]}"
            logger.error("SMS gateway rejected message to %s: %s", to, error)
            return SmsDeliveryResult(success=False, error=error)
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("SMS send error for %s: %s", to, exc)
            return SmsDeliveryResult(success=False, error=str(exc) or type(exc).__name__)

        logger.info("SMS accepted by gateway for %s", to)
        return SmsDeliveryResult(
            success=True, provider_data=data, message_id=_extract_message_id(data)
        )

    def get_balance(self) -> SmsDeliveryResult:
        """Return the account balance reported by the gateway."""

        if not self.is_configured:
            return SmsDeliveryResult(success=False, error="SMS delivery is not configured")

        try:
            response = self._get_client().get(
                f"{self.base_url}/balance", headers=self._headers()
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Failed to fetch SMS balance: %s", exc)
            return SmsDeliveryResult(success=False, error=str(exc) or type(exc).__name__)
        return SmsDeliveryResult(success=True, provider_data=data)

    def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None


__all__ = ["DEFAULT_SMS_API_URL", "SmsDeliveryResult", "TextSmsSender"]
