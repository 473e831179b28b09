"""Integration tests for the provider endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from notifier.application.dispatcher import ChannelDispatcher
from notifier.interfaces.api.dependencies import get_channel_dispatcher


def test_sms_balance(client: TestClient) -> None:
    response = client.get("/providers/sms/balance")

    assert response.status_code == 200
    assert response.json() == {"balance": {"credit": "250.00"}}


def test_sms_balance_provider_failure(client: TestClient, email_sender) -> None:
    class _BrokenBalanceSender:
        def send_sms(self, to, message):
            return None

        def get_balance(self):
            return {"success": False, "error": "HTTP 401: Unauthorized"}

    dispatcher = ChannelDispatcher(email_sender, _BrokenBalanceSender())
    client.app.dependency_overrides[get_channel_dispatcher] = lambda: dispatcher

    response = client.get("/providers/sms/balance")

    assert response.status_code == 502
    assert response.json()["detail"] == "HTTP 401: Unauthorized"
