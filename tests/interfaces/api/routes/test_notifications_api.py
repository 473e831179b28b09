"""Integration tests for the notification endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _create(client: TestClient, **overrides) -> dict:
    payload = {"recipientId": "user-1", "content": "Hello", "category": "alerts"}
    payload.update(overrides)
    response = client.post("/notifications/", json=payload)
    assert response.status_code == 201
    return response.json()


def test_notification_lifecycle(client: TestClient) -> None:
    created = _create(client)
    notification_id = created["id"]

    assert created["status"] == "pending"
    assert created["channel"] == "email"
    assert created["readAt"] is None

    read = client.patch(f"/notifications/{notification_id}/read").json()
    assert read["readAt"] is not None

    unread = client.patch(f"/notifications/{notification_id}/unread").json()
    assert unread["readAt"] is None

    canceled = client.patch(f"/notifications/{notification_id}/cancel").json()
    assert canceled["canceledAt"] is not None

    detail = client.get(f"/notifications/{notification_id}")
    assert detail.status_code == 200
    assert detail.json()["canceledAt"] == canceled["canceledAt"]


def test_unknown_notification_returns_404(client: TestClient) -> None:
    assert client.get("/notifications/missing").status_code == 404
    response = client.patch("/notifications/missing/read")
    assert response.status_code == 404
    assert response.json()["detail"] == "Notification not found"


def test_invalid_channel_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/notifications/",
        json={"recipientId": "user-1", "content": "Hi", "category": "alerts", "channel": "fax"},
    )

    assert response.status_code == 422


def test_list_and_count_notifications(client: TestClient) -> None:
    _create(client, content="one")
    _create(client, content="two")
    _create(client, recipientId="user-2", content="three")

    assert len(client.get("/notifications/").json()) == 3
    assert len(client.get("/notifications/", params={"limit": 1}).json()) == 1
    assert client.get("/notifications/count/from/user-1").json() == {"count": 2}
    assert {n["content"] for n in client.get("/notifications/from/user-1").json()} == {
        "one",
        "two",
    }


def test_send_notification_records_delivery(client: TestClient, email_sender) -> None:
    response = client.post(
        "/notifications/send",
        json={
            "recipientId": "user-1",
            "content": "<p>Receipt</p>",
            "category": "billing",
            "channel": "email",
            "subject": "Your receipt",
            "recipientEmail": "ann@example.com",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["delivery"]["success"] is True
    assert body["delivery"]["messageId"] == "email-1"
    assert body["notification"]["status"] == "sent"
    assert email_sender.sent[0]["subject"] == "Your receipt"


def test_send_notification_failure_is_recorded(client: TestClient) -> None:
    response = client.post(
        "/notifications/send",
        json={"recipientId": "user-1", "content": "Hi", "category": "alerts", "channel": "sms"},
    )

    body = response.json()
    assert response.status_code == 201
    assert body["delivery"] == {
        "success": False,
        "messageId": None,
        "error": "No sms contact information",
    }
    assert body["notification"]["status"] == "failed"
