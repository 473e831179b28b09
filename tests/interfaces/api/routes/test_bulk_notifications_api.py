"""Integration tests for the bulk notification endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from notifier.interfaces.api.dependencies import get_strict_template_lookup


def test_send_bulk_end_to_end(client: TestClient, email_sender) -> None:
    """One good address and one missing address yield a partial success."""

    payload = {
        "channel": "email",
        "templateContent": "Hi {name}",
        "templateSubject": "Hello {name}",
        "recipients": [
            {"recipientId": "r1", "email": "a@x.io", "variables": {"name": "A"}},
            {"recipientId": "r2", "variables": {"name": "B"}},
        ],
    }

    response = client.post("/bulk-notifications/send", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["sentCount"] == 1
    assert body["failedCount"] == 1
    assert body["results"][0] == {"recipientId": "r1", "success": True, "messageId": "email-1"}
    assert body["results"][1] == {
        "recipientId": "r2",
        "success": False,
        "error": "No email contact information",
    }
    assert email_sender.sent[0]["subject"] == "Hello A"

    stored = client.get("/notifications/from/r1").json()
    assert len(stored) == 1
    assert stored[0]["content"] == "Hi A"
    assert stored[0]["status"] == "sent"
    assert client.get("/notifications/count/from/r2").json() == {"count": 0}


def test_send_bulk_requires_content_source(client: TestClient) -> None:
    payload = {"channel": "email", "recipients": [{"recipientId": "r1", "email": "a@x.io"}]}

    response = client.post("/bulk-notifications/send", json=payload)

    assert response.status_code == 422


def test_send_bulk_rejects_unknown_channel(client: TestClient) -> None:
    payload = {
        "channel": "fax",
        "templateContent": "Hi",
        "recipients": [{"recipientId": "r1", "email": "a@x.io"}],
    }

    assert client.post("/bulk-notifications/send", json=payload).status_code == 422


def test_send_bulk_requires_recipients(client: TestClient) -> None:
    payload = {"channel": "email", "templateContent": "Hi", "recipients": []}

    assert client.post("/bulk-notifications/send", json=payload).status_code == 422


def test_send_bulk_with_unknown_template_in_strict_mode(client: TestClient) -> None:
    client.app.dependency_overrides[get_strict_template_lookup] = lambda: True
    payload = {
        "channel": "email",
        "templateId": "missing",
        "recipients": [{"recipientId": "r1", "email": "a@x.io"}],
    }

    response = client.post("/bulk-notifications/send", json=payload)

    assert response.status_code == 404
    assert response.json()["detail"] == "Template not found"


def test_send_to_all_recipients(client: TestClient, sms_sender) -> None:
    client.post(
        "/recipients/",
        json={"name": "Ann", "email": "ann@example.com", "phone": "+254700000001"},
    )
    client.post("/recipients/", json={"name": "Bob", "email": "bob@example.com"})

    response = client.post(
        "/bulk-notifications/send-to-all",
        json={"channel": "sms", "templateContent": "<p>Maintenance tonight</p>"},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["sentCount"] == 1
    assert body["failedCount"] == 1
    assert sms_sender.sent == [{"to": "+254700000001", "message": "Maintenance tonight"}]


def test_send_by_csv(client: TestClient, email_sender) -> None:
    response = client.post(
        "/bulk-notifications/send-by-csv",
        json={
            "channel": "email",
            "templateContent": "Hi {name}",
            "csvData": [
                {"id": "row-1", "email": "ann@example.com", "variables": {"name": "Ann"}},
                {"email": "bob@example.com", "variables": {"name": "Bob"}},
            ],
        },
    )

    body = response.json()
    assert response.status_code == 200
    assert body["sentCount"] == 2
    assert body["results"][0]["recipientId"] == "row-1"
    assert body["results"][1]["recipientId"].startswith("csv-")
    assert [message["html"] for message in email_sender.sent] == ["Hi Ann", "Hi Bob"]


def test_send_bulk_accepts_numeric_variables(client: TestClient, email_sender) -> None:
    payload = {
        "channel": "email",
        "templateContent": "Code {code}, total {total}",
        "variables": {"total": 9.5},
        "recipients": [{"recipientId": "r1", "email": "a@x.io", "variables": {"code": 123}}],
    }

    response = client.post("/bulk-notifications/send", json=payload)

    assert response.status_code == 200
    assert response.json()["sentCount"] == 1
    assert email_sender.sent[0]["html"] == "Code 123, total 9.5"
