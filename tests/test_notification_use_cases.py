"""Tests for single-notification use cases."""

from __future__ import annotations

import pytest

from notifier.application.use_cases.notifications import (
    cancel_notification,
    count_recipient_notifications,
    create_notification,
    get_notification,
    list_notifications,
    list_recipient_notifications,
    read_notification,
    send_notification_with_channel,
    unread_notification,
)
from notifier.domain.entities import NotificationChannel, NotificationStatus
from notifier.domain.errors import NotificationNotFoundError


def test_create_notification_is_pending(db_session) -> None:
    notification = create_notification(
        db_session, recipient_id="user-1", content="Hello", category=" alerts "
    )

    stored = get_notification(db_session, notification.id)
    assert stored.status is NotificationStatus.PENDING
    assert stored.channel is NotificationChannel.EMAIL
    assert stored.category == "alerts"


def test_create_notification_requires_content(db_session) -> None:
    with pytest.raises(ValueError, match="content cannot be empty"):
        create_notification(db_session, recipient_id="user-1", content="  ", category="alerts")


def test_successful_send_marks_notification_sent(db_session, dispatcher, email_sender) -> None:
    notification, outcome = send_notification_with_channel(
        db_session,
        recipient_id="user-1",
        content="<p>Your invoice</p>",
        category="billing",
        channel="email",
        dispatcher=dispatcher,
        subject="Invoice",
        recipient_email="ann@example.com",
    )

    assert outcome.success is True
    assert notification.status is NotificationStatus.SENT
    assert get_notification(db_session, notification.id).status is NotificationStatus.SENT
    assert email_sender.sent[0]["html"] == email_sender.sent[0]["text"] == "<p>Your invoice</p>"


def test_failed_send_marks_notification_failed(db_session, dispatcher) -> None:
    notification, outcome = send_notification_with_channel(
        db_session,
        recipient_id="user-1",
        content="Hi",
        category="alerts",
        channel="sms",
        dispatcher=dispatcher,
    )

    assert outcome.success is False
    assert outcome.error == "No sms contact information"
    assert get_notification(db_session, notification.id).status is NotificationStatus.FAILED


def test_read_unread_and_cancel_are_persisted(db_session) -> None:
    notification = create_notification(
        db_session, recipient_id="user-1", content="Hello", category="alerts"
    )

    assert read_notification(db_session, notification.id).read_at is not None
    assert unread_notification(db_session, notification.id).read_at is None
    canceled = cancel_notification(db_session, notification.id)

    stored = get_notification(db_session, notification.id)
    assert stored.canceled_at == canceled.canceled_at
    assert stored.updated_at > notification.updated_at


def test_state_changes_on_unknown_notification_raise(db_session) -> None:
    with pytest.raises(NotificationNotFoundError):
        read_notification(db_session, "missing")


def test_recipient_queries(db_session) -> None:
    for content in ("one", "two"):
        create_notification(db_session, recipient_id="user-1", content=content, category="alerts")
    create_notification(db_session, recipient_id="user-2", content="three", category="alerts")

    assert count_recipient_notifications(db_session, "user-1") == 2
    assert count_recipient_notifications(db_session, "nobody") == 0
    assert {n.content for n in list_recipient_notifications(db_session, "user-1")} == {"one", "two"}
    assert len(list_notifications(db_session, limit=2)) == 2
