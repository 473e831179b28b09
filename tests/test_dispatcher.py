"""Tests for the channel dispatcher."""

from __future__ import annotations

import logging

from notifier.application.dispatcher import ChannelDispatcher
from notifier.domain.entities import NotificationChannel


def test_email_dispatch_forwards_message(dispatcher, email_sender) -> None:
    outcome = dispatcher.dispatch(
        "email",
        "<p>Hi</p>",
        subject="Welcome",
        email="ann@example.com",
        text_content="Hi",
    )

    assert outcome.success is True
    assert outcome.message_id == "email-1"
    assert email_sender.sent == [
        {"to": "ann@example.com", "subject": "Welcome", "html": "<p>Hi</p>", "text": "Hi"}
    ]


def test_missing_email_fails_without_calling_provider(dispatcher, email_sender) -> None:
    outcome = dispatcher.dispatch(NotificationChannel.EMAIL, "Hi", email=None)

    assert outcome.success is False
    assert outcome.error == "No email contact information"
    assert email_sender.sent == []


def test_missing_phone_fails_without_calling_provider(dispatcher, sms_sender) -> None:
    outcome = dispatcher.dispatch("sms", "Hi", phone="")

    assert outcome.success is False
    assert outcome.error == "No sms contact information"
    assert sms_sender.sent == []


def test_sms_dispatch_strips_markup(dispatcher, sms_sender) -> None:
    outcome = dispatcher.dispatch("sms", "<h1>Hello</h1><p>Ann</p>", phone="+254700000001")

    assert outcome.success is True
    assert sms_sender.sent == [{"to": "+254700000001", "message": "HelloAnn"}]


def test_push_returns_synthetic_success(dispatcher, email_sender, sms_sender) -> None:
    outcome = dispatcher.dispatch("push", "Hi")

    assert outcome.success is True
    assert email_sender.sent == [] and sms_sender.sent == []


def test_unknown_channel_is_reported(dispatcher) -> None:
    outcome = dispatcher.dispatch("fax", "Hi")

    assert outcome.success is False
    assert outcome.error == "Unsupported channel: fax"


def test_provider_failure_without_message_uses_default(email_sender, sms_sender) -> None:
    email_sender.failures["ann@example.com"] = None
    dispatcher = ChannelDispatcher(email_sender, sms_sender)

    outcome = dispatcher.dispatch("email", "Hi", email="ann@example.com")

    assert outcome.success is False
    assert outcome.error == "Failed to send"


def test_provider_exception_becomes_failed_outcome(email_sender, sms_sender, caplog) -> None:
    email_sender.raises["ann@example.com"] = RuntimeError("connection reset")
    dispatcher = ChannelDispatcher(email_sender, sms_sender)

    with caplog.at_level(logging.ERROR):
        outcome = dispatcher.dispatch("email", "Hi", email="ann@example.com")

    assert outcome.success is False
    assert outcome.error == "connection reset"
    assert "Unexpected email provider error" in caplog.text


class _MappingEmailSender:
    """Provider answering with a plain mapping instead of a result object."""

    def __init__(self, response: dict) -> None:
        self.response = response

    def send_email(self, to, subject, html_content, text_content=None):
        return self.response


def test_mapping_success_result_is_understood(sms_sender) -> None:
    dispatcher = ChannelDispatcher(
        _MappingEmailSender({"success": True, "messageId": "abc"}), sms_sender
    )

    outcome = dispatcher.dispatch("email", "hi", email="a@x.com")

    assert outcome.success is True
    assert outcome.message_id == "abc"
    assert outcome.error is None


def test_mapping_failure_result_keeps_provider_error(sms_sender) -> None:
    dispatcher = ChannelDispatcher(
        _MappingEmailSender({"success": False, "error": "Quota exceeded"}), sms_sender
    )

    outcome = dispatcher.dispatch("email", "hi", email="a@x.com")

    assert outcome.success is False
    assert outcome.error == "Quota exceeded"


def test_sms_balance_uses_provider(dispatcher) -> None:
    outcome = dispatcher.sms_balance()

    assert outcome.success is True
    assert outcome.provider_data == {"credit": "250.00"}


def test_sms_balance_without_support(email_sender) -> None:
    class _NoBalanceSender:
        def send_sms(self, to, message):
            return None

    outcome = ChannelDispatcher(email_sender, _NoBalanceSender()).sms_balance()

    assert outcome.success is False
    assert outcome.error == "SMS provider does not report a balance"


def test_close_releases_providers_that_support_it(email_sender) -> None:
    class _ClosableSmsSender:
        closed = False

        def send_sms(self, to, message):
            return None

        def close(self):
            self.closed = True

    sms_sender = _ClosableSmsSender()

    ChannelDispatcher(email_sender, sms_sender).close()

    assert sms_sender.closed is True
