"""Shared fixtures: a throwaway SQLite database and in-memory delivery providers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)
os.environ.pop("STRICT_TEMPLATE_LOOKUP", None)

from notifier.application.dispatcher import ChannelDispatcher  # noqa: E402
from notifier.config import reset_settings_cache  # noqa: E402
from notifier.infrastructure import database  # noqa: E402


@dataclass
class FakeResult:
    success: bool
    message_id: str | None = None
    error: str | None = None
    provider_data: object = None


@dataclass
class FakeEmailSender:
    """Records every email and fails for the addresses listed in ``failures``."""

    failures: dict[str, str | None] = field(default_factory=dict)
    raises: dict[str, Exception] = field(default_factory=dict)
    sent: list[dict[str, str | None]] = field(default_factory=list)

    def send_email(self, to, subject, html_content, text_content=None):
        if to in self.raises:
            raise self.raises[to]
        self.sent.append(
            {"to": to, "subject": subject, "html": html_content, "text": text_content}
        )
        if to in self.failures:
            return FakeResult(success=False, error=self.failures[to])
        return FakeResult(success=True, message_id=f"email-{len(self.sent)}")


@dataclass
class FakeSmsSender:
    """Records every SMS and fails for the numbers listed in ``failures``."""

    failures: dict[str, str | None] = field(default_factory=dict)
    sent: list[dict[str, str]] = field(default_factory=list)

    def send_sms(self, to, message):
        self.sent.append({"to": to, "message": message})
        if to in self.failures:
            return FakeResult(success=False, error=self.failures[to])
        return FakeResult(success=True, message_id=f"sms-{len(self.sent)}")

    def get_balance(self):
        return FakeResult(success=True, provider_data={"credit": "250.00"})


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table before each test."""

    reset_settings_cache()
    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.engine.dispose()


@pytest.fixture()
def db_session():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture()
def sms_sender() -> FakeSmsSender:
    return FakeSmsSender()


@pytest.fixture()
def dispatcher(email_sender, sms_sender) -> ChannelDispatcher:
    return ChannelDispatcher(email_sender, sms_sender)


@pytest.fixture()
def client(dispatcher):
    """Return a test client whose delivery providers are the in-memory fakes."""

    from fastapi.testclient import TestClient

    from main import create_app
    from notifier.interfaces.api.dependencies import get_channel_dispatcher

    app = create_app()
    app.dependency_overrides[get_channel_dispatcher] = lambda: dispatcher
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def pytest_sessionfinish(session, exitstatus):
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
