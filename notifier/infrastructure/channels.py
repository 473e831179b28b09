"""Build delivery providers from application settings."""

from __future__ import annotations

from notifier.application.dispatcher import ChannelDispatcher
from notifier.config import Settings
from notifier.infrastructure.email import SendGridEmailSender
from notifier.infrastructure.sms import TextSmsSender


def build_channel_dispatcher(settings: Settings) -> ChannelDispatcher:
    """Return a dispatcher wired to SendGrid and the SMS gateway."""

    email_sender = SendGridEmailSender(
        api_key=settings.sendgrid_api_key,
        sender=settings.sendgrid_sender,
    )
    sms_sender = TextSmsSender(
        api_key=settings.sms_api_key,
        partner_id=settings.sms_partner_id,
        sender_id=settings.sms_sender_id,
        base_url=settings.sms_api_url,
        timeout=settings.sms_timeout_seconds,
    )
    return ChannelDispatcher(email_sender, sms_sender)


__all__ = ["build_channel_dispatcher"]
