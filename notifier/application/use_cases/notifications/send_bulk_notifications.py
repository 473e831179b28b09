"""Use cases for sending one templated message to many recipients."""

from __future__ import annotations

import logging
import secrets
import string
from collections.abc import Iterable, Mapping
from typing import Any
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notifier.application.dispatcher import DEFAULT_FAILURE_MESSAGE, ChannelDispatcher
from notifier.application.rendering import render_message
from notifier.domain.entities import (
    BulkDispatchRequest,
    BulkDispatchResult,
    BulkRecipient,
    Notification,
    NotificationChannel,
    NotificationStatus,
    RecipientOutcome,
)
from notifier.domain.errors import TemplateNotFoundError
from notifier.infrastructure.repositories import (
    NotificationRepository,
    RecipientRepository,
    TemplateRepository,
)

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Notification"
_CSV_ID_ALPHABET = string.digits + string.ascii_lowercase


def _resolve_template(
    session: Session, request: BulkDispatchRequest, *, strict_templates: bool
) -> tuple[str, str]:
    """Return the ``(subject, body)`` pair used for every recipient."""

    content = request.template_content or ""
    subject = request.template_subject or DEFAULT_SUBJECT

    if not request.template_id:
        return subject, content

    template = TemplateRepository(session).get(request.template_id)
    if template is None:
        if strict_templates:
            raise TemplateNotFoundError()
        logger.warning(
            "Template %s not found; falling back to inline content", request.template_id
        )
        return subject, content

    return template.subject or DEFAULT_SUBJECT, template.html_body or ""


def _rollback_quietly(session: Session, batch_id: str) -> None:
    try:
        session.rollback()
    except SQLAlchemyError:
        logger.exception("Rollback failed during bulk dispatch %s", batch_id)


def send_bulk_notifications(
    session: Session,
    request: BulkDispatchRequest,
    *,
    dispatcher: ChannelDispatcher,
    strict_templates: bool = False,
) -> BulkDispatchResult:
    """Render and send ``request`` to each recipient, one after the other.

    A failure for one recipient never aborts the batch: missing contact data,
    provider errors and unexpected exceptions are all reported in the
    per-recipient results. Only successful sends are stored as notifications,
    each committed on its own, and all of them share one
    ``bulk_notification_id``.

    With ``strict_templates`` an unknown ``template_id`` raises
    :class:`TemplateNotFoundError` before anything is sent; otherwise the
    inline content is used.
    """

    subject, content = _resolve_template(
        session, request, strict_templates=strict_templates
    )
    channel = NotificationChannel(request.channel)
    batch_id = str(uuid4())
    repository = NotificationRepository(session)

    results: list[RecipientOutcome] = []
    sent_count = 0
    failed_count = 0

    for recipient in request.recipients:
        try:
            variables = {**(request.variables or {}), **(recipient.variables or {})}
            personalized_subject, personalized_content = render_message(
                subject, content, variables
            )

            outcome = dispatcher.dispatch(
                channel,
                personalized_content,
                subject=personalized_subject,
                email=recipient.email,
                phone=recipient.phone,
            )

            if not outcome.success:
                failed_count += 1
                results.append(
                    RecipientOutcome(
                        recipient_id=recipient.recipient_id,
                        success=False,
                        error=outcome.error or DEFAULT_FAILURE_MESSAGE,
                    )
                )
                continue

            repository.create(
                Notification(
                    recipient_id=recipient.recipient_id,
                    content=personalized_content,
                    category=channel.value,
                    channel=channel,
                    status=NotificationStatus.SENT,
                    bulk_notification_id=batch_id,
                )
            )
            sent_count += 1
            results.append(
                RecipientOutcome(
                    recipient_id=recipient.recipient_id,
                    success=True,
                    message_id=outcome.message_id,
                )
            )
        except Exception as exc:
            logger.exception(
                "Bulk dispatch %s failed for recipient %s", batch_id, recipient.recipient_id
            )
            _rollback_quietly(session, batch_id)
            failed_count += 1
            results.append(
                RecipientOutcome(
                    recipient_id=recipient.recipient_id,
                    success=False,
                    error=str(exc) or "Unknown error",
                )
            )

    logger.info(
        "Bulk dispatch %s over %s finished: %s sent, %s failed",
        batch_id,
        channel.value,
        sent_count,
        failed_count,
    )
    return BulkDispatchResult(
        success=sent_count > 0,
        sent_count=sent_count,
        failed_count=failed_count,
        results=results,
    )


def send_bulk_to_all_recipients(
    session: Session,
    *,
    channel: NotificationChannel | str,
    dispatcher: ChannelDispatcher,
    template_id: str | None = None,
    template_content: str | None = None,
    template_subject: str | None = None,
    variables: Mapping[str, str] | None = None,
    strict_templates: bool = False,
) -> BulkDispatchResult:
    """Send the message to every stored recipient."""

    recipients = [
        BulkRecipient(
            recipient_id=recipient.id,
            email=recipient.email,
            phone=recipient.phone or None,
        )
        for recipient in RecipientRepository(session).list()
    ]
    request = BulkDispatchRequest(
        channel=NotificationChannel(channel),
        recipients=recipients,
        template_id=template_id,
        template_content=template_content,
        template_subject=template_subject,
        variables=dict(variables or {}),
    )
    return send_bulk_notifications(
        session, request, dispatcher=dispatcher, strict_templates=strict_templates
    )


def _generate_csv_recipient_id() -> str:
    suffix = "".join(secrets.choice(_CSV_ID_ALPHABET) for _ in range(9))
    return f"csv-{suffix}"


def _row_to_recipient(row: Mapping[str, Any]) -> BulkRecipient:
    raw_variables = row.get("variables") or {}
    variables = (
        {str(key): str(value) for key, value in raw_variables.items()}
        if isinstance(raw_variables, Mapping)
        else {}
    )
    row_id = row.get("id")
    return BulkRecipient(
        recipient_id=str(row_id) if row_id else _generate_csv_recipient_id(),
        email=row.get("email") or None,
        phone=row.get("phone") or None,
        variables=variables,
    )


def send_bulk_from_rows(
    session: Session,
    *,
    rows: Iterable[Mapping[str, Any]],
    channel: NotificationChannel | str,
    dispatcher: ChannelDispatcher,
    template_id: str | None = None,
    template_content: str | None = None,
    template_subject: str | None = None,
    variables: Mapping[str, str] | None = None,
    strict_templates: bool = False,
) -> BulkDispatchResult:
    """Send the message to recipients described by parsed CSV rows.

    Each row may carry ``id``, ``email``, ``phone`` and a ``variables``
    mapping. Rows without ``id`` get a random ``csv-`` identifier.
    """

    request = BulkDispatchRequest(
        channel=NotificationChannel(channel),
        recipients=[_row_to_recipient(row) for row in rows],
        template_id=template_id,
        template_content=template_content,
        template_subject=template_subject,
        variables=dict(variables or {}),
    )
    return send_bulk_notifications(
        session, request, dispatcher=dispatcher, strict_templates=strict_templates
    )


__all__ = [
    "DEFAULT_SUBJECT",
    "send_bulk_from_rows",
    "send_bulk_notifications",
    "send_bulk_to_all_recipients",
]
