"""Endpoints for creating, sending and tracking notifications."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from notifier.application.dispatcher import ChannelDispatcher
from notifier.application.use_cases.notifications import (
    cancel_notification as cancel_notification_uc,
    count_recipient_notifications as count_recipient_notifications_uc,
    create_notification as create_notification_uc,
    get_notification as get_notification_uc,
    list_notifications as list_notifications_uc,
    list_recipient_notifications as list_recipient_notifications_uc,
    read_notification as read_notification_uc,
    send_notification_with_channel as send_notification_with_channel_uc,
    unread_notification as unread_notification_uc,
)
from notifier.domain.entities import Notification
from notifier.infrastructure.database import get_db
from notifier.interfaces.api.dependencies import get_channel_dispatcher
from notifier.interfaces.api.routes_helpers import http_error_from
from notifier.interfaces.api.schemas import (
    DeliveryRead,
    NotificationCount,
    NotificationCreate,
    NotificationRead,
    NotificationSendRequest,
    NotificationSendResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _to_read_model(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return notifications, newest first."""

    notifications = list_notifications_uc(db, skip=skip, limit=limit)
    return [_to_read_model(notification) for notification in notifications]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Record a pending notification without delivering it."""

    try:
        notification = create_notification_uc(
            db,
            recipient_id=payload.recipient_id,
            content=payload.content,
            category=payload.category,
            channel=payload.channel,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(notification)


@router.post(
    "/send",
    response_model=NotificationSendResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_notification(
    payload: NotificationSendRequest,
    db: Session = Depends(get_db),
    dispatcher: ChannelDispatcher = Depends(get_channel_dispatcher),
) -> NotificationSendResponse:
    """Create a notification and deliver it through the requested channel."""

    notification, outcome = send_notification_with_channel_uc(
        db,
        recipient_id=payload.recipient_id,
        content=payload.content,
        category=payload.category,
        channel=payload.channel,
        dispatcher=dispatcher,
        subject=payload.subject,
        recipient_email=payload.recipient_email,
        recipient_phone=payload.recipient_phone,
    )
    return NotificationSendResponse(
        notification=_to_read_model(notification),
        delivery=DeliveryRead(
            success=outcome.success,
            message_id=outcome.message_id,
            error=outcome.error,
        ),
    )


@router.get("/count/from/{recipient_id}", response_model=NotificationCount)
def count_from_recipient(
    recipient_id: str,
    db: Session = Depends(get_db),
) -> NotificationCount:
    """Return how many notifications a recipient has."""

    return NotificationCount(count=count_recipient_notifications_uc(db, recipient_id))


@router.get("/from/{recipient_id}", response_model=list[NotificationRead])
def list_from_recipient(
    recipient_id: str,
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the notifications addressed to a recipient."""

    notifications = list_recipient_notifications_uc(db, recipient_id)
    return [_to_read_model(notification) for notification in notifications]


@router.get("/{notification_id}", response_model=NotificationRead)
def read_notification_detail(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Return the notification identified by ``notification_id``."""

    try:
        notification = get_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(notification)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_as_read(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationRead:
    try:
        notification = read_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(notification)


@router.patch("/{notification_id}/unread", response_model=NotificationRead)
def mark_as_unread(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationRead:
    try:
        notification = unread_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(notification)


@router.patch("/{notification_id}/cancel", response_model=NotificationRead)
def cancel(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationRead:
    try:
        notification = cancel_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(notification)
