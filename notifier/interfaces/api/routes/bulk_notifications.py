"""Endpoints that send one message to many recipients."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from notifier.application.dispatcher import ChannelDispatcher
from notifier.application.use_cases.notifications import (
    send_bulk_from_rows as send_bulk_from_rows_uc,
    send_bulk_notifications as send_bulk_notifications_uc,
    send_bulk_to_all_recipients as send_bulk_to_all_recipients_uc,
)
from notifier.domain.entities import BulkDispatchResult
from notifier.infrastructure.database import get_db
from notifier.interfaces.api.dependencies import (
    get_channel_dispatcher,
    get_strict_template_lookup,
)
from notifier.interfaces.api.routes_helpers import http_error_from
from notifier.interfaces.api.schemas import (
    BulkNotificationRequest,
    BulkNotificationResponse,
    BulkSendByCsvRequest,
    BulkSendToAllRequest,
)

router = APIRouter(prefix="/bulk-notifications", tags=["bulk-notifications"])


def _to_response(result: BulkDispatchResult) -> BulkNotificationResponse:
    return BulkNotificationResponse.model_validate(result)


@router.post(
    "/send",
    response_model=BulkNotificationResponse,
    response_model_exclude_none=True,
)
def send_bulk(
    payload: BulkNotificationRequest,
    db: Session = Depends(get_db),
    dispatcher: ChannelDispatcher = Depends(get_channel_dispatcher),
    strict_templates: bool = Depends(get_strict_template_lookup),
) -> BulkNotificationResponse:
    """Send the message to every recipient listed in the payload."""

    try:
        result = send_bulk_notifications_uc(
            db,
            payload.to_domain(),
            dispatcher=dispatcher,
            strict_templates=strict_templates,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_response(result)


@router.post(
    "/send-to-all",
    response_model=BulkNotificationResponse,
    response_model_exclude_none=True,
)
def send_to_all(
    payload: BulkSendToAllRequest,
    db: Session = Depends(get_db),
    dispatcher: ChannelDispatcher = Depends(get_channel_dispatcher),
    strict_templates: bool = Depends(get_strict_template_lookup),
) -> BulkNotificationResponse:
    """Send the message to every stored recipient."""

    try:
        result = send_bulk_to_all_recipients_uc(
            db,
            channel=payload.channel,
            dispatcher=dispatcher,
            template_id=payload.template_id,
            template_content=payload.template_content,
            template_subject=payload.template_subject,
            variables=payload.variables,
            strict_templates=strict_templates,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_response(result)


@router.post(
    "/send-by-csv",
    response_model=BulkNotificationResponse,
    response_model_exclude_none=True,
)
def send_by_csv(
    payload: BulkSendByCsvRequest,
    db: Session = Depends(get_db),
    dispatcher: ChannelDispatcher = Depends(get_channel_dispatcher),
    strict_templates: bool = Depends(get_strict_template_lookup),
) -> BulkNotificationResponse:
    """Send the message to recipients taken from parsed CSV rows."""

    try:
        result = send_bulk_from_rows_uc(
            db,
            rows=payload.csv_data,
            channel=payload.channel,
            dispatcher=dispatcher,
            template_id=payload.template_id,
            template_content=payload.template_content,
            template_subject=payload.template_subject,
            variables=payload.variables,
            strict_templates=strict_templates,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_response(result)
