"""Endpoints for managing notification recipients."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from notifier.application.use_cases.recipients import (
    create_recipient as create_recipient_uc,
    delete_recipient as delete_recipient_uc,
    get_recipient as get_recipient_uc,
    list_recipients as list_recipients_uc,
    update_recipient as update_recipient_uc,
)
from notifier.domain.entities import Recipient
from notifier.infrastructure.database import get_db
from notifier.interfaces.api.routes_helpers import http_error_from
from notifier.interfaces.api.schemas import RecipientCreate, RecipientRead, RecipientUpdate

router = APIRouter(prefix="/recipients", tags=["recipients"])


def _to_read_model(recipient: Recipient) -> RecipientRead:
    return RecipientRead.model_validate(recipient)


@router.get("/", response_model=list[RecipientRead])
def list_recipients(db: Session = Depends(get_db)) -> list[RecipientRead]:
    """Return recipients, newest first."""

    return [_to_read_model(recipient) for recipient in list_recipients_uc(db)]


@router.post("/", response_model=RecipientRead, status_code=status.HTTP_201_CREATED)
def register_recipient(
    recipient_in: RecipientCreate,
    db: Session = Depends(get_db),
) -> RecipientRead:
    """Register a recipient."""

    try:
        recipient = create_recipient_uc(
            db,
            name=recipient_in.name,
            email=str(recipient_in.email),
            phone=recipient_in.phone,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(recipient)


@router.get("/{recipient_id}", response_model=RecipientRead)
def read_recipient(
    recipient_id: str,
    db: Session = Depends(get_db),
) -> RecipientRead:
    try:
        recipient = get_recipient_uc(db, recipient_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(recipient)


@router.put("/{recipient_id}", response_model=RecipientRead)
def update_recipient(
    recipient_id: str,
    recipient_in: RecipientUpdate,
    db: Session = Depends(get_db),
) -> RecipientRead:
    """Update the fields present in the payload."""

    update_data = recipient_in.model_dump(exclude_unset=True)
    if update_data.get("email") is not None:
        update_data["email"] = str(update_data["email"])
    try:
        recipient = update_recipient_uc(db, recipient_id=recipient_id, **update_data)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(recipient)


@router.delete("/{recipient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipient(
    recipient_id: str,
    db: Session = Depends(get_db),
) -> Response:
    try:
        delete_recipient_uc(db, recipient_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
