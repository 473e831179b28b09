"""Use case for updating recipients."""

from dataclasses import replace

from sqlalchemy.orm import Session

from notifier.domain.entities import Recipient
from notifier.domain.errors import RecipientNotFoundError
from notifier.infrastructure.repositories import RecipientRepository

from .validators import ensure_unique_email, normalize_email


def update_recipient(
    session: Session,
    *,
    recipient_id: str,
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
) -> Recipient:
    """Update the provided fields of a recipient."""

    repository = RecipientRepository(session)
    current = repository.get(recipient_id)
    if current is None:
        raise RecipientNotFoundError()

    new_name = current.name
    if name is not None:
        new_name = name.strip()
        if not new_name:
            raise ValueError("Recipient name cannot be empty")

    new_email = current.email
    if email is not None:
        new_email = normalize_email(email)
        ensure_unique_email(repository, new_email, exclude_id=recipient_id)

    updated = replace(
        current,
        name=new_name,
        email=new_email,
        phone=(phone.strip() or None) if phone is not None else current.phone,
    )
    return repository.update(updated)
