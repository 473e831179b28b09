"""Use case for creating recipients."""

from sqlalchemy.orm import Session

from notifier.domain.entities import Recipient
from notifier.infrastructure.repositories import RecipientRepository

from .validators import ensure_unique_email, normalize_email


def create_recipient(
    session: Session,
    *,
    name: str,
    email: str,
    phone: str | None = None,
) -> Recipient:
    """Register a new recipient with a unique email address."""

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Recipient name cannot be empty")

    normalized_email = normalize_email(email)
    repository = RecipientRepository(session)
    ensure_unique_email(repository, normalized_email)

    recipient = Recipient(
        id=None,
        name=normalized_name,
        email=normalized_email,
        phone=(phone or "").strip() or None,
    )
    return repository.create(recipient)
