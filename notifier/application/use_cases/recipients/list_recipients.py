"""Use case for listing recipients."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import Recipient
from notifier.infrastructure.repositories import RecipientRepository


def list_recipients(
    session: Session, *, skip: int = 0, limit: int | None = None
) -> Sequence[Recipient]:
    """Return recipients, newest first."""

    return RecipientRepository(session).list(skip=skip, limit=limit)
