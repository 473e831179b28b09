"""Use case for deleting recipients."""

from sqlalchemy.orm import Session

from notifier.domain.errors import RecipientNotFoundError
from notifier.infrastructure.repositories import RecipientRepository


def delete_recipient(session: Session, recipient_id: str) -> None:
    """Delete the specified recipient; its notifications are kept."""

    repository = RecipientRepository(session)
    if repository.get(recipient_id) is None:
        raise RecipientNotFoundError()
    repository.delete(recipient_id)
