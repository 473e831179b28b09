"""Use case for retrieving a recipient."""

from sqlalchemy.orm import Session

from notifier.domain.entities import Recipient
from notifier.domain.errors import RecipientNotFoundError
from notifier.infrastructure.repositories import RecipientRepository


def get_recipient(session: Session, recipient_id: str) -> Recipient:
    """Return the recipient identified by ``recipient_id`` or raise an error."""

    recipient = RecipientRepository(session).get(recipient_id)
    if recipient is None:
        raise RecipientNotFoundError()
    return recipient
