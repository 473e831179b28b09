"""Persistence layer for recipients."""

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from notifier.domain.entities import Recipient
from notifier.infrastructure.models import RecipientModel
from notifier.utils import ensure_app_timezone


class RecipientRepository:
    """Provide CRUD operations for recipients."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, skip: int = 0, limit: int | None = None) -> Sequence[Recipient]:
        query = self.session.query(RecipientModel).order_by(
            RecipientModel.created_at.desc(), RecipientModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, recipient_id: str) -> Recipient | None:
        model = self.session.get(RecipientModel, recipient_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> Recipient | None:
        model = (
            self.session.query(RecipientModel)
            .filter(func.lower(RecipientModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, recipient: Recipient) -> Recipient:
        model = RecipientModel(id=recipient.id or str(uuid4()))
        self._apply_entity_to_model(model, recipient)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, recipient: Recipient) -> Recipient:
        model = self.session.get(RecipientModel, recipient.id)
        if model is None:
            msg = f"Recipient with id {recipient.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, recipient)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, recipient_id: str) -> None:
        model = self.session.get(RecipientModel, recipient_id)
        if model is None:
            msg = f"Recipient with id {recipient_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: RecipientModel, recipient: Recipient) -> None:
        model.name = recipient.name
        model.email = recipient.email
        model.phone = recipient.phone

    @staticmethod
    def _to_entity(model: RecipientModel) -> Recipient:
        return Recipient(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["RecipientRepository"]
