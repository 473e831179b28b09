"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from notifier.domain.entities import Notification
from notifier.infrastructure.models import NotificationModel
from notifier.utils import ensure_app_naive_datetime, ensure_app_timezone


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects.

    Every write commits on its own; callers that persist several notifications
    get one transaction per record.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list(self, *, skip: int = 0, limit: int | None = 100) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_for_recipient(
        self, recipient_id: str, *, limit: int | None = None
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == recipient_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_for_batch(self, bulk_notification_id: str) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.bulk_notification_id == bulk_notification_id)
            .order_by(NotificationModel.created_at.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def count_for_recipient(self, recipient_id: str) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.recipient_id == recipient_id)
            .scalar()
            or 0
        )

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(id=notification.id)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def save(self, notification: Notification) -> Notification:
        """Insert or update ``notification`` by its identifier."""

        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            return self.create(notification)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.recipient_id = notification.recipient_id
        model.content = notification.content
        model.category = notification.category
        model.channel = notification.channel.value
        model.status = notification.status.value
        model.read_at = ensure_app_naive_datetime(notification.read_at)
        model.canceled_at = ensure_app_naive_datetime(notification.canceled_at)
        model.bulk_notification_id = notification.bulk_notification_id
        model.created_at = ensure_app_naive_datetime(notification.created_at)
        model.updated_at = ensure_app_naive_datetime(notification.updated_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            content=model.content,
            category=model.category,
            channel=model.channel,
            status=model.status,
            read_at=ensure_app_timezone(model.read_at),
            canceled_at=ensure_app_timezone(model.canceled_at),
            bulk_notification_id=model.bulk_notification_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRepository"]
