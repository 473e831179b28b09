"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, String, Text

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a notification sent to a recipient."""

    __tablename__ = "notification"

    id = Column(String(36), primary_key=True)
    # Recipients supplied inline to bulk sends are not necessarily stored.
    recipient_id = Column(String(64), nullable=False, index=True)
    content = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    channel = Column(String(20), nullable=False, default="email")
    status = Column(String(20), nullable=False, default="pending", index=True)
    read_at = Column(DateTime(), nullable=True)
    canceled_at = Column(DateTime(), nullable=True)
    bulk_notification_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
