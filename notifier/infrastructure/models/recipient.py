"""SQLAlchemy model for notification recipients."""

from sqlalchemy import Column, DateTime, String

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class RecipientModel(Base):
    """Database representation of a recipient and its contact details."""

    __tablename__ = "recipient"

    id = Column(String(36), primary_key=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(32), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["RecipientModel"]
