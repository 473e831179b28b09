"""SQLAlchemy model for message templates."""

from sqlalchemy import JSON, Column, DateTime, String, Text

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class TemplateModel(Base):
    """Database representation of a reusable email/SMS template."""

    __tablename__ = "template"

    id = Column(String(36), primary_key=True)
    name = Column(String(120), nullable=False)
    subject = Column(String(255), nullable=False, default="")
    html_body = Column(Text, nullable=False, default="")
    text_body = Column(Text, nullable=True)
    variables = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["TemplateModel"]
