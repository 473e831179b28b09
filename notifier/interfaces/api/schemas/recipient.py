"""Schemas for recipient endpoints."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from .base import CamelModel


class RecipientCreate(CamelModel):
    """Payload required to register a recipient."""

    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=32)


class RecipientUpdate(CamelModel):
    name: str | None = Field(default=None, max_length=120)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=32)

    model_config = ConfigDict(extra="forbid")


class RecipientRead(CamelModel):
    id: str
    name: str
    email: str
    phone: str | None
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["RecipientCreate", "RecipientRead", "RecipientUpdate"]
