"""Schemas for template endpoints."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import CamelModel


class TemplateCreate(CamelModel):
    """Payload required to create a template."""

    name: str = Field(..., min_length=1, max_length=120)
    subject: str = Field(default="", max_length=255)
    html_body: str = ""
    text_body: str | None = None
    variables: list[str] | None = None


class TemplateUpdate(CamelModel):
    name: str | None = Field(default=None, max_length=120)
    subject: str | None = Field(default=None, max_length=255)
    html_body: str | None = None
    text_body: str | None = None
    variables: list[str] | None = None

    model_config = ConfigDict(extra="forbid")


class TemplateRead(CamelModel):
    id: str
    name: str
    subject: str
    html_body: str
    text_body: str | None
    variables: list[str]
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["TemplateCreate", "TemplateRead", "TemplateUpdate"]
