"""Use case for listing templates."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import Template
from notifier.infrastructure.repositories import TemplateRepository


def list_templates(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[Template]:
    """Return templates, newest first."""

    return TemplateRepository(session).list(skip=skip, limit=limit)
