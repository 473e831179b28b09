"""Persistence layer for templates."""

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from notifier.domain.entities import Template
from notifier.infrastructure.models import TemplateModel
from notifier.utils import ensure_app_timezone


class TemplateRepository:
    """Provide CRUD operations for templates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, skip: int = 0, limit: int | None = 100) -> Sequence[Template]:
        query = self.session.query(TemplateModel).order_by(
            TemplateModel.created_at.desc(), TemplateModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, template_id: str) -> Template | None:
        model = self.session.get(TemplateModel, template_id)
        return self._to_entity(model) if model else None

    def create(self, template: Template) -> Template:
        model = TemplateModel(id=template.id or str(uuid4()))
        self._apply_entity_to_model(model, template)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, template: Template) -> Template:
        model = self.session.get(TemplateModel, template.id)
        if model is None:
            msg = f"Template with id {template.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, template)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, template_id: str) -> None:
        model = self.session.get(TemplateModel, template_id)
        if model is None:
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: TemplateModel, template: Template) -> None:
        model.name = template.name
        model.subject = template.subject
        model.html_body = template.html_body
        model.text_body = template.text_body
        model.variables = list(template.variables or [])

    @staticmethod
    def _to_entity(model: TemplateModel) -> Template:
        return Template(
            id=model.id,
            name=model.name,
            subject=model.subject or "",
            html_body=model.html_body or "",
            text_body=model.text_body,
            variables=list(model.variables or []),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["TemplateRepository"]
