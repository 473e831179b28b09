"""Endpoints for managing message templates."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from notifier.application.use_cases.templates import (
    create_template as create_template_uc,
    delete_template as delete_template_uc,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
    update_template as update_template_uc,
)
from notifier.domain.entities import Template
from notifier.infrastructure.database import get_db
from notifier.interfaces.api.routes_helpers import http_error_from
from notifier.interfaces.api.schemas import TemplateCreate, TemplateRead, TemplateUpdate

router = APIRouter(prefix="/templates", tags=["templates"])


def _to_read_model(template: Template) -> TemplateRead:
    return TemplateRead.model_validate(template)


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
) -> list[TemplateRead]:
    """Return templates, newest first."""

    return [_to_read_model(template) for template in list_templates_uc(db, skip=skip, limit=limit)]


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def register_template(
    template_in: TemplateCreate,
    db: Session = Depends(get_db),
) -> TemplateRead:
    """Create a new template."""

    try:
        template = create_template_uc(
            db,
            name=template_in.name,
            subject=template_in.subject,
            html_body=template_in.html_body,
            text_body=template_in.text_body,
            variables=template_in.variables,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(template)


@router.get("/{template_id}", response_model=TemplateRead)
def read_template(
    template_id: str,
    db: Session = Depends(get_db),
) -> TemplateRead:
    try:
        template = get_template_uc(db, template_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(template)


@router.put("/{template_id}", response_model=TemplateRead)
def update_template(
    template_id: str,
    template_in: TemplateUpdate,
    db: Session = Depends(get_db),
) -> TemplateRead:
    """Update the fields present in the payload."""

    update_data = template_in.model_dump(exclude_unset=True)
    try:
        template = update_template_uc(db, template_id=template_id, **update_data)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: str,
    db: Session = Depends(get_db),
) -> Response:
    try:
        delete_template_uc(db, template_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
