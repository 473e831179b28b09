"""Use case for updating templates."""

from dataclasses import replace

from sqlalchemy.orm import Session

from notifier.domain.entities import Template
from notifier.domain.errors import TemplateNotFoundError
from notifier.infrastructure.repositories import TemplateRepository


def update_template(
    session: Session,
    *,
    template_id: str,
    name: str | None = None,
    subject: str | None = None,
    html_body: str | None = None,
    text_body: str | None = None,
    variables: list[str] | None = None,
) -> Template:
    """Update the provided fields of a template."""

    repository = TemplateRepository(session)
    current = repository.get(template_id)
    if current is None:
        raise TemplateNotFoundError()

    new_name = current.name
    if name is not None:
        new_name = name.strip()
        if not new_name:
            raise ValueError("Template name cannot be empty")

    updated = replace(
        current,
        name=new_name,
        subject=subject if subject is not None else current.subject,
        html_body=html_body if html_body is not None else current.html_body,
        text_body=text_body if text_body is not None else current.text_body,
        variables=list(variables) if variables is not None else current.variables,
    )
    return repository.update(updated)
