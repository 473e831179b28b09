"""Use case for retrieving a template."""

from sqlalchemy.orm import Session

from notifier.domain.entities import Template
from notifier.domain.errors import TemplateNotFoundError
from notifier.infrastructure.repositories import TemplateRepository


def get_template(session: Session, template_id: str) -> Template:
    """Return the template identified by ``template_id`` or raise an error."""

    template = TemplateRepository(session).get(template_id)
    if template is None:
        raise TemplateNotFoundError()
    return template
