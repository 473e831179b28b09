"""Use case for deleting templates."""

from sqlalchemy.orm import Session

from notifier.domain.errors import TemplateNotFoundError
from notifier.infrastructure.repositories import TemplateRepository


def delete_template(session: Session, template_id: str) -> None:
    """Delete the specified template."""

    repository = TemplateRepository(session)
    if repository.get(template_id) is None:
        raise TemplateNotFoundError()
    repository.delete(template_id)
