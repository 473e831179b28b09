"""Use case for creating templates."""

from sqlalchemy.orm import Session

from notifier.application.rendering import extract_placeholders
from notifier.domain.entities import Template
from notifier.infrastructure.repositories import TemplateRepository


def create_template(
    session: Session,
    *,
    name: str,
    subject: str,
    html_body: str,
    text_body: str | None = None,
    variables: list[str] | None = None,
) -> Template:
    """Create a new template.

    When ``variables`` is omitted the placeholders found in the subject and
    body are recorded instead.
    """

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Template name cannot be empty")

    declared = variables if variables is not None else extract_placeholders(
        f"{subject}\n{html_body}"
    )
    template = Template(
        id=None,
        name=normalized_name,
        subject=subject,
        html_body=html_body,
        text_body=text_body,
        variables=list(declared),
    )
    return TemplateRepository(session).create(template)
