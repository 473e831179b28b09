"""Validation helpers shared by recipient use cases."""

from notifier.infrastructure.repositories import RecipientRepository


def normalize_email(email: str) -> str:
    normalized = email.strip()
    if "@" not in normalized:
        raise ValueError("Recipient email is not valid")
    return normalized


def ensure_unique_email(
    repository: RecipientRepository, email: str, *, exclude_id: str | None = None
) -> None:
    """Raise ``ValueError`` when another recipient already uses ``email``."""

    existing = repository.get_by_email(email)
    if existing is not None and existing.id != exclude_id:
        raise ValueError("A recipient with this email already exists")
