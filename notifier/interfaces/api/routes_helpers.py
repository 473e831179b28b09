"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from notifier.domain.errors import NotFoundError


def http_error_from(exc: ValueError) -> HTTPException:
    """Translate a use case error into the matching HTTP error."""

    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
