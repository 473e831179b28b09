"""Errors raised by use cases when a referenced record does not exist."""


class NotFoundError(ValueError):
    """Base class for lookups that did not match any stored record."""


class NotificationNotFoundError(NotFoundError):
    def __init__(self, message: str = "Notification not found") -> None:
        super().__init__(message)


class TemplateNotFoundError(NotFoundError):
    def __init__(self, message: str = "Template not found") -> None:
        super().__init__(message)


class RecipientNotFoundError(NotFoundError):
    def __init__(self, message: str = "Recipient not found") -> None:
        super().__init__(message)


__all__ = [
    "NotFoundError",
    "NotificationNotFoundError",
    "RecipientNotFoundError",
    "TemplateNotFoundError",
]
