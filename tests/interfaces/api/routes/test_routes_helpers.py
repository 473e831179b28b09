"""Tests for helper utilities shared by the API routes."""

import pytest

from notifier.domain.errors import (
    NotificationNotFoundError,
    RecipientNotFoundError,
    TemplateNotFoundError,
)
from notifier.interfaces.api.routes_helpers import http_error_from


@pytest.mark.parametrize(
    ("error", "expected_status", "expected_detail"),
    [
        (NotificationNotFoundError(), 404, "Notification not found"),
        (TemplateNotFoundError(), 404, "Template not found"),
        (RecipientNotFoundError(), 404, "Recipient not found"),
        (ValueError("Recipient name cannot be empty"), 400, "Recipient name cannot be empty"),
    ],
)
def test_http_error_from(error, expected_status, expected_detail):
    """Not-found errors map to 404 and every other validation error to 400."""

    exc = http_error_from(error)

    assert exc.status_code == expected_status
    assert exc.detail == expected_detail
