"""Placeholder substitution for notification templates."""

from __future__ import annotations

import re
from collections.abc import Mapping

_HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
_PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


def render(content: str, variables: Mapping[str, str] | None) -> str:
    """Return ``content`` with every ``{key}`` replaced by ``variables[key]``.

    Keys are applied in mapping order and matched case-sensitively. Placeholders
    without a matching key are left untouched and values are inserted verbatim,
    so characters such as ``$`` or ``\\`` carry no special meaning.
    """

    rendered = content
    for key, value in (variables or {}).items():
        rendered = rendered.replace(f"{{{key}}}", str(value))
    return rendered


def render_message(
    subject: str, body: str, variables: Mapping[str, str] | None
) -> tuple[str, str]:
    """Render ``subject`` and ``body`` with the same variables."""

    return render(subject, variables), render(body, variables)


def strip_html(text: str) -> str:
    """Remove every markup tag from ``text``."""

    return _HTML_TAG_PATTERN.sub("", text)


def extract_placeholders(content: str) -> list[str]:
    """List placeholder names in order of first appearance."""

    names: list[str] = []
    for match in _PLACEHOLDER_PATTERN.finditer(content or ""):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


__all__ = ["extract_placeholders", "render", "render_message", "strip_html"]
