"""Tests for placeholder rendering helpers."""

from notifier.application.rendering import (
    extract_placeholders,
    render,
    render_message,
    strip_html,
)


def test_render_replaces_every_occurrence() -> None:
    rendered = render("Hi {name}, {name}! Code: {code}", {"name": "Ann", "code": "42"})

    assert rendered == "Hi Ann, Ann! Code: 42"


def test_render_is_idempotent_once_placeholders_are_filled() -> None:
    variables = {"name": "Ann", "city": "Nairobi"}
    once = render("{name} lives in {city}", variables)

    assert render(once, variables) == once


def test_render_keeps_unknown_placeholders() -> None:
    assert render("Hello {name}, see {link}", {"name": "Ann"}) == "Hello Ann, see {link}"


def test_render_is_case_sensitive() -> None:
    assert render("{Name} / {name}", {"name": "ann"}) == "{Name} / ann"


def test_render_inserts_special_characters_literally() -> None:
    rendered = render("Total: {amount} in {path}", {"amount": "$1 $$", "path": r"C:\temp\1"})

    assert rendered == r"Total: $1 $$ in C:\temp\1"


def test_render_without_variables_returns_content() -> None:
    assert render("Plain {text}", None) == "Plain {text}"


def test_recipient_variables_override_global_ones() -> None:
    merged = {**{"name": "Global", "team": "Ops"}, **{"name": "Ann"}}

    subject, body = render_message("For {name}", "{name} from {team}", merged)

    assert subject == "For Ann"
    assert body == "Ann from Ops"


def test_strip_html_removes_tags() -> None:
    assert strip_html("<p>Hello <b>Ann</b></p><br/>") == "Hello Ann"


def test_extract_placeholders_preserves_first_appearance_order() -> None:
    assert extract_placeholders("{b} {a} {b} {c}") == ["b", "a", "c"]
