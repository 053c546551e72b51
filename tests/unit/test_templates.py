"""Unit coverage for template rendering."""

from __future__ import annotations

from langregistry.templates import FormatterTemplate, StaticTemplate, substitute


def test_substitute_replaces_every_occurrence() -> None:
    assert substitute("{a} and {a} or {b}", {"a": "x", "b": 2}) == "x and x or 2"


def test_substitute_leaves_unknown_placeholders() -> None:
    assert substitute("{known} {unknown}", {"known": "yes"}) == "yes {unknown}"


def test_substitute_is_single_pass() -> None:
    """Token values containing placeholders are not expanded again."""

    assert substitute("{a} {b}", {"a": "{b}", "b": "B"}) == "{b} B"


def test_static_template_without_tokens_is_unchanged() -> None:
    template = StaticTemplate("Hello, {world}")

    assert template.render() == "Hello, {world}"
    assert template.render({}) == "Hello, {world}"


def test_formatter_template_passes_tokens_in_declaration_order() -> None:
    template = FormatterTemplate(
        name="range",
        params=("low", "high"),
        function=lambda low, high: f"{low}-{high}",
    )

    assert template.render({"high": 9, "low": 1}) == "1-9"
    assert template.render({"high": 9}) == "{low}-9"
    assert template.render() == "{low}-{high}"
