"""Integration tests for the Flask request-language helpers."""

from __future__ import annotations

from flask import Flask, render_template_string
from flask.testing import FlaskClient

from langregistry import LanguageRegistry
from langregistry.web import get_registry


def test_init_app_attaches_registry(app: Flask, registry: LanguageRegistry) -> None:
    assert get_registry(app) is registry


def test_defaults_to_registry_language(client: FlaskClient) -> None:
    response = client.get("/greeting")

    assert response.status_code == 200
    assert response.get_json() == {"language": "en", "greeting": "Greetings, World"}


def test_accept_language_selects_translation(
    client: FlaskClient, registry: LanguageRegistry
) -> None:
    response = client.get("/greeting", headers={"Accept-Language": "da-DK,da;q=0.9,en;q=0.5"})

    assert response.get_json() == {"language": "da", "greeting": "Hej, World"}
    assert registry.get() == "en"


def test_query_argument_overrides_header(client: FlaskClient) -> None:
    response = client.get("/greeting?lang=en", headers={"Accept-Language": "da"})

    assert response.get_json()["greeting"] == "Greetings, World"


def test_wildcard_header_uses_registry_language(
    client: FlaskClient, registry: LanguageRegistry
) -> None:
    registry.set("da")

    response = client.get("/greeting", headers={"Accept-Language": "*"})

    assert response.get_json() == {"language": "da", "greeting": "Hej, World"}


def test_templates_can_translate(client: FlaskClient) -> None:
    response = client.get("/page", headers={"Accept-Language": "da"})

    assert response.get_data(as_text=True) == "Hej, World"


def test_template_tokens_may_share_helper_argument_names(app: Flask) -> None:
    with app.test_request_context("/", headers={"Accept-Language": "en"}):
        rendered = render_template_string(
            "{{ translate('foo/bar', 'Edit {text} in {domain}', text='notes', domain='docs') }}"
        )

    assert rendered == "Edit notes in docs"
