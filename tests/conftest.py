"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask, render_template_string  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from langregistry import ErrorCollector, FormatterTable, LanguageRegistry  # noqa: E402
from langregistry import lang as default_lang  # noqa: E402
from langregistry.web import init_app, request_language, translator  # noqa: E402

LANG_ROOT = Path(__file__).resolve().parent / "lang"


@pytest.fixture()
def lang_root() -> Path:
    """Directory holding the fixture catalogues."""

    return LANG_ROOT


@pytest.fixture()
def formatters() -> FormatterTable:
    """Formatter table matching the entries used by the fixture catalogues."""

    table = FormatterTable()

    @table.formatter()
    def results(num):
        return "1 result" if num == 1 else f"{num} results"

    @table.formatter()
    def results_da(num):
        return "1 resultat" if num == 1 else f"{num} resultater"

    @table.formatter()
    def welcome(name):
        return f"Welcome back, {name}!"

    return table


@pytest.fixture()
def registry(formatters: FormatterTable) -> LanguageRegistry:
    """Return a fresh registry wired to the fixture formatters."""

    instance = LanguageRegistry(formatters=formatters)
    yield instance
    instance.reset()


@pytest.fixture()
def errors(registry: LanguageRegistry) -> ErrorCollector:
    """Collect every message the registry reports while the test runs."""

    with ErrorCollector(registry) as collector:
        yield collector


@pytest.fixture()
def shared_registry(formatters: FormatterTable) -> LanguageRegistry:
    """Reset the process-wide registry around a test."""

    registry = default_lang.get_registry()
    registry.reset()
    previous = registry.loader.formatters
    registry.loader.formatters = formatters
    yield registry
    registry.loader.formatters = previous
    registry.reset()


@pytest.fixture()
def app(registry: LanguageRegistry, lang_root: Path) -> Flask:
    """Return a Flask application with the registry attached."""

    registry.register("foo", lang_root / "foo")

    application = Flask(__name__)
    application.config.update(TESTING=True)
    init_app(application, registry)

    @application.get("/greeting")
    def greeting():
        translate = translator("foo/bar")
        return {
            "language": request_language(),
            "greeting": translate("Hello, {world}", {"world": "World"}),
        }

    @application.get("/page")
    def page():
        return render_template_string(
            "{{ translate('foo/bar', 'Hello, {world}', world='World') }}"
        )

    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
