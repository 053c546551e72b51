"""Flask integration resolving a per-request language."""

from __future__ import annotations

from typing import Any

from flask import Flask, current_app, g, request

from .registry import DomainTranslator, LanguageRegistry

EXTENSION_KEY = "langregistry"


def _primary_language(header: str | None) -> str | None:
    """Return the primary subtag of the first ``Accept-Language`` entry."""

    if not header:
        return None
    primary = header.split(",")[0].split(";")[0].strip()
    if not primary or primary == "*":
        return None
    return primary.lower().split("-")[0]


def get_registry(app: Flask | None = None) -> LanguageRegistry:
    """Return the registry attached to ``app`` (the current app by default)."""

    target = app or current_app
    return target.extensions[EXTENSION_KEY]


def _resolve_request_language() -> None:
    registry = get_registry()

    explicit = request.args.get("lang", "").strip()
    if explicit:
        g.language = explicit
        return

    g.language = _primary_language(request.headers.get("Accept-Language")) or registry.get()


def request_language() -> str:
    """Return the language selected for the current request."""

    language = g.get("language")
    if language is None:
        _resolve_request_language()
        language = g.language
    return language


def translator(domain: str) -> DomainTranslator:
    """Return a translator for ``domain`` bound to the request language."""

    return get_registry().domain(domain, request_language())


def init_app(app: Flask, registry: LanguageRegistry) -> None:
    """Attach ``registry`` to ``app`` and expose ``translate`` to templates."""

    app.extensions[EXTENSION_KEY] = registry
    app.before_request(_resolve_request_language)

    @app.context_processor
    def _inject_translate() -> dict[str, Any]:
        def translate(domain: str, text: str, /, **tokens: Any) -> str:
            return translator(domain)(text, tokens or None)

        return {"translate": translate}


__all__ = ["EXTENSION_KEY", "get_registry", "init_app", "request_language", "translator"]
