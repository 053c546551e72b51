"""Process-wide translation functions backed by a shared registry.

Import the module rather than its functions, since ``set`` shadows a builtin::

    from langregistry import lang

    lang.register("acme/widgets", "/srv/app/lang/acme/widgets")
    lang.set("da")
    lang.text("acme/widgets", "Hello, {name}", {"name": "Ada"})
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from .loaders import Locator
from .registry import DomainTranslator, LanguageRegistry

_registry: LanguageRegistry | None = None


def get_registry() -> LanguageRegistry:
    """Return the shared registry, creating it on first use."""

    global _registry
    if _registry is None:
        _registry = LanguageRegistry()
    return _registry


def set(code: str) -> None:  # noqa: A001 - mirrors the registry API
    get_registry().set(code)


def get() -> str:
    return get_registry().get()


def register(domain: str, locator: Locator) -> None:
    get_registry().register(domain, locator)


def register_package(domain: str, package: str, directory: str = "lang") -> None:
    get_registry().register_package(domain, package, directory)


def text(domain: str, text: str, tokens: Mapping[str, Any] | None = None) -> str:
    return get_registry().text(domain, text, tokens)


def domain(domain: str, code: str | None = None) -> DomainTranslator:
    return get_registry().domain(domain, code)


def translate(
    code: str,
    domain: str,
    text: str,
    tokens: Mapping[str, Any] | None = None,
) -> str:
    return get_registry().translate(code, domain, text, tokens)


def formatter(
    name: str | None = None,
    params: Sequence[str] | None = None,
) -> Callable[[Callable[..., str]], Callable[..., str]]:
    return get_registry().formatter(name, params)


def reset() -> None:
    get_registry().reset()


__all__ = [
    "domain",
    "formatter",
    "get",
    "get_registry",
    "register",
    "register_package",
    "reset",
    "set",
    "text",
    "translate",
]
