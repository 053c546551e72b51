"""Translation registry resolving domains, languages and templates."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping, Sequence

from .formatters import FormatterTable
from .loaders import EMPTY_TABLE, CatalogueLoader, Locator, TranslationTable
from .templates import StaticTemplate

if TYPE_CHECKING:  # pragma: no cover - only for static type checkers
    from .settings import RegistrySettings

_LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

ErrorHook = Callable[[str], None]


@dataclass(frozen=True)
class DomainTranslator:
    """Callable bound to a domain and, optionally, a fixed language code."""

    registry: LanguageRegistry
    domain: str
    code: str | None = None

    def __call__(self, text: str, tokens: Mapping[str, Any] | None = None) -> str:
        # unbound translators follow the registry's active language per call
        code = self.code or self.registry.get()
        return self.registry.translate(code, self.domain, text, tokens)


class LanguageRegistry:
    """Maps translation domains to catalogues and renders translated text.

    Domain names are slash-delimited (``"vendor/package/sub"``). A registration
    for ``"vendor"`` serves every domain beneath it: requesting ``"vendor/package"``
    in Danish loads ``{locator}/package/da.json``. The longest registered prefix
    with an existing catalogue wins.

    Missing catalogues and missing entries never raise; the source text is used
    instead and the condition is reported to ``on_error`` when a hook is set.
    """

    def __init__(
        self,
        default_language: str = DEFAULT_LANGUAGE,
        *,
        loader: CatalogueLoader | None = None,
        formatters: FormatterTable | None = None,
        on_error: ErrorHook | None = None,
    ) -> None:
        self.default_language = default_language
        self.loader = loader if loader is not None else CatalogueLoader(formatters)
        self.on_error = on_error
        self._lock = threading.RLock()
        self._code = default_language
        self._paths: dict[str, Locator] = {}
        self._tables: dict[str, TranslationTable] = {}

    @classmethod
    def from_settings(
        cls,
        settings: RegistrySettings,
        formatters: FormatterTable | None = None,
    ) -> LanguageRegistry:
        """Build a registry from settings, applying the domain manifest if any."""

        from .hooks import log_errors
        from .settings import apply_manifest, load_manifest

        registry = cls(
            settings.default_language or DEFAULT_LANGUAGE,
            formatters=formatters,
            on_error=log_errors() if settings.log_missing else None,
        )
        if settings.manifest is not None:
            manifest_path = Path(settings.manifest)
            apply_manifest(registry, load_manifest(manifest_path), manifest_path.parent)
            if settings.default_language:
                registry.default_language = settings.default_language
                registry.set(settings.default_language)
        return registry

    @property
    def formatters(self) -> FormatterTable:
        return self.loader.formatters

    def formatter(
        self,
        name: str | None = None,
        params: Sequence[str] | None = None,
    ) -> Callable[[Callable[..., str]], Callable[..., str]]:
        """Register a formatter function catalogues can reference by name."""

        return self.formatters.formatter(name, params)

    def set(self, code: str) -> None:
        """Change the active language code."""

        self._code = code

    def get(self) -> str:
        """Return the active language code."""

        return self._code

    def register(self, domain: str, locator: Locator) -> None:
        """Associate ``domain`` with the base locator of its catalogues."""

        with self._lock:
            self._paths[domain] = locator

    def register_package(self, domain: str, package: str, directory: str = "lang") -> None:
        """Register catalogues shipped as package data inside ``package``."""

        root = resources.files(package)
        if directory:
            root = root.joinpath(directory)
        self.register(domain, root)

    def registrations(self) -> dict[str, Locator]:
        with self._lock:
            return dict(self._paths)

    def text(self, domain: str, text: str, tokens: Mapping[str, Any] | None = None) -> str:
        """Translate ``text`` in ``domain`` using the active language."""

        return self.translate(self._code, domain, text, tokens)

    def domain(self, domain: str, code: str | None = None) -> DomainTranslator:
        """Return a translator bound to ``domain`` (and ``code`` when given)."""

        return DomainTranslator(registry=self, domain=domain, code=code)

    def translate(
        self,
        code: str,
        domain: str,
        text: str,
        tokens: Mapping[str, Any] | None = None,
    ) -> str:
        """Translate ``text`` in ``domain`` for the explicit language ``code``."""

        name = f"{domain}/{code}"
        table = self._tables.get(name)
        if table is None:
            table = self.load(name)

        template = table.get(text)
        if template is None:
            self._report(f"missing translation of '{text}' for: {name}")
            template = StaticTemplate(text)

        return template.render(tokens)

    def load(self, name: str) -> TranslationTable:
        """Resolve and cache the table for ``name`` (``"{domain}/{code}"``)."""

        with self._lock:
            cached = self._tables.get(name)
            if cached is not None:
                return cached

            table = self._find_table(name)
            if table is None:
                self._tables[name] = EMPTY_TABLE
                self._report(f"no translation file found for: {name}")
                return EMPTY_TABLE

            self._tables[name] = table
            return table

    def _find_table(self, name: str) -> TranslationTable | None:
        segments = name.split("/")
        while segments:
            prefix = "/".join(segments)
            locator = self._paths.get(prefix)
            if locator is not None:
                resource = self.loader.locate(locator, name[len(prefix):])
                if resource is not None:
                    _LOGGER.debug("Resolved %s via domain %s: %s", name, prefix, resource)
                    return self.loader.load(resource)
                _LOGGER.debug("No catalogue for %s under registered domain %s", name, prefix)
            segments.pop()
        return None

    def reset(self) -> None:
        """Restore the default language and drop registrations and cached tables."""

        with self._lock:
            self._code = self.default_language
            self._paths.clear()
            self._tables.clear()

    def _report(self, message: str) -> None:
        if self.on_error is not None:
            self.on_error(message)


__all__ = ["DEFAULT_LANGUAGE", "DomainTranslator", "ErrorHook", "LanguageRegistry"]
