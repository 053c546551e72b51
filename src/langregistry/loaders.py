"""Catalogue discovery and parsing for JSON and YAML translation files."""

from __future__ import annotations

import json
import logging
import os
from importlib.resources.abc import Traversable
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union

import yaml
from pydantic import ValidationError

from .formatters import FormatterTable, UnknownFormatterError
from .schema import CatalogueDocument, CatalogueError, FormatterReference
from .templates import StaticTemplate, Template

_LOGGER = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".json", ".yaml", ".yml")

Locator = Union[str, "os.PathLike[str]", Traversable]
TranslationTable = Mapping[str, Template]

EMPTY_TABLE: TranslationTable = MappingProxyType({})


def _candidate(locator: Locator, suffix: str, extension: str) -> Traversable | None:
    if isinstance(locator, (str, os.PathLike)):
        return Path(f"{os.fspath(locator)}{suffix}{extension}")

    # packaged directories cannot grow an extension, so they need a remainder
    parts = [part for part in suffix.split("/") if part]
    if not parts:
        return None
    parts[-1] = f"{parts[-1]}{extension}"
    return locator.joinpath(*parts)


def _parse(resource: Traversable) -> Any:
    with resource.open("r", encoding="utf-8") as handle:
        if resource.name.endswith(".json"):
            try:
                return json.load(handle)
            except json.JSONDecodeError as error:
                raise CatalogueError(f"Invalid JSON in {resource}: {error}") from error
        try:
            # source texts such as "Yes" or "Off" must stay strings, not YAML 1.1 booleans
            return yaml.load(handle, Loader=yaml.BaseLoader)
        except yaml.YAMLError as error:
            raise CatalogueError(f"Invalid YAML in {resource}: {error}") from error


class CatalogueLoader:
    """Locate and parse catalogue resources into translation tables."""

    def __init__(
        self,
        formatters: FormatterTable | None = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.formatters = formatters if formatters is not None else FormatterTable()
        self.extensions = tuple(extensions)

    def locate(self, locator: Locator, suffix: str) -> Traversable | None:
        """Return the first existing ``locator + suffix + extension`` resource."""

        for extension in self.extensions:
            candidate = _candidate(locator, suffix, extension)
            if candidate is not None and candidate.is_file():
                return candidate
        return None

    def load(self, resource: Traversable) -> TranslationTable:
        """Parse ``resource`` and resolve every entry to a template."""

        payload = _parse(resource)
        if payload is None:
            return EMPTY_TABLE
        if not isinstance(payload, dict):
            raise CatalogueError(f"Catalogue {resource} must define a mapping at the top level")

        try:
            document = CatalogueDocument.model_validate(payload)
        except ValidationError as error:
            raise CatalogueError(f"Catalogue validation failed for {resource}: {error}") from error

        table: dict[str, Template] = {}
        for text, entry in document.root.items():
            if isinstance(entry, FormatterReference):
                try:
                    table[text] = self.formatters.get(entry.formatter)
                except UnknownFormatterError as error:
                    raise CatalogueError(
                        f"Catalogue {resource} references unknown formatter '{entry.formatter}'"
                    ) from error
            else:
                table[text] = StaticTemplate(entry)

        _LOGGER.debug("Loaded %d translations from %s", len(table), resource)
        return MappingProxyType(table)


__all__ = [
    "CatalogueLoader",
    "DEFAULT_EXTENSIONS",
    "EMPTY_TABLE",
    "Locator",
    "TranslationTable",
]
