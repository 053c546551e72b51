"""Pydantic models describing catalogue documents and domain manifests."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator


class CatalogueError(ValueError):
    """Raised when a catalogue resource exists but cannot be used."""


class ConfigurationError(ValueError):
    """Raised when registry configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class FormatterReference(ImmutableModel):
    """Catalogue entry delegating to a named formatter function."""

    formatter: str = Field(min_length=1)


class CatalogueDocument(RootModel[dict[str, Union[str, FormatterReference]]]):
    """Top-level mapping of source text to a translation or formatter reference."""


class DomainEntry(ImmutableModel):
    """Single domain registration declared in a manifest."""

    name: str
    path: str | None = None
    package: str | None = None
    directory: str = "lang"

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        name = value.strip().strip("/")
        if not name:
            raise ConfigurationError("Domain names must not be empty")
        return name

    @model_validator(mode="after")
    def _validate_locator(self) -> DomainEntry:
        if (self.path is None) == (self.package is None):
            raise ConfigurationError(
                f"Domain '{self.name}' must declare exactly one of 'path' or 'package'"
            )
        return self


class DomainManifest(ImmutableModel):
    """Collection of domain registrations loaded from YAML."""

    default_language: str | None = None
    domains: tuple[DomainEntry, ...] = ()

    @model_validator(mode="after")
    def _validate_unique_domains(self) -> DomainManifest:
        names = [entry.name for entry in self.domains]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Duplicate domain registrations in manifest: {', '.join(duplicates)}"
            )
        return self


__all__ = [
    "CatalogueDocument",
    "CatalogueError",
    "ConfigurationError",
    "DomainEntry",
    "DomainManifest",
    "FormatterReference",
    "ImmutableModel",
]
