"""Environment settings and YAML domain manifests for registry setup."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

import yaml
from pydantic import ValidationError, field_validator

from .schema import ConfigurationError, DomainManifest, ImmutableModel

if TYPE_CHECKING:  # pragma: no cover - only for static type checkers
    from .registry import LanguageRegistry

ENV_DEFAULT_LANGUAGE = "LANGREGISTRY_DEFAULT_LANGUAGE"
ENV_MANIFEST = "LANGREGISTRY_MANIFEST"
ENV_LOG_MISSING = "LANGREGISTRY_LOG_MISSING"

_TRUTHY = {"1", "true", "yes", "on"}


class RegistrySettings(ImmutableModel):
    """Process configuration for building a :class:`LanguageRegistry`."""

    default_language: str | None = None
    manifest: Path | None = None
    log_missing: bool = False

    @field_validator("default_language")
    @classmethod
    def _strip_language(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RegistrySettings:
        """Read settings from ``LANGREGISTRY_*`` environment variables."""

        env = os.environ if environ is None else environ
        manifest = env.get(ENV_MANIFEST, "").strip()
        return cls(
            default_language=env.get(ENV_DEFAULT_LANGUAGE),
            manifest=Path(manifest) if manifest else None,
            log_missing=env.get(ENV_LOG_MISSING, "").strip().lower() in _TRUTHY,
        )


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ConfigurationError(f"Invalid YAML in manifest {path}: {error}") from error
    if not isinstance(data, dict):
        raise ConfigurationError("Manifest file must define a mapping at the top level")
    return data


def load_manifest(path: Path | str) -> DomainManifest:
    """Load and validate a domain manifest from disk."""

    manifest_path = Path(path)
    if not manifest_path.exists():
        raise ConfigurationError(f"Domain manifest not found: {manifest_path}")

    raw_manifest = _load_yaml(manifest_path)

    try:
        return DomainManifest.model_validate(raw_manifest)
    except ValidationError as error:
        raise ConfigurationError(f"Manifest validation failed: {error}") from error


def apply_manifest(
    registry: LanguageRegistry,
    manifest: DomainManifest,
    base_dir: Path | str | None = None,
) -> None:
    """Register every manifest domain; relative paths resolve from ``base_dir``."""

    root = Path(base_dir) if base_dir is not None else Path.cwd()

    for entry in manifest.domains:
        if entry.package is not None:
            registry.register_package(entry.name, entry.package, entry.directory)
            continue
        path = Path(entry.path)
        registry.register(entry.name, path if path.is_absolute() else root / path)

    if manifest.default_language:
        registry.default_language = manifest.default_language
        registry.set(manifest.default_language)


__all__ = [
    "ENV_DEFAULT_LANGUAGE",
    "ENV_LOG_MISSING",
    "ENV_MANIFEST",
    "RegistrySettings",
    "apply_manifest",
    "load_manifest",
]
