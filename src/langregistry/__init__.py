"""Runtime translation registry for hierarchical text domains."""

from .formatters import FormatterTable, UnknownFormatterError
from .hooks import ErrorCollector, log_errors
from .loaders import CatalogueLoader
from .registry import DEFAULT_LANGUAGE, DomainTranslator, LanguageRegistry
from .schema import CatalogueError, ConfigurationError
from .settings import RegistrySettings, apply_manifest, load_manifest
from .templates import FormatterTemplate, StaticTemplate
from .version import get_project_version

__version__ = get_project_version()

__all__ = [
    "CatalogueError",
    "CatalogueLoader",
    "ConfigurationError",
    "DEFAULT_LANGUAGE",
    "DomainTranslator",
    "ErrorCollector",
    "FormatterTable",
    "FormatterTemplate",
    "LanguageRegistry",
    "RegistrySettings",
    "StaticTemplate",
    "UnknownFormatterError",
    "__version__",
    "apply_manifest",
    "load_manifest",
    "log_errors",
]
