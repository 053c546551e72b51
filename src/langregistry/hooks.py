"""Error hooks for surfacing missing catalogues and translations."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:  # pragma: no cover - only for static type checkers
    from .registry import ErrorHook, LanguageRegistry

_LOGGER = logging.getLogger("langregistry")


class ErrorCollector:
    """Hook that records every reported message.

    Used as a context manager with a registry, it installs itself as the
    registry's ``on_error`` hook and restores the previous hook on exit::

        with ErrorCollector(registry) as errors:
            registry.text("acme/widgets", "Save")
        assert errors.messages == [...]
    """

    def __init__(self, registry: LanguageRegistry | None = None) -> None:
        self.messages: list[str] = []
        self._registry = registry
        self._previous: ErrorHook | None = None

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __enter__(self) -> ErrorCollector:
        if self._registry is not None:
            self._previous = self._registry.on_error
            self._registry.on_error = self
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._registry is not None:
            self._registry.on_error = self._previous
            self._previous = None


def log_errors(
    level: int = logging.WARNING,
    logger: logging.Logger | None = None,
) -> Callable[[str], None]:
    """Return a hook forwarding messages to ``logger`` at ``level``."""

    target = logger or _LOGGER

    def hook(message: str) -> None:
        target.log(level, message)

    return hook


__all__ = ["ErrorCollector", "log_errors"]
