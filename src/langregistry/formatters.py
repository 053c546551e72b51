"""Lookup table of named formatter functions referenced by catalogues."""

from __future__ import annotations

import inspect
from typing import Callable, Iterable, Sequence

from .templates import FormatterTemplate

_NAMED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class UnknownFormatterError(KeyError):
    """Raised when a catalogue references a formatter that was never registered."""


def _declared_params(function: Callable[..., str]) -> tuple[str, ...]:
    signature = inspect.signature(function)
    return tuple(
        name
        for name, parameter in signature.parameters.items()
        if parameter.kind in _NAMED_KINDS
    )


class FormatterTable:
    """Registry of formatter templates keyed by the name catalogues use."""

    def __init__(self) -> None:
        self._templates: dict[str, FormatterTemplate] = {}

    def add(
        self,
        name: str,
        function: Callable[..., str],
        params: Sequence[str] | None = None,
    ) -> FormatterTemplate:
        """Register ``function`` under ``name``.

        When ``params`` is omitted the parameter names are read from the
        function signature once, here, and stored with the template.
        """

        declared = tuple(params) if params is not None else _declared_params(function)
        template = FormatterTemplate(name=name, params=declared, function=function)
        self._templates[name] = template
        return template

    def formatter(
        self,
        name: str | None = None,
        params: Sequence[str] | None = None,
    ) -> Callable[[Callable[..., str]], Callable[..., str]]:
        """Decorator form of :meth:`add`."""

        def decorator(function: Callable[..., str]) -> Callable[..., str]:
            self.add(name or function.__name__, function, params)
            return function

        return decorator

    def get(self, name: str) -> FormatterTemplate:
        try:
            return self._templates[name]
        except KeyError as exc:
            raise UnknownFormatterError(name) from exc

    def names(self) -> Iterable[str]:
        return tuple(sorted(self._templates))

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)


__all__ = ["FormatterTable", "UnknownFormatterError"]
