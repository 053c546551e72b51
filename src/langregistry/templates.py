"""Template variants resolved from translation catalogues."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union


@dataclass(frozen=True)
class StaticTemplate:
    """Literal translation text with ``{token}`` placeholders."""

    text: str

    def render(self, tokens: Mapping[str, Any] | None = None) -> str:
        if not tokens:
            return self.text
        return substitute(self.text, tokens)


@dataclass(frozen=True)
class FormatterTemplate:
    """Named formatter invoked positionally with its declared parameters."""

    name: str
    params: tuple[str, ...]
    function: Callable[..., str]

    def render(self, tokens: Mapping[str, Any] | None = None) -> str:
        """Call the formatter, substituting ``{param}`` for absent tokens."""

        supplied = tokens or {}
        args = [
            supplied[param] if param in supplied else f"{{{param}}}"
            for param in self.params
        ]
        return self.function(*args)


Template = Union[StaticTemplate, FormatterTemplate]


def substitute(template: str, tokens: Mapping[str, Any]) -> str:
    """Replace every ``{name}`` in ``template`` with its token value in one pass.

    Replacements are never rescanned, so a token value that itself looks like a
    placeholder is emitted verbatim. Placeholders without a matching token are
    left untouched.
    """

    if not tokens:
        return template

    replacements = {f"{{{key}}}": str(value) for key, value in tokens.items()}
    # longest first, so overlapping placeholders resolve like a translation table
    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda match: replacements[match.group(0)], template)


__all__ = ["FormatterTemplate", "StaticTemplate", "Template", "substitute"]
