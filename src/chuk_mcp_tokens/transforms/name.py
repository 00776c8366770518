"""
Name transforms - camelCase keys and kebab-case custom property names.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.transforms.base import NameRule

# A run of hyphens plus the character that follows it
_HYPHEN_RUN = re.compile(r"-+(.)")

# Words for kebab-casing: acronyms, capitalized words, lowercase runs, digits
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def kebab_to_camel(text: str) -> str:
    """
    Convert a hyphenated identifier to camelCase.

    Each '-x' becomes 'X'. Runs of hyphens collapse, so the function is
    idempotent: kebab_to_camel(kebab_to_camel(s)) == kebab_to_camel(s).

    Examples:
        >>> kebab_to_camel("font-size")
        'fontSize'
        >>> kebab_to_camel("fontSize")
        'fontSize'
    """
    return _HYPHEN_RUN.sub(lambda m: m.group(1).upper(), text)


def to_kebab(parts: Iterable[str]) -> str:
    """
    Join path parts into one kebab-case name.

    Parts are split on anything non-alphanumeric and on camelCase
    boundaries, then lower-cased.

    Examples:
        >>> to_kebab(["rolo", "fontSize", "md"])
        'rolo-font-size-md'
        >>> to_kebab(["color attendee", "bg"])
        'color-attendee-bg'
    """
    words: list[str] = []
    for part in parts:
        words.extend(w.lower() for w in _WORD.findall(part))
    return "-".join(words)


class KebabNameRule(NameRule):
    """CSS custom property names: prefix plus path, kebab-cased."""

    name = "name/kebab"

    def __init__(self, prefix: str | None = None):
        self.prefix = prefix or ""

    def apply(self, token: Token) -> str:
        parts = [self.prefix, *token.path] if self.prefix else list(token.path)
        return to_kebab(parts)


class CamelNameRule(NameRule):
    """camelCase names, used for nested JSON output."""

    name = "name/camel"

    def __init__(self, prefix: str | None = None):
        self.prefix = prefix or ""

    def apply(self, token: Token) -> str:
        base = to_kebab([self.prefix, *token.path] if self.prefix else token.path)
        return kebab_to_camel(base)
