"""
Reference resolver - flattens token sets and resolves aliases.

Token sets are merged in load order. A path defined in a later set
overrides the earlier definition in place, so each path appears once and
keeps the position where it was first seen.

Aliases use '{group.path}' syntax. A value that is exactly one alias takes
the referenced value whatever its shape; aliases embedded in a longer
string are substituted as text ('{spacing.base}*2'). The unresolved text
is kept on each token as original_value.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tokens.models.token import Token, TokenSet
from chuk_mcp_tokens.models.value import format_scalar, parse_value

logger = logging.getLogger(__name__)

_ALIAS = re.compile(r"\{([^{}]+)\}")
_WHOLE_ALIAS = re.compile(r"^\{([^{}]+)\}$")

VALUE_KEYS = ("value", "$value")
TYPE_KEYS = ("type", "$type")
DESCRIPTION_KEYS = ("description", "$description")


@dataclass
class _Entry:
    """A raw token definition before resolution."""

    path: tuple[str, ...]
    raw: Any
    type: str | None
    description: str | None
    file_path: str
    token_set: str


def _first(node: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in node:
            return node[key]
    return None


def _is_token(node: Any) -> bool:
    return isinstance(node, dict) and any(key in node for key in VALUE_KEYS)


def _reference_key(expression: str) -> str:
    """'color.base.value' and 'color.base' refer to the same token."""
    expression = expression.strip()
    if expression.endswith(".value"):
        return expression[: -len(".value")]
    return expression


class ReferenceResolver:
    """
    Builds the flat, alias-resolved token list for a set of token sets.
    """

    def __init__(self, token_sets: list[TokenSet]):
        """
        Initialize the resolver.

        Args:
            token_sets: Token sets in load order (later sets win)
        """
        self.token_sets = token_sets
        self._entries: dict[str, _Entry] = {}
        self._resolved: dict[str, Any] = {}
        self._merge()

    def _merge(self) -> None:
        for token_set in self.token_sets:
            self._collect(token_set.tree, (), token_set)

    def _collect(self, node: dict[str, Any], prefix: tuple[str, ...], token_set: TokenSet) -> None:
        for key, child in node.items():
            if key.startswith("$") or not isinstance(child, dict):
                continue
            path = (*prefix, key)
            if _is_token(child):
                description = _first(child, DESCRIPTION_KEYS)
                self._entries[".".join(path)] = _Entry(
                    path=path,
                    raw=_first(child, VALUE_KEYS),
                    type=_first(child, TYPE_KEYS),
                    description=str(description) if description is not None else None,
                    file_path=token_set.file_path,
                    token_set=token_set.name,
                )
            else:
                self._collect(child, path, token_set)

    def resolve(self) -> list[Token]:
        """
        Resolve every token.

        Returns:
            Tokens in first-encounter order with aliases resolved
        """
        tokens: list[Token] = []
        for key, entry in self._entries.items():
            resolved = self._resolve_key(key, ())
            tokens.append(
                Token(
                    path=entry.path,
                    type=entry.type,
                    value=parse_value(resolved, entry.type),
                    original_value=copy.deepcopy(entry.raw),
                    description=entry.description,
                    file_path=entry.file_path,
                    token_set=entry.token_set,
                )
            )
        return tokens

    def _resolve_key(self, key: str, chain: tuple[str, ...]) -> Any:
        if key in self._resolved:
            return self._resolved[key]
        resolved = self._resolve_raw(self._entries[key].raw, (*chain, key))
        self._resolved[key] = resolved
        return resolved

    def _lookup(self, expression: str, chain: tuple[str, ...]) -> tuple[bool, Any]:
        key = _reference_key(expression)
        if key not in self._entries:
            logger.warning(f"Unresolved reference {{{expression}}} in {chain[-1]}")
            return False, None
        if key in chain:
            logger.warning(f"Circular reference {' -> '.join((*chain, key))}")
            return False, None
        return True, self._resolve_key(key, chain)

    def _resolve_raw(self, raw: Any, chain: tuple[str, ...]) -> Any:
        if isinstance(raw, dict):
            return {k: self._resolve_raw(v, chain) for k, v in raw.items()}
        if isinstance(raw, list):
            return [self._resolve_raw(item, chain) for item in raw]
        if not isinstance(raw, str):
            return raw

        whole = _WHOLE_ALIAS.match(raw)
        if whole:
            found, value = self._lookup(whole.group(1), chain)
            return copy.deepcopy(value) if found else raw

        def substitute(match: re.Match[str]) -> str:
            found, value = self._lookup(match.group(1), chain)
            if not found:
                return match.group(0)
            if isinstance(value, dict | list):
                return json.dumps(value)
            return format_scalar(value)

        return _ALIAS.sub(substitute, raw)


def build_dictionary(token_sets: list[TokenSet]) -> list[Token]:
    """Merge token sets and resolve aliases."""
    return ReferenceResolver(token_sets).resolve()
