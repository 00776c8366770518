"""
Transform rule interface.

A rule is a value with a matches/apply pair. Pipelines hold rules in an
ordered list and try each one in turn; nothing is looked up by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from chuk_mcp_tokens.constants import TransformKind
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.models.value import TokenValue


class TransformRule(ABC):
    """Base class for all transform rules."""

    kind: TransformKind
    name: str = "transform"

    @abstractmethod
    def matches(self, token: Token) -> bool:
        """Whether this rule applies to the token."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ValueRule(TransformRule):
    """Rewrites a token's value."""

    kind = TransformKind.VALUE

    @abstractmethod
    def apply(self, token: Token) -> TokenValue | None:
        """New value for the token. None drops the token from output."""


class NameRule(TransformRule):
    """Builds a token's output name."""

    kind = TransformKind.NAME

    def matches(self, token: Token) -> bool:
        return True

    @abstractmethod
    def apply(self, token: Token) -> str:
        """Output name for the token."""
