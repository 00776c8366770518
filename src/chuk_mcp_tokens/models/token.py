"""
Token models - a flattened design token with provenance.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.models.value import TokenValue


class Token(BaseModel):
    """
    A single design token after alias resolution.

    Tokens are frozen. Transforms return a copy with a new value or name;
    path and original_value never change after loading.
    """

    path: tuple[str, ...] = Field(..., description="Path segments, e.g. ('color', 'primary')")
    type: str | None = Field(default=None, description="Token type tag")
    value: TokenValue | None = Field(
        default=None,
        description="Resolved value; None means the token is dropped from output",
    )
    original_value: Any = Field(
        default=None,
        description="Value as authored, possibly an alias like '{color.base}'",
    )
    description: str | None = None
    file_path: str = Field(default="", description="Source file, e.g. 'tokens/light.json'")
    token_set: str = Field(default="", description="Token set the token came from")
    name: str = Field(default="", description="Output name set by the name transform")

    model_config = {"frozen": True}

    @property
    def dotted_path(self) -> str:
        """Path joined with dots, as used in alias expressions."""
        return ".".join(self.path)

    @property
    def is_dropped(self) -> bool:
        """True when a transform could not produce a value."""
        return self.value is None

    def with_value(self, value: TokenValue | None) -> Token:
        """Copy with a replaced value."""
        return self.model_copy(update={"value": value})

    def with_name(self, name: str) -> Token:
        """Copy with a replaced output name."""
        return self.model_copy(update={"name": name})


class TokenSet(BaseModel):
    """Tokens loaded from one source file."""

    name: str = Field(..., description="Set identifier, e.g. 'semantics/mutable'")
    file_path: str = ""
    tree: dict[str, Any] = Field(default_factory=dict, description="Raw nested token tree")

    model_config = {"frozen": True}
