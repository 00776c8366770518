"""
Pydantic models for the token pipeline.

This module provides:
- Token / TokenSet: flattened tokens with provenance
- TokenValue: tagged union of value shapes
- ThemeDefinition / Theme: declared and resolved themes
- BuildConfig: all build options
"""

from chuk_mcp_tokens.models.config import BuildConfig
from chuk_mcp_tokens.models.theme import Theme, ThemeDefinition
from chuk_mcp_tokens.models.token import Token, TokenSet
from chuk_mcp_tokens.models.value import (
    Composite,
    Scalar,
    Shadow,
    ShadowList,
    ShadowSpec,
    TokenValue,
    Typography,
    TypographySpec,
    parse_value,
)

__all__ = [
    "BuildConfig",
    "Composite",
    "Scalar",
    "Shadow",
    "ShadowList",
    "ShadowSpec",
    "Theme",
    "ThemeDefinition",
    "Token",
    "TokenSet",
    "TokenValue",
    "Typography",
    "TypographySpec",
    "parse_value",
]
