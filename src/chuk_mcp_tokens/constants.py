"""
Constants and enums for the token pipeline.

No magic strings - use enums for token types and build modes.
"""

from enum import Enum


class TokenType(str, Enum):
    """Token type tags that the transforms care about."""

    COLOR = "color"
    TYPOGRAPHY = "typography"
    BOX_SHADOW = "boxShadow"
    LINE_HEIGHTS = "lineHeights"
    SPACING = "spacing"
    SIZING = "sizing"
    TIME = "time"


class TransformKind(str, Enum):
    """What a transform rule rewrites."""

    VALUE = "value"
    NAME = "name"


class RoundingMode(str, Enum):
    """
    Rounding strategy for formula values.

    DIRECT rounds to the nearest tenth in one step. TWO_STEP rounds to the
    nearest hundredth first, which can differ on values like 0.149999.
    """

    DIRECT = "direct"
    TWO_STEP = "two_step"


class NameCase(str, Enum):
    """Naming convention for CSS custom properties."""

    KEBAB = "kebab"
    CAMEL = "camel"


# Default custom property prefix (--rolo-*)
DEFAULT_PREFIX = "rolo"

DEFAULT_SELECTOR = ":root"

METADATA_FILE = "$metadata.json"
COMBINED_FILE = "combined.json"

# Tag added to each per-theme document during the merge
FILE_TAG_KEY = "nameOfFile"

# Token sets whose aliases are kept as var() references in CSS
DEFAULT_REFERENCEABLE_SETS: tuple[str, ...] = (
    "semantics/color",
    "semantics/color attendee",
    "semantics/mutable",
    "semantics/shadow",
)

# Namespaces the structural (root) theme does not pick up
DEFAULT_FALLBACK_EXCLUDED_NAMESPACES: tuple[str, ...] = ("light", "dark")

TYPOGRAPHY_FONT_WEIGHT = "400"


class ErrorMessages:
    """Standardized error messages."""

    METADATA_NOT_FOUND = "Metadata file not found: {path}"
    METADATA_INVALID = "Metadata file is not valid JSON: {path}"
    TOKEN_SET_NOT_FOUND = "Token set '{name}' not found at {path}"
    TOKEN_SET_INVALID = "Token set '{name}' is not valid JSON: {path}"
    THEME_NOT_FOUND = "Theme '{name}' not found."
    CONFIG_INVALID = "Invalid build configuration in {path}: {reason}"
