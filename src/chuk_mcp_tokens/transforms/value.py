"""
Value transforms - the fixed set of rules that reshape token values.

Rules run in the order they are listed. Each token type is shaped by at
most one composite rule (typography or box shadow); the formula and
percent rules apply to plain strings independently of type.
"""

from __future__ import annotations

import math
import re

from chuk_mcp_tokens.constants import TYPOGRAPHY_FONT_WEIGHT, RoundingMode, TokenType
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.models.value import (
    Composite,
    Scalar,
    Shadow,
    ShadowList,
    ShadowSpec,
    TokenValue,
    Typography,
    format_number,
    format_scalar,
)
from chuk_mcp_tokens.transforms.base import ValueRule

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_MILLISECONDS = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:ms)?\s*$")
_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_COLOR = re.compile(
    r"^rgba?\(\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)\s*,\s*(\d+(?:\.\d+)?)\s*"
    r"(?:,\s*(\d*\.?\d+)\s*)?\)$"
)


def strip_non_numeric(raw: object) -> str:
    """
    Keep only digits, '.' and '-'. Falsy or fully stripped input gives '0'.

    Examples:
        >>> strip_non_numeric("4px")
        '4'
        >>> strip_non_numeric(None)
        '0'
    """
    if not raw:
        return "0"
    return _NON_NUMERIC.sub("", str(raw)) or "0"


def to_number(raw: object) -> float:
    """Numeric value of an operand; anything unparsable counts as zero."""
    try:
        return float(strip_non_numeric(raw))
    except ValueError:
        return 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_tenth(value: float, mode: RoundingMode = RoundingMode.DIRECT) -> float:
    """Round to one decimal place using the given strategy."""
    if mode == RoundingMode.TWO_STEP:
        return round_half_up(round_half_up(value * 100) / 10) / 10
    return round_half_up(value * 10) / 10


def _string_value(token: Token) -> str | None:
    if isinstance(token.value, Scalar):
        return token.value.text
    return None


class FormulaRule(ValueRule):
    """Evaluates 'A*B' multiplications into pixel values ('2*8' -> '16px')."""

    name = "value/formula"

    def __init__(self, rounding: RoundingMode = RoundingMode.DIRECT):
        self.rounding = rounding

    def matches(self, token: Token) -> bool:
        text = _string_value(token)
        return text is not None and "*" in text

    def apply(self, token: Token) -> TokenValue | None:
        operands = (_string_value(token) or "").split("*")
        a, b = to_number(operands[0]), to_number(operands[1])
        return Scalar(raw=f"{format_number(round_tenth(a * b, self.rounding))}px")


class PercentRule(ValueRule):
    """
    Percent values pass through, except percentage line heights.

    A lineHeights token with a percent value is replaced by its
    description, which carries a hand-written override.
    """

    name = "value/percent"

    def matches(self, token: Token) -> bool:
        text = _string_value(token)
        return text is not None and "%" in text

    def apply(self, token: Token) -> TokenValue | None:
        if token.type == TokenType.LINE_HEIGHTS.value:
            if token.description is None:
                return None
            return Scalar(raw=token.description)
        return token.value


class TypographyRule(ValueRule):
    """Typography composites become the CSS font shorthand."""

    name = "value/typography"

    def matches(self, token: Token) -> bool:
        return token.type == TokenType.TYPOGRAPHY.value and isinstance(
            token.value, Typography | Composite
        )

    def apply(self, token: Token) -> TokenValue | None:
        if not isinstance(token.value, Typography):
            return None
        spec = token.value.spec
        if not (spec.font_size and spec.line_height and spec.font_family):
            return None
        size = format_scalar(spec.font_size)
        line_height = format_scalar(spec.line_height)
        return Scalar(raw=f"{TYPOGRAPHY_FONT_WEIGHT} {size}/{line_height} {spec.font_family}")


def format_shadow(spec: ShadowSpec) -> str:
    """'<x>px <y>px <blur>px <spread>px <color>' with spread sanitized."""
    x, y, blur = (format_scalar(v) for v in (spec.x, spec.y, spec.blur))
    return f"{x}px {y}px {blur}px {strip_non_numeric(spec.spread)}px {spec.color}"


class BoxShadowRule(ValueRule):
    """
    Box shadows become a CSS box-shadow value.

    Stacked shadows are joined with ', '. With inset=True the whole result
    gets a single 'inset ' prefix.
    """

    name = "value/box-shadow"

    def __init__(self, inset: bool = False):
        self.inset = inset

    def matches(self, token: Token) -> bool:
        return token.type == TokenType.BOX_SHADOW.value

    def apply(self, token: Token) -> TokenValue | None:
        value = token.value
        if isinstance(value, Shadow):
            specs = [value.spec]
        elif isinstance(value, ShadowList):
            specs = list(value.specs)
        elif isinstance(value, Composite):
            return None
        else:
            if self.inset and value is not None:
                return Scalar(raw=f"inset {value.render()}")
            return value

        if not specs or not all(spec.is_complete() for spec in specs):
            return None

        rendered = ", ".join(format_shadow(spec) for spec in specs)
        if self.inset:
            rendered = f"inset {rendered}"
        return Scalar(raw=rendered)


class TimeSecondsRule(ValueRule):
    """Millisecond durations become seconds ('200' -> '0.20s')."""

    name = "value/time-seconds"

    def matches(self, token: Token) -> bool:
        if token.type != TokenType.TIME.value or not isinstance(token.value, Scalar):
            return False
        raw = token.value.raw
        if isinstance(raw, bool):
            return False
        if isinstance(raw, int | float):
            return True
        return bool(_MILLISECONDS.match(raw))

    def apply(self, token: Token) -> TokenValue | None:
        assert isinstance(token.value, Scalar)
        raw = token.value.raw
        if isinstance(raw, str):
            match = _MILLISECONDS.match(raw)
            milliseconds = float(match.group(1)) if match else 0.0
        else:
            milliseconds = float(raw)
        return Scalar(raw=f"{milliseconds / 1000:.2f}s")


def parse_color(text: str) -> tuple[int, int, int, float] | None:
    """
    Parse hex, rgb() and rgba() colors into (r, g, b, alpha).

    Returns None for anything else (named colors, hsl, var() references).
    """
    text = text.strip()
    if text.lower() == "transparent":
        return 0, 0, 0, 0.0

    match = _HEX_COLOR.match(text)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return r, g, b, alpha

    match = _RGB_COLOR.match(text)
    if match:
        r, g, b = (min(255, round_half_up(float(v))) for v in match.group(1, 2, 3))
        alpha = min(1.0, float(match.group(4))) if match.group(4) else 1.0
        return r, g, b, alpha

    return None


def format_color(r: int, g: int, b: int, alpha: float = 1.0) -> str:
    """
    Opaque colors as lower-case '#rrggbb', others as 'rgba(r, g, b, a)'.

    Alpha is rounded to two decimal places.

    Examples:
        >>> format_color(0, 0, 0, 26 / 255)
        'rgba(0, 0, 0, 0.1)'
    """
    if alpha >= 1:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r}, {g}, {b}, {format_number(round_half_up(alpha * 100) / 100)})"


class ColorCssRule(ValueRule):
    """
    Normalizes color tokens for CSS.

    Hex with an alpha channel becomes rgba(); opaque colors become six-digit
    hex. Values that are not hex or rgb() pass through unchanged.
    """

    name = "value/color-css"

    def matches(self, token: Token) -> bool:
        return token.type == TokenType.COLOR.value and _string_value(token) is not None

    def apply(self, token: Token) -> TokenValue | None:
        color = parse_color(_string_value(token) or "")
        if color is None:
            return token.value
        return Scalar(raw=format_color(*color))


def default_value_rules(
    inset: bool = False,
    rounding: RoundingMode = RoundingMode.DIRECT,
    css_colors: bool = False,
) -> list[ValueRule]:
    """
    The standard ordered value rule list.

    Args:
        inset: Prefix box shadows with 'inset '
        rounding: Rounding strategy for formula values
        css_colors: Append ColorCssRule (CSS output only)

    Returns:
        Rules in application order
    """
    rules: list[ValueRule] = [
        FormulaRule(rounding=rounding),
        PercentRule(),
        TypographyRule(),
        BoxShadowRule(inset=inset),
        TimeSecondsRule(),
    ]
    if css_colors:
        rules.append(ColorCssRule())
    return rules
