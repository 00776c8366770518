"""
Token value models - a tagged union over the shapes a token value can take.

Raw token JSON is duck-typed: a value may be a string, a number, an object
or a list of objects depending on the token type. parse_value() turns that
into one of the variants below so transforms can match on the tag instead
of probing the shape at runtime.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chuk_mcp_tokens.constants import TokenType

logger = logging.getLogger(__name__)

ScalarRaw = str | int | float | bool

SHADOW_KEYS = frozenset({"x", "y", "blur", "spread"})
TYPOGRAPHY_KEYS = frozenset({"fontFamily", "fontSize", "lineHeight", "fontWeight"})


def format_number(value: int | float) -> str:
    """Format a number the way it should appear in CSS (16.0 -> '16')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_scalar(raw: Any) -> str:
    """Render a scalar as CSS text."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, int | float):
        return format_number(raw)
    return str(raw)


def render_raw(raw: Any) -> str:
    """
    Render any JSON value as CSS text.

    Lists join their items with ',' and objects serialize as JSON.

    Examples:
        >>> render_raw(["Inter", "Arial"])
        'Inter,Arial'
    """
    if raw is None:
        return ""
    if isinstance(raw, list | tuple):
        return ",".join(render_raw(item) for item in raw)
    if isinstance(raw, dict):
        return json.dumps(raw)
    return format_scalar(raw)


class ShadowSpec(BaseModel):
    """One shadow layer as authored in the token file."""

    x: ScalarRaw | None = None
    y: ScalarRaw | None = None
    blur: ScalarRaw | None = None
    spread: ScalarRaw | None = None
    color: str | None = None
    shadow_type: str | None = Field(default=None, alias="type")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def is_complete(self) -> bool:
        """Spread may be omitted; everything else is required."""
        return all(v is not None for v in (self.x, self.y, self.blur, self.color))


class TypographySpec(BaseModel):
    """Composite typography value."""

    font_family: str | None = Field(default=None, alias="fontFamily")
    font_size: ScalarRaw | None = Field(default=None, alias="fontSize")
    line_height: ScalarRaw | None = Field(default=None, alias="lineHeight")
    font_weight: ScalarRaw | None = Field(default=None, alias="fontWeight")
    letter_spacing: ScalarRaw | None = Field(default=None, alias="letterSpacing")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Scalar(BaseModel):
    """A plain string or number."""

    kind: Literal["scalar"] = "scalar"
    raw: ScalarRaw

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str | None:
        """The raw value if it is a string."""
        return self.raw if isinstance(self.raw, str) else None

    def render(self) -> str:
        return format_scalar(self.raw)

    def to_json(self) -> Any:
        return self.raw


class Shadow(BaseModel):
    """A single box shadow."""

    kind: Literal["shadow"] = "shadow"
    spec: ShadowSpec

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return render_raw(self.to_json())

    def to_json(self) -> Any:
        return self.spec.model_dump(by_alias=True, exclude_none=True)


class ShadowList(BaseModel):
    """Stacked box shadows."""

    kind: Literal["shadow_list"] = "shadow_list"
    specs: list[ShadowSpec]

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return render_raw(self.to_json())

    def to_json(self) -> Any:
        return [s.model_dump(by_alias=True, exclude_none=True) for s in self.specs]


class Typography(BaseModel):
    """A typography composite."""

    kind: Literal["typography"] = "typography"
    spec: TypographySpec

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return render_raw(self.to_json())

    def to_json(self) -> Any:
        return self.spec.model_dump(by_alias=True, exclude_none=True)


class Composite(BaseModel):
    """Any other structured value, kept as-is."""

    kind: Literal["composite"] = "composite"
    data: Any

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return render_raw(self.data)

    def to_json(self) -> Any:
        return self.data


TokenValue = Annotated[
    Scalar | Shadow | ShadowList | Typography | Composite,
    Field(discriminator="kind"),
]


def _is_shadow_dict(raw: Any) -> bool:
    return isinstance(raw, dict) and bool(SHADOW_KEYS & raw.keys())


def parse_value(raw: Any, token_type: str | None = None) -> TokenValue | None:
    """
    Build a tagged value from raw token JSON.

    Args:
        raw: Alias-resolved value from the token file
        token_type: The token's type tag, used for incomplete composites

    Returns:
        The tagged value, or None when raw is None. A composite whose
        fields have the wrong JSON types comes back as Composite, which
        the typography and box shadow rules drop.
    """
    if raw is None:
        return None

    try:
        return _parse_structured(raw, token_type)
    except ValidationError as e:
        kind = token_type or "composite"
        logger.warning(f"Malformed {kind} value ({e.error_count()} invalid fields)")
        return Composite(data=raw)


def _parse_structured(raw: Any, token_type: str | None) -> TokenValue:
    if isinstance(raw, list):
        if token_type == TokenType.BOX_SHADOW.value or (
            raw and all(_is_shadow_dict(item) for item in raw)
        ):
            return ShadowList(
                specs=[ShadowSpec.model_validate(item) for item in raw if isinstance(item, dict)]
            )
        return Composite(data=raw)

    if isinstance(raw, dict):
        if token_type == TokenType.TYPOGRAPHY.value or TYPOGRAPHY_KEYS & raw.keys():
            return Typography(spec=TypographySpec.model_validate(raw))
        if token_type == TokenType.BOX_SHADOW.value or _is_shadow_dict(raw):
            return Shadow(spec=ShadowSpec.model_validate(raw))
        return Composite(data=raw)

    return Scalar(raw=raw)
