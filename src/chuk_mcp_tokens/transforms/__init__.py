"""
Transforms - value and name rules applied during a build.
"""

from chuk_mcp_tokens.transforms.base import NameRule, TransformRule, ValueRule
from chuk_mcp_tokens.transforms.name import (
    CamelNameRule,
    KebabNameRule,
    kebab_to_camel,
    to_kebab,
)
from chuk_mcp_tokens.transforms.pipeline import TransformPipeline
from chuk_mcp_tokens.transforms.value import (
    BoxShadowRule,
    ColorCssRule,
    FormulaRule,
    PercentRule,
    TimeSecondsRule,
    TypographyRule,
    default_value_rules,
    format_color,
    format_shadow,
    parse_color,
    round_tenth,
    strip_non_numeric,
)

__all__ = [
    "BoxShadowRule",
    "CamelNameRule",
    "ColorCssRule",
    "FormulaRule",
    "KebabNameRule",
    "NameRule",
    "PercentRule",
    "TimeSecondsRule",
    "TransformPipeline",
    "TransformRule",
    "TypographyRule",
    "ValueRule",
    "default_value_rules",
    "format_color",
    "format_shadow",
    "kebab_to_camel",
    "parse_color",
    "round_tenth",
    "strip_non_numeric",
    "to_kebab",
]
