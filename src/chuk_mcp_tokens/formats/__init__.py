"""
Output formats - CSS custom properties and nested JSON.
"""

from chuk_mcp_tokens.formats.css import CssFormatter, make_variable
from chuk_mcp_tokens.formats.json_nested import format_nested_json, render_nested_json

__all__ = [
    "CssFormatter",
    "format_nested_json",
    "make_variable",
    "render_nested_json",
]
