"""
CHUK Tokens - a design-token build pipeline.

Reads token set JSON files, applies value and name transforms, splits
token sets into themes and writes per-theme CSS custom properties plus a
combined JSON document.
"""

from chuk_mcp_tokens.build import BuildOrchestrator, BuildReport, build_themes
from chuk_mcp_tokens.config import load_config
from chuk_mcp_tokens.models import BuildConfig, Theme, ThemeDefinition, Token

__version__ = "0.1.0"

__all__ = [
    "BuildConfig",
    "BuildOrchestrator",
    "BuildReport",
    "Theme",
    "ThemeDefinition",
    "Token",
    "build_themes",
    "load_config",
]
