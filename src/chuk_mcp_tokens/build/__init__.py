"""
Build pipeline - per-theme CSS and JSON output plus the combined JSON.
"""

from chuk_mcp_tokens.build.merge import MergeResult, merge_theme_documents
from chuk_mcp_tokens.build.orchestrator import (
    BuildOrchestrator,
    BuildReport,
    ThemeBuildResult,
    build_themes,
)

__all__ = [
    "BuildOrchestrator",
    "BuildReport",
    "MergeResult",
    "ThemeBuildResult",
    "build_themes",
    "merge_theme_documents",
]
