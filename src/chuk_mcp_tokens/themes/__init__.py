"""
Themes - token set membership per theme.
"""

from chuk_mcp_tokens.themes.resolver import ThemeMembershipResolver

__all__ = ["ThemeMembershipResolver"]
