"""
MCP tool implementations.

- build - theme listing, theme details, builds and config export
"""

from chuk_mcp_tokens.tools.build import register_build_tools

__all__ = ["register_build_tools"]
