"""
Build tools - MCP tools for inspecting themes and running builds.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_tokens.build import BuildOrchestrator

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_build_tools(
    mcp: ChukMCPServer,
    orchestrator: BuildOrchestrator,
) -> dict[str, Any]:
    """
    Register token build tools with the MCP server.

    Args:
        mcp: The MCP server instance
        orchestrator: The build orchestrator

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_themes() -> str:
        """
        List configured themes.

        Returns each theme's selector, whether it is structural and how
        many token sets it includes.

        Returns:
            JSON string with list of theme summaries

        Example:
            tokens_list_themes()
        """
        try:
            themes = orchestrator.resolve_themes()

            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {
                            "name": t.name,
                            "selector": t.css_selector,
                            "structural": t.structural,
                            "token_set_count": len(t.token_sets),
                        }
                        for t in themes
                    ],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_themes"] = tokens_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_theme(name: str) -> str:
        """
        Get the token sets and outputs of a theme.

        Args:
            name: Theme name

        Returns:
            JSON string with theme details

        Example:
            tokens_describe_theme(name="dark")
        """
        try:
            theme = next((t for t in orchestrator.resolve_themes() if t.name == name), None)
            if theme is None:
                return json.dumps({"status": "error", "message": f"Theme not found: {name}"})

            definition = orchestrator.config.get_theme(name)
            return json.dumps(
                {
                    "status": "success",
                    "theme": {
                        "name": theme.name,
                        "selector": theme.css_selector,
                        "structural": theme.structural,
                        "token_sets": theme.token_sets,
                        "excluded_sets": definition.excluded_sets if definition else [],
                        "css_file": theme.css_file,
                        "json_file": theme.json_file,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe theme")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_theme"] = tokens_describe_theme

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build() -> str:
        """
        Build every theme and merge the JSON output.

        Clears the CSS output directory, writes one CSS file per theme and
        a combined JSON document.

        Returns:
            JSON string with the generated files and any failures

        Example:
            tokens_build()
        """
        try:
            report = orchestrator.build()
            merge = report.merge

            return json.dumps(
                {
                    "status": "success" if report.success else "partial",
                    "css_files": [str(p) for p in report.css_files],
                    "combined": str(merge.path) if merge and merge.path else None,
                    "failed_themes": report.failed_themes,
                    "merge_error": merge.error if merge else None,
                }
            )
        except Exception as e:
            logger.exception("Failed to build tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_export_config() -> str:
        """
        Export the active build configuration as YAML.

        Returns:
            JSON string containing the YAML content

        Example:
            tokens_export_config()
        """
        try:
            data = orchestrator.config.model_dump(mode="json")
            yaml_content = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

            return json.dumps({"status": "success", "yaml": yaml_content})
        except Exception as e:
            logger.exception("Failed to export config")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_export_config"] = tokens_export_config

    return tools
