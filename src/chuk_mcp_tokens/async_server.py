#!/usr/bin/env python3
"""
Async Design Token MCP Server using chuk-mcp-server

This server exposes the design-token build pipeline as MCP tools:
- Listing themes and the token sets each one includes
- Building per-theme CSS custom properties and the combined JSON document
- Exporting the active build configuration
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.build import BuildOrchestrator
from chuk_mcp_tokens.config import DEFAULT_CONFIG_FILE, load_config
from chuk_mcp_tokens.tools import register_build_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_PATH = Path(os.environ.get("TOKENS_CONFIG", BASE_PATH / DEFAULT_CONFIG_FILE))

config = load_config(CONFIG_PATH)
orchestrator = BuildOrchestrator(config, root=BASE_PATH)

# Register all tools
build_tools = register_build_tools(mcp, orchestrator)

# Export tool functions for direct access
tokens_list_themes = build_tools["tokens_list_themes"]
tokens_describe_theme = build_tools["tokens_describe_theme"]
tokens_build = build_tools["tokens_build"]
tokens_export_config = build_tools["tokens_export_config"]

logger.info("CHUK Tokens MCP Server initialized")
logger.info(f"  Config: {CONFIG_PATH}")
logger.info(f"  Tokens dir: {orchestrator.tokens_dir}")
logger.info(f"  CSS dir: {orchestrator.css_dir}")
logger.info(f"  JSON dir: {orchestrator.json_dir}")
