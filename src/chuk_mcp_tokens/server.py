#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

Supports the MCP transports (stdio, http) and a one-shot 'build' mode
that runs the token build and exits.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def run_build(config_path: Path | None) -> int:
    """Build every theme once. Returns a process exit code."""
    from chuk_mcp_tokens.build import BuildOrchestrator
    from chuk_mcp_tokens.config import load_config
    from chuk_mcp_tokens.errors import TokenBuildError

    try:
        orchestrator = BuildOrchestrator(load_config(config_path))
        report = orchestrator.build()
    except TokenBuildError as e:
        logger.error(str(e))
        return 1

    for name, error in report.failed_themes.items():
        logger.error(f"Theme '{name}' failed: {error}")
    return 0 if report.success else 1


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "build"],
        default="stdio",
        help="Transport mode, or 'build' to run one build (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Build configuration YAML (only for build)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.transport == "build":
        sys.exit(run_build(args.config))

    # Import after argument parsing to avoid issues
    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
