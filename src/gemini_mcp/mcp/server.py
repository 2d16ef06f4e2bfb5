# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Gemini MCP server.

Serves the eight Gemini tools over stdio via the MCP protocol.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from gemini_mcp import __version__
from gemini_mcp.core.config import get_config
from gemini_mcp.core.health import cli_health_check, startup_checks
from gemini_mcp.core.logging import configure_logging
from gemini_mcp.core.response import ToolResult

from .context import build_tool_context, get_tool_context, set_tool_context
from .dispatch import dispatch
from .tools import GEMINI_TOOLS

logger = logging.getLogger(__name__)

server = Server("gemini-mcp", version=__version__)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


# ============================================================================
# MCP Server Protocol Implementation
# ============================================================================


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return GEMINI_TOOLS


# Arguments are validated by the per-tool option models, not the SDK
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """Route tool calls to the dispatch table."""
    result = await dispatch(get_tool_context(), name, arguments)
    return to_call_tool_result(result)


# ============================================================================
# Server Entry Point
# ============================================================================


def run(argv: list[str] | None = None) -> None:
    """Run the Gemini MCP server."""
    parser = argparse.ArgumentParser(description="Gemini MCP Server")
    parser.add_argument("--health-check", action="store_true", help="Run health check and exit")
    parser.add_argument("--log-level", default=None, help="Override GEMINI_MCP_LOG_LEVEL")
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(level=args.log_level)

    if args.health_check:
        sys.exit(cli_health_check(config))

    logger.info(f"Gemini MCP server {__version__} starting...")
    startup_checks(config)
    set_tool_context(build_tool_context(config))
    logger.info(f"Writing output to {config.output_path}")

    async def main():
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())

    asyncio.run(main())


if __name__ == "__main__":
    run()
