# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Shared helpers for MCP tool handlers."""

from __future__ import annotations

from gemini_mcp.core.client import GeminiClient
from gemini_mcp.core.exceptions import ConfigException

from ..context import ToolContext

MISSING_API_KEY_MESSAGE = "GEMINI_API_KEY environment variable is not set"


def require_client(ctx: ToolContext) -> GeminiClient:
    """Return the Gemini client or raise if no API key was configured."""
    if ctx.client is None:
        raise ConfigException(MISSING_API_KEY_MESSAGE, missing_vars=["GEMINI_API_KEY"])
    return ctx.client


def with_header(header: str, body: str) -> str:
    """Markdown header block, a rule, then the model's text."""
    return f"{header}\n\n---\n\n{body}"
