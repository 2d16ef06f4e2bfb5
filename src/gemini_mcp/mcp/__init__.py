# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Gemini MCP server package.

Re-exports the entry point and tool table.
"""

from .dispatch import TOOL_HANDLERS, dispatch
from .server import run
from .tools import GEMINI_TOOLS

__all__ = ["GEMINI_TOOLS", "TOOL_HANDLERS", "dispatch", "run"]
