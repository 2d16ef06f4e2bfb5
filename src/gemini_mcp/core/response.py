# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Standard result envelope for tool handlers.

Every handler returns a ``ToolResult`` so the transport layer always
receives a consistent ``(text, is_error)`` pair rather than ad-hoc
strings or bare exceptions.

Usage::

    from gemini_mcp.core.response import ok, err

    return ok("Conversation 'abc' cleared.")
    return err("Error: Image file not found: /tmp/x.png")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolResult:
    """Result of a single tool call.

    Attributes:
        text:     Human-readable body shown to the host.
        is_error: True when the call failed.  Informational results such as
                  "Unknown tool" or "not found" are *not* errors.
    """

    text: str
    is_error: bool = False


def ok(text: str) -> ToolResult:
    """Create a successful ToolResult."""
    return ToolResult(text=text)


def err(text: str) -> ToolResult:
    """Create a failed ToolResult.

    Args:
        text: Human-readable description of the failure.
    """
    return ToolResult(text=text, is_error=True)
