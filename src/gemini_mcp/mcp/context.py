# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Per-process state handed to every tool handler."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gemini_mcp.core.artifacts import ensure_output_dir
from gemini_mcp.core.client import GeminiClient
from gemini_mcp.core.config import CoreSettings, get_config
from gemini_mcp.core.conversations import ConversationRegistry

logger = logging.getLogger(__name__)


@dataclass
class ToolContext:
    """Settings, remote client and conversation registry for one server process.

    ``client`` is None when no API key is configured; dispatch refuses every
    call in that case before a handler can reach it.
    """

    settings: CoreSettings
    client: GeminiClient | None = None
    registry: ConversationRegistry = field(default_factory=ConversationRegistry)


def build_tool_context(settings: CoreSettings | None = None) -> ToolContext:
    """Create the output directory and, when a key is set, the Gemini client."""
    settings = settings or get_config()
    ensure_output_dir(settings.output_path)

    client = None
    if settings.has_api_key:
        client = GeminiClient(settings.api_key)
    else:
        logger.warning("GEMINI_API_KEY is not set; every tool call will return an error")

    return ToolContext(
        settings=settings,
        client=client,
        registry=ConversationRegistry(max_conversations=settings.max_conversations),
    )


_context: ToolContext | None = None


def get_tool_context() -> ToolContext:
    """Get the process-wide tool context, building it on first use."""
    global _context
    if _context is None:
        _context = build_tool_context()
    return _context


def set_tool_context(context: ToolContext | None) -> None:
    """Install a tool context (or clear it with None). Used at startup and in tests."""
    global _context
    _context = context
