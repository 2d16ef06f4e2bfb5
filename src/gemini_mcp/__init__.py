# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""gemini-mcp - Google Gemini as MCP tools.

Exposes text generation, image analysis, creative brainstorming, zine page
drafting, multi-turn chat and image generation as eight tools served over
stdio for an AI coding assistant host.

Entry point: ``gemini-mcp`` (or ``python -m gemini_mcp``).
"""

__version__ = "1.0.0"
