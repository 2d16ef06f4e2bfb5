# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Tool dispatch: route a tool name and argument bag to its handler.

Every failure is recovered here and returned as an error ``ToolResult``;
nothing propagates to the transport.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from google.genai import errors as genai_errors

from gemini_mcp.core.exceptions import (
    ConfigException,
    GeminiMCPException,
    NotFoundError,
    ValidationException,
)
from gemini_mcp.core.logging import tool_call_context, tool_logger
from gemini_mcp.core.options import (
    AnalyzeImageOptions,
    BrainstormOptions,
    ChatOptions,
    ClearConversationOptions,
    GenerateImageOptions,
    GenerateOptions,
    ListConversationsOptions,
    ToolOptions,
    ZinePageOptions,
)
from gemini_mcp.core.response import ToolResult, err, ok

from .context import ToolContext
from .handlers._utils import MISSING_API_KEY_MESSAGE
from .handlers.chat import gemini_chat, gemini_clear_conversation, gemini_list_conversations
from .handlers.images import gemini_generate_image
from .handlers.text import gemini_analyze_image, gemini_brainstorm, gemini_generate, gemini_zine_page

logger = logging.getLogger(__name__)

Handler = Callable[[ToolContext, Any], Awaitable[ToolResult]]

# ============================================================================
# Tool Handler Registry
# ============================================================================

TOOL_HANDLERS: dict[str, tuple[type[ToolOptions], Handler]] = {
    # Text
    "gemini_generate": (GenerateOptions, gemini_generate),
    "gemini_analyze_image": (AnalyzeImageOptions, gemini_analyze_image),
    "gemini_brainstorm": (BrainstormOptions, gemini_brainstorm),
    "gemini_zine_page": (ZinePageOptions, gemini_zine_page),
    # Conversations
    "gemini_chat": (ChatOptions, gemini_chat),
    "gemini_list_conversations": (ListConversationsOptions, gemini_list_conversations),
    "gemini_clear_conversation": (ClearConversationOptions, gemini_clear_conversation),
    # Images
    "gemini_generate_image": (GenerateImageOptions, gemini_generate_image),
}


async def dispatch(ctx: ToolContext, name: str, arguments: dict[str, Any] | None) -> ToolResult:
    """Run tool ``name`` and return its result.

    Order of checks: API key, tool name, arguments, handler.
    """
    arguments = arguments or {}
    with tool_call_context(name):
        tool_logger.log_call(name, arguments)
        start = time.perf_counter()
        result = await _dispatch(ctx, name, arguments)
        duration_ms = (time.perf_counter() - start) * 1000
        tool_logger.log_result(name, not result.is_error, duration_ms)
    return result


async def _dispatch(ctx: ToolContext, name: str, arguments: dict[str, Any]) -> ToolResult:
    if not ctx.settings.has_api_key:
        return err(f"Error: {MISSING_API_KEY_MESSAGE}")

    route = TOOL_HANDLERS.get(name)
    if route is None:
        logger.info(f"Unknown tool requested: {name}")
        return ok(f"Unknown tool: {name}")
    options_model, handler = route

    try:
        options = options_model.from_arguments(arguments)
        return await handler(ctx, options)

    except ValidationException as e:
        logger.warning(f"Validation error in tool {name}: {e}", extra={"data": e.to_dict()})
        return err(f"Validation error: {e.message}")
    except NotFoundError as e:
        logger.warning(f"Missing resource in tool {name}: {e}", extra={"data": e.to_dict()})
        return err(f"Error: {e.message}")
    except ConfigException as e:
        logger.error(f"Configuration error in tool {name}: {e}", extra={"data": e.to_dict()})
        return err(f"Error: {e.message}")
    except GeminiMCPException as e:
        logger.error(f"Error in tool {name}: {e}", extra={"data": e.to_dict()})
        return err(f"Error: {e.message}")
    except genai_errors.APIError as e:
        logger.error(f"Gemini API error in tool {name}: {e}")
        return err(f"Error: {e.message or e}")
    except Exception as e:  # Intentionally broad: top-level handler for unexpected errors
        logger.exception(f"Unexpected error in tool {name}")
        return err(f"Error: {e}")
