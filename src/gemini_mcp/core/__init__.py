"""Gemini MCP core - configuration, client, conversation state and file output."""

from .config import CoreSettings, clear_config_cache, get_config
from .conversations import Conversation, ConversationRegistry
from .exceptions import (
    ConfigException,
    FallbackExhausted,
    GeminiMCPException,
    NotFoundError,
    ValidationException,
)
from .fallback import FallbackOutcome, try_in_order
from .response import ToolResult, err, ok

__all__ = [
    "ConfigException",
    "Conversation",
    "ConversationRegistry",
    "CoreSettings",
    "FallbackExhausted",
    "FallbackOutcome",
    "GeminiMCPException",
    "NotFoundError",
    "ToolResult",
    "ValidationException",
    "clear_config_cache",
    "err",
    "get_config",
    "ok",
    "try_in_order",
]
