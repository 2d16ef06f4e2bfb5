# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Conversation tool handlers: chat, list_conversations, clear_conversation."""

from __future__ import annotations

import logging

from gemini_mcp.core.options import ChatOptions, ClearConversationOptions, ListConversationsOptions
from gemini_mcp.core.response import ToolResult, ok

from ..context import ToolContext
from ._utils import require_client

logger = logging.getLogger(__name__)


async def gemini_chat(ctx: ToolContext, options: ChatOptions) -> ToolResult:
    """Send one message, continuing ``conversation_id`` or starting a new chat.

    ``system_instruction`` and ``model`` only take effect for a new chat.
    """
    client = require_client(ctx)
    conversation = ctx.registry.get_or_create(
        options.conversation_id,
        model=options.model,
        system_instruction=options.system_instruction,
        start_chat=client.start_chat,
    )
    if options.system_instruction and options.system_instruction != conversation.system_instruction:
        logger.debug("Ignoring system_instruction for existing conversation %s", conversation.conversation_id)

    text = await client.send_message(conversation.chat, options.message)
    conversation.message_count += 1
    return ok(f"**[Conversation: {conversation.conversation_id}]**\n\n{text}")


async def gemini_list_conversations(ctx: ToolContext, options: ListConversationsOptions) -> ToolResult:
    conversation_ids = ctx.registry.list()
    if not conversation_ids:
        return ok("No active conversations. Start one with gemini_chat.")
    lines = "\n".join(f"- {conversation_id}" for conversation_id in conversation_ids)
    return ok(f"**Active Conversations:**\n\n{lines}")


async def gemini_clear_conversation(ctx: ToolContext, options: ClearConversationOptions) -> ToolResult:
    """Forget a conversation.  An unknown id is reported, not treated as an error."""
    if ctx.registry.clear(options.conversation_id):
        return ok(f"Conversation '{options.conversation_id}' cleared.")
    return ok(f"Conversation '{options.conversation_id}' not found.")
