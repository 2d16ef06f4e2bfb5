# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""In-memory registry of multi-turn chat sessions.

Maps a conversation id to the remote chat handle that retains prior turns.
The registry is an ordinary object owned by the server's tool context, so
tests build a fresh one per run.

Sessions live until cleared or until the process exits.  Setting
``max_conversations`` bounds memory by evicting the oldest conversation;
it is off by default.

The registry does no locking.  Its methods never await, so each one runs
to completion on the event loop; two turns sent to the same chat may still
interleave at the remote end.
"""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)

ChatFactory = Callable[[str, str | None], Any]


@dataclass
class Conversation:
    """A chat session and the settings it was created with."""

    conversation_id: str
    chat: Any
    model: str
    system_instruction: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    message_count: int = 0


def generate_conversation_id() -> str:
    """Time-derived id, e.g. ``conv_1760870400123``."""
    return f"conv_{int(time.time() * 1000)}"


class ConversationRegistry:
    """Process-lifetime mapping from conversation id to chat session."""

    def __init__(self, max_conversations: int | None = None) -> None:
        if max_conversations is not None and max_conversations < 1:
            raise ValueError("max_conversations must be at least 1")
        self._max_conversations = max_conversations
        self._conversations: OrderedDict[str, Conversation] = OrderedDict()

    def __len__(self) -> int:
        return len(self._conversations)

    def __contains__(self, conversation_id: object) -> bool:
        return conversation_id in self._conversations

    def get(self, conversation_id: str) -> Conversation | None:
        return self._conversations.get(conversation_id)

    def get_or_create(
        self,
        conversation_id: str | None,
        model: str,
        system_instruction: str | None = None,
        *,
        start_chat: ChatFactory,
    ) -> Conversation:
        """Return the conversation for ``conversation_id``, creating it if absent.

        ``model`` and ``system_instruction`` only apply when the conversation is
        created; for an existing id they are ignored without error.

        Args:
            conversation_id: Existing or new id; a fresh one is generated if empty.
            model: Model for a newly created chat.
            system_instruction: Persona/context for a newly created chat.
            start_chat: ``(model, system_instruction) -> chat handle``.
        """
        if conversation_id:
            existing = self._conversations.get(conversation_id)
            if existing is not None:
                return existing
        else:
            conversation_id = self._fresh_id()

        conversation = Conversation(
            conversation_id=conversation_id,
            chat=start_chat(model, system_instruction),
            model=model,
            system_instruction=system_instruction,
        )
        self._conversations[conversation_id] = conversation
        logger.info("Started conversation %s (model=%s)", conversation_id, model)
        self._evict_if_needed()
        return conversation

    def list(self) -> list[str]:
        """Conversation ids, oldest first."""
        return list(self._conversations.keys())

    def clear(self, conversation_id: str) -> bool:
        """Remove a conversation.  Returns False when the id is unknown."""
        if self._conversations.pop(conversation_id, None) is None:
            return False
        logger.info("Cleared conversation %s", conversation_id)
        return True

    def _fresh_id(self) -> str:
        conversation_id = generate_conversation_id()
        # Two creations in the same millisecond must not share a chat
        while conversation_id in self._conversations:
            stamp = int(conversation_id.removeprefix("conv_")) + 1
            conversation_id = f"conv_{stamp}"
        return conversation_id

    def _evict_if_needed(self) -> None:
        if self._max_conversations is None:
            return
        while len(self._conversations) > self._max_conversations:
            oldest_id, _ = self._conversations.popitem(last=False)
            logger.warning(
                "Evicted conversation %s (limit of %d reached)",
                oldest_id,
                self._max_conversations,
            )
