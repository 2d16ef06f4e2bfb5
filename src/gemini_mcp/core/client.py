# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Async wrapper over the ``google-genai`` SDK.

Every remote call the tools make goes through ``GeminiClient`` so handlers
never touch the SDK directly and tests can substitute a mock.  No timeout
or retry is added here; a hung remote call hangs the tool call.
"""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from .artifacts import ImageInput

logger = logging.getLogger(__name__)

IMAGE_RESPONSE_MODALITIES = ["IMAGE", "TEXT"]


class GeminiClient:
    """Thin async facade for text, vision, chat and image generation."""

    def __init__(self, api_key: str, client: genai.Client | None = None) -> None:
        self._client = client or genai.Client(api_key=api_key)

    async def generate_text(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        """Single-shot text generation."""
        config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        logger.debug("generate_content model=%s prompt_len=%d", model, len(prompt))
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
        return response.text or ""

    async def analyze_image(self, prompt: str, image: ImageInput, *, model: str) -> str:
        """Ask a question about a local image."""
        logger.debug("vision model=%s image=%s (%s)", model, image.path, image.mime_type)
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=[
                prompt,
                types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
            ],
        )
        return response.text or ""

    def start_chat(self, model: str, system_instruction: str | None = None) -> Any:
        """Create a remote chat session; the handle keeps its own history."""
        config = None
        if system_instruction:
            config = types.GenerateContentConfig(system_instruction=system_instruction)
        return self._client.aio.chats.create(model=model, config=config)

    async def send_message(self, chat: Any, message: str) -> str:
        response = await chat.send_message(message)
        return response.text or ""

    async def generate_image_content(
        self,
        prompt: str,
        *,
        model: str,
        aspect_ratio: str | None = None,
    ) -> types.GenerateContentResponse:
        """Image-capable generation; the response mixes inline image and text parts."""
        config = types.GenerateContentConfig(
            response_modalities=IMAGE_RESPONSE_MODALITIES,
            image_config=types.ImageConfig(aspect_ratio=aspect_ratio) if aspect_ratio else None,
        )
        logger.debug("image generation model=%s aspect_ratio=%s", model, aspect_ratio)
        return await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
