# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Image generation handler.

Tries each configured image model in order until one answers, then writes
every inline image part of the response to the output directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from gemini_mcp.core.artifacts import image_filename, timestamp_slug, write_image
from gemini_mcp.core.exceptions import FallbackExhausted
from gemini_mcp.core.fallback import try_in_order
from gemini_mcp.core.options import GenerateImageOptions
from gemini_mcp.core.prompts import build_image_prompt
from gemini_mcp.core.response import ToolResult, err, ok

from ..context import ToolContext
from ._utils import require_client

logger = logging.getLogger(__name__)


@dataclass
class ImageParts:
    """Image payloads and text extracted from a generation response."""

    images: list[bytes | str] = field(default_factory=list)
    text: str = ""


def response_parts(response: Any) -> list[Any]:
    """Parts of the first candidate, or top-level parts for flattened responses."""
    candidates = getattr(response, "candidates", None) or []
    if candidates:
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None)
        if parts:
            return list(parts)
    return list(getattr(response, "parts", None) or [])


def extract_image_parts(response: Any) -> ImageParts:
    extracted = ImageParts()
    for part in response_parts(response):
        if getattr(part, "text", None):
            extracted.text += part.text + "\n"
            continue
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and getattr(inline_data, "data", None):
            extracted.images.append(inline_data.data)
    return extracted


async def gemini_generate_image(ctx: ToolContext, options: GenerateImageOptions) -> ToolResult:
    client = require_client(ctx)
    prompt = build_image_prompt(options.prompt, options.style)

    async def attempt(model: str) -> Any:
        logger.info("Trying image generation with model: %s", model)
        return await client.generate_image_content(prompt, model=model, aspect_ratio=options.aspect_ratio)

    try:
        outcome = await try_in_order(ctx.settings.image_model_list, attempt)
    except FallbackExhausted as e:
        return err(f"All image generation models failed. Last error: {e.last_message}")

    parts = extract_image_parts(outcome.value)
    if not parts.images:
        detail = parts.text.strip() or str(outcome.value)[:500]
        return err(f"Image generation did not return any images. Response: {detail}")

    timestamp = timestamp_slug()
    # Suffix names whenever more than one file is written, even if only one was asked for
    total = max(options.num_images, len(parts.images))
    saved_paths = [
        write_image(
            ctx.settings.output_path,
            image_filename(options.filename, timestamp, index, total),
            data,
        )
        for index, data in enumerate(parts.images)
    ]

    plural = "s" if len(saved_paths) > 1 else ""
    lines = [
        f"Image{plural} generated successfully!",
        "",
        f"**Model:** {outcome.candidate}",
        f"**Prompt:** {options.prompt}",
        f"**Style:** {options.style}",
        f"**Aspect Ratio:** {options.aspect_ratio}",
        "**Saved to:**",
        *(f"- {path}" for path in saved_paths),
    ]
    text = "\n".join(lines)
    if parts.text:
        text += f"\n\n**Model response:** {parts.text}"
    return ok(text)
