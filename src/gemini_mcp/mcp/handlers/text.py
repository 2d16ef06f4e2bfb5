# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Single-shot text tool handlers: generate, analyze_image, brainstorm, zine_page."""

from __future__ import annotations

import logging

from gemini_mcp.core.artifacts import load_image, write_text_output
from gemini_mcp.core.options import (
    DEFAULT_TEXT_MODEL,
    AnalyzeImageOptions,
    BrainstormOptions,
    GenerateOptions,
    ZinePageOptions,
)
from gemini_mcp.core.prompts import (
    BRAINSTORM_TEMPERATURE,
    ZINE_PAGE_TEMPERATURE,
    build_brainstorm_prompt,
    build_zine_page_prompt,
)
from gemini_mcp.core.response import ToolResult, ok

from ..context import ToolContext
from ._utils import require_client, with_header

logger = logging.getLogger(__name__)


async def gemini_generate(ctx: ToolContext, options: GenerateOptions) -> ToolResult:
    """Generate text, optionally saving it as Markdown in the output directory."""
    client = require_client(ctx)
    text = await client.generate_text(
        options.prompt,
        model=options.model,
        temperature=options.temperature,
        max_output_tokens=options.max_tokens,
    )

    if not options.save_to_file:
        return ok(text)

    saved_path = write_text_output(
        ctx.settings.output_path,
        prompt=options.prompt,
        model=options.model,
        text=text,
        filename=options.filename,
    )
    return ok(f"{text}\n\n---\n*Saved to: {saved_path}*")


async def gemini_analyze_image(ctx: ToolContext, options: AnalyzeImageOptions) -> ToolResult:
    """Describe or answer a question about a local image.

    The file is read before any remote call, so a bad path fails fast with
    ``NotFoundError``.
    """
    image = load_image(options.image_path)
    client = require_client(ctx)
    text = await client.analyze_image(options.prompt, image, model=options.model)
    return ok(f"**Image Analysis: {options.image_path}**\n\n{text}")


async def gemini_brainstorm(ctx: ToolContext, options: BrainstormOptions) -> ToolResult:
    client = require_client(ctx)
    prompt = build_brainstorm_prompt(
        topic=options.topic,
        content_type=options.content_type,
        style=options.style,
        num_ideas=options.num_ideas,
    )
    text = await client.generate_text(prompt, model=DEFAULT_TEXT_MODEL, temperature=BRAINSTORM_TEMPERATURE)
    header = f"# Brainstorm: {options.topic}\n\n**Content Type:** {options.content_type}\n**Style:** {options.style}"
    return ok(with_header(header, text))


async def gemini_zine_page(ctx: ToolContext, options: ZinePageOptions) -> ToolResult:
    client = require_client(ctx)
    prompt = build_zine_page_prompt(
        theme=options.theme,
        page_type=options.page_type,
        tone=options.tone,
        include_image_prompts=options.include_image_prompts,
    )
    text = await client.generate_text(prompt, model=DEFAULT_TEXT_MODEL, temperature=ZINE_PAGE_TEMPERATURE)
    header = f"# Zine Page: {options.theme}\n\n**Type:** {options.page_type} | **Tone:** {options.tone}"
    return ok(with_header(header, text))
