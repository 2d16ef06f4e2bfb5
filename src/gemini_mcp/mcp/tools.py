# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Tool definitions for the Gemini MCP server.

Contains GEMINI_TOOLS, the eight MCP tool descriptors.  Defaults declared
here mirror the option models in ``gemini_mcp.core.options``.

Tool list:
    gemini_generate            Text generation, optional Markdown save
    gemini_analyze_image       Vision: describe / question a local image
    gemini_brainstorm          Structured creative ideas
    gemini_chat                Multi-turn conversation
    gemini_list_conversations  Active conversation ids
    gemini_clear_conversation  Forget a conversation
    gemini_zine_page           Zine page copy, layout notes, image prompts
    gemini_generate_image      Image generation with model fallback
"""

from __future__ import annotations

from mcp.types import Tool

from gemini_mcp.core.options import DEFAULT_IMAGE_PROMPT, DEFAULT_TEXT_MODEL, MAX_IMAGES
from gemini_mcp.core.prompts import DEFAULT_ASPECT_RATIO, DEFAULT_IMAGE_STYLE

GEMINI_TOOLS = [
    # =========================================================================
    # Text tools
    # =========================================================================
    Tool(
        name="gemini_generate",
        description=(
            "Generate text content using Google Gemini. "
            "Great for writing, analysis, code generation, and creative content."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "The prompt or instruction for Gemini",
                },
                "model": {
                    "type": "string",
                    "description": (
                        f"Model to use (default: {DEFAULT_TEXT_MODEL}). "
                        "Options: gemini-2.5-flash, gemini-2.5-pro, gemini-2.5-flash-lite"
                    ),
                    "default": DEFAULT_TEXT_MODEL,
                },
                "temperature": {
                    "type": "number",
                    "description": "Creativity level 0.0-2.0 (default: 1.0). Lower = more focused, higher = more creative",
                    "default": 1.0,
                    "minimum": 0.0,
                    "maximum": 2.0,
                },
                "max_tokens": {
                    "type": "number",
                    "description": "Maximum output tokens (default: 8192)",
                    "default": 8192,
                },
                "save_to_file": {
                    "type": "boolean",
                    "description": "Save output to a file in the output directory",
                    "default": False,
                },
                "filename": {
                    "type": "string",
                    "description": "Filename for saved output (without extension)",
                },
            },
            "required": ["prompt"],
        },
    ),
    Tool(
        name="gemini_analyze_image",
        description=(
            "Analyze an image using Gemini's vision capabilities. "
            "Can describe, extract text, identify objects, or answer questions about images."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "image_path": {
                    "type": "string",
                    "description": "Path to the image file to analyze",
                },
                "prompt": {
                    "type": "string",
                    "description": f"Question or instruction about the image (default: '{DEFAULT_IMAGE_PROMPT}')",
                    "default": DEFAULT_IMAGE_PROMPT,
                },
                "model": {
                    "type": "string",
                    "description": f"Model to use (default: {DEFAULT_TEXT_MODEL})",
                    "default": DEFAULT_TEXT_MODEL,
                },
            },
            "required": ["image_path"],
        },
    ),
    Tool(
        name="gemini_brainstorm",
        description=(
            "Creative brainstorming for zines, articles, and content. "
            "Returns structured ideas with titles, concepts, and visual suggestions."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "topic": {
                    "type": "string",
                    "description": "The topic or theme to brainstorm about",
                },
                "content_type": {
                    "type": "string",
                    "description": "Type of content: zine, article, social_post, newsletter, poem, story",
                    "default": "zine",
                },
                "style": {
                    "type": "string",
                    "description": "Creative style: punk, academic, whimsical, minimalist, collage, retro, futuristic",
                    "default": "creative",
                },
                "num_ideas": {
                    "type": "number",
                    "description": "Number of ideas to generate (default: 5)",
                    "default": 5,
                },
            },
            "required": ["topic"],
        },
    ),
    # =========================================================================
    # Conversation tools
    # =========================================================================
    Tool(
        name="gemini_chat",
        description="Have a multi-turn conversation with Gemini. Use conversation_id to continue existing chats.",
        inputSchema={
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "description": "Your message to Gemini",
                },
                "conversation_id": {
                    "type": "string",
                    "description": "ID to continue a previous conversation (optional, creates new if not provided)",
                },
                "system_instruction": {
                    "type": "string",
                    "description": "System instruction to set context/persona (only used when starting new conversation)",
                },
                "model": {
                    "type": "string",
                    "description": f"Model to use (default: {DEFAULT_TEXT_MODEL})",
                    "default": DEFAULT_TEXT_MODEL,
                },
            },
            "required": ["message"],
        },
    ),
    Tool(
        name="gemini_list_conversations",
        description="List active conversation IDs for the gemini_chat tool",
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
    Tool(
        name="gemini_clear_conversation",
        description="Clear a conversation history",
        inputSchema={
            "type": "object",
            "properties": {
                "conversation_id": {
                    "type": "string",
                    "description": "ID of the conversation to clear",
                },
            },
            "required": ["conversation_id"],
        },
    ),
    # =========================================================================
    # Zine tools
    # =========================================================================
    Tool(
        name="gemini_zine_page",
        description="Generate content for a zine page including text, layout suggestions, and image prompts for illustration.",
        inputSchema={
            "type": "object",
            "properties": {
                "theme": {
                    "type": "string",
                    "description": "Theme or topic for the zine page",
                },
                "page_type": {
                    "type": "string",
                    "description": "Type of page: cover, intro, article, interview, art_spread, collage, back_cover",
                    "default": "article",
                },
                "tone": {
                    "type": "string",
                    "description": "Tone: rebellious, thoughtful, playful, informative, poetic, absurdist",
                    "default": "thoughtful",
                },
                "include_image_prompts": {
                    "type": "boolean",
                    "description": "Include AI image generation prompts for illustrations",
                    "default": True,
                },
            },
            "required": ["theme"],
        },
    ),
    # =========================================================================
    # Image tools
    # =========================================================================
    Tool(
        name="gemini_generate_image",
        description=(
            "Generate an image with Gemini's image-capable models. "
            "Models are tried in order until one succeeds; images are saved as PNG files "
            "in the output directory."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": "Detailed description of the image to generate",
                },
                "style": {
                    "type": "string",
                    "description": (
                        "Art style hint: photorealistic, illustration, painting, sketch, "
                        "collage, punk-zine, vintage, minimalist"
                    ),
                    "default": DEFAULT_IMAGE_STYLE,
                },
                "aspect_ratio": {
                    "type": "string",
                    "description": "Aspect ratio: 1:1 (square), 3:4 (portrait), 4:3 (landscape), 9:16 (tall), 16:9 (wide)",
                    "default": DEFAULT_ASPECT_RATIO,
                },
                "num_images": {
                    "type": "number",
                    "description": f"Number of images to generate (1-{MAX_IMAGES}, default: 1)",
                    "default": 1,
                },
                "filename": {
                    "type": "string",
                    "description": "Output filename without extension (auto-generated if not provided)",
                },
            },
            "required": ["prompt"],
        },
    ),
]

TOOL_NAMES = frozenset(tool.name for tool in GEMINI_TOOLS)
