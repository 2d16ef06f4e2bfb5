# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Prompt templates and image prompt helpers for the creative tools."""

from __future__ import annotations

BRAINSTORM_TEMPERATURE = 1.2
ZINE_PAGE_TEMPERATURE = 1.1

DEFAULT_IMAGE_STYLE = "illustration"
DEFAULT_ASPECT_RATIO = "3:4"

STYLE_HINTS = {
    "photorealistic": "photorealistic, high detail, natural lighting, realistic textures",
    "illustration": "digital illustration, clean lines, vibrant colors, artistic",
    "painting": "oil painting style, brushstrokes visible, artistic, painterly",
    "sketch": "pencil sketch, hand-drawn, black and white, line art",
    "collage": "cut-and-paste collage, mixed media, layered paper textures, punk zine aesthetic",
    "punk-zine": "punk zine aesthetic, xerox texture, high contrast, DIY, rebellious, rough edges",
    "vintage": "vintage aesthetic, retro colors, aged paper texture, nostalgic",
    "minimalist": "minimalist design, simple shapes, limited color palette, clean",
}

ASPECT_RATIOS = {
    "square": "1:1",
    "portrait": "3:4",
    "landscape": "4:3",
    "tall": "9:16",
    "wide": "16:9",
    "1:1": "1:1",
    "3:4": "3:4",
    "4:3": "4:3",
    "9:16": "9:16",
    "16:9": "16:9",
}


def style_hint(style: str | None) -> str:
    """Style modifier for an image prompt; unknown styles use the illustration hint."""
    return STYLE_HINTS.get(style or "", STYLE_HINTS[DEFAULT_IMAGE_STYLE])


def resolve_aspect_ratio(value: str | None) -> str:
    """Normalise a ratio or ratio name (``wide``) to ``W:H``; defaults to 3:4."""
    return ASPECT_RATIOS.get((value or "").strip().lower(), DEFAULT_ASPECT_RATIO)


def build_image_prompt(prompt: str, style: str | None) -> str:
    return f"{prompt}. Style: {style_hint(style)}"


def build_brainstorm_prompt(topic: str, content_type: str, style: str, num_ideas: int) -> str:
    return f"""You are a creative director brainstorming for a {content_type}.

Topic: {topic}
Style: {style}
Number of ideas needed: {num_ideas}

Generate {num_ideas} distinct creative ideas. For each idea, provide:
1. **Title** - A catchy title
2. **Concept** - 2-3 sentence description of the idea
3. **Visual Direction** - Suggestions for imagery, colors, typography
4. **Key Phrases** - 3-5 evocative phrases or pull quotes that could be used
5. **AI Image Prompt** - A detailed prompt that could generate an illustration for this idea

Be bold, unconventional, and specific. Mix the expected with the surprising."""


_ZINE_IMAGE_PROMPTS_SECTION = """## IMAGE PROMPTS
2-3 detailed prompts for AI image generation that would create illustrations fitting this page. Include style directions (collage, illustration, photo manipulation, etc.)"""


def build_zine_page_prompt(theme: str, page_type: str, tone: str, include_image_prompts: bool) -> str:
    image_section = _ZINE_IMAGE_PROMPTS_SECTION if include_image_prompts else ""
    return f"""You are designing a page for a DIY zine. Create compelling content that balances text and visual elements.

Theme: {theme}
Page Type: {page_type}
Tone: {tone}
Include Image Prompts: {str(include_image_prompts).lower()}

Generate the following for this zine page:

## HEADLINE
A bold, attention-grabbing headline (can be hand-drawn style, experimental typography)

## BODY TEXT
The main text content appropriate for the page type. Keep it punchy and zine-appropriate - not too long, not too polished.

## PULL QUOTES / CALLOUTS
2-3 short phrases that could be highlighted or placed in the margins

## LAYOUT NOTES
Suggestions for how to arrange elements on the page (consider: cut-and-paste aesthetic, hand-drawn elements, white space, asymmetry)

{image_section}

## DIY TOUCHES
Suggestions for hand-made additions (stamps, doodles, tape, stickers, hand-written notes)

Be authentic to zine culture - raw, personal, and visually interesting."""
