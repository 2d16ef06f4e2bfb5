"""Tests for prompt builders and image prompt helpers."""

from __future__ import annotations

import pytest

from gemini_mcp.core.prompts import (
    STYLE_HINTS,
    build_brainstorm_prompt,
    build_image_prompt,
    build_zine_page_prompt,
    resolve_aspect_ratio,
    style_hint,
)


class TestImagePrompt:
    def test_known_style(self):
        assert build_image_prompt("A fox", "sketch") == f"A fox. Style: {STYLE_HINTS['sketch']}"

    def test_unknown_style_falls_back_to_illustration(self):
        assert style_hint("cubist") == STYLE_HINTS["illustration"]
        assert style_hint(None) == STYLE_HINTS["illustration"]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1:1", "1:1"),
            ("16:9", "16:9"),
            ("square", "1:1"),
            ("Wide", "16:9"),
            ("tall", "9:16"),
            ("landscape", "4:3"),
            ("5:4", "3:4"),
            ("", "3:4"),
            (None, "3:4"),
        ],
    )
    def test_resolve_aspect_ratio(self, value, expected):
        assert resolve_aspect_ratio(value) == expected


class TestBrainstormPrompt:
    def test_includes_inputs(self):
        prompt = build_brainstorm_prompt("urban gardens", "newsletter", "punk", 3)

        assert "brainstorming for a newsletter" in prompt
        assert "Topic: urban gardens" in prompt
        assert "Style: punk" in prompt
        assert "Generate 3 distinct creative ideas" in prompt
        assert "**AI Image Prompt**" in prompt


class TestZinePagePrompt:
    def test_with_image_prompts(self):
        prompt = build_zine_page_prompt("night buses", "cover", "poetic", True)

        assert "Theme: night buses" in prompt
        assert "Page Type: cover" in prompt
        assert "Tone: poetic" in prompt
        assert "Include Image Prompts: true" in prompt
        assert "## IMAGE PROMPTS" in prompt
        assert prompt.index("## LAYOUT NOTES") < prompt.index("## IMAGE PROMPTS") < prompt.index("## DIY TOUCHES")

    def test_without_image_prompts(self):
        prompt = build_zine_page_prompt("night buses", "article", "thoughtful", False)

        assert "Include Image Prompts: false" in prompt
        assert "## IMAGE PROMPTS" not in prompt
        assert "## DIY TOUCHES" in prompt
