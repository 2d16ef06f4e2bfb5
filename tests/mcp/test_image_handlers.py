"""Tests for image generation with model fallback."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from google.genai import types

from gemini_mcp.core.config import CoreSettings
from gemini_mcp.core.options import GenerateImageOptions
from gemini_mcp.core.prompts import STYLE_HINTS
from gemini_mcp.mcp.context import ToolContext
from gemini_mcp.mcp.dispatch import dispatch
from gemini_mcp.mcp.handlers.images import extract_image_parts, gemini_generate_image

MODELS = ["image-model-a", "image-model-b", "image-model-c"]


def image_response(*images: bytes, text: str | None = None) -> types.GenerateContentResponse:
    parts = []
    if text:
        parts.append(types.Part(text=text))
    parts.extend(types.Part(inline_data=types.Blob(data=data, mime_type="image/png")) for data in images)
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


@pytest.fixture
def image_context(clean_env, output_dir, mock_client, registry):
    settings = CoreSettings(api_key="test-key", output_dir=str(output_dir), image_models=",".join(MODELS))
    return ToolContext(settings=settings, client=mock_client, registry=registry)


class TestFallback:
    @pytest.mark.asyncio
    async def test_third_model_succeeds_after_two_failures(self, image_context, mock_client, output_dir):
        mock_client.generate_image_content.side_effect = [
            RuntimeError("model a not found"),
            RuntimeError("model b overloaded"),
            image_response(b"img-1", b"img-2"),
        ]

        result = await gemini_generate_image(
            image_context, GenerateImageOptions(prompt="a fox", num_images=2, filename="fox")
        )

        assert result.is_error is False
        assert "**Model:** image-model-c" in result.text
        saved = [line[2:] for line in result.text.splitlines() if line.startswith("- ")]
        assert len(saved) == 2
        assert saved == [str(output_dir / "fox_1.png"), str(output_dir / "fox_2.png")]
        assert (output_dir / "fox_2.png").read_bytes() == b"img-2"
        tried = [call.kwargs["model"] for call in mock_client.generate_image_content.await_args_list]
        assert tried == MODELS

    @pytest.mark.asyncio
    async def test_stops_at_first_success(self, image_context, mock_client):
        mock_client.generate_image_content.return_value = image_response(b"img")

        await gemini_generate_image(image_context, GenerateImageOptions(prompt="a fox"))

        assert mock_client.generate_image_content.await_count == 1

    @pytest.mark.asyncio
    async def test_all_models_fail(self, image_context, mock_client, output_dir):
        mock_client.generate_image_content.side_effect = [
            RuntimeError("a"),
            RuntimeError("b"),
            RuntimeError("quota exhausted"),
        ]

        result = await gemini_generate_image(image_context, GenerateImageOptions(prompt="a fox"))

        assert result.is_error is True
        assert result.text == "All image generation models failed. Last error: quota exhausted"
        assert not output_dir.exists() or not any(output_dir.iterdir())


class TestImageRequest:
    @pytest.mark.asyncio
    async def test_prompt_style_and_aspect_ratio(self, image_context, mock_client):
        mock_client.generate_image_content.return_value = image_response(b"img")

        result = await gemini_generate_image(
            image_context, GenerateImageOptions(prompt="a fox", style="sketch", aspect_ratio="wide")
        )

        call = mock_client.generate_image_content.await_args
        assert call.args[0] == f"a fox. Style: {STYLE_HINTS['sketch']}"
        assert call.kwargs["aspect_ratio"] == "16:9"
        assert "**Style:** sketch" in result.text
        assert "**Aspect Ratio:** 16:9" in result.text

    @pytest.mark.asyncio
    async def test_single_image_default_name(self, image_context, mock_client, output_dir):
        mock_client.generate_image_content.return_value = image_response(b"img")

        result = await gemini_generate_image(image_context, GenerateImageOptions(prompt="a fox"))

        (saved,) = output_dir.glob("*.png")
        assert saved.name.startswith("gemini_img_")
        assert "_1.png" not in saved.name
        assert result.text.startswith("Image generated successfully!")

    @pytest.mark.asyncio
    async def test_extra_images_never_overwrite(self, image_context, mock_client, output_dir):
        mock_client.generate_image_content.return_value = image_response(b"one", b"two")

        result = await gemini_generate_image(image_context, GenerateImageOptions(prompt="p", filename="x"))

        assert sorted(p.name for p in output_dir.glob("*.png")) == ["x_1.png", "x_2.png"]
        assert result.text.startswith("Images generated successfully!")

    @pytest.mark.asyncio
    async def test_model_text_is_reported(self, image_context, mock_client):
        mock_client.generate_image_content.return_value = image_response(b"img", text="Here is your fox")

        result = await gemini_generate_image(image_context, GenerateImageOptions(prompt="a fox"))

        assert result.text.endswith("**Model response:** Here is your fox\n")

    @pytest.mark.asyncio
    async def test_no_images_returned(self, image_context, mock_client):
        mock_client.generate_image_content.return_value = image_response(text="I can't draw that")

        result = await gemini_generate_image(image_context, GenerateImageOptions(prompt="a fox"))

        assert result.is_error is True
        assert result.text == "Image generation did not return any images. Response: I can't draw that"

    @pytest.mark.asyncio
    async def test_through_dispatch(self, image_context, mock_client):
        mock_client.generate_image_content.return_value = image_response(b"img")

        result = await dispatch(image_context, "gemini_generate_image", {"prompt": "a fox", "num_images": 10})

        assert result.is_error is False
        assert "**Model:** image-model-a" in result.text


class TestExtractImageParts:
    def test_reads_candidate_parts(self):
        extracted = extract_image_parts(image_response(b"a", text="caption"))

        assert extracted.images == [b"a"]
        assert extracted.text == "caption\n"

    def test_falls_back_to_top_level_parts(self):
        response = SimpleNamespace(
            candidates=None,
            parts=[SimpleNamespace(text=None, inline_data=SimpleNamespace(data="aW1n"))],
        )

        assert extract_image_parts(response).images == ["aW1n"]

    def test_empty_response(self):
        extracted = extract_image_parts(types.GenerateContentResponse())

        assert extracted.images == []
        assert extracted.text == ""


@pytest.mark.asyncio
async def test_fractional_num_images_through_dispatch(image_context, mock_client, output_dir):
    mock_client.generate_image_content.return_value = image_response(b"one", b"two")

    result = await dispatch(image_context, "gemini_generate_image", {"prompt": "p", "num_images": 2.5, "filename": "f"})

    assert result.is_error is False
    assert sorted(p.name for p in output_dir.glob("*.png")) == ["f_1.png", "f_2.png"]
