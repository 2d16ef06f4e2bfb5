# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Per-tool argument models.

Each tool's argument bag is validated into one of these models before its
handler runs, so required fields are checked and every default is filled
in one place.  Unknown keys are ignored.
"""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ValidationException
from .prompts import DEFAULT_ASPECT_RATIO, DEFAULT_IMAGE_STYLE, resolve_aspect_ratio

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_PROMPT = "Describe this image in detail"
MAX_IMAGES = 4


def truncate_number(value: Any) -> Any:
    """Truncate a finite float toward zero; leave everything else to pydantic."""
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return value


# JSON has a single number type; hosts may send 2.0 or 2.5 for a count
WholeNumber = Annotated[int, BeforeValidator(truncate_number)]


class ToolOptions(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any] | None) -> ToolOptions:
        """Validate a raw argument bag.

        Raises:
            ValidationException: naming the first offending field.
        """
        try:
            return cls.model_validate(arguments or {})
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            message = f"{field}: {first['msg']}" if field else first["msg"]
            raise ValidationException(message, field=field, value=first.get("input")) from e


class GenerateOptions(ToolOptions):
    prompt: str
    model: str = DEFAULT_TEXT_MODEL
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    max_tokens: WholeNumber = Field(default=8192, gt=0)
    save_to_file: bool = False
    filename: str | None = None

class AnalyzeImageOptions(ToolOptions):
    image_path: str
    prompt: str = DEFAULT_IMAGE_PROMPT
    model: str = DEFAULT_TEXT_MODEL


class BrainstormOptions(ToolOptions):
    topic: str
    content_type: str = "zine"
    style: str = "creative"
    num_ideas: WholeNumber = Field(default=5, gt=0)

class ChatOptions(ToolOptions):
    message: str
    conversation_id: str | None = None
    system_instruction: str | None = None
    model: str = DEFAULT_TEXT_MODEL


class ListConversationsOptions(ToolOptions):
    pass


class ClearConversationOptions(ToolOptions):
    conversation_id: str


class ZinePageOptions(ToolOptions):
    theme: str
    page_type: str = "article"
    tone: str = "thoughtful"
    include_image_prompts: bool = True


class GenerateImageOptions(ToolOptions):
    prompt: str
    style: str = DEFAULT_IMAGE_STYLE
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    num_images: WholeNumber = 1
    filename: str | None = None

    @field_validator("aspect_ratio", mode="before")
    @classmethod
    def _normalise_aspect_ratio(cls, value: Any) -> str:
        return resolve_aspect_ratio(value if isinstance(value, str) else None)

    @field_validator("num_images")
    @classmethod
    def _clamp_num_images(cls, value: int) -> int:
        return max(1, min(value, MAX_IMAGES))
