# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Local file side effects: saved text output, generated images, image input.

Output files are write-once.  Names come from the caller or from a
timestamp in the form ``2026-10-19T12-30-05-123Z`` (ISO-8601 with ``:`` and
``.`` replaced so the name is filesystem-safe).
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from .exceptions import ConfigException, NotFoundError

logger = logging.getLogger(__name__)

TEXT_OUTPUT_TITLE = "Gemini Output"

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}
DEFAULT_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ImageInput:
    """A local image loaded for a vision request."""

    path: Path
    data: bytes
    mime_type: str


def timestamp_slug(now: datetime | None = None) -> str:
    """Filesystem-safe UTC timestamp with millisecond precision."""
    now = (now or datetime.now(UTC)).astimezone(UTC)
    return now.strftime("%Y-%m-%dT%H-%M-%S-") + f"{now.microsecond // 1000:03d}Z"


def ensure_output_dir(path: Path) -> Path:
    """Create the output directory (and parents) if absent."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigException(f"Cannot create output directory {path}: {e}") from e
    return path


def mime_type_for(path: str | Path) -> str:
    """MIME type from the file extension, JPEG when unknown."""
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


def load_image(image_path: str) -> ImageInput:
    """Read a local image for analysis.

    Raises:
        NotFoundError: the resolved path does not exist.
    """
    path = Path(image_path).resolve()
    if not path.exists():
        raise NotFoundError("Image file", str(path))
    return ImageInput(path=path, data=path.read_bytes(), mime_type=mime_type_for(path))


def render_text_output(prompt: str, model: str, text: str) -> str:
    return f"# {TEXT_OUTPUT_TITLE}\n\n**Prompt:** {prompt}\n\n**Model:** {model}\n\n---\n\n{text}"


def write_text_output(
    output_dir: Path,
    prompt: str,
    model: str,
    text: str,
    filename: str | None = None,
) -> Path:
    """Save generated text as Markdown and return the file path."""
    ensure_output_dir(output_dir)
    path = output_dir / f"{filename or f'gemini_{timestamp_slug()}'}.md"
    path.write_text(render_text_output(prompt, model, text), encoding="utf-8")
    logger.info("Saved text output to %s", path)
    return path


def image_filename(base: str | None, timestamp: str, index: int, total: int) -> str:
    """Stem for the ``index``-th (0-based) image of a request for ``total`` images."""
    suffix = f"_{index + 1}" if total > 1 else ""
    return f"{base or f'gemini_img_{timestamp}'}{suffix}"


def write_image(output_dir: Path, stem: str, data: bytes | str) -> Path:
    """Write image bytes (raw or base64 text) to ``<stem>.png``."""
    if isinstance(data, str):
        data = base64.b64decode(data)
    ensure_output_dir(output_dir)
    path = output_dir / f"{stem}.png"
    path.write_bytes(data)
    logger.info("Saved image (%d bytes) to %s", len(data), path)
    return path
