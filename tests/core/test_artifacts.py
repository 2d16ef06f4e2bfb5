"""Tests for local file output and image loading."""

from __future__ import annotations

import base64
from datetime import UTC, datetime
from pathlib import Path

import pytest

from gemini_mcp.core.artifacts import (
    ensure_output_dir,
    image_filename,
    load_image,
    mime_type_for,
    render_text_output,
    timestamp_slug,
    write_image,
    write_text_output,
)
from gemini_mcp.core.exceptions import ConfigException, NotFoundError


class TestTimestampSlug:
    def test_format_matches_iso_with_separators_replaced(self):
        now = datetime(2026, 10, 19, 12, 30, 5, 123456, tzinfo=UTC)

        assert timestamp_slug(now) == "2026-10-19T12-30-05-123Z"

    def test_slug_is_filesystem_safe(self):
        slug = timestamp_slug()

        assert ":" not in slug
        assert "." not in slug
        assert slug.endswith("Z")


class TestTextOutput:
    def test_render_header(self):
        content = render_text_output("Write a haiku", "gemini-2.5-flash", "Leaves fall")

        assert content == (
            "# Gemini Output\n\n**Prompt:** Write a haiku\n\n**Model:** gemini-2.5-flash\n\n---\n\nLeaves fall"
        )

    def test_write_with_filename(self, tmp_path):
        path = write_text_output(tmp_path, "prompt", "model", "body", filename="notes")

        assert path == tmp_path / "notes.md"
        assert path.read_text(encoding="utf-8").startswith("# Gemini Output")

    def test_write_without_filename_uses_timestamp(self, tmp_path):
        path = write_text_output(tmp_path, "prompt", "model", "body")

        assert path.name.startswith("gemini_")
        assert path.suffix == ".md"

    def test_write_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "out"

        path = write_text_output(target, "prompt", "model", "body", filename="x")

        assert path.exists()


class TestImageOutput:
    def test_single_image_has_no_suffix(self):
        assert image_filename("cover", "ts", 0, 1) == "cover"

    def test_multiple_images_are_numbered_from_one(self):
        assert [image_filename("cover", "ts", i, 3) for i in range(3)] == ["cover_1", "cover_2", "cover_3"]

    def test_default_name_from_timestamp(self):
        assert image_filename(None, "2026-10-19T12-30-05-123Z", 1, 2) == "gemini_img_2026-10-19T12-30-05-123Z_2"

    def test_write_raw_bytes(self, tmp_path):
        path = write_image(tmp_path, "img", b"\x89PNG")

        assert path == tmp_path / "img.png"
        assert path.read_bytes() == b"\x89PNG"

    def test_write_base64_text(self, tmp_path):
        path = write_image(tmp_path, "img", base64.b64encode(b"\x89PNG").decode())

        assert path.read_bytes() == b"\x89PNG"


class TestLoadImage:
    def test_missing_file_raises_not_found_with_absolute_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(NotFoundError) as exc_info:
            load_image("missing.png")

        assert exc_info.value.message == f"Image file not found: {tmp_path.resolve() / 'missing.png'}"

    def test_loads_bytes_and_mime_type(self, tmp_path):
        image = tmp_path / "photo.PNG"
        image.write_bytes(b"data")

        loaded = load_image(str(image))

        assert loaded.data == b"data"
        assert loaded.mime_type == "image/png"
        assert loaded.path.is_absolute()

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.jpg", "image/jpeg"),
            ("a.jpeg", "image/jpeg"),
            ("a.gif", "image/gif"),
            ("a.webp", "image/webp"),
            ("a.bmp", "image/jpeg"),
            ("noext", "image/jpeg"),
        ],
    )
    def test_mime_type_for(self, name, expected):
        assert mime_type_for(name) == expected


def test_ensure_output_dir_wraps_os_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    with pytest.raises(ConfigException):
        ensure_output_dir(Path(blocker) / "sub")
