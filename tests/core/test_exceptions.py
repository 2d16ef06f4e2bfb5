"""Tests for the gemini_mcp exception hierarchy."""

from __future__ import annotations

from gemini_mcp.core.exceptions import (
    ConfigException,
    FallbackExhausted,
    GeminiMCPException,
    NotFoundError,
    ValidationException,
)


def test_all_inherit_from_base():
    for exc in (
        ValidationException("bad"),
        ConfigException("missing"),
        NotFoundError("Image file", "/tmp/x.png"),
        FallbackExhausted([]),
    ):
        assert isinstance(exc, GeminiMCPException)


def test_validation_details():
    exc = ValidationException("prompt: Field required", field="prompt", value=3)

    assert exc.to_dict() == {
        "error": "ValidationException",
        "message": "prompt: Field required",
        "details": {"field": "prompt", "value": "3"},
    }


def test_not_found_message():
    exc = NotFoundError("Image file", "/tmp/x.png")

    assert str(exc) == "Image file not found: /tmp/x.png"
    assert exc.details == {"resource_type": "Image file", "resource_id": "/tmp/x.png"}


def test_config_missing_vars():
    exc = ConfigException("no key", missing_vars=["GEMINI_API_KEY"])

    assert exc.missing_vars == ["GEMINI_API_KEY"]
    assert exc.details["missing_vars"] == ["GEMINI_API_KEY"]


def test_fallback_exhausted_last_error():
    first, last = RuntimeError("a"), RuntimeError("b")
    exc = FallbackExhausted([("m1", first), ("m2", last)])

    assert exc.last_error is last
    assert exc.last_message == "b"
    assert exc.message == "All 2 candidates failed"
