# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Custom exception hierarchy for the Gemini MCP server.

Every failure a tool can hit locally maps onto one of these types so the
dispatch boundary can turn it into a structured error result.
"""

from __future__ import annotations

from typing import Any


class GeminiMCPException(Exception):  # noqa: N818
    """Base exception for all gemini_mcp errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(GeminiMCPException):
    """Exception for validation errors.

    Raised when:
    - A required tool argument is missing
    - An argument has the wrong type
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigException(GeminiMCPException):
    """Exception for configuration errors.

    Raised when:
    - Required environment variables are missing
    - The output directory cannot be created
    """

    def __init__(self, message: str, missing_vars: list[str] | None = None):
        details = {}
        if missing_vars:
            details["missing_vars"] = missing_vars
        super().__init__(message, details)
        self.missing_vars = missing_vars or []


class NotFoundError(GeminiMCPException):
    """Exception for missing local resources (e.g. an image to analyze)."""

    def __init__(self, resource_type: str, resource_id: str):
        message = f"{resource_type} not found: {resource_id}"
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id,
        }
        super().__init__(message, details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class FallbackExhausted(GeminiMCPException):
    """Every candidate in a fallback list failed.

    ``errors`` holds ``(candidate, exception)`` pairs in attempt order.
    """

    def __init__(self, errors: list[tuple[str, BaseException]]):
        self.errors = errors
        super().__init__(
            f"All {len(errors)} candidates failed",
            {"attempts": [{"candidate": c, "error": str(e)} for c, e in errors]},
        )

    @property
    def last_error(self) -> BaseException | None:
        return self.errors[-1][1] if self.errors else None

    @property
    def last_message(self) -> str:
        """Message of the final failure, or ``Unknown error`` when nothing was tried."""
        error = self.last_error
        if error is None:
            return "Unknown error"
        return str(error) or error.__class__.__name__
