# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Logging for the Gemini MCP server.

stdout carries the MCP transport, so logs only ever go to stderr and an
optional file.

Each tool call runs inside ``tool_call_context``.  ``CallContextFilter``
copies the call id and tool name onto every record emitted during the call,
so the lines of one call can be grouped even when calls overlap on the
event loop.

Usage::

    with tool_call_context("gemini_chat") as call_id:
        logger.info("Started conversation %s", conversation_id)
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

_call_id: ContextVar[str | None] = ContextVar("gemini_mcp_call_id", default=None)
_tool_name: ContextVar[str | None] = ContextVar("gemini_mcp_tool_name", default=None)

# Chatty at INFO; only their warnings are interesting here
QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "asyncio")


def get_call_id() -> str | None:
    return _call_id.get()


def get_tool_name() -> str | None:
    return _tool_name.get()


@contextmanager
def tool_call_context(tool_name: str, call_id: str | None = None) -> Generator[str, None, None]:
    """Scope one tool call.

    Args:
        tool_name: Tool being called; stamped on every record as ``tool``.
        call_id: Id to use; a short random hex id is generated when omitted.

    Yields:
        The call id.
    """
    call_id = call_id or uuid.uuid4().hex[:12]
    call_token = _call_id.set(call_id)
    tool_token = _tool_name.set(tool_name)
    try:
        yield call_id
    finally:
        _tool_name.reset(tool_token)
        _call_id.reset(call_token)


class CallContextFilter(logging.Filter):
    """Stamp ``call_id`` and ``tool`` onto records (both None outside a call)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.call_id = _call_id.get()
        record.tool = _tool_name.get()
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Structured values passed as ``extra={"data": {...}}`` are emitted under
    ``data``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("tool", "call_id"):
            value = getattr(record, key, None)
            if value:
                entry[key] = value

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.levelno >= logging.ERROR:
            entry["where"] = f"{record.module}:{record.lineno}"
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain single-line format for an interactive terminal."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s%(call_label)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        tool = getattr(record, "tool", None)
        call_id = getattr(record, "call_id", None)
        record.call_label = f" [{tool}#{call_id}]" if tool and call_id else ""
        return super().format(record)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _wants_json(log_format: str) -> bool:
    log_format = log_format.strip().lower()
    if log_format in ("json", "text"):
        return log_format == "json"
    # Host-launched servers have a pipe on stderr, not a terminal
    return not sys.stderr.isatty()


def configure_logging(
    level: str | int | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Install stderr (and optional file) handlers on the root logger.

    Arguments left as None come from ``GEMINI_MCP_LOG_LEVEL``,
    ``GEMINI_MCP_LOG_FORMAT`` and ``GEMINI_MCP_LOG_FILE``.  The file always
    gets JSON.  Calling this again replaces the handlers it installed before.
    """
    from .config import get_config

    settings = get_config()
    level = _resolve_level(level if level is not None else settings.log_level)
    if json_format is None:
        json_format = _wants_json(settings.log_format)
    if log_file is None:
        log_file = settings.log_file

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(JSONFormatter() if json_format else TextFormatter())
    handlers: list[logging.Handler] = [console]
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    call_filter = CallContextFilter()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        handler.addFilter(call_filter)
        root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class ToolCallLogger:
    """Logs each tool call's arguments and outcome.

    Argument values are summarised before logging: secrets are redacted,
    free text (prompts, chat messages) is reduced to its length, and any
    other long string is truncated.
    """

    # Matched against whole argument names, case-insensitively
    SECRET_ARGUMENTS = frozenset(
        {
            "api_key",
            "apikey",
            "key",
            "password",
            "secret",
            "token",
            "access_token",
            "auth_token",
            "authorization",
            "credentials",
        }
    )
    FREE_TEXT_ARGUMENTS = frozenset({"prompt", "message", "system_instruction"})
    MAX_VALUE_LENGTH = 120

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("gemini_mcp.tools")

    def log_call(self, tool_name: str, arguments: Mapping[str, Any]) -> None:
        data: dict[str, Any] = {"arguments": self.summarize(arguments)}
        if isinstance(arguments.get("model"), str):
            data["model"] = arguments["model"]
        self.logger.debug(f"Calling {tool_name}", extra={"data": data})

    def log_result(self, tool_name: str, success: bool, duration_ms: float) -> None:
        """Successes at DEBUG, failures at INFO."""
        status = "ok" if success else "error"
        self.logger.log(
            logging.DEBUG if success else logging.INFO,
            f"{tool_name} {status} in {duration_ms:.1f}ms",
            extra={"data": {"success": success, "duration_ms": round(duration_ms, 1)}},
        )

    def summarize(self, value: Any, key: str | None = None) -> Any:
        """Loggable copy of an argument value."""
        name = key.lower() if key else None
        if name in self.SECRET_ARGUMENTS:
            return "[REDACTED]"
        if isinstance(value, Mapping):
            return {k: self.summarize(v, str(k)) for k, v in value.items()}
        if isinstance(value, list):
            return [self.summarize(item) for item in value]
        if isinstance(value, str):
            if name in self.FREE_TEXT_ARGUMENTS:
                return f"<{len(value)} chars>"
            if len(value) > self.MAX_VALUE_LENGTH:
                return value[: self.MAX_VALUE_LENGTH] + "..."
        return value


tool_logger = ToolCallLogger()
