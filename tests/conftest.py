"""Global test fixtures for the gemini_mcp test suite."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from gemini_mcp.core.client import GeminiClient
from gemini_mcp.core.config import CoreSettings, clear_config_cache
from gemini_mcp.core.conversations import ConversationRegistry
from gemini_mcp.mcp.context import ToolContext, set_tool_context

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all GEMINI_ environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith("GEMINI_"):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def reset_tool_context():
    """Never leak a process-wide tool context between tests."""
    set_tool_context(None)
    yield
    set_tool_context(None)


# ============================================================================
# Settings / Context Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "gemini-output"


@pytest.fixture
def settings(clean_env, output_dir):
    """Settings with an API key and a temporary output directory."""
    return CoreSettings(api_key="test-key", output_dir=str(output_dir))


@pytest.fixture
def settings_without_key(clean_env, output_dir):
    return CoreSettings(api_key="", output_dir=str(output_dir))


@pytest.fixture
def mock_client():
    """GeminiClient double; remote methods are AsyncMocks returning plain text."""
    client = MagicMock(spec=GeminiClient)
    client.generate_text = AsyncMock(return_value="generated text")
    client.analyze_image = AsyncMock(return_value="a cat on a mat")
    client.send_message = AsyncMock(return_value="chat reply")
    client.generate_image_content = AsyncMock()
    client.start_chat = MagicMock(side_effect=lambda model, system_instruction=None: MagicMock(name=f"chat-{model}"))
    return client


@pytest.fixture
def registry():
    return ConversationRegistry()


@pytest.fixture
def tool_context(settings, mock_client, registry):
    return ToolContext(settings=settings, client=mock_client, registry=registry)


@pytest.fixture
def keyless_context(settings_without_key, mock_client, registry):
    """Context with a client present but no API key configured."""
    return ToolContext(settings=settings_without_key, client=mock_client, registry=registry)
