"""Core configuration - centralized config for the gemini_mcp package.

All environment-based configuration should flow through this module.
This provides a single source of truth and consistent defaults.

Usage:
    from gemini_mcp.core.config import get_config
    config = get_config()

    # Access settings
    api_key = config.api_key
    output_dir = config.output_path
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_IMAGE_MODELS = (
    "gemini-2.5-flash-image",
    "gemini-2.0-flash-exp-image-generation",
    "gemini-2.0-flash-preview-image-generation",
)


class CoreSettings(BaseSettings):
    """Core configuration settings for the Gemini MCP server.

    The API key and output directory keep the plain GEMINI_ names that MCP
    host configurations already use; server-internal settings use the
    GEMINI_MCP_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ==========================================================================
    # REMOTE API SETTINGS
    # ==========================================================================

    api_key: str = Field(
        default="",
        description="Gemini API key; every tool call fails while unset",
        validation_alias="GEMINI_API_KEY",
    )
    image_models: str = Field(
        default=",".join(DEFAULT_IMAGE_MODELS),
        description="Comma-separated image-capable models, tried in order",
        validation_alias="GEMINI_IMAGE_MODELS",
    )

    # ==========================================================================
    # OUTPUT SETTINGS
    # ==========================================================================

    output_dir: str = Field(
        default="",
        description="Directory for saved text and image output (default: ~/Documents/gemini-output)",
        validation_alias="GEMINI_OUTPUT_DIR",
    )

    # ==========================================================================
    # CONVERSATION SETTINGS
    # ==========================================================================

    max_conversations: int | None = Field(
        default=None,
        description="Evict the oldest chat once this many are active (unset = unbounded)",
        validation_alias="GEMINI_MAX_CONVERSATIONS",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="GEMINI_MCP_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="GEMINI_MCP_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="GEMINI_MCP_LOG_FILE",
    )

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def has_api_key(self) -> bool:
        """True when an API key is configured."""
        return bool(self.api_key.strip())

    @property
    def output_path(self) -> Path:
        """Resolved output directory."""
        if self.output_dir:
            return Path(self.output_dir).expanduser()
        return Path.home() / "Documents" / "gemini-output"

    @property
    def image_model_list(self) -> list[str]:
        """Image models in fallback order."""
        return [m.strip() for m in self.image_models.split(",") if m.strip()]


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: CoreSettings | None = None


def get_config() -> CoreSettings:
    """Get the global configuration instance.

    Returns:
        The singleton CoreSettings instance.
    """
    global _config
    if _config is None:
        _config = CoreSettings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
