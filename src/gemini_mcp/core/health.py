# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Gemini MCP Contributors

"""Startup health checks for the Gemini MCP server.

Verifies that the environment is usable before serving: API key present and
output directory writable.  No remote call is made.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .config import CoreSettings, get_config
from .exceptions import ConfigException

logger = logging.getLogger(__name__)


@dataclass
class HealthStatus:
    """Result of a health check."""

    healthy: bool
    api_key_present: bool
    output_dir: str
    output_dir_writable: bool
    image_models: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "healthy": self.healthy,
            "api_key_present": self.api_key_present,
            "output_dir": self.output_dir,
            "output_dir_writable": self.output_dir_writable,
            "image_models": self.image_models,
            "warnings": self.warnings,
            "error": self.error,
        }


def check_output_dir(settings: CoreSettings) -> bool:
    """True if the output directory exists (or can be created) and is writable."""
    path = settings.output_path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Output directory {path} cannot be created: {e}")
        return False
    return os.access(path, os.W_OK)


def run_health_check(settings: CoreSettings | None = None) -> HealthStatus:
    """Run all health checks."""
    settings = settings or get_config()
    api_key_present = settings.has_api_key
    writable = check_output_dir(settings)
    models = settings.image_model_list

    warnings = []
    if not models:
        warnings.append("No image models configured; gemini_generate_image will always fail")
    if settings.max_conversations is None:
        warnings.append("Conversation registry is unbounded (set GEMINI_MAX_CONVERSATIONS to cap it)")

    error = None
    if not api_key_present:
        error = "GEMINI_API_KEY environment variable is not set"
    elif not writable:
        error = f"Output directory is not writable: {settings.output_path}"

    return HealthStatus(
        healthy=api_key_present and writable,
        api_key_present=api_key_present,
        output_dir=str(settings.output_path),
        output_dir_writable=writable,
        image_models=models,
        warnings=warnings,
        error=error,
    )


def startup_checks(settings: CoreSettings | None = None, fail_fast: bool = False) -> HealthStatus:
    """Log health problems at startup.

    A missing API key is not fatal by default: the server still starts and
    every tool call reports the missing key.

    Raises:
        ConfigException: if ``fail_fast`` and the check failed.
    """
    status = run_health_check(settings)
    logger.info("Startup health check", extra={"data": status.to_dict()})
    for warning in status.warnings:
        logger.warning(warning)
    if status.error:
        if fail_fast:
            raise ConfigException(status.error, missing_vars=[] if status.api_key_present else ["GEMINI_API_KEY"])
        logger.error(status.error)
    return status


def cli_health_check(settings: CoreSettings | None = None) -> int:
    """CLI entry point for health check.

    Returns:
        Exit code (0 for healthy, 1 for unhealthy)
    """
    status = run_health_check(settings)

    print(f"Healthy: {status.healthy}")
    print(f"API key present: {status.api_key_present}")
    print(f"Output directory: {status.output_dir}")
    print(f"Output directory writable: {status.output_dir_writable}")
    print(f"Image models: {', '.join(status.image_models) or '(none)'}")

    if status.error:
        print(f"Error: {status.error}")

    if status.warnings:
        print("Warnings:")
        for warning in status.warnings:
            print(f"  - {warning}")

    return 0 if status.healthy else 1
