# wpai/cli/utils.py
"""
Shared CLI utilities.

Common functions used across multiple CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from wpai.cli.ui import ui
from wpai.config.loader import load_settings
from wpai.config.schema import EngineSettings
from wpai.core.config import ConfigError
from wpai.core.exceptions import WPAIError
from wpai.logging.logger import get_logger
from wpai.logging.tags import CLI
from wpai.plugin_gen.config_file import load_plugin_config
from wpai.plugin_gen.types import PluginConfig

logger = get_logger(__name__)


def fail(exc: Exception) -> NoReturn:
    """Report an error and exit with status 1."""
    logger.debug(f"{CLI} Command failed", exc_info=exc)
    ui.error(str(exc))
    raise typer.Exit(1)


def load_settings_or_exit() -> EngineSettings:
    try:
        return load_settings()
    except ConfigError as e:
        fail(e)


def load_plugin_or_exit(path: Path) -> PluginConfig:
    try:
        return load_plugin_config(path)
    except (ConfigError, WPAIError) as e:
        fail(e)


__all__ = ["fail", "load_settings_or_exit", "load_plugin_or_exit"]
