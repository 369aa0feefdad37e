# wpai/plugin_gen/config_file.py
"""
Plugin configuration files.

`wpai new` saves the wizard answers as YAML; the other commands load them.
Hand-written files may leave fields out, they are filled from the wizard
defaults exactly as PluginConfig.new() does. Two fields are never filled in:
`id` must be present so every build of a file embeds the same plugin id, and
`version` must be a string (quote it, YAML reads `1.10` as the float 1.1).

Example file:
    id: plg_k3x9a0q2m
    name: My Bot
    slug: my-bot
    version: 2.0.0
    type: chatbot
    primary_color: '#ff0000'
    prompt_template: Be nice
    features:
      use_gutenberg: true
      use_shortcode: true
      show_in_menu: true
      require_auth: false
    ai_model: gemini-3-flash-preview
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from wpai.core.config import ConfigValidationError, load_yaml, save_yaml
from wpai.core.exceptions import ValidationError
from wpai.logging.logger import get_logger
from wpai.logging.tags import CONFIG
from wpai.plugin_gen.types import PluginConfig

logger = get_logger(__name__)


def load_plugin_config(path: Union[str, Path]) -> PluginConfig:
    """
    Load a plugin configuration file.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the file is not a YAML mapping
        ConfigValidationError: If `id` is missing, `version` is not a string
            or a value has the wrong type
    """
    p = Path(path)
    data = load_yaml(p)

    if not data.get("id"):
        raise ConfigValidationError(
            "id: required (files written by `wpai new` always carry one)", path=p
        )
    if "version" in data and not isinstance(data["version"], str):
        raise ConfigValidationError(
            "version: must be a quoted string, e.g. version: '1.10'", path=p
        )

    try:
        config = PluginConfig.new(**{str(key): value for key, value in data.items()})
    except ValidationError as e:
        raise ConfigValidationError(str(e), path=p) from e

    logger.debug(f"{CONFIG} Loaded plugin config {config.id} ({config.slug}) from {p}")
    return config


def save_plugin_config(config: PluginConfig, path: Union[str, Path]) -> Path:
    """Write a plugin configuration file; returns the written path."""
    return save_yaml(config.model_dump(mode="json"), path)


__all__ = ["load_plugin_config", "save_plugin_config"]
