# wpai/config/loader.py
"""
Layered settings loading.

Merge strategy:
    1. Package defaults (wpai/config/defaults/settings.yaml) - always loaded
    2. User settings (.wpai/config.yaml) - overrides defaults

Usage:
    from wpai.config.loader import load_settings

    settings = load_settings()
    settings.generator.api_endpoint  # always exists
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from wpai.config.schema import EngineSettings
from wpai.core.config import load_yaml, validate_config
from wpai.core.paths import WPAIPaths
from wpai.logging.logger import get_logger
from wpai.logging.tags import CONFIG

logger = get_logger(__name__)


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively; lists are replaced.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_defaults() -> dict[str, Any]:
    """Load the packaged default settings."""
    return load_yaml(WPAIPaths.defaults())


def load_settings_dict(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """
    Load merged settings as a raw dictionary.

    Args:
        path: Explicit user settings file. When None, .wpai/config.yaml is
              used if it exists.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If a settings file is not valid YAML
    """
    defaults = load_defaults()

    user_path = Path(path) if path is not None else WPAIPaths.config()
    if path is None and not user_path.exists():
        logger.debug(f"{CONFIG} No user settings at {user_path}, using defaults")
        return defaults

    merged = deep_merge(defaults, load_yaml(user_path))
    logger.debug(f"{CONFIG} Merged settings: defaults + {user_path}")
    return merged


def load_settings(path: Optional[Union[str, Path]] = None) -> EngineSettings:
    """
    Load and validate merged settings.

    Raises:
        ConfigValidationError: If the merged settings don't match the schema
    """
    source = Path(path) if path is not None else WPAIPaths.config()
    return validate_config(load_settings_dict(path), EngineSettings, path=source)


def get_settings_source(path: Optional[Union[str, Path]] = None) -> str:
    """Describe where settings are loaded from."""
    user_path = Path(path) if path is not None else WPAIPaths.config()
    if user_path.exists():
        return str(user_path)
    return "package defaults"


__all__ = [
    "deep_merge",
    "load_defaults",
    "load_settings",
    "load_settings_dict",
    "get_settings_source",
]
