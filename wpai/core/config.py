# wpai/core/config.py
"""
YAML loading and schema validation shared by settings and plugin files.

Usage:
    from wpai.core.config import load_yaml, save_yaml, ConfigError

    data = load_yaml("my-bot.yaml")
    save_yaml(data, "backup.yaml")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wpai.logging.tags import CONFIG

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def validate_config(data: Dict[str, Any], schema: Type[T], path: Optional[Path] = None) -> T:
    """Validate raw config data against a pydantic schema."""
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigValidationError(f"Invalid configuration: {errors}", path=path) from e


def save_yaml(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write a mapping to a YAML file, keeping key order."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    logger.debug(f"{CONFIG} Wrote config to {p}")
    return p


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_yaml",
    "validate_config",
    "save_yaml",
]
