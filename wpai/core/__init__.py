# wpai/core/__init__.py
"""Shared infrastructure: exceptions, config loading, HTTP, paths."""

from wpai.core.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from wpai.core.exceptions import (
    AssemblyError,
    EnhancementError,
    ValidationError,
    WPAIError,
)
from wpai.core.paths import WPAIPaths

__all__ = [
    "WPAIError",
    "ValidationError",
    "AssemblyError",
    "EnhancementError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "WPAIPaths",
]
