# wpai/config/__init__.py
"""Layered settings: package defaults plus workspace overrides."""

from wpai.config.loader import load_settings
from wpai.config.schema import (
    EngineSettings,
    EnhancementSettings,
    GeneratorSettings,
    OutputSettings,
)

__all__ = [
    "load_settings",
    "EngineSettings",
    "GeneratorSettings",
    "EnhancementSettings",
    "OutputSettings",
]
