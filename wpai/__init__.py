# wpai/__init__.py
"""
WP-AI Engine - generate AI-powered WordPress plugins.

Usage:
    from wpai import PluginBuilder

    builder = PluginBuilder()
    config = builder.new_config(name="My Bot")
    builder.export(config).write_to("dist")  # dist/my-bot.zip
"""

from wpai.builder import ExportResult, PluginBuilder
from wpai.core.exceptions import AssemblyError, EnhancementError, ValidationError, WPAIError
from wpai.library import PluginLibrary
from wpai.plugin_gen import AIModel, PluginConfig, PluginFeatures, PluginType, render_plugin

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AIModel",
    "AssemblyError",
    "EnhancementError",
    "ExportResult",
    "PluginBuilder",
    "PluginConfig",
    "PluginFeatures",
    "PluginLibrary",
    "PluginType",
    "ValidationError",
    "WPAIError",
    "render_plugin",
]
