# wpai/plugin_gen/__init__.py
"""
WordPress plugin generator.

Turns a PluginConfig into the files of a WordPress plugin.

Usage:
    from wpai.plugin_gen import PluginConfig, render_plugin

    config = PluginConfig.new(name="My Bot")
    files = render_plugin(config)
    print(files["my-bot.php"])
"""

from wpai.plugin_gen.config_file import load_plugin_config, save_plugin_config
from wpai.plugin_gen.renderer import (
    README_FILENAME,
    main_filename,
    render_main_php,
    render_plugin,
    render_readme,
)
from wpai.plugin_gen.types import (
    AIModel,
    PluginConfig,
    PluginFeatures,
    PluginRecord,
    PluginType,
    class_prefix,
    function_prefix,
    generate_plugin_id,
    slugify,
)
from wpai.plugin_gen.validators import validate_plugin_config

__all__ = [
    "AIModel",
    "PluginConfig",
    "PluginFeatures",
    "PluginRecord",
    "PluginType",
    "README_FILENAME",
    "class_prefix",
    "function_prefix",
    "generate_plugin_id",
    "load_plugin_config",
    "main_filename",
    "render_main_php",
    "render_plugin",
    "render_readme",
    "save_plugin_config",
    "slugify",
    "validate_plugin_config",
]
