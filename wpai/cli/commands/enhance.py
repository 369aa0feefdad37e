# wpai/cli/commands/enhance.py
"""
Enhance command - improve a plugin's prompt with AI.

Usage:
    wpai enhance my-bot.yaml           # Show the suggestion
    wpai enhance my-bot.yaml --write   # Save it to the config file
"""

from __future__ import annotations

from pathlib import Path

from wpai.cli.ui import ui
from wpai.cli.utils import fail, load_plugin_or_exit, load_settings_or_exit
from wpai.core.config import ConfigError
from wpai.plugin_gen.config_file import save_plugin_config


def command(config_path: Path, write: bool = False) -> None:
    from wpai.builder import PluginBuilder

    settings = load_settings_or_exit()
    config = load_plugin_or_exit(config_path)
    builder = PluginBuilder(settings=settings)

    ui.header("WP-AI Engine", f"Enhancing prompt for {config.name}")
    ui.panel(config.prompt_template, title="Current prompt")

    enhanced = builder.enhance_prompt(config)
    if enhanced is config:
        ui.warning("Enhancement unavailable, prompt unchanged", "check your API key")
        return

    ui.panel(enhanced.prompt_template, title="Enhanced prompt", style="green")

    if write:
        try:
            save_plugin_config(enhanced, config_path)
        except (ConfigError, OSError) as e:
            fail(e)
        ui.success(f"Updated {config_path}")
