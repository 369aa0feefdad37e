# wpai/cli/commands/build.py
"""
Build command - package a plugin config as <slug>.zip.

Usage:
    wpai build my-bot.yaml
    wpai build my-bot.yaml --output-dir ./out --enhance
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from wpai.cli.ui import ui
from wpai.cli.utils import fail, load_plugin_or_exit, load_settings_or_exit
from wpai.core.exceptions import WPAIError


def command(config_path: Path, output_dir: Optional[Path] = None, enhance: bool = False) -> None:
    """Export the plugin described by ``config_path``."""
    from wpai.builder import PluginBuilder

    settings = load_settings_or_exit()
    config = load_plugin_or_exit(config_path)
    builder = PluginBuilder(settings=settings)

    ui.header("WP-AI Engine", f"Building {config.name} v{config.version}")

    if enhance:
        enhanced = builder.enhance_prompt(config)
        if enhanced is config:
            ui.warning("Enhancement unavailable, using the original prompt")
        config = enhanced

    try:
        result = builder.export(config, progress_callback=ui.info)
        path = result.write_to(output_dir or Path(settings.output.directory))
    except (WPAIError, OSError) as e:
        fail(e)

    ui.key_values(
        "Archive",
        [("File", str(path)), ("Size", f"{len(result.data)} bytes")]
        + [("Entry", entry) for entry in result.entries],
    )
    ui.success(f"Plugin ready: {path}")
