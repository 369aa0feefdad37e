# wpai/cli/commands/preview.py
"""
Preview command - print a generated file without packaging it.

Usage:
    wpai preview my-bot.yaml            # Main PHP file
    wpai preview my-bot.yaml --readme   # readme.txt
"""

from __future__ import annotations

from pathlib import Path

from wpai.cli.ui import ui
from wpai.cli.utils import fail, load_plugin_or_exit, load_settings_or_exit
from wpai.core.exceptions import WPAIError
from wpai.plugin_gen.renderer import README_FILENAME, main_filename, render_plugin


def command(config_path: Path, readme: bool = False) -> None:
    settings = load_settings_or_exit()
    config = load_plugin_or_exit(config_path)

    try:
        files = render_plugin(config, settings.generator)
    except WPAIError as e:
        fail(e)

    if readme:
        ui.code(files[README_FILENAME], lexer="text")
    else:
        ui.code(files[main_filename(config)], lexer="php")
