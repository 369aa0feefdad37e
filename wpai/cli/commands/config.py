# wpai/cli/commands/config.py
"""
Configuration command.

Usage:
    wpai config           # Show effective settings
    wpai config --json    # Output as JSON
    wpai config --path    # Show settings file path
"""

from __future__ import annotations

import json

import yaml

from wpai.cli.ui import console, ui
from wpai.cli.utils import load_settings_or_exit
from wpai.config.loader import get_settings_source
from wpai.core.paths import WPAIPaths


def command(show_path: bool = False, as_json: bool = False) -> None:
    if show_path:
        console.print(str(WPAIPaths.config()), highlight=False, soft_wrap=True)
        return

    settings = load_settings_or_exit()
    data = settings.model_dump(mode="json")
    if data["enhancement"].get("api_key"):
        data["enhancement"]["api_key"] = "***"

    if as_json:
        console.print_json(json.dumps(data))
        return

    ui.header("WP-AI Engine Settings", f"Source: {get_settings_source()}")
    ui.code(yaml.safe_dump(data, sort_keys=False), lexer="yaml")
