# wpai/cli/cli.py
"""
WP-AI Engine CLI - Main application.

Commands:
    wpai new        Wizard: configure a plugin and build it (START HERE)
    wpai build      Package a saved plugin config as <slug>.zip
    wpai preview    Print the generated PHP file or readme.txt
    wpai enhance    Improve a plugin's prompt with AI
    wpai config     View effective settings

NOTE: Commands use lazy loading - imports only happen when a command is invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from wpai.logging.logger import configure_logging

app = typer.Typer(
    name="wpai",
    help="WP-AI Engine - generate AI-powered WordPress plugins. Start with: wpai new",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """WP-AI Engine - generate AI-powered WordPress plugins."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# =============================================================================
# LAZY COMMANDS
# =============================================================================
# Each command is a thin wrapper that imports the real implementation only when invoked.


@app.command("new")
def new(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to save the plugin config (default: <slug>.yaml)."
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Plugin name."),
    non_interactive: bool = typer.Option(False, "--yes", "-y", help="Use defaults, no prompts."),
    build: Optional[bool] = typer.Option(
        None, "--build/--no-build", help="Build the zip after saving (asks when omitted)."
    ),
) -> None:
    """Create a plugin with the interactive wizard."""
    from wpai.cli.commands import new as mod

    mod.command(output=output, name=name, non_interactive=non_interactive, build=build)


@app.command("build")
def build(
    config_path: Path = typer.Argument(..., help="Plugin config file (YAML)."),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for the zip (default: settings)."
    ),
    enhance: bool = typer.Option(False, "--enhance", "-e", help="Enhance the prompt first."),
) -> None:
    """Package a plugin config as <slug>.zip."""
    from wpai.cli.commands import build as mod

    mod.command(config_path=config_path, output_dir=output_dir, enhance=enhance)


@app.command("preview")
def preview(
    config_path: Path = typer.Argument(..., help="Plugin config file (YAML)."),
    readme: bool = typer.Option(False, "--readme", "-r", help="Show readme.txt instead."),
) -> None:
    """Print a generated file without packaging it."""
    from wpai.cli.commands import preview as mod

    mod.command(config_path=config_path, readme=readme)


@app.command("enhance")
def enhance(
    config_path: Path = typer.Argument(..., help="Plugin config file (YAML)."),
    write: bool = typer.Option(False, "--write", "-w", help="Save the enhanced prompt."),
) -> None:
    """Improve a plugin's prompt with AI."""
    from wpai.cli.commands import enhance as mod

    mod.command(config_path=config_path, write=write)


@app.command("config")
def config(
    show_path: bool = typer.Option(False, "--path", "-p", help="Show settings file path."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """View effective settings."""
    from wpai.cli.commands import config as mod

    mod.command(show_path=show_path, as_json=as_json)


if __name__ == "__main__":
    app()
