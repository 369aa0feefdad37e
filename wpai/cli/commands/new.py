# wpai/cli/commands/new.py
"""
New command - interactive plugin wizard.

Usage:
    wpai new                      # Four-step wizard
    wpai new --name "My Bot" -y   # Defaults only, no prompts
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from wpai.cli.ui import ui
from wpai.cli.utils import fail, load_settings_or_exit
from wpai.core.config import ConfigError
from wpai.core.exceptions import WPAIError
from wpai.plugin_gen.config_file import save_plugin_config
from wpai.plugin_gen.types import AIModel, PluginConfig, PluginType, slugify
from wpai.plugin_gen.validators import HEX_COLOR_RE, VERSION_RE, validate_plugin_config

TOTAL_STEPS = 4


# =============================================================================
# Wizard Steps
# =============================================================================


def _identity_step(config: PluginConfig) -> PluginConfig:
    ui.step(1, TOTAL_STEPS, "Identity")

    while True:
        name = ui.prompt_text("Plugin name", default=config.name)
        if slugify(name):
            break
        ui.error("The name needs at least one ASCII letter or digit (a-z, 0-9) to form the slug")

    config = config.with_updates(name=name)
    ui.info(f"Slug: {config.slug}")

    while True:
        version = ui.prompt_text("Version", default=config.version)
        if VERSION_RE.fullmatch(version):
            break
        ui.error(f"Not a valid version: {version} (use letters, digits, '.', '+', '-')")

    plugin_type = ui.prompt_numbered_choice(
        "Plugin type", [pt.value for pt in PluginType], default=config.type.value
    )
    return config.with_updates(version=version, type=PluginType(plugin_type))


def _design_step(config: PluginConfig) -> PluginConfig:
    ui.step(2, TOTAL_STEPS, "Design")

    while True:
        color = ui.prompt_text("Primary color (hex)", default=config.primary_color)
        if HEX_COLOR_RE.fullmatch(color):
            return config.with_updates(primary_color=color)
        ui.error(f"Not a hex color: {color}")


def _ai_step(config: PluginConfig, builder) -> PluginConfig:
    ui.step(3, TOTAL_STEPS, "AI behavior")

    prompt = ui.prompt_text("Prompt template", default=config.prompt_template)
    model = ui.prompt_numbered_choice(
        "AI model", [m.value for m in AIModel], default=config.ai_model.value
    )
    config = config.with_updates(prompt_template=prompt, ai_model=AIModel(model))

    if ui.prompt_confirm("Enhance the prompt with AI?", default=False):
        enhanced = builder.enhance_prompt(config)
        if enhanced.prompt_template == config.prompt_template:
            ui.warning("Enhancement unavailable, keeping your prompt")
        else:
            ui.panel(enhanced.prompt_template, title="Enhanced prompt", style="green")
            if ui.prompt_confirm("Use the enhanced prompt?", default=True):
                config = enhanced

    return config


def _features_step(config: PluginConfig) -> PluginConfig:
    ui.step(4, TOTAL_STEPS, "Features")

    f = config.features
    return config.with_updates(
        features={
            "use_gutenberg": ui.prompt_confirm("Gutenberg block?", default=f.use_gutenberg),
            "use_shortcode": ui.prompt_confirm(
                f"Shortcode ({config.slug})?", default=f.use_shortcode
            ),
            "show_in_menu": ui.prompt_confirm("Top-level admin menu?", default=f.show_in_menu),
            "require_auth": ui.prompt_confirm(
                "Require logged-in users?", default=f.require_auth
            ),
        }
    )


# =============================================================================
# Main Command
# =============================================================================


def command(
    output: Optional[Path] = None,
    name: Optional[str] = None,
    non_interactive: bool = False,
    build: Optional[bool] = None,
) -> None:
    """Run the wizard, save the plugin config and optionally build the zip."""
    from wpai.builder import PluginBuilder

    settings = load_settings_or_exit()
    builder = PluginBuilder(settings=settings)

    ui.header("WP-AI Engine", "Build an AI-powered WordPress plugin")

    try:
        overrides = {"name": name} if name else {}
        config = builder.new_config(**overrides)

        if not non_interactive:
            config = _identity_step(config)
            config = _design_step(config)
            config = _ai_step(config, builder)
            config = _features_step(config)

        config = validate_plugin_config(config)

        config_path = save_plugin_config(config, output or Path(f"{config.slug}.yaml"))
        ui.success(f"Saved plugin config: {config_path}")

        if build is None:
            build = non_interactive or ui.prompt_confirm("Build the plugin zip now?", default=True)

        if build:
            result = builder.export(config, progress_callback=ui.info)
            path = result.write_to(settings.output.directory)
            ui.success(f"Plugin ready: {path}")
    except (ConfigError, WPAIError, OSError) as e:
        fail(e)
