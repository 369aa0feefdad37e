# wpai/config/schema.py
"""
Settings schema for wpai.

Schema hierarchy:
- EngineSettings: The merged settings consumed by the CLI and builder
- GeneratorSettings: Values baked into generated plugin files
- EnhancementSettings: Prompt enhancement client settings
- OutputSettings: Where exported archives are written
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_ENDPOINT = "https://api.wp-ai-engine.io/v1/process"


class GeneratorSettings(BaseModel):
    """
    Values interpolated into every generated plugin.

    Defaults mirror config/defaults/settings.yaml so the renderer can be used
    without loading any file.
    """

    author: str = Field(default="WP-AI Engine User", description="Plugin header Author")
    api_endpoint: str = Field(
        default=DEFAULT_API_ENDPOINT, description="Endpoint the generated plugin proxies to"
    )
    api_key_placeholder: str = Field(
        default="YOUR_WP_AI_API_KEY", description="Key placeholder written into the PHP class"
    )
    contributors: str = Field(default="wp-ai-engine", description="readme Contributors line")
    requires_at_least: str = Field(default="5.8", description="Minimum WordPress version")
    tested_up_to: str = Field(default="6.4", description="Latest tested WordPress version")
    license: str = Field(default="GPLv2 or later", description="readme License line")
    menu_icon: str = Field(default="dashicons-superhero", description="Admin menu dashicon")

    model_config = ConfigDict(extra="forbid", frozen=True)


class EnhancementSettings(BaseModel):
    """Prompt enhancement collaborator settings."""

    enabled: bool = True
    provider: str = "gemini"
    model: str = "gemini-3-flash-preview"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: float = Field(default=30.0, gt=0)
    api_key: Optional[str] = Field(
        default=None, description="Explicit API key; env vars are used when unset"
    )

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Export destination."""

    directory: str = "dist"

    model_config = ConfigDict(extra="forbid")


class EngineSettings(BaseModel):
    """Complete, merged wpai settings."""

    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    enhancement: EnhancementSettings = Field(default_factory=EnhancementSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "DEFAULT_API_ENDPOINT",
    "EngineSettings",
    "GeneratorSettings",
    "EnhancementSettings",
    "OutputSettings",
]
