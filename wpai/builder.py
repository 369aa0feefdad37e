# wpai/builder.py
"""
Export pipeline: validate → render → package → record.

Usage:
    from wpai.builder import PluginBuilder

    builder = PluginBuilder()
    config = builder.new_config(name="My Bot")
    result = builder.export(config)
    result.write_to("dist")  # dist/my-bot.zip
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

from wpai.config.schema import EngineSettings
from wpai.core.exceptions import AssemblyError
from wpai.enhance.enhancer import PromptEnhancer
from wpai.library import PluginLibrary
from wpai.logging.logger import get_logger
from wpai.logging.tags import GENERATOR
from wpai.packaging.assembler import ArchiveAssembler, ZipArchiveAssembler
from wpai.plugin_gen.renderer import render_plugin
from wpai.plugin_gen.types import PluginConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExportResult:
    """A packaged plugin ready to be saved."""

    filename: str
    data: bytes = field(repr=False)
    entries: Tuple[str, ...] = ()

    def write_to(self, directory: Union[str, Path]) -> Path:
        """Write the archive into ``directory``; returns the file path."""
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / self.filename
        path.write_bytes(self.data)
        logger.info(f"{GENERATOR} Saved {path}")
        return path


class PluginBuilder:
    """
    Ties together rendering, packaging, prompt enhancement and the library.

    Args:
        settings: Merged settings (package defaults when None)
        assembler: Archive assembler (zip when None)
        enhancer: Prompt enhancer (built from settings when None)
        library: Library that records successful exports
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        assembler: Optional[ArchiveAssembler] = None,
        enhancer: Optional[PromptEnhancer] = None,
        library: Optional[PluginLibrary] = None,
    ):
        self.settings = settings or EngineSettings()
        self.assembler = assembler or ZipArchiveAssembler()
        self.enhancer = enhancer or PromptEnhancer(settings=self.settings.enhancement)
        self.library = library if library is not None else PluginLibrary()

    def new_config(self, **overrides: Any) -> PluginConfig:
        """Start a new plugin from the wizard defaults."""
        return PluginConfig.new(**overrides)

    def render(self, config: PluginConfig) -> Dict[str, str]:
        """Render the plugin files without packaging them."""
        return render_plugin(config, self.settings.generator)

    def enhance_prompt(self, config: PluginConfig) -> PluginConfig:
        """Return ``config`` with an enhanced prompt (unchanged on failure)."""
        improved = self.enhancer.enhance(config.prompt_template, config.type)
        if improved == config.prompt_template:
            return config
        return config.with_updates(prompt_template=improved)

    def export(
        self,
        config: PluginConfig,
        progress_callback: Optional[Callable[[str], None]] = None,
    ) -> ExportResult:
        """
        Render and package ``config`` as ``<slug>.zip``.

        The config is recorded in the library only after packaging succeeds.

        Raises:
            ValidationError: If the config is incomplete or unsafe
            AssemblyError: If packaging fails
        """

        def progress(msg: str) -> None:
            if progress_callback:
                progress_callback(msg)
            logger.info(f"{GENERATOR} {msg}")

        progress(f"Rendering {config.slug}...")
        # Validates the config; nothing is packaged or recorded when it fails
        files = self.render(config)

        progress("Packaging archive...")
        try:
            data = self.assembler.assemble(config.slug, files)
        except AssemblyError:
            raise
        except Exception as e:
            raise AssemblyError(f"Archive assembler failed: {e}") from e

        if self.library.record(config):
            progress(f"Added {config.name} to your plugins")

        return ExportResult(
            filename=f"{config.slug}.zip",
            data=data,
            entries=tuple(f"{config.slug}/{path}" for path in files),
        )


__all__ = ["ExportResult", "PluginBuilder"]
