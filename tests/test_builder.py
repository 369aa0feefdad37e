# tests/test_builder.py
"""
Tests for the export pipeline.
"""

from __future__ import annotations

import io
import logging
import zipfile
from unittest.mock import MagicMock

import pytest

from wpai.builder import ExportResult, PluginBuilder
from wpai.config.schema import EngineSettings, GeneratorSettings
from wpai.core.exceptions import AssemblyError, ValidationError
from wpai.library import PluginLibrary

pytestmark = pytest.mark.tier1


class _FailingAssembler:
    def assemble(self, folder_name, entries):
        raise OSError("disk full")


class TestExport:
    """Tests for PluginBuilder.export()."""

    def test_export(self, bot_config):
        library = PluginLibrary()
        result = PluginBuilder(library=library).export(bot_config)

        assert result.filename == "my-bot.zip"
        assert result.entries == ("my-bot/my-bot.php", "my-bot/readme.txt")
        with zipfile.ZipFile(io.BytesIO(result.data)) as zf:
            assert zf.namelist() == list(result.entries)
            assert b"Plugin Name: My Bot" in zf.read("my-bot/my-bot.php")

        assert bot_config.id in library

    def test_progress_callback(self, bot_config):
        messages: list[str] = []
        PluginBuilder().export(bot_config, progress_callback=messages.append)

        assert messages[0] == "Rendering my-bot..."
        assert "Packaging archive..." in messages
        assert messages[-1] == "Added My Bot to your plugins"

    def test_reexport_does_not_duplicate(self, bot_config):
        builder = PluginBuilder()

        builder.export(bot_config)
        builder.export(bot_config.with_updates(version="2.1.0"))

        assert len(builder.library) == 1
        assert builder.library.get(bot_config.id).version == "2.1.0"

    def test_invalid_config_records_nothing(self, bot_config):
        assembler = MagicMock()
        builder = PluginBuilder(assembler=assembler)
        config = bot_config.model_copy(update={"slug": "bad slug"})

        with pytest.raises(ValidationError):
            builder.export(config)

        assembler.assemble.assert_not_called()
        assert len(builder.library) == 0

    def test_validates_once(self, bot_config, caplog):
        """Test a non-dotted version warns once per export."""
        config = bot_config.with_updates(version="2.0-beta")

        with caplog.at_level(logging.WARNING, logger="wpai.plugin_gen.validators"):
            PluginBuilder().export(config)

        assert caplog.text.count("not dotted numeric") == 1

    def test_assembler_failure(self, bot_config):
        """Test a failing assembler surfaces AssemblyError and records nothing."""
        builder = PluginBuilder(assembler=_FailingAssembler())

        with pytest.raises(AssemblyError, match="disk full"):
            builder.export(bot_config)

        assert len(builder.library) == 0

    def test_assembly_error_passes_through(self, bot_config):
        assembler = MagicMock()
        error = AssemblyError("nope")
        assembler.assemble.side_effect = error

        with pytest.raises(AssemblyError) as exc_info:
            PluginBuilder(assembler=assembler).export(bot_config)
        assert exc_info.value is error

    def test_uses_generator_settings(self, bot_config):
        settings = EngineSettings(generator=GeneratorSettings(author="Acme"))
        files = PluginBuilder(settings=settings).render(bot_config)

        assert "Author: Acme" in files["my-bot.php"]


class TestExportResult:
    """Tests for ExportResult."""

    def test_write_to(self, tmp_path):
        result = ExportResult(filename="my-bot.zip", data=b"PK", entries=())
        path = result.write_to(tmp_path / "dist")

        assert path == tmp_path / "dist" / "my-bot.zip"
        assert path.read_bytes() == b"PK"

    def test_repr_hides_data(self):
        assert "data=" not in repr(ExportResult(filename="a.zip", data=b"x" * 100))


class TestEnhancePrompt:
    """Tests for PluginBuilder.enhance_prompt()."""

    def test_applies_enhanced_prompt(self, bot_config):
        enhancer = MagicMock()
        enhancer.enhance.return_value = "Be nice and helpful."

        updated = PluginBuilder(enhancer=enhancer).enhance_prompt(bot_config)

        assert updated.prompt_template == "Be nice and helpful."
        assert updated.id == bot_config.id
        enhancer.enhance.assert_called_once_with("Be nice", bot_config.type)

    def test_unchanged_returns_same_config(self, bot_config):
        enhancer = MagicMock()
        enhancer.enhance.return_value = "Be nice"

        assert PluginBuilder(enhancer=enhancer).enhance_prompt(bot_config) is bot_config

    def test_new_config(self):
        config = PluginBuilder().new_config(name="Shop Helper")
        assert config.slug == "shop-helper"
