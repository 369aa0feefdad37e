# tests/test_library.py
"""
Tests for the in-memory plugin library.
"""

from __future__ import annotations

import pytest

from wpai.library import PluginLibrary
from wpai.plugin_gen.types import PluginConfig

pytestmark = pytest.mark.tier1


class TestPluginLibrary:
    """Tests for PluginLibrary."""

    def test_empty(self):
        library = PluginLibrary()

        assert len(library) == 0
        assert library.records() == []
        assert library.get("plg_missing00") is None

    def test_record_new(self, bot_config):
        library = PluginLibrary()

        assert library.record(bot_config) is True
        assert "plg_test12345" in library
        assert library.get("plg_test12345") is bot_config

    def test_same_id_refreshes(self, bot_config):
        """Test re-exporting a config replaces its entry instead of duplicating it."""
        library = PluginLibrary()
        library.record(bot_config)

        updated = bot_config.with_updates(version="2.1.0")
        assert library.record(updated) is False

        assert len(library) == 1
        assert library.get(bot_config.id).version == "2.1.0"

    def test_keeps_first_export_order(self, bot_config):
        library = PluginLibrary()
        other = PluginConfig.new(name="Other Bot")

        library.record(bot_config)
        library.record(other)
        library.record(bot_config.with_updates(version="3.0.0"))

        assert [c.id for c in library] == [bot_config.id, other.id]
        assert [r.slug for r in library.records()] == ["my-bot", "other-bot"]
