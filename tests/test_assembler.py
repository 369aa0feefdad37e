# tests/test_assembler.py
"""
Tests for the zip archive assembler.
"""

from __future__ import annotations

import io
import zipfile

import pytest

from wpai.core.exceptions import AssemblyError
from wpai.packaging.assembler import FIXED_DATE_TIME, ArchiveAssembler, ZipArchiveAssembler
from wpai.plugin_gen.renderer import render_plugin

pytestmark = pytest.mark.tier1


def _open(data: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(data))


class TestZipArchiveAssembler:
    """Tests for ZipArchiveAssembler."""

    def test_implements_protocol(self):
        assert isinstance(ZipArchiveAssembler(), ArchiveAssembler)

    def test_plugin_layout(self, bot_config):
        """Test the two plugin files sit under a single slug folder."""
        data = ZipArchiveAssembler().assemble("my-bot", render_plugin(bot_config))

        with _open(data) as zf:
            assert zf.namelist() == ["my-bot/my-bot.php", "my-bot/readme.txt"]
            assert zf.read("my-bot/my-bot.php").decode("utf-8").startswith("<?php")
            assert b"Stable tag: 2.0.0" in zf.read("my-bot/readme.txt")

    def test_contents_round_trip(self):
        entries = {"a.txt": "héllo", "sub/b.txt": "world"}
        data = ZipArchiveAssembler().assemble("pkg", entries)

        with _open(data) as zf:
            assert zf.read("pkg/a.txt").decode("utf-8") == "héllo"
            assert zf.read("pkg/sub/b.txt") == b"world"

    def test_deterministic(self, bot_config):
        """Test the same entries always produce the same bytes."""
        files = render_plugin(bot_config)
        assembler = ZipArchiveAssembler()

        assert assembler.assemble("my-bot", files) == assembler.assemble("my-bot", files)

    def test_fixed_metadata(self):
        data = ZipArchiveAssembler().assemble("pkg", {"a.txt": "x"})

        with _open(data) as zf:
            info = zf.getinfo("pkg/a.txt")
            assert info.date_time == FIXED_DATE_TIME
            assert (info.external_attr >> 16) & 0o777 == 0o644
            assert info.compress_type == zipfile.ZIP_DEFLATED

    def test_stored_compression(self):
        data = ZipArchiveAssembler(compression=zipfile.ZIP_STORED).assemble("pkg", {"a.txt": "x"})

        with _open(data) as zf:
            assert zf.getinfo("pkg/a.txt").compress_type == zipfile.ZIP_STORED

    def test_empty_entries(self):
        with pytest.raises(AssemblyError, match="no entries"):
            ZipArchiveAssembler().assemble("pkg", {})

    @pytest.mark.parametrize("folder", ["", ".", "..", "a/b", "/abs", "a\\b"])
    def test_invalid_folder(self, folder):
        with pytest.raises(AssemblyError):
            ZipArchiveAssembler().assemble(folder, {"a.txt": "x"})

    @pytest.mark.parametrize("path", ["", "../evil.php", "/etc/passwd", "a/../../b", "a\\b"])
    def test_invalid_entry_path(self, path):
        with pytest.raises(AssemblyError):
            ZipArchiveAssembler().assemble("pkg", {path: "x"})
