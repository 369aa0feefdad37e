# wpai/packaging/__init__.py
"""Packaging of rendered plugin files into downloadable archives."""

from wpai.packaging.assembler import ArchiveAssembler, ZipArchiveAssembler

__all__ = ["ArchiveAssembler", "ZipArchiveAssembler"]
