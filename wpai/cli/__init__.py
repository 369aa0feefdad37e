# wpai/cli/__init__.py
"""Command-line interface (``wpai``)."""

from wpai.cli.cli import app

__all__ = ["app"]
