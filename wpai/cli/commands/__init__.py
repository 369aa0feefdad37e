# wpai/cli/commands/__init__.py
"""CLI command implementations, imported lazily by wpai.cli.cli."""
