# wpai/core/paths.py
"""
Central path management for wpai.

The workspace is the .wpai directory in the current working directory,
or an override set for testing.

Usage:
    from wpai.core.paths import WPAIPaths

    settings_path = WPAIPaths.config()
    WPAIPaths.set_workspace(tmp_path / ".wpai")
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class WPAIPaths:
    """Path facade. All methods are classmethods for static access."""

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """Override the workspace root. Pass None to reset to the default."""
        cls._workspace_override = None if path is None else Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace (CWD)."""
        cls._workspace_override = None

    @classmethod
    def workspace(cls) -> Path:
        """The .wpai workspace directory. Default: {CWD}/.wpai/"""
        if cls._workspace_override is not None:
            return cls._workspace_override
        return Path.cwd() / ".wpai"

    @classmethod
    def config(cls) -> Path:
        """User settings file: {workspace}/config.yaml"""
        return cls.workspace() / "config.yaml"

    @classmethod
    def defaults(cls) -> Path:
        """Packaged default settings."""
        return Path(__file__).parent.parent / "config" / "defaults" / "settings.yaml"


__all__ = ["WPAIPaths"]
