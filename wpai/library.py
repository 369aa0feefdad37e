# wpai/library.py
"""
In-memory list of exported plugins.

Keyed by plugin id: exporting the same config again refreshes its entry
instead of adding a duplicate. Nothing is persisted.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from wpai.plugin_gen.types import PluginConfig, PluginRecord


class PluginLibrary:
    """Exported plugins for the current session, in first-export order."""

    def __init__(self) -> None:
        self._configs: Dict[str, PluginConfig] = {}

    def record(self, config: PluginConfig) -> bool:
        """
        Remember an exported config.

        Returns:
            True if the id was new, False if an existing entry was refreshed
        """
        is_new = config.id not in self._configs
        self._configs[config.id] = config
        return is_new

    def get(self, plugin_id: str) -> Optional[PluginConfig]:
        return self._configs.get(plugin_id)

    def records(self) -> List[PluginRecord]:
        """Lightweight listing entries."""
        return [config.to_record() for config in self._configs.values()]

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self._configs

    def __iter__(self) -> Iterator[PluginConfig]:
        return iter(list(self._configs.values()))

    def __len__(self) -> int:
        return len(self._configs)


__all__ = ["PluginLibrary"]
