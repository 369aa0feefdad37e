# tests/conftest.py
"""
Root conftest - shared fixtures.

Test Tiers:
- tier1: Pure logic, no network (<30s)
         Run: pytest -m tier1

Every test runs against an isolated .wpai workspace under tmp_path and with
the enhancement API key variables removed, so nothing on the developer
machine leaks into results.
"""

from __future__ import annotations

import pytest

from wpai.core.paths import WPAIPaths
from wpai.enhance.credentials import GENERIC_API_KEY_ENV, PROVIDER_ENV_MAP
from wpai.plugin_gen.types import PluginConfig

API_KEY_ENV_VARS = PROVIDER_ENV_MAP["gemini"] + [GENERIC_API_KEY_ENV]


@pytest.fixture(autouse=True)
def isolated_workspace(tmp_path, monkeypatch):
    """Point the workspace at tmp_path and clear API key env vars."""
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    workspace = tmp_path / ".wpai"
    WPAIPaths.set_workspace(workspace)
    yield workspace
    WPAIPaths.reset()


@pytest.fixture
def bot_config() -> PluginConfig:
    """The "My Bot" config used throughout the tests."""
    return PluginConfig.new(
        id="plg_test12345",
        name="My Bot",
        version="2.0.0",
        type="chatbot",
        primary_color="#ff0000",
        prompt_template="Be nice",
        features={
            "use_gutenberg": True,
            "use_shortcode": True,
            "show_in_menu": True,
            "require_auth": False,
        },
    )


@pytest.fixture
def bot_config_dict(bot_config) -> dict:
    return bot_config.model_dump(mode="json")
