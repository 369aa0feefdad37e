# wpai/plugin_gen/validators.py
"""
Precondition checks run before any plugin file is rendered.

The renderer embeds slug, id, version and color verbatim in PHP identifiers,
shortcode tags, CSS ids, file names and style attributes, so they are
restricted to safe alphabets here.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from wpai.core.exceptions import ValidationError
from wpai.logging.logger import get_logger
from wpai.logging.tags import VALIDATION
from wpai.plugin_gen.types import PluginConfig, from_pydantic_error, slugify

logger = get_logger(__name__)

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
PLUGIN_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")
VERSION_RE = re.compile(r"^[0-9A-Za-z][0-9A-Za-z.+-]*$")
DOTTED_VERSION_RE = re.compile(r"^\d+(?:\.\d+)*$")
HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

REQUIRED_TEXT_FIELDS = ("id", "name", "slug", "version")
REQUIRED_FIELDS = REQUIRED_TEXT_FIELDS + (
    "type",
    "primary_color",
    "prompt_template",
    "features",
    "ai_model",
)


def _check_fields(config: PluginConfig) -> List[str]:
    problems: List[str] = []

    for field in REQUIRED_FIELDS:
        if getattr(config, field, None) is None:
            problems.append(f"{field}: required")

    for field in REQUIRED_TEXT_FIELDS:
        value = getattr(config, field, None)
        if isinstance(value, str) and not value.strip():
            problems.append(f"{field}: must not be blank")

    if problems:
        return problems

    if not SLUG_RE.fullmatch(config.slug):
        problems.append(
            f"slug: {config.slug!r} may only contain lowercase letters, digits and single hyphens"
        )
    elif config.slug != slugify(config.name):
        problems.append(f"slug: {config.slug!r} does not match name {config.name!r}")

    if not PLUGIN_ID_RE.fullmatch(config.id):
        problems.append(f"id: {config.id!r} may only contain letters, digits, '_' and '-'")

    if not VERSION_RE.fullmatch(config.version):
        problems.append(f"version: {config.version!r} contains unsupported characters")
    elif not DOTTED_VERSION_RE.fullmatch(config.version):
        logger.warning(f"{VALIDATION} Version {config.version!r} is not dotted numeric")

    if not HEX_COLOR_RE.fullmatch(config.primary_color):
        problems.append(f"primary_color: {config.primary_color!r} is not a hex color")

    return problems


def validate_plugin_config(config: Union[PluginConfig, Mapping[str, Any]]) -> PluginConfig:
    """
    Check that ``config`` is complete and safe to render.

    Mappings are validated strictly: every field must be present, nothing is
    filled from defaults.

    Returns:
        The validated PluginConfig

    Raises:
        ValidationError: Listing every failed check
    """
    if isinstance(config, Mapping):
        try:
            config = PluginConfig.model_validate(dict(config))
        except PydanticValidationError as e:
            raise from_pydantic_error(e) from e
    elif not isinstance(config, PluginConfig):
        raise ValidationError(
            "Invalid plugin configuration",
            [f"expected PluginConfig or mapping, got {type(config).__name__}"],
        )

    problems = _check_fields(config)
    if problems:
        logger.debug(f"{VALIDATION} Rejected config {getattr(config, 'id', None)}: {problems}")
        raise ValidationError("Invalid plugin configuration", problems)

    return config


__all__ = [
    "SLUG_RE",
    "HEX_COLOR_RE",
    "VERSION_RE",
    "validate_plugin_config",
]
