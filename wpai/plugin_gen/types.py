# wpai/plugin_gen/types.py
"""
Configuration Model for generated WordPress plugins.

A PluginConfig is created with wizard defaults, updated field by field while
the user answers the wizard, then handed read-only to the renderer.
"""

from __future__ import annotations

import re
import secrets
import string
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from wpai.core.exceptions import ValidationError

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_NON_IDENT_RE = re.compile(r"[^A-Z0-9]+")

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9


class PluginType(str, Enum):
    """Kinds of AI plugin the wizard can build."""

    CHATBOT = "chatbot"
    CONTENT_GEN = "content_gen"
    SEO_OPTIMIZER = "seo_optimizer"
    IMAGE_GEN = "image_gen"
    CUSTOM_TOOL = "custom_tool"

    @property
    def label(self) -> str:
        """Lowercase label used in generated descriptions ("content gen")."""
        return self.value.replace("_", " ", 1)

    @property
    def display_name(self) -> str:
        """Human-readable name for display."""
        names = {
            PluginType.CHATBOT: "Chatbot",
            PluginType.CONTENT_GEN: "Content Generator",
            PluginType.SEO_OPTIMIZER: "SEO Optimizer",
            PluginType.IMAGE_GEN: "Image Generator",
            PluginType.CUSTOM_TOOL: "Custom Tool",
        }
        return names[self]

    @property
    def description(self) -> str:
        """Short description for CLI help."""
        descriptions = {
            PluginType.CHATBOT: "Conversational assistant for site visitors",
            PluginType.CONTENT_GEN: "Drafts posts, pages and product copy",
            PluginType.SEO_OPTIMIZER: "Suggests titles, meta descriptions and keywords",
            PluginType.IMAGE_GEN: "Creates images from text descriptions",
            PluginType.CUSTOM_TOOL: "Free-form AI tool driven by your own prompt",
        }
        return descriptions[self]


class AIModel(str, Enum):
    """Model identifiers a plugin can be configured with."""

    FLASH = "gemini-3-flash-preview"
    PRO = "gemini-3-pro-preview"


# =============================================================================
# Naming helpers
# =============================================================================


def slugify(name: str) -> str:
    """
    Derive the identifier-safe slug for a plugin name.

    Examples:
        >>> slugify("My  AI Assistant!")
        'my-ai-assistant'
    """
    return _NON_SLUG_RE.sub("-", name.lower()).strip("-")


def class_prefix(name: str) -> str:
    """
    Uppercase PHP identifier fragment for the plugin class.

    Examples:
        >>> class_prefix("My Bot")
        'MY_BOT'
        >>> class_prefix("3D Studio")
        'WPAI_3D_STUDIO'
    """
    prefix = _NON_IDENT_RE.sub("_", name.upper()).strip("_")
    if not prefix or prefix[0].isdigit():
        prefix = f"WPAI_{prefix}".rstrip("_")
    return prefix


def function_prefix(slug: str) -> str:
    """Hook/nonce prefix: the slug with hyphens replaced by underscores."""
    return slug.replace("-", "_")


def generate_plugin_id() -> str:
    """New opaque plugin id, e.g. ``plg_k3x9a0q2m``."""
    return "plg_" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


# =============================================================================
# Models
# =============================================================================

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class PluginFeatures(BaseModel):
    """Feature flags; each one toggles an optional block of generated code."""

    use_gutenberg: bool
    use_shortcode: bool
    show_in_menu: bool
    require_auth: bool

    model_config = _MODEL_CONFIG


DEFAULT_PROMPT = (
    "You are a helpful assistant for this WordPress site. Answer user questions accurately."
)

DEFAULTS: Dict[str, Any] = {
    "name": "My AI Assistant",
    "version": "1.0.0",
    "type": PluginType.CHATBOT,
    "primary_color": "#3b82f6",
    "prompt_template": DEFAULT_PROMPT,
    "features": {
        "use_gutenberg": True,
        "use_shortcode": True,
        "show_in_menu": True,
        "require_auth": False,
    },
    "ai_model": AIModel.FLASH,
}


def _normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase keys to field names so overrides merge predictably."""
    aliases = {to_camel(name): name for name in PluginConfig.model_fields}
    return {aliases.get(key, key): value for key, value in data.items()}


def from_pydantic_error(exc: PydanticValidationError) -> ValidationError:
    """Convert pydantic model errors to the project ValidationError."""
    problems = [
        f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]
    return ValidationError("Invalid plugin configuration", problems)


class PluginConfig(BaseModel):
    """
    Everything needed to render one plugin.

    All fields are required; use PluginConfig.new() to start from the wizard
    defaults. Instances are immutable, updates return a new config with the
    same id.

    Example:
        >>> config = PluginConfig.new(name="My Bot", version="2.0.0")
        >>> config.slug
        'my-bot'
        >>> config.with_updates(name="Support Bot").slug
        'support-bot'
    """

    id: str
    name: str
    slug: str
    version: str
    type: PluginType
    primary_color: str
    prompt_template: str
    features: PluginFeatures
    ai_model: AIModel

    model_config = _MODEL_CONFIG

    @classmethod
    def new(cls, **overrides: Any) -> "PluginConfig":
        """
        Create a config from the wizard defaults.

        Missing keys fall back to defaults, partial ``features`` are merged
        with the default flags, ``slug`` is derived from the final name and
        a fresh ``id`` is generated unless given.

        Raises:
            ValidationError: If an override has the wrong type
        """
        data = dict(DEFAULTS)
        overrides = _normalize_keys(overrides)

        features = overrides.pop("features", None)
        if isinstance(features, PluginFeatures):
            features = features.model_dump()
        if features is not None:
            if not isinstance(features, dict):
                raise ValidationError(
                    "Invalid plugin configuration", ["features: must be a mapping"]
                )
            data["features"] = {**DEFAULTS["features"], **_normalize_feature_keys(features)}

        data.update(overrides)
        data.setdefault("id", generate_plugin_id())
        if not data.get("slug") and isinstance(data.get("name"), str):
            data["slug"] = slugify(data["name"])

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise from_pydantic_error(e) from e

    def with_updates(self, **changes: Any) -> "PluginConfig":
        """
        Return a copy with ``changes`` applied.

        Changing ``name`` re-derives ``slug``. The id is never changed.

        Raises:
            ValidationError: If ``id`` or ``slug`` is changed directly, or a
                value has the wrong type
        """
        changes = _normalize_keys(changes)
        if "id" in changes and changes["id"] != self.id:
            raise ValidationError("Invalid plugin configuration", ["id: cannot be changed"])
        if "slug" in changes:
            raise ValidationError(
                "Invalid plugin configuration", ["slug: derived from name, set name instead"]
            )

        data = self.model_dump()
        features = changes.pop("features", None)
        if isinstance(features, PluginFeatures):
            features = features.model_dump()
        if features is not None:
            if not isinstance(features, dict):
                raise ValidationError(
                    "Invalid plugin configuration", ["features: must be a mapping"]
                )
            data["features"] = {**data["features"], **_normalize_feature_keys(features)}

        data.update(changes)
        if "name" in changes and isinstance(changes["name"], str):
            data["slug"] = slugify(changes["name"])

        try:
            return type(self).model_validate(data)
        except PydanticValidationError as e:
            raise from_pydantic_error(e) from e

    def to_record(self) -> "PluginRecord":
        """Lightweight listing entry for this config."""
        return PluginRecord(
            id=self.id,
            name=self.name,
            slug=self.slug,
            version=self.version,
            type=self.type,
        )


def _normalize_feature_keys(features: Dict[str, Any]) -> Dict[str, Any]:
    aliases = {to_camel(name): name for name in PluginFeatures.model_fields}
    return {aliases.get(key, key): value for key, value in features.items()}


class PluginRecord(BaseModel):
    """What the plugin library keeps about an exported plugin."""

    id: str
    name: str
    slug: str
    version: str
    type: PluginType

    model_config = ConfigDict(frozen=True)


__all__ = [
    "PluginType",
    "AIModel",
    "PluginFeatures",
    "PluginConfig",
    "PluginRecord",
    "DEFAULTS",
    "DEFAULT_PROMPT",
    "slugify",
    "class_prefix",
    "function_prefix",
    "generate_plugin_id",
    "from_pydantic_error",
]
