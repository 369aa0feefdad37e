# wpai/enhance/enhancer.py
"""
Best-effort prompt enhancement.

PromptEnhancer.enhance() never raises: when the completion client fails for
any reason the original prompt comes back unchanged. Enhancement is an
optional step and must not block an export.
"""

from __future__ import annotations

from typing import Optional, Union

from wpai.config.schema import EnhancementSettings
from wpai.core.exceptions import EnhancementError
from wpai.enhance.client import GeminiClient, TextCompletionClient
from wpai.logging.logger import get_logger
from wpai.logging.tags import ENHANCE
from wpai.plugin_gen.types import PluginType

logger = get_logger(__name__)


def build_enhancement_prompt(prompt_text: str, plugin_type: Union[PluginType, str]) -> str:
    """Instruction sent to the completion model."""
    type_name = plugin_type.value if isinstance(plugin_type, PluginType) else str(plugin_type)
    return (
        "You are an expert prompt engineer for WordPress AI plugins.\n"
        f"The user is building a {type_name} plugin.\n"
        f'Their initial prompt is: "{prompt_text}".\n'
        "\n"
        "Improve this prompt to be more descriptive, safe, and effective for a LLM to use "
        "in a production WordPress environment.\n"
        "Return ONLY the improved prompt text."
    )


class PromptEnhancer:
    """
    Improves plugin prompts through a text-completion client.

    Args:
        client: Completion client; a GeminiClient built from ``settings``
                is created lazily when None
        settings: Enhancement settings (enabled flag, model, timeout)

    Example:
        enhancer = PromptEnhancer()
        better = enhancer.enhance("Answer questions", PluginType.CHATBOT)
    """

    def __init__(
        self,
        client: Optional[TextCompletionClient] = None,
        settings: Optional[EnhancementSettings] = None,
    ):
        self.settings = settings or EnhancementSettings()
        self._client = client

    def _get_client(self) -> TextCompletionClient:
        """Lazy load the completion client."""
        if self._client is None:
            if self.settings.provider != GeminiClient.provider:
                raise EnhancementError(
                    f"Unsupported enhancement provider: {self.settings.provider}"
                )
            self._client = GeminiClient.from_settings(self.settings)
        return self._client

    def enhance(self, prompt_text: str, plugin_type: Union[PluginType, str]) -> str:
        """
        Return an improved prompt, or ``prompt_text`` unchanged on failure.
        """
        if not self.settings.enabled:
            logger.debug(f"{ENHANCE} Enhancement disabled, keeping original prompt")
            return prompt_text

        try:
            improved = self._get_client().complete(
                build_enhancement_prompt(prompt_text, plugin_type)
            )
        except Exception as e:
            # Any collaborator failure falls back to the original prompt
            logger.warning(f"{ENHANCE} Failed to enhance prompt: {e}")
            return prompt_text

        if not isinstance(improved, str) or not improved.strip():
            logger.warning(f"{ENHANCE} Enhancement returned no text, keeping original prompt")
            return prompt_text

        improved = improved.strip()
        logger.info(f"{ENHANCE} Prompt enhanced ({len(prompt_text)} -> {len(improved)} chars)")
        return improved


__all__ = ["PromptEnhancer", "build_enhancement_prompt"]
