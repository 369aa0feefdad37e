# wpai/enhance/__init__.py
"""
Prompt enhancement through an external text-completion service.

Usage:
    from wpai.enhance import PromptEnhancer

    better = PromptEnhancer().enhance(config.prompt_template, config.type)
"""

from wpai.enhance.client import GeminiClient, TextCompletionClient
from wpai.enhance.credentials import CredentialError, resolve_api_key
from wpai.enhance.enhancer import PromptEnhancer, build_enhancement_prompt

__all__ = [
    "CredentialError",
    "GeminiClient",
    "PromptEnhancer",
    "TextCompletionClient",
    "build_enhancement_prompt",
    "resolve_api_key",
]
