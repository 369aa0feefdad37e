# wpai/core/exceptions.py
"""
All exceptions raised by the plugin generation pipeline.

Hierarchy:
    WPAIError
    ├── ValidationError - Plugin configuration fails a precondition
    ├── AssemblyError - Archive packaging failed
    └── EnhancementError - Prompt enhancement failed (never leaves PromptEnhancer)
"""

from __future__ import annotations

from typing import Iterable, Optional


class WPAIError(Exception):
    """Base class for wpai errors."""

    pass


class ValidationError(WPAIError, ValueError):
    """
    Plugin configuration is missing a field or holds an unsafe value.

    Raised before any artifact is produced.

    Attributes:
        problems: One message per failed check
    """

    def __init__(self, message: str, problems: Optional[Iterable[str]] = None):
        self.problems = list(problems or [])
        if self.problems:
            message = f"{message}: " + "; ".join(self.problems)
        super().__init__(message)


class AssemblyError(WPAIError):
    """The archive assembler failed to package the rendered files."""

    pass


class EnhancementError(WPAIError):
    """The text-completion collaborator failed or returned nothing usable."""

    pass


__all__ = [
    "WPAIError",
    "ValidationError",
    "AssemblyError",
    "EnhancementError",
]
