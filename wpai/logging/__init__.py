# wpai/logging/__init__.py
"""Logging helpers shared by every wpai module."""

from wpai.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
