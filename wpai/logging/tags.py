# wpai/logging/tags.py
"""
Subsystem tags prefixed to log messages.

Changing a tag here updates it project-wide.
"""

GENERATOR = "[GENERATOR]"
VALIDATION = "[VALIDATION]"
PACKAGING = "[PACKAGING]"
ENHANCE = "[ENHANCE]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
