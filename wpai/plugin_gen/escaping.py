# wpai/plugin_gen/escaping.py
"""
Escaping for values interpolated into generated PHP files.

Three contexts appear in a generated plugin:
- PHP single-quoted string literals (php_string)
- the plugin header docblock (header_value)
- HTML emitted outside PHP tags (html_text)
"""

from __future__ import annotations

import html
import re

_WHITESPACE_RE = re.compile(r"\s+")


def php_string(value: str) -> str:
    """
    Quote ``value`` as a PHP single-quoted literal.

    Backslashes are escaped before quotes so a trailing backslash cannot
    swallow the closing quote.

    Examples:
        >>> php_string("it's")
        "'it\\\\'s'"
    """
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def header_value(value: str) -> str:
    """Single-line docblock value that cannot close the comment."""
    return _WHITESPACE_RE.sub(" ", value).strip().replace("*/", "* /")


def html_text(value: str) -> str:
    """Escape text for HTML content and quoted attributes."""
    return html.escape(value, quote=True)


def readme_line(value: str) -> str:
    """Single-line value for readme.txt metadata."""
    return _WHITESPACE_RE.sub(" ", value).strip()


__all__ = ["php_string", "header_value", "html_text", "readme_line"]
