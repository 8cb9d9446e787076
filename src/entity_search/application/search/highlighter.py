"""
Highlighter - Safe Match Markup

Wraps every case-insensitive, non-overlapping occurrence of the pattern in
emphasis tags. Matching runs on the raw display name and each segment is
HTML-escaped on its own, so upstream text can never inject markup and a
query such as ``amp`` never matches inside an escaped entity.

The output is ready for direct insertion into a document.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

from entity_search.application.search.sanitizer import compile_pattern


@dataclass(frozen=True)
class HighlightStyle:
    """Opening and closing markup placed around each match."""

    open_tag: str = "<mark>"
    close_tag: str = "</mark>"


DEFAULT_STYLE = HighlightStyle()


def escape_markup(text: str) -> str:
    """Escape ``& < > " '`` for safe insertion into HTML."""
    return html.escape(text, quote=True)


def highlight(
    display_name: str,
    pattern: str,
    style: HighlightStyle = DEFAULT_STYLE,
) -> str:
    """
    Escape ``display_name`` and wrap each match of ``pattern``.

    Args:
        display_name: Untrusted name as received from upstream
        pattern: Sanitized pattern; empty means no wrapping
        style: Markup placed around matches

    Returns:
        Escaped markup string
    """
    compiled = compile_pattern(pattern)
    if compiled is None:
        return escape_markup(display_name)

    parts: list[str] = []
    cursor = 0
    for match in compiled.finditer(display_name):
        parts.append(escape_markup(display_name[cursor : match.start()]))
        parts.append(style.open_tag)
        parts.append(escape_markup(match.group(0)))
        parts.append(style.close_tag)
        cursor = match.end()
    parts.append(escape_markup(display_name[cursor:]))

    return "".join(parts)
