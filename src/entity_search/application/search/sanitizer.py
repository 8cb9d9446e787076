"""
Query Sanitizer - Literal Pattern Escaping

Turns raw user input into a pattern that matches only itself when compiled
as a regular expression. Used by the ranker and the highlighter so both see
the same matches.

Example:
    >>> sanitize("C++ (beta)")
    'C\\+\\+ \\(beta\\)'
"""

from __future__ import annotations

import re

# Characters with special meaning in a regular expression
REGEX_METACHARACTERS = frozenset(".*+?^${}()|[]\\")

_METACHAR_PATTERN = re.compile("([" + re.escape("".join(sorted(REGEX_METACHARACTERS))) + "])")


def sanitize(raw: str | None) -> str:
    """
    Escape regex metacharacters in user input.

    Total function: ``None`` and ``""`` both yield ``""``.
    """
    if not raw:
        return ""
    return _METACHAR_PATTERN.sub(r"\\\1", raw)


def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile a sanitized pattern for case-insensitive matching (None if empty)."""
    if not pattern:
        return None
    return re.compile(pattern, re.IGNORECASE)
