"""
Relevance Ranker - Match Position and Frequency Ordering

Orders normalized items by how early and how often the query pattern occurs
in their display name:

    key(item) = (first_match_index, -match_count, original_position)

Items without a match get NO_MATCH_INDEX and sort after every match.
Matching is case-insensitive and counts non-overlapping occurrences left to
right, the same way the highlighter wraps them.

An empty pattern leaves the input order untouched so a default browse list
is never shuffled.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import NamedTuple

from entity_search.application.search.sanitizer import compile_pattern
from entity_search.domain.entities.search_item import SearchEntityItem

NO_MATCH_INDEX = sys.maxsize


class RelevanceKey(NamedTuple):
    """Match statistics of one display name against one pattern."""

    first_match_index: int
    match_count: int


def _relevance(name: str, compiled: re.Pattern[str] | None) -> RelevanceKey:
    if compiled is None:
        return RelevanceKey(NO_MATCH_INDEX, 0)

    first = NO_MATCH_INDEX
    count = 0
    for match in compiled.finditer(name):
        if count == 0:
            first = match.start()
        count += 1
    return RelevanceKey(first, count)


def relevance_key(name: str, pattern: str) -> RelevanceKey:
    """Compute (first_match_index, match_count) for a display name."""
    return _relevance(name, compile_pattern(pattern))


def match_count(name: str, pattern: str) -> int:
    return relevance_key(name, pattern).match_count


def rank_with_keys(
    items: Sequence[SearchEntityItem],
    pattern: str,
) -> list[tuple[SearchEntityItem, tuple[int, int, int]]]:
    """
    Rank items, returning each alongside its sort tuple.

    With an empty pattern every item is tied and keeps its position.
    """
    compiled = compile_pattern(pattern)
    keyed = []
    for position, item in enumerate(items):
        key = _relevance(item.display_name, compiled)
        keyed.append((item, (key.first_match_index, -key.match_count, position)))

    if compiled is None:
        return keyed

    # Position is part of the key, so the order is total and deterministic
    keyed.sort(key=lambda pair: pair[1])
    return keyed


def rank(items: Sequence[SearchEntityItem], pattern: str) -> list[SearchEntityItem]:
    """
    Order items by relevance to ``pattern``.

    Args:
        items: Normalized items in concatenation order
        pattern: Sanitized pattern (see ``sanitize``)

    Returns:
        A new list containing exactly the input items, reordered
    """
    return [item for item, _ in rank_with_keys(items, pattern)]
