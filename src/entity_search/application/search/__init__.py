"""
Entity Search Pipeline

Turns pre-fetched records of several entity kinds into one ranked,
highlighted result list.

Architecture:
    SearchQuery.text
        │
        ▼
    ┌──────────────────┐
    │    sanitize      │  ← Literal regex pattern
    └────────┬─────────┘
             │
    ┌────────┴─────────────────────┐
    ▼         ▼         ▼          ▼
 Company   Person    Story      Topic    ← Per-kind adapters
    │         │         │          │
    └─────────┴────┬────┴──────────┘
                   ▼
    ┌──────────────────┐
    │      rank        │  ← (first match, -count, position)
    └────────┬─────────┘
             ▼
    ┌──────────────────┐
    │    highlight     │  ← Escaped markup
    └────────┬─────────┘
             ▼
         ResultSet
"""

from __future__ import annotations

from .adapters import (
    ADAPTERS,
    AdapterResult,
    normalize,
    normalize_companies,
    normalize_people,
    normalize_stories,
    normalize_topics,
)
from .aggregator import (
    EntitySearchAggregator,
    SearchConfig,
    resolve_filter,
    search,
)
from .highlighter import (
    DEFAULT_STYLE,
    HighlightStyle,
    escape_markup,
    highlight,
)
from .ranking import (
    NO_MATCH_INDEX,
    RelevanceKey,
    match_count,
    rank,
    relevance_key,
)
from .sanitizer import sanitize

__all__ = [
    # Sanitizer
    "sanitize",
    # Adapters
    "ADAPTERS",
    "AdapterResult",
    "normalize",
    "normalize_companies",
    "normalize_people",
    "normalize_stories",
    "normalize_topics",
    # Ranking
    "NO_MATCH_INDEX",
    "RelevanceKey",
    "relevance_key",
    "match_count",
    "rank",
    # Highlighting
    "HighlightStyle",
    "DEFAULT_STYLE",
    "escape_markup",
    "highlight",
    # Aggregation
    "EntitySearchAggregator",
    "SearchConfig",
    "resolve_filter",
    "search",
]
