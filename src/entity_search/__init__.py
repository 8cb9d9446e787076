"""
Entity Search - Multi-Kind Search Aggregation and Ranking

Merges pre-fetched company, person, story and topic records into one
ranked list with highlighted names. Pure and stateless: callers fetch the
records, call ``search`` on every query change and keep the latest result.

Usage:
    from entity_search import EntityKind, SearchQuery, search

    result = search(
        SearchQuery(text="app", active_filter="all"),
        {
            EntityKind.COMPANY: [{"id": 1, "name": "Apple Inc", "domain": "apple.com"}],
            EntityKind.TOPIC: [{"id": "t1", "name": "Mobile apps"}],
        },
    )
    for item in result.items:
        print(item.kind.value, item.highlighted_name)
"""

from .application.search import (
    EntitySearchAggregator,
    HighlightStyle,
    SearchConfig,
    highlight,
    rank,
    sanitize,
    search,
)
from .core.exceptions import (
    ConfigurationError,
    EntitySearchError,
    InvalidKindError,
    MalformedRecordError,
)
from .domain.entities import (
    ALL,
    AggregationStats,
    EntityKind,
    ResultSet,
    SearchEntityItem,
    SearchFilter,
    SearchQuery,
)

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "search",
    "EntitySearchAggregator",
    "SearchConfig",
    # Components
    "sanitize",
    "rank",
    "highlight",
    "HighlightStyle",
    # Types
    "EntityKind",
    "SearchFilter",
    "ALL",
    "SearchQuery",
    "SearchEntityItem",
    "ResultSet",
    "AggregationStats",
    # Errors
    "EntitySearchError",
    "InvalidKindError",
    "MalformedRecordError",
    "ConfigurationError",
]
