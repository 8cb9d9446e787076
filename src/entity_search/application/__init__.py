"""
Application Layer - Search Orchestration

Contains:
- search: sanitizer, per-kind adapters, ranker, highlighter, aggregator
"""

from .search.aggregator import EntitySearchAggregator, SearchConfig, search

__all__ = [
    "EntitySearchAggregator",
    "SearchConfig",
    "search",
]
