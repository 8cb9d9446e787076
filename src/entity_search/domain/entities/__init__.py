"""
Domain Entities

Core objects shared by every search component.
"""

from __future__ import annotations

from .search_item import (
    ALL,
    CANONICAL_KIND_ORDER,
    AggregationStats,
    EntityKind,
    ResultSet,
    SearchEntityItem,
    SearchFilter,
    SearchQuery,
)

__all__ = [
    "EntityKind",
    "SearchFilter",
    "ALL",
    "CANONICAL_KIND_ORDER",
    "SearchQuery",
    "SearchEntityItem",
    "ResultSet",
    "AggregationStats",
]
