"""
Domain Entities: SearchEntityItem, SearchQuery, ResultSet

Cross-kind search result records. Every kind (company, person, story,
topic) is normalized into the same tagged shape; the ``kind`` field is the
discriminator. Source-specific field mapping lives in the adapters.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """Discriminator for normalized search results."""

    COMPANY = "company"
    PERSON = "person"
    STORY = "story"
    TOPIC = "topic"


class SearchFilter(str, Enum):
    """Filter value meaning "no single-kind restriction"."""

    ALL = "all"


ALL = SearchFilter.ALL

# Concatenation order before ranking; also the final tie-break.
CANONICAL_KIND_ORDER: tuple[EntityKind, ...] = (
    EntityKind.COMPANY,
    EntityKind.PERSON,
    EntityKind.STORY,
    EntityKind.TOPIC,
)


@dataclass(frozen=True)
class SearchQuery:
    """
    One search request.

    ``active_filter`` narrows the results to a single kind; with ``ALL`` the
    set of ``enabled_kinds`` applies instead. ``enabled_kinds=None`` defers
    to the configured default.
    """

    text: str = ""
    active_filter: EntityKind | SearchFilter | str = SearchFilter.ALL
    enabled_kinds: frozenset[EntityKind] | None = None


@dataclass(frozen=True)
class SearchEntityItem:
    """
    Normalized search result.

    ``display_name`` never changes after creation. ``highlighted_name`` and
    ``sort_key`` are filled in by the aggregator on a fresh copy.
    """

    id: str
    kind: EntityKind
    display_name: str
    subtitle: str = ""
    icon_ref: str | None = None
    url: str | None = None
    highlighted_name: str = ""
    sort_key: tuple[int, int, int] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data = dataclasses.asdict(self)
        data["kind"] = self.kind.value
        data["sort_key"] = list(self.sort_key) if self.sort_key is not None else None
        return data


@dataclass
class AggregationStats:
    """Statistics from one search invocation."""

    pattern: str = ""
    counts_by_kind: dict[EntityKind, int] = field(default_factory=dict)
    skipped_by_kind: dict[EntityKind, int] = field(default_factory=dict)
    failed_kinds: list[EntityKind] = field(default_factory=list)

    @property
    def total_skipped(self) -> int:
        return sum(self.skipped_by_kind.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "pattern": self.pattern,
            "counts_by_kind": {k.value: v for k, v in self.counts_by_kind.items()},
            "skipped_by_kind": {k.value: v for k, v in self.skipped_by_kind.items()},
            "failed_kinds": [k.value for k in self.failed_kinds],
        }


@dataclass(frozen=True)
class ResultSet:
    """Ranked and highlighted output of one search."""

    items: list[SearchEntityItem] = field(default_factory=list)
    unfiltered_count: int = 0
    stats: AggregationStats = field(default_factory=AggregationStats)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "unfiltered_count": self.unfiltered_count,
            "stats": self.stats.to_dict(),
        }
