"""
EntitySearchAggregator - Multi-Kind Result Merging and Ranking

Combines pre-fetched records of several entity kinds into one ranked,
highlighted list:
1. Validate the active filter (the only fatal condition)
2. Sanitize the query text into a literal pattern
3. Normalize every kind present in ``sources`` through its adapter
4. Concatenate the effective kinds in canonical order
5. Rank by match position and frequency, then highlight

Architecture Decision:
    The aggregator does NOT fetch anything and keeps no state between
    calls. Callers re-invoke ``search`` whenever the query or the sources
    change and discard stale results themselves.

Example:
    >>> from entity_search import SearchQuery, EntityKind, search
    >>>
    >>> result = search(
    ...     SearchQuery(text="an"),
    ...     {EntityKind.COMPANY: [{"id": 1, "name": "Banana Corp"}]},
    ... )
    >>> result.items[0].highlighted_name
    'B<mark>an</mark><mark>an</mark>a Corp'
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from entity_search.application.search.adapters import ADAPTERS, Adapter, AdapterResult
from entity_search.application.search.highlighter import HighlightStyle, highlight
from entity_search.application.search.ranking import rank_with_keys
from entity_search.application.search.sanitizer import sanitize
from entity_search.core.exceptions import ConfigurationError, InvalidKindError
from entity_search.domain.entities.search_item import (
    CANONICAL_KIND_ORDER,
    AggregationStats,
    EntityKind,
    ResultSet,
    SearchEntityItem,
    SearchFilter,
    SearchQuery,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuration for entity search.

    Presets:
    - DEFAULT: ``<mark>`` highlighting, no result limit
    - TYPEAHEAD: ``<strong>`` highlighting, at most 10 results
    """

    highlight_open_tag: str = "<mark>"
    highlight_close_tag: str = "</mark>"

    # Trim surrounding whitespace from the query before sanitizing (opt-in)
    strip_query: bool = False

    # Maximum items returned (None = unlimited); unfiltered_count ignores it
    max_results: int | None = None

    # Kinds used when a query does not name its own
    default_enabled_kinds: frozenset[EntityKind] = field(
        default_factory=lambda: frozenset(EntityKind)
    )

    def __post_init__(self) -> None:
        if self.max_results is not None and (
            not isinstance(self.max_results, int)
            or isinstance(self.max_results, bool)
            or self.max_results < 0
        ):
            raise ConfigurationError(
                f"max_results must be an int >= 0 or None, got {self.max_results!r}"
            )
        if bool(self.highlight_open_tag) != bool(self.highlight_close_tag):
            raise ConfigurationError(
                "highlight_open_tag and highlight_close_tag must both be set or both empty"
            )

    @classmethod
    def default(cls) -> SearchConfig:
        """Get default configuration."""
        return cls()

    @classmethod
    def typeahead(cls) -> SearchConfig:
        """Get a compact configuration for dropdown suggestions."""
        return cls(
            highlight_open_tag="<strong>",
            highlight_close_tag="</strong>",
            max_results=10,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SearchConfig:
        """
        Build a config from plain values (e.g. parsed YAML).

        Raises:
            ConfigurationError: Unknown keys or invalid values
        """
        data = dict(data or {})
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown search config keys: {', '.join(unknown)}")

        if "default_enabled_kinds" in data:
            raw_kinds = data["default_enabled_kinds"] or []
            try:
                data["default_enabled_kinds"] = frozenset(
                    EntityKind(str(k).lower()) for k in raw_kinds
                )
            except ValueError as e:
                raise ConfigurationError(f"Invalid default_enabled_kinds: {e}") from e

        return cls(**data)

    @property
    def highlight_style(self) -> HighlightStyle:
        return HighlightStyle(self.highlight_open_tag, self.highlight_close_tag)


# =============================================================================
# Kind resolution
# =============================================================================


def resolve_filter(value: Any) -> EntityKind | None:
    """
    Resolve an active filter value.

    Returns:
        The single EntityKind to restrict to, or None for ALL

    Raises:
        InvalidKindError: Value is neither ALL nor an EntityKind
    """
    if value is SearchFilter.ALL:
        return None
    if isinstance(value, EntityKind):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized == SearchFilter.ALL.value:
            return None
        try:
            return EntityKind(normalized)
        except ValueError:
            pass
    raise InvalidKindError(
        value,
        allowed=(SearchFilter.ALL.value, *(k.value for k in EntityKind)),
    )


def _as_adapter_result(kind: EntityKind, output: Any) -> AdapterResult:
    """Accept an AdapterResult or a plain sequence of items from an adapter."""
    if isinstance(output, AdapterResult):
        return output
    if isinstance(output, (str, bytes)) or not isinstance(output, Sequence):
        raise TypeError(f"Adapter for {kind.value} returned {type(output).__name__}")
    items = list(output)
    for item in items:
        if not isinstance(item, SearchEntityItem):
            raise TypeError(f"Adapter for {kind.value} returned a {type(item).__name__} item")
    return AdapterResult(kind=kind, items=items)


def _coerce_kinds(values: Iterable[Any]) -> set[EntityKind]:
    """Known kinds among ``values``; unknown entries are logged and ignored."""
    kinds: set[EntityKind] = set()
    for value in values:
        if isinstance(value, EntityKind):
            kinds.add(value)
            continue
        try:
            kinds.add(EntityKind(str(value).strip().lower()))
        except ValueError:
            logger.warning(f"Ignoring unknown entity kind: {value!r}")
    return kinds


# =============================================================================
# Aggregator
# =============================================================================


class EntitySearchAggregator:
    """
    Aggregates and ranks pre-fetched records of several entity kinds.

    Responsibilities:
    1. Reject unknown filter kinds before doing any work
    2. Normalize each kind through its adapter, isolating failures
    3. Rank the concatenated items and highlight their names
    4. Report per-kind counts for the caller's filter tabs

    Usage:
        aggregator = EntitySearchAggregator(SearchConfig.typeahead())
        result = aggregator.search(query, sources)
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        adapters: Mapping[EntityKind, Adapter] | None = None,
    ):
        """
        Initialize EntitySearchAggregator.

        Args:
            config: Search configuration (defaults to SearchConfig.default())
            adapters: Per-kind adapter overrides; kinds not listed use the built-in ones
        """
        self._config = config or SearchConfig.default()
        self._adapters: Mapping[EntityKind, Adapter] = {**ADAPTERS, **(adapters or {})}

    @property
    def config(self) -> SearchConfig:
        return self._config

    def search(
        self,
        query: SearchQuery,
        sources: Mapping[Any, Sequence[Any]] | None,
    ) -> ResultSet:
        """
        Run one search over pre-fetched records.

        Args:
            query: Text, active filter and enabled kinds
            sources: Raw records per kind; missing kinds are "not loaded yet"

        Returns:
            Ranked, highlighted ResultSet

        Raises:
            InvalidKindError: ``query.active_filter`` is not a known kind or ALL
        """
        filter_kind = resolve_filter(query.active_filter)

        text = query.text or ""
        if self._config.strip_query:
            text = text.strip()
        pattern = sanitize(text)

        if filter_kind is not None:
            effective = {filter_kind}
        elif query.enabled_kinds is None:
            effective = set(self._config.default_enabled_kinds)
        else:
            effective = _coerce_kinds(query.enabled_kinds)

        stats = AggregationStats(pattern=pattern)
        normalized = self._normalize_sources(sources or {}, stats)
        unfiltered_count = sum(len(r.items) for r in normalized.values())

        concatenated: list[SearchEntityItem] = []
        for kind in CANONICAL_KIND_ORDER:
            if kind in effective and kind in normalized:
                concatenated.extend(normalized[kind].items)

        ranked = rank_with_keys(concatenated, pattern)
        if self._config.max_results is not None:
            ranked = ranked[: self._config.max_results]

        style = self._config.highlight_style
        items = [
            dataclasses.replace(
                item,
                highlighted_name=highlight(item.display_name, pattern, style),
                sort_key=key,
            )
            for item, key in ranked
        ]

        logger.debug(
            f"Entity search pattern={pattern!r} filter={filter_kind} "
            f"returned {len(items)}/{unfiltered_count} items "
            f"(skipped={stats.total_skipped}, failed={len(stats.failed_kinds)})"
        )

        return ResultSet(items=items, unfiltered_count=unfiltered_count, stats=stats)

    def _normalize_sources(
        self,
        sources: Mapping[Any, Sequence[Any]],
        stats: AggregationStats,
    ) -> dict[EntityKind, AdapterResult]:
        """Run the adapter of every known kind present in ``sources``."""
        present: dict[EntityKind, Sequence[Any]] = {}
        for key, records in sources.items():
            try:
                kind = key if isinstance(key, EntityKind) else EntityKind(str(key).lower())
            except ValueError:
                logger.warning(f"Ignoring records for unknown entity kind: {key!r}")
                continue
            present[kind] = records

        results: dict[EntityKind, AdapterResult] = {}
        for kind in CANONICAL_KIND_ORDER:
            if kind not in present:
                continue
            adapter = self._adapters.get(kind)
            if adapter is None:
                continue
            try:
                result = _as_adapter_result(kind, adapter(present[kind]))
            except Exception:
                # Failure is isolated to this kind
                logger.warning(f"Adapter for {kind.value} failed", exc_info=True)
                stats.failed_kinds.append(kind)
                continue

            results[kind] = result
            stats.counts_by_kind[kind] = len(result.items)
            if result.skipped:
                stats.skipped_by_kind[kind] = result.skipped

        return results


# Convenience functions


def search(
    query: SearchQuery,
    sources: Mapping[Any, Sequence[Any]] | None,
    *,
    config: SearchConfig | None = None,
    adapters: Mapping[EntityKind, Adapter] | None = None,
) -> ResultSet:
    """
    Search pre-fetched records of every kind.

    Args:
        query: Text, active filter and enabled kinds
        sources: Raw records per kind
        config: Search configuration
        adapters: Per-kind adapter overrides merged over the built-in ones

    Returns:
        Ranked, highlighted ResultSet
    """
    return EntitySearchAggregator(config, adapters).search(query, sources)
