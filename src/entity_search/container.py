"""
Application DI Container (dependency-injector).

Centralizes creation of the search configuration and the aggregator.

Usage::

    from entity_search.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "search": {"max_results": 10, "highlight_open_tag": "<strong>",
                   "highlight_close_tag": "</strong>"},
    })
    # or: container.config.from_yaml("search.yaml")

    aggregator = container.aggregator()
    result = aggregator.search(query, sources)

    # In tests: override any provider:
    container.adapters.override(providers.Object({EntityKind.COMPANY: fake}))
"""

from __future__ import annotations

import logging
from typing import Any

from dependency_injector import containers, providers

from entity_search.application.search.adapters import ADAPTERS
from entity_search.application.search.aggregator import EntitySearchAggregator, SearchConfig

logger = logging.getLogger(__name__)


def _create_search_config(options: dict[str, Any] | None) -> SearchConfig:
    config = SearchConfig.from_dict(options)
    logger.debug(f"Search config loaded: {config}")
    return config


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for Entity Search.

    - ``search_config``: validated SearchConfig built from ``config.search``
    - ``adapters``: per-kind adapter registry
    - ``aggregator``: shared EntitySearchAggregator (stateless, thread-safe)
    """

    config = providers.Configuration()

    search_config = providers.Singleton(
        _create_search_config,
        options=config.search,
    )

    adapters = providers.Object(ADAPTERS)

    aggregator = providers.Singleton(
        EntitySearchAggregator,
        config=search_config,
        adapters=adapters,
    )


__all__ = ["ApplicationContainer"]
