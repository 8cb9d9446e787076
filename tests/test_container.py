"""Tests for the DI container and configuration loading."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from dependency_injector import providers

from entity_search.application.search.adapters import AdapterResult
from entity_search.application.search.aggregator import EntitySearchAggregator, SearchConfig
from entity_search.container import ApplicationContainer
from entity_search.core.exceptions import ConfigurationError
from entity_search.domain.entities import EntityKind, SearchQuery

# ============================================================================
# DI Container Tests
# ============================================================================


class TestApplicationContainer:
    """Test the DI container manages services correctly."""

    def test_container_defaults(self) -> None:
        """Without configuration the default SearchConfig is used."""
        container = ApplicationContainer()
        assert container.search_config() == SearchConfig.default()
        assert isinstance(container.aggregator(), EntitySearchAggregator)

    def test_config_from_dict(self) -> None:
        container = ApplicationContainer()
        container.config.from_dict(
            {
                "search": {
                    "max_results": 3,
                    "highlight_open_tag": "<b>",
                    "highlight_close_tag": "</b>",
                }
            }
        )
        config = container.aggregator().config
        assert config.max_results == 3
        assert config.highlight_open_tag == "<b>"

    def test_config_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "search.yaml"
        path.write_text(
            "search:\n"
            "  max_results: 7\n"
            "  strip_query: true\n"
            "  default_enabled_kinds: [company, story]\n",
            encoding="utf-8",
        )
        container = ApplicationContainer()
        container.config.from_yaml(str(path))

        config = container.search_config()
        assert config.max_results == 7
        assert config.strip_query is True
        assert config.default_enabled_kinds == frozenset({EntityKind.COMPANY, EntityKind.STORY})

    def test_invalid_config_raises(self) -> None:
        container = ApplicationContainer()
        container.config.from_dict({"search": {"max_results": -5}})
        with pytest.raises(ConfigurationError):
            container.aggregator()

    def test_aggregator_singleton(self) -> None:
        """Aggregator provider returns the same instance (Singleton)."""
        container = ApplicationContainer()
        assert container.aggregator() is container.aggregator()

    def test_override_adapters(self) -> None:
        """Container supports provider overriding for tests."""
        fake = Mock(return_value=AdapterResult(kind=EntityKind.TOPIC))
        container = ApplicationContainer()
        container.adapters.override(providers.Object({EntityKind.TOPIC: fake}))

        result = container.aggregator().search(SearchQuery(), {EntityKind.TOPIC: [{"id": 1}]})

        fake.assert_called_once()
        assert result.items == []

    def test_container_reset(self) -> None:
        """Resetting the singleton builds a fresh aggregator."""
        container = ApplicationContainer()
        first = container.aggregator()
        container.aggregator.reset()
        assert container.aggregator() is not first
