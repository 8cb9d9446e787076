"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from entity_search.application.search.adapters import AdapterResult
from entity_search.domain.entities import EntityKind, SearchEntityItem

# ============================================================
# Raw Provider Records
# ============================================================


@pytest.fixture
def company_records():
    """Raw records as returned by the company provider."""
    return [
        {"id": "c1", "name": "Apple Inc", "domain": "apple.com"},
        {"id": "c2", "name": "Banana Corp", "domain": "https://banana.example/", "favicon": "https://cdn.example/banana.ico"},
    ]


@pytest.fixture
def person_records():
    """Raw records as returned by the people provider."""
    return [
        {"id": 101, "name": "Ana Banana", "headline": "Founder", "profile_image": "https://img.example/ana.png", "external_id": "ana-b"},
        {"id": 102, "first_name": "Tim", "last_name": "Apple", "title": "CEO"},
    ]


@pytest.fixture
def story_records():
    """Raw records as returned by the story provider."""
    return [
        {"id": "s1", "title": "How Apple grew", "slug": "how-apple-grew", "featured_image": "https://img.example/s1.jpg", "excerpt": "A history"},
    ]


@pytest.fixture
def topic_records():
    """Raw records as returned by the topic provider."""
    return [
        {"id": "t1", "name": "Bananas & Plantains", "category": "Food", "category_icon": "leaf"},
    ]


@pytest.fixture
def all_sources(company_records, person_records, story_records, topic_records):
    """Sources map with every kind loaded."""
    return {
        EntityKind.COMPANY: company_records,
        EntityKind.PERSON: person_records,
        EntityKind.STORY: story_records,
        EntityKind.TOPIC: topic_records,
    }


# ============================================================
# Normalized Items
# ============================================================


@pytest.fixture
def make_item():
    """Factory for SearchEntityItem instances."""

    def _create(name: str, kind: EntityKind = EntityKind.COMPANY, item_id: str | None = None):
        return SearchEntityItem(id=item_id or name, kind=kind, display_name=name)

    return _create


@pytest.fixture
def spy_adapters():
    """Adapters that record calls and return no items."""
    return {kind: Mock(return_value=AdapterResult(kind=kind)) for kind in EntityKind}
