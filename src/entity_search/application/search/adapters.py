"""
Entity Source Adapters - Per-Kind Record Normalization

Each upstream provider returns its own record shape. One builder function
per EntityKind maps a single raw record into a SearchEntityItem; the shared
``normalize`` loop applies it to a batch and drops records that fail.

Field mapping:
    COMPANY  name, domain -> subtitle/url, favicon|logo -> icon
    PERSON   name|first_name+last_name, headline|title -> subtitle,
             profile_image|avatar -> icon, external_id -> url
    STORY    title|name, excerpt|author -> subtitle, featured_image -> icon,
             slug -> url
    TOPIC    name, category -> subtitle, category_icon|icon -> icon

Adapters do no ranking and no highlighting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from entity_search.core.exceptions import MalformedRecordError
from entity_search.domain.entities.search_item import EntityKind, SearchEntityItem

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]

FAVICON_SERVICE_URL = "https://www.google.com/s2/favicons?sz=64&domain={domain}"


@dataclass
class AdapterResult:
    """Items normalized from one batch plus the number of records dropped."""

    kind: EntityKind
    items: list[SearchEntityItem] = field(default_factory=list)
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.items)


# =============================================================================
# Field helpers
# =============================================================================


def _text(record: RawRecord, *keys: str) -> str:
    """First non-blank value among ``keys``, stripped, or ''."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


def _identity(kind: EntityKind, record: RawRecord, name: str) -> str:
    """Validate id and name, returning the id as a string."""
    record_id = _text(record, "id")
    if not record_id:
        raise MalformedRecordError(kind.value, "id", record=record)
    if not name:
        raise MalformedRecordError(kind.value, "name", record=record)
    return record_id


def _require_mapping(kind: EntityKind, record: Any) -> RawRecord:
    if not isinstance(record, Mapping):
        raise MalformedRecordError(kind.value, "mapping", record=record)
    return record


# =============================================================================
# Per-kind builders
# =============================================================================


def build_company(record: Any) -> SearchEntityItem:
    record = _require_mapping(EntityKind.COMPANY, record)
    name = _text(record, "name")
    record_id = _identity(EntityKind.COMPANY, record, name)

    domain = _text(record, "domain").lower()
    if domain.startswith(("http://", "https://")):
        domain = domain.split("://", 1)[1]
    domain = domain.rstrip("/")

    icon = _text(record, "favicon", "logo") or None
    if icon is None and domain:
        icon = FAVICON_SERVICE_URL.format(domain=domain)

    return SearchEntityItem(
        id=record_id,
        kind=EntityKind.COMPANY,
        display_name=name,
        subtitle=domain,
        icon_ref=icon,
        url=f"https://{domain}" if domain else None,
    )


def build_person(record: Any) -> SearchEntityItem:
    record = _require_mapping(EntityKind.PERSON, record)
    name = _text(record, "name")
    if not name:
        # Some providers only send split name parts
        parts = [_text(record, "first_name"), _text(record, "last_name")]
        name = " ".join(p for p in parts if p)
    record_id = _identity(EntityKind.PERSON, record, name)

    external_id = _text(record, "external_id")
    return SearchEntityItem(
        id=record_id,
        kind=EntityKind.PERSON,
        display_name=name,
        subtitle=_text(record, "headline", "title"),
        icon_ref=_text(record, "profile_image", "avatar") or None,
        url=f"/people/{external_id}" if external_id else None,
    )


def build_story(record: Any) -> SearchEntityItem:
    record = _require_mapping(EntityKind.STORY, record)
    name = _text(record, "title", "name")
    record_id = _identity(EntityKind.STORY, record, name)

    slug = _text(record, "slug")
    return SearchEntityItem(
        id=record_id,
        kind=EntityKind.STORY,
        display_name=name,
        subtitle=_text(record, "excerpt", "author"),
        icon_ref=_text(record, "featured_image") or None,
        url=f"/stories/{slug}" if slug else None,
    )


def build_topic(record: Any) -> SearchEntityItem:
    record = _require_mapping(EntityKind.TOPIC, record)
    name = _text(record, "name")
    record_id = _identity(EntityKind.TOPIC, record, name)

    return SearchEntityItem(
        id=record_id,
        kind=EntityKind.TOPIC,
        display_name=name,
        subtitle=_text(record, "category"),
        icon_ref=_text(record, "category_icon", "icon") or None,
    )


# =============================================================================
# Batch normalization
# =============================================================================


RecordBuilder = Callable[[Any], SearchEntityItem]
Adapter = Callable[[Sequence[Any]], AdapterResult]

BUILDERS: dict[EntityKind, RecordBuilder] = {
    EntityKind.COMPANY: build_company,
    EntityKind.PERSON: build_person,
    EntityKind.STORY: build_story,
    EntityKind.TOPIC: build_topic,
}


def normalize(kind: EntityKind, records: Sequence[Any] | None) -> AdapterResult:
    """
    Normalize a batch of raw records of one kind.

    Records that raise MalformedRecordError are dropped and counted; the
    remaining items keep their input order.
    """
    builder = BUILDERS[kind]
    result = AdapterResult(kind=kind)

    for position, record in enumerate(records or ()):
        try:
            result.items.append(builder(record))
        except MalformedRecordError as e:
            result.skipped += 1
            logger.debug(f"Skipping {kind.value} record #{position}: {e}")

    return result


def normalize_companies(records: Sequence[Any] | None) -> AdapterResult:
    return normalize(EntityKind.COMPANY, records)


def normalize_people(records: Sequence[Any] | None) -> AdapterResult:
    return normalize(EntityKind.PERSON, records)


def normalize_stories(records: Sequence[Any] | None) -> AdapterResult:
    return normalize(EntityKind.STORY, records)


def normalize_topics(records: Sequence[Any] | None) -> AdapterResult:
    return normalize(EntityKind.TOPIC, records)


ADAPTERS: dict[EntityKind, Adapter] = {
    EntityKind.COMPANY: normalize_companies,
    EntityKind.PERSON: normalize_people,
    EntityKind.STORY: normalize_stories,
    EntityKind.TOPIC: normalize_topics,
}
