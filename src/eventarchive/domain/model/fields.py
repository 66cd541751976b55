"""Declarative mapping from spreadsheet columns to entity fields.

Every export sheet uses the same Italian headers for a given entity kind, so a
single ``FieldMapping`` per kind is enough to turn a raw record into the
column values written to the catalog tables.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Final, TypeAlias

from eventarchive.domain.model.enums import EntityKind

RawRecord: TypeAlias = Mapping[str, str | None]
FieldValue: TypeAlias = str | list[str] | None
Transform: TypeAlias = Callable[[str | None], FieldValue]

SOURCE_ID_COLUMN: Final[str] = "form_record_id"
PARENT_ID_COLUMN: Final[str] = "parent_record_id"
SOURCE_ID_FIELD: Final[str] = "source_record_id"


def trim_to_null(value: str | None) -> str | None:
    """Strip surrounding whitespace; blank values become ``None``."""

    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def split_list(value: str | None) -> list[str] | None:
    """Split a comma separated cell into trimmed, non-empty items."""

    if value is None:
        return None
    items = [item.strip() for item in value.split(",")]
    items = [item for item in items if item]
    return items or None


def record_value(record: RawRecord, column: str) -> str | None:
    return trim_to_null(record.get(column))


@dataclass(frozen=True, slots=True)
class FieldSpec:
    column: str
    field: str
    transform: Transform = trim_to_null


@dataclass(frozen=True, slots=True)
class FieldMapping:
    kind: EntityKind
    fields: tuple[FieldSpec, ...]

    def apply(self, record: RawRecord) -> dict[str, FieldValue]:
        """Return every mapped field plus ``source_record_id``.

        Columns missing from ``record`` map to ``None`` so that writing the
        result replaces the whole row rather than patching it.
        """

        values: dict[str, FieldValue] = {
            SOURCE_ID_FIELD: record_value(record, SOURCE_ID_COLUMN),
        }
        for spec in self.fields:
            values[spec.field] = spec.transform(record.get(spec.column))
        return values


STATUS = FieldSpec("Stato record", "status")
SLUG = FieldSpec("Slug", "slug")

EVENT_FIELDS = FieldMapping(
    EntityKind.EVENT,
    (
        FieldSpec("Titolo", "title"),
        FieldSpec("Data", "event_date"),
        FieldSpec("Descrizione", "description"),
        FieldSpec("Tipo", "type"),
        FieldSpec("Genere", "genre"),
        FieldSpec("Evento-Rassegna", "series"),
        FieldSpec("Tag", "tags", split_list),
        FieldSpec("Luogo", "place_text"),
        SLUG,
        STATUS,
        FieldSpec("NOTE", "notes"),
    ),
)

PERSON_FIELDS = FieldMapping(
    EntityKind.PERSON,
    (
        FieldSpec("Nome completo", "full_name"),
        FieldSpec("Cognome", "last_name"),
        FieldSpec("Nome", "first_name"),
        FieldSpec("Aka", "aka"),
        FieldSpec("Ruolo", "role"),
        FieldSpec("Bio", "bio"),
        SLUG,
        STATUS,
    ),
)

GROUP_FIELDS = FieldMapping(
    EntityKind.GROUP,
    (
        FieldSpec("Nome", "name"),
        FieldSpec("Tipo", "type"),
        FieldSpec("Attivo dal...", "active_from"),
        FieldSpec("fino al...", "active_to"),
        FieldSpec("Biografia", "bio"),
        STATUS,
    ),
)

PLACE_FIELDS = FieldMapping(
    EntityKind.PLACE,
    (
        FieldSpec("Nome", "name"),
        FieldSpec("Città", "city"),
        FieldSpec("Indirizzo", "address"),
        FieldSpec("Tipo", "type"),
        FieldSpec("Attivo dal", "active_from"),
        FieldSpec("...fino al", "active_to"),
        SLUG,
        STATUS,
    ),
)

ORGANIZATION_FIELDS = FieldMapping(
    EntityKind.ORGANIZATION,
    (
        FieldSpec("Nome", "name"),
        FieldSpec("Tipo", "type"),
        SLUG,
        STATUS,
    ),
)

SOURCE_FIELDS = FieldMapping(
    EntityKind.SOURCE,
    (
        FieldSpec("Tipo", "type"),
        FieldSpec("Titolo", "title"),
        STATUS,
    ),
)

MEDIA_FIELDS = FieldMapping(
    EntityKind.MEDIA,
    (
        FieldSpec("Tipo", "type"),
        FieldSpec("Titolo", "title"),
        SLUG,
        STATUS,
    ),
)

ONLINE_RESOURCE_FIELDS = FieldMapping(
    EntityKind.ONLINE_RESOURCE,
    (
        FieldSpec("Tipo", "type"),
        FieldSpec("Titolo", "title"),
        FieldSpec("URL", "url"),
        STATUS,
    ),
)

FIELD_MAPPINGS: Final[Mapping[EntityKind, FieldMapping]] = {
    mapping.kind: mapping
    for mapping in (
        EVENT_FIELDS,
        PERSON_FIELDS,
        GROUP_FIELDS,
        PLACE_FIELDS,
        ORGANIZATION_FIELDS,
        SOURCE_FIELDS,
        MEDIA_FIELDS,
        ONLINE_RESOURCE_FIELDS,
    )
}


def mapping_for(kind: EntityKind) -> FieldMapping:
    return FIELD_MAPPINGS[kind]
