"""Identity resolution for records that arrive without a stable id."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final, TypeAlias

from eventarchive.domain.model import (
    SOURCE_ID_FIELD,
    EntityKind,
    RawRecord,
    record_value,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from eventarchive.domain.model import FieldMapping
    from eventarchive.domain.ports import EntityRepository

log = logging.getLogger(__name__)

NameExtractor: TypeAlias = Callable[[RawRecord], str | None]


class DedupOutcome(StrEnum):
    SKIPPED = "skipped"
    MATCHED = "matched"
    INSERTED = "inserted"


def normalize_name(value: str) -> str:
    return value.strip().lower()


def _person_name(record: RawRecord) -> str | None:
    full_name = record_value(record, "Nome completo")
    if full_name:
        return full_name
    parts = [record_value(record, "Nome"), record_value(record, "Cognome")]
    joined = " ".join(part for part in parts if part)
    return joined or None


def _column(name: str) -> NameExtractor:
    def extract(record: RawRecord) -> str | None:
        return record_value(record, name)

    return extract


def _place_name(record: RawRecord) -> str | None:
    return record_value(record, "Nome") or record_value(record, "Città")


@dataclass(frozen=True, slots=True)
class DedupRule:
    """How a kind without stable ids is recognised.

    ``name_of`` derives the name-bearing value from the raw record; rows where
    it yields nothing are skipped. ``match_fields`` are mapped fields that must
    also be equal (``NULL`` matching ``NULL``) for two rows to be the same.
    """

    kind: EntityKind
    name_field: str
    name_of: NameExtractor
    match_fields: tuple[str, ...] = ()


DEDUP_RULES: Final[Mapping[EntityKind, DedupRule]] = {
    EntityKind.PERSON: DedupRule(EntityKind.PERSON, "full_name", _person_name),
    EntityKind.GROUP: DedupRule(EntityKind.GROUP, "name", _column("Nome")),
    EntityKind.PLACE: DedupRule(EntityKind.PLACE, "name", _place_name, ("city",)),
    EntityKind.EVENT: DedupRule(EntityKind.EVENT, "title", _column("Titolo"), ("event_date",)),
}


def rule_for(kind: EntityKind) -> DedupRule:
    try:
        return DEDUP_RULES[kind]
    except KeyError:
        raise ValueError(f"No dedup rule defined for {kind}") from None


@dataclass(slots=True)
class DedupResolver:
    """Insert a record unless a row with the same normalized name exists.

    Matching rows are left untouched.
    """

    repository: EntityRepository
    mapping: FieldMapping
    rule: DedupRule

    def resolve(self, record: RawRecord) -> DedupOutcome:
        name = self.rule.name_of(record)
        if name is None:
            log.debug("Skipping %s row without %s", self.rule.kind, self.rule.name_field)
            return DedupOutcome.SKIPPED

        fields = self.mapping.apply(record)
        fields[self.rule.name_field] = name
        fields[SOURCE_ID_FIELD] = None

        existing = self.repository.find_by_name(
            self.rule.name_field,
            normalize_name(name),
            match={field: fields[field] for field in self.rule.match_fields},
        )
        if existing is not None:
            return DedupOutcome.MATCHED

        self.repository.insert(fields)
        return DedupOutcome.INSERTED
