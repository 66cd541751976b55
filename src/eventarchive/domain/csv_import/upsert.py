"""Upsert of identified records keyed by their stable source id."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from eventarchive.domain.model import SOURCE_ID_FIELD

if TYPE_CHECKING:
    from eventarchive.domain.model import FieldMapping, RawRecord
    from eventarchive.domain.ports import EntityRepository

log = logging.getLogger(__name__)


@dataclass(slots=True)
class EntityUpsertResolver:
    """Map a raw record to entity fields and write them by ``source_record_id``.

    An existing row with the same source id is overwritten field by field;
    columns missing from the record become ``NULL``.
    """

    repository: EntityRepository
    mapping: FieldMapping

    def __post_init__(self) -> None:
        if self.repository.kind is not self.mapping.kind:
            raise ValueError(
                f"Field mapping for {self.mapping.kind} cannot feed {self.repository.kind}"
            )

    def resolve(self, record: RawRecord) -> int | None:
        fields = self.mapping.apply(record)
        if fields[SOURCE_ID_FIELD] is None:
            log.debug("Skipping %s row without a source id", self.mapping.kind)
            return None
        return self.repository.upsert(fields)
