"""Shared state for one import run: repositories plus the completion report."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from eventarchive.domain.csv_import.dedup import DedupOutcome
from eventarchive.domain.csv_import.links import LinkOutcome
from eventarchive.domain.model import AssociationKind, EntityKind

if TYPE_CHECKING:
    from eventarchive.domain.ports import CatalogRepositories


@dataclass(slots=True)
class ImportReport:
    """Aggregate counters for a finished run."""

    upserted: Counter[EntityKind] = field(default_factory=Counter[EntityKind])
    seeded: Counter[EntityKind] = field(default_factory=Counter[EntityKind])
    matched: Counter[EntityKind] = field(default_factory=Counter[EntityKind])
    skipped_rows: Counter[EntityKind] = field(default_factory=Counter[EntityKind])
    links_created: Counter[AssociationKind] = field(default_factory=Counter[AssociationKind])
    links_existing: Counter[AssociationKind] = field(default_factory=Counter[AssociationKind])
    links_unresolved: Counter[AssociationKind] = field(
        default_factory=Counter[AssociationKind]
    )

    def record_upsert(self, kind: EntityKind, entity_id: int | None) -> None:
        if entity_id is None:
            self.skipped_rows[kind] += 1
        else:
            self.upserted[kind] += 1

    def record_dedup(self, kind: EntityKind, outcome: DedupOutcome) -> None:
        match outcome:
            case DedupOutcome.INSERTED:
                self.seeded[kind] += 1
            case DedupOutcome.MATCHED:
                self.matched[kind] += 1
            case _:
                self.skipped_rows[kind] += 1

    def record_link(self, kind: AssociationKind, outcome: LinkOutcome) -> None:
        match outcome:
            case LinkOutcome.CREATED:
                self.links_created[kind] += 1
            case LinkOutcome.EXISTING:
                self.links_existing[kind] += 1
            case _:
                self.links_unresolved[kind] += 1

    @property
    def total_upserted(self) -> int:
        return self.upserted.total()

    @property
    def total_seeded(self) -> int:
        return self.seeded.total()

    @property
    def total_links(self) -> int:
        return self.links_created.total() + self.links_existing.total()

    @property
    def total_unresolved_links(self) -> int:
        return self.links_unresolved.total()

    def summary(self) -> str:
        return (
            f"upserted={self.total_upserted}, seeded={self.total_seeded}, "
            f"matched={self.matched.total()}, skipped={self.skipped_rows.total()}, "
            f"links={self.total_links}, unresolved_links={self.total_unresolved_links}"
        )


@dataclass(slots=True)
class ImportContext:
    repositories: CatalogRepositories
    report: ImportReport = field(default_factory=ImportReport)
