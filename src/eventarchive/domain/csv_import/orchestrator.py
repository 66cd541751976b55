"""Phase-based orchestrator for the CSV import."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from eventarchive.domain.csv_import.dedup import DedupResolver, rule_for
from eventarchive.domain.csv_import.links import LinkResolver
from eventarchive.domain.csv_import.sheets import LINK_SHEETS, UNIDENTIFIED_SHEETS
from eventarchive.domain.csv_import.upsert import EntityUpsertResolver
from eventarchive.domain.model import (
    PARENT_ID_COLUMN,
    AssociationKind,
    EntityKind,
    mapping_for,
    record_value,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from eventarchive.domain.csv_import.context import ImportContext
    from eventarchive.domain.csv_import.sheets import SheetLayout

log = logging.getLogger(__name__)


class ImportPhase(Protocol):
    """Contract implemented by each import phase."""

    name: str

    def run(self, layout: SheetLayout, *, context: ImportContext) -> None: ...


@dataclass(slots=True)
class IdentifiedImportPhase(ImportPhase):
    """Upsert identified events, then every link sheet against them.

    The event id map is read once, after all event upserts and before the
    first link is resolved.
    """

    name: str = "identified"
    link_kinds: tuple[AssociationKind, ...] = tuple(LINK_SHEETS)

    def run(self, layout: SheetLayout, *, context: ImportContext) -> None:
        repositories = context.repositories
        report = context.report

        events = EntityUpsertResolver(
            repositories.entity(EntityKind.EVENT), mapping_for(EntityKind.EVENT)
        )
        rows = 0
        for record in layout.events():
            report.record_upsert(EntityKind.EVENT, events.resolve(record))
            rows += 1
        log.info("Upserted events from %s: rows=%s", layout.events().name, rows)

        event_ids = repositories.entity(EntityKind.EVENT).source_id_map()

        for kind in self.link_kinds:
            sheet = layout.link_sheet(kind)
            related = EntityUpsertResolver(
                repositories.entity(kind.related), mapping_for(kind.related)
            )
            links = LinkResolver(repositories.association(kind))
            rows = 0
            for record in sheet:
                related_id = related.resolve(record)
                report.record_upsert(kind.related, related_id)
                parent = record_value(record, PARENT_ID_COLUMN)
                event_id = event_ids.get(parent) if parent is not None else None
                outcome = links.resolve(event_id, related_id)
                if event_id is None:
                    log.debug("Unresolved parent %r in %s", parent, sheet.name)
                report.record_link(kind, outcome)
                rows += 1
            log.info("Processed %s: rows=%s", sheet.name, rows)


@dataclass(slots=True)
class UnidentifiedSeedingPhase(ImportPhase):
    """Seed records without stable ids, skipping names already catalogued."""

    name: str = "unidentified"
    kinds: tuple[EntityKind, ...] = tuple(UNIDENTIFIED_SHEETS)

    def run(self, layout: SheetLayout, *, context: ImportContext) -> None:
        for kind in self.kinds:
            sheet = layout.unidentified_sheet(kind)
            resolver = DedupResolver(
                context.repositories.entity(kind), mapping_for(kind), rule_for(kind)
            )
            rows = 0
            for record in sheet:
                context.report.record_dedup(kind, resolver.resolve(record))
                rows += 1
            log.info(
                "Seeded %s: rows=%s, inserted=%s",
                sheet.name,
                rows,
                context.report.seeded[kind],
            )


@dataclass(slots=True)
class CsvImportPipeline:
    """Run the configured phases strictly in order."""

    phases: Sequence[ImportPhase] = field(default_factory=tuple)

    def with_phase(self, phase: ImportPhase) -> CsvImportPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return CsvImportPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[ImportPhase]) -> CsvImportPipeline:
        return CsvImportPipeline(phases=(*self.phases, *tuple(phases)))

    def run(self, layout: SheetLayout, *, context: ImportContext) -> ImportContext:
        for phase in self.phases:
            log.info("Starting import phase %s", phase.name)
            phase.run(layout, context=context)
            log.info("Finished import phase %s", phase.name)
        return context


def default_pipeline() -> CsvImportPipeline:
    return CsvImportPipeline(phases=(IdentifiedImportPhase(), UnidentifiedSeedingPhase()))
