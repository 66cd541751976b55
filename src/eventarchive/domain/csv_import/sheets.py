"""Names and locations of the exported sheets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from eventarchive.domain.csv_import.reader import Sheet
from eventarchive.domain.model import AssociationKind, EntityKind

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

EVENTS_SHEET: Final[str] = "Eventi.csv"

LINK_SHEETS: Final[Mapping[AssociationKind, str]] = {
    AssociationKind.EVENT_PERSON: "LinkTo-Personaggi.csv",
    AssociationKind.EVENT_GROUP: "LinkTo-Gruppi.csv",
    AssociationKind.EVENT_PLACE: "LinkTo-Sedi-Luoghi.csv",
    AssociationKind.EVENT_ORGANIZATION: "LinkTo-Organizzazioni.csv",
    AssociationKind.EVENT_SOURCE: "LinkTo-Fonti.csv",
    AssociationKind.EVENT_MEDIA: "LinkTo-Media.csv",
    AssociationKind.EVENT_ONLINE_RESOURCE: "LinkTo-Risorse online.csv",
}

UNIDENTIFIED_SHEETS: Final[Mapping[EntityKind, str]] = {
    EntityKind.PERSON: "Personaggi.csv",
    EntityKind.GROUP: "Gruppi.csv",
    EntityKind.PLACE: "Sedi-Luoghi.csv",
    EntityKind.EVENT: "Eventi-no_ID.csv",
}


@dataclass(frozen=True, slots=True)
class SheetLayout:
    """Resolve sheets from the identified and unidentified export folders."""

    identified_dir: Path
    unidentified_dir: Path

    def events(self) -> Sheet:
        return Sheet(self.identified_dir / EVENTS_SHEET)

    def link_sheet(self, kind: AssociationKind) -> Sheet:
        return Sheet(self.identified_dir / LINK_SHEETS[kind])

    def unidentified_sheet(self, kind: EntityKind) -> Sheet:
        return Sheet(self.unidentified_dir / UNIDENTIFIED_SHEETS[kind])
