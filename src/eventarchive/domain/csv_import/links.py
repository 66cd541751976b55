"""Event association resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eventarchive.domain.ports import AssociationRepository


class LinkOutcome(StrEnum):
    UNRESOLVED = "unresolved"
    CREATED = "created"
    EXISTING = "existing"


@dataclass(slots=True)
class LinkResolver:
    repository: AssociationRepository

    def resolve(self, event_id: int | None, related_id: int | None) -> LinkOutcome:
        """Link the pair when both ids resolved; relinking is a no-op."""

        if event_id is None or related_id is None:
            return LinkOutcome.UNRESOLVED
        if self.repository.link(event_id, related_id):
            return LinkOutcome.CREATED
        return LinkOutcome.EXISTING
