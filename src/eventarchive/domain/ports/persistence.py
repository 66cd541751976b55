"""Ports for persisting catalog entities and their associations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from eventarchive.domain.model import AssociationKind, EntityKind, FieldValue


@runtime_checkable
class EntityRepository(Protocol):
    """Persistence contract for one entity kind."""

    @property
    def kind(self) -> EntityKind: ...

    def source_id_map(self) -> dict[str, int]:
        """Return ``source_record_id -> id`` for every identified row in one read."""
        ...

    def upsert(self, fields: Mapping[str, FieldValue]) -> int | None:
        """Insert or overwrite the row keyed by ``fields["source_record_id"]``."""
        ...

    def find_by_name(
        self,
        name_field: str,
        name: str,
        *,
        match: Mapping[str, FieldValue] | None = None,
    ) -> int | None:
        """Return the id of a row whose ``name_field`` equals ``name`` ignoring case.

        Every ``match`` column must also be equal, with ``NULL`` equal to ``NULL``.
        """
        ...

    def insert(self, fields: Mapping[str, FieldValue]) -> int | None: ...

    def count(self) -> int: ...

    def labels(self) -> list[tuple[int, str | None]]: ...


@runtime_checkable
class AssociationRepository(Protocol):
    """Persistence contract for one event association table."""

    @property
    def kind(self) -> AssociationKind: ...

    def link(self, event_id: int, related_id: int) -> bool:
        """Insert the pair unless present; return whether a row was written."""
        ...

    def count(self) -> int: ...

    def pairs(self) -> list[tuple[int, int]]: ...
