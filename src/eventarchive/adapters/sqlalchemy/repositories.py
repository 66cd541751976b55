"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import func, insert, select
from sqlalchemy.dialects import postgresql, sqlite

from eventarchive.adapters.sqlalchemy.tables import ASSOCIATION_TABLES, ENTITY_TABLES
from eventarchive.domain.model import SOURCE_ID_FIELD, AssociationKind, EntityKind
from eventarchive.domain.ports import CatalogRepositories

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Table
    from sqlalchemy.orm import Session

    from eventarchive.domain.model import FieldValue


class UnsupportedDialectError(RuntimeError):
    """Raised when conflict-aware inserts are requested on an unknown backend."""


def _conflict_insert(session: Session, table: Table) -> Any:
    """Return a dialect-specific INSERT supporting ``ON CONFLICT``."""

    dialect = session.get_bind().dialect.name
    match dialect:
        case "sqlite":
            return sqlite.insert(table)
        case "postgresql":
            return postgresql.insert(table)
        case _:
            raise UnsupportedDialectError(f"ON CONFLICT inserts are not supported on {dialect}")


class SqlAlchemyEntityRepository:
    """Catalog rows of one entity kind."""

    def __init__(self, session: Session, kind: EntityKind) -> None:
        self.session = session
        self._kind = kind
        self._table = ENTITY_TABLES[kind]

    @property
    def kind(self) -> EntityKind:
        return self._kind

    def source_id_map(self) -> dict[str, int]:
        table = self._table
        stmt = select(table.c.source_record_id, table.c.id).where(
            table.c.source_record_id.is_not(None)
        )
        return {source_id: entity_id for source_id, entity_id in self.session.execute(stmt)}

    def upsert(self, fields: Mapping[str, FieldValue]) -> int | None:
        values = self._values(fields)
        if values.get(SOURCE_ID_FIELD) is None:
            raise ValueError(f"Upserting {self._kind} requires {SOURCE_ID_FIELD}")
        table = self._table
        stmt = _conflict_insert(self.session, table).values(**values)
        updates: dict[str, Any] = {
            name: stmt.excluded[name] for name in values if name != SOURCE_ID_FIELD
        }
        updates["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.source_record_id],
            set_=updates,
        ).returning(table.c.id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_name(
        self,
        name_field: str,
        name: str,
        *,
        match: Mapping[str, FieldValue] | None = None,
    ) -> int | None:
        table = self._table
        stmt = select(table.c.id).where(
            func.lower(func.trim(table.c[name_field])) == name.strip().lower()
        )
        for column, value in (match or {}).items():
            stmt = stmt.where(table.c[column].is_not_distinct_from(value))
        stmt = stmt.order_by(table.c.id).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()

    def insert(self, fields: Mapping[str, FieldValue]) -> int | None:
        table = self._table
        stmt = insert(table).values(**self._values(fields)).returning(table.c.id)
        return self.session.execute(stmt).scalar_one_or_none()

    def count(self) -> int:
        stmt = select(func.count()).select_from(self._table)
        return self.session.execute(stmt).scalar_one()

    def labels(self) -> list[tuple[int, str | None]]:
        table = self._table
        stmt = select(table.c.id, table.c[self._kind.label_field]).order_by(table.c.id)
        return [(entity_id, label) for entity_id, label in self.session.execute(stmt)]

    def _values(self, fields: Mapping[str, FieldValue]) -> dict[str, FieldValue]:
        unknown = set(fields) - set(self._table.c.keys())
        if unknown:
            names = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown {self._kind} fields: {names}")
        return dict(fields)


class SqlAlchemyAssociationRepository:
    """Event association rows of one association kind."""

    def __init__(self, session: Session, kind: AssociationKind) -> None:
        self.session = session
        self._kind = kind
        self._table = ASSOCIATION_TABLES[kind]

    @property
    def kind(self) -> AssociationKind:
        return self._kind

    def link(self, event_id: int, related_id: int) -> bool:
        table = self._table
        related_column = table.c[self._kind.related_column]
        stmt = (
            _conflict_insert(self.session, table)
            .values({table.c.event_id: event_id, related_column: related_id})
            .on_conflict_do_nothing()
            .returning(table.c.event_id)
        )
        return self.session.execute(stmt).scalar_one_or_none() is not None

    def count(self) -> int:
        stmt = select(func.count()).select_from(self._table)
        return self.session.execute(stmt).scalar_one()

    def pairs(self) -> list[tuple[int, int]]:
        table = self._table
        related_column = table.c[self._kind.related_column]
        stmt = select(table.c.event_id, related_column).order_by(
            table.c.event_id, related_column
        )
        return [(event_id, related_id) for event_id, related_id in self.session.execute(stmt)]


def build_catalog_repositories(session: Session) -> CatalogRepositories:
    return CatalogRepositories(
        entities={kind: SqlAlchemyEntityRepository(session, kind) for kind in EntityKind},
        associations={
            kind: SqlAlchemyAssociationRepository(session, kind) for kind in AssociationKind
        },
    )


if TYPE_CHECKING:
    from eventarchive.domain.ports import AssociationRepository, EntityRepository

    _session_stub = cast("Session", object())
    _entity_repo: EntityRepository = SqlAlchemyEntityRepository(_session_stub, EntityKind.EVENT)
    _association_repo: AssociationRepository = SqlAlchemyAssociationRepository(
        _session_stub, AssociationKind.EVENT_PERSON
    )
