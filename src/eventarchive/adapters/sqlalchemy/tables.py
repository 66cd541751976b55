"""SQLAlchemy table metadata for the catalog schema."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    TypeDecorator,
    event,
    func,
)

from eventarchive.domain.model import AssociationKind, EntityKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StringListType(TypeDecorator[list[str]]):
    """Ordered list of strings stored as a JSON array."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(list(value), ensure_ascii=False)

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str] | None:
        _ = dialect
        if value is None:
            return None
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return None
        items = cast(list[Any], loaded)
        return [str(item) for item in items]


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def _entity_table(kind: EntityKind, *columns: Column[Any]) -> Table:
    return Table(
        kind.table_name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("source_record_id", String, nullable=True, unique=True),
        *columns,
        Column("status", String, nullable=True),
        Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
        Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    )


def _text_columns(*names: str) -> tuple[Column[Any], ...]:
    return tuple(Column(name, String, nullable=True) for name in names)


event_table = _entity_table(
    EntityKind.EVENT,
    *_text_columns("title", "event_date", "description", "type", "genre", "series"),
    Column("tags", StringListType, nullable=True),
    *_text_columns("place_text", "slug", "notes"),
)

person_table = _entity_table(
    EntityKind.PERSON,
    *_text_columns("full_name", "last_name", "first_name", "aka", "role", "bio", "slug"),
)

group_table = _entity_table(
    EntityKind.GROUP,
    *_text_columns("name", "type", "active_from", "active_to", "bio"),
)

place_table = _entity_table(
    EntityKind.PLACE,
    *_text_columns("name", "city", "address", "type", "active_from", "active_to", "slug"),
)

organization_table = _entity_table(
    EntityKind.ORGANIZATION,
    *_text_columns("name", "type", "slug"),
)

source_table = _entity_table(EntityKind.SOURCE, *_text_columns("type", "title"))

media_table = _entity_table(EntityKind.MEDIA, *_text_columns("type", "title", "slug"))

online_resource_table = _entity_table(
    EntityKind.ONLINE_RESOURCE,
    *_text_columns("type", "title", "url"),
)

ENTITY_TABLES: Final[Mapping[EntityKind, Table]] = {
    EntityKind.EVENT: event_table,
    EntityKind.PERSON: person_table,
    EntityKind.GROUP: group_table,
    EntityKind.PLACE: place_table,
    EntityKind.ORGANIZATION: organization_table,
    EntityKind.SOURCE: source_table,
    EntityKind.MEDIA: media_table,
    EntityKind.ONLINE_RESOURCE: online_resource_table,
}


def _association_table(kind: AssociationKind) -> Table:
    related = ENTITY_TABLES[kind.related]
    return Table(
        kind.table_name,
        metadata,
        Column(
            "event_id",
            Integer,
            ForeignKey(event_table.c.id, ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            kind.related_column,
            Integer,
            ForeignKey(related.c.id, ondelete="CASCADE"),
            primary_key=True,
        ),
    )


ASSOCIATION_TABLES: Final[Mapping[AssociationKind, Table]] = {
    kind: _association_table(kind) for kind in AssociationKind
}


def _sqlite_lower(value: object) -> object:
    return value.lower() if isinstance(value, str) else value


def _on_sqlite_connect(dbapi_connection: Any, connection_record: Any) -> None:
    _ = connection_record
    # SQLite's builtin lower() only folds ASCII.
    dbapi_connection.create_function("lower", 1, _sqlite_lower, deterministic=True)
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(engine: Engine) -> Engine:
    """Attach per-connection setup needed by the repositories."""

    if engine.dialect.name == "sqlite" and not event.contains(
        engine, "connect", _on_sqlite_connect
    ):
        event.listen(engine, "connect", _on_sqlite_connect)
    return engine


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the catalog metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
