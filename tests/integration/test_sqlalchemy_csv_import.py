from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from eventarchive.adapters.sqlalchemy import ASSOCIATION_TABLES, ENTITY_TABLES
from eventarchive.app import get_catalog_graph, get_catalog_stats, import_csv_exports
from eventarchive.config import ImportConfig
from eventarchive.domain.model import AssociationKind, EntityKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine

    from eventarchive.adapters.sqlalchemy import SqlAlchemyCatalogUnitOfWork
    from tests.support.sheets import SheetWriter

EVENT_HEADER = ("form_record_id", "Titolo", "Data", "Tag", "Stato record")
PERSON_LINK_HEADER = ("parent_record_id", "form_record_id", "Nome completo")


def _config(sheets: SheetWriter) -> ImportConfig:
    return ImportConfig(root=sheets.root)


def _rows(engine: Engine, kind: EntityKind) -> list[dict[str, object]]:
    table = ENTITY_TABLES[kind]
    with engine.connect() as connection:
        result = connection.execute(select(table).order_by(table.c.id))
        return [dict(row._mapping) for row in result]  # noqa: SLF001


def _pairs(engine: Engine, kind: AssociationKind) -> list[tuple[int, int]]:
    table = ASSOCIATION_TABLES[kind]
    with engine.connect() as connection:
        return [(row[0], row[1]) for row in connection.execute(select(table))]


def test_event_with_linked_person(
    sqlite_engine: Engine,
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    sheets: SheetWriter,
) -> None:
    sheets.identified("Eventi.csv", EVENT_HEADER, [("1", "Concerto", "2024-05-01", "", "")])
    sheets.identified("LinkTo-Personaggi.csv", PERSON_LINK_HEADER, [("1", "9", "Maria Rossi")])

    import_csv_exports(config=_config(sheets), unit_of_work_factory=sqlite_unit_of_work)

    (event,) = _rows(sqlite_engine, EntityKind.EVENT)
    (person,) = _rows(sqlite_engine, EntityKind.PERSON)
    assert event["title"] == "Concerto"
    assert event["event_date"] == "2024-05-01"
    assert person["full_name"] == "Maria Rossi"
    assert person["source_record_id"] == "9"
    assert _pairs(sqlite_engine, AssociationKind.EVENT_PERSON) == [(event["id"], person["id"])]


def test_reimport_updates_rows_in_place(
    sqlite_engine: Engine,
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    sheets: SheetWriter,
) -> None:
    sheets.identified(
        "Eventi.csv", EVENT_HEADER, [("1", "Concerto", "2024-05-01", "jazz, live", "Bozza")]
    )
    import_csv_exports(config=_config(sheets), unit_of_work_factory=sqlite_unit_of_work)

    sheets.identified("Eventi.csv", EVENT_HEADER, [("1", "Concerto finale", "", "", "Pubblicato")])
    import_csv_exports(config=_config(sheets), unit_of_work_factory=sqlite_unit_of_work)

    (event,) = _rows(sqlite_engine, EntityKind.EVENT)
    assert event["title"] == "Concerto finale"
    assert event["event_date"] is None
    assert event["tags"] is None
    assert event["status"] == "Pubblicato"


def test_full_rerun_adds_nothing(
    sqlite_engine: Engine,
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    sheets: SheetWriter,
) -> None:
    sheets.identified("Eventi.csv", EVENT_HEADER, [("1", "Concerto", "2024-05-01", "", "")])
    sheets.identified(
        "LinkTo-Sedi-Luoghi.csv",
        ("parent_record_id", "form_record_id", "Nome", "Città"),
        [("1", "30", "Arena", "Verona")],
    )
    sheets.identified(
        "LinkTo-Risorse online.csv",
        ("parent_record_id", "form_record_id", "Titolo", "URL"),
        [("1", "70", "Scheda", "https://example.org/concerto")],
    )
    sheets.unidentified(
        "Sedi-Luoghi.csv",
        ("Nome", "Città"),
        [("Teatro Comunale", "Bologna"), ("Teatro Comunale", "Bologna"), ("arena", "Verona")],
    )
    sheets.unidentified("Personaggi.csv", ("Nome completo", "Nome", "Cognome"), [("", "", "")])

    first = import_csv_exports(config=_config(sheets), unit_of_work_factory=sqlite_unit_of_work)
    second = import_csv_exports(config=_config(sheets), unit_of_work_factory=sqlite_unit_of_work)

    places = _rows(sqlite_engine, EntityKind.PLACE)
    assert [place["name"] for place in places] == ["Arena", "Teatro Comunale"]
    assert _rows(sqlite_engine, EntityKind.PERSON) == []
    assert len(_pairs(sqlite_engine, AssociationKind.EVENT_ONLINE_RESOURCE)) == 1
    assert first.seeded[EntityKind.PLACE] == 1
    assert second.total_seeded == 0
    assert second.links_existing.total() == 2


def test_catalog_views_read_imported_rows(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    sheets: SheetWriter,
) -> None:
    sheets.identified("Eventi.csv", EVENT_HEADER, [("1", "Concerto", "2024-05-01", "", "")])
    sheets.identified("LinkTo-Personaggi.csv", PERSON_LINK_HEADER, [("1", "9", "Maria Rossi")])
    import_csv_exports(config=_config(sheets), unit_of_work_factory=sqlite_unit_of_work)

    stats = get_catalog_stats(unit_of_work_factory=sqlite_unit_of_work).as_dict()
    graph = get_catalog_graph(unit_of_work_factory=sqlite_unit_of_work)

    assert stats["totals"]["events"] == 1
    assert stats["links"]["event_people"] == 1
    assert [node["label"] for node in graph.nodes] == ["Concerto", "Maria Rossi"]
    assert [edge["type"] for edge in graph.edges] == ["event_person"]
