"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from eventarchive.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    is_started,
    startup,
)
from eventarchive.config import ConfigurationError, get_import_config
from eventarchive.domain.catalog_views import catalog_graph, catalog_stats
from eventarchive.domain.csv_import import SheetLayout, run_csv_import

if TYPE_CHECKING:
    from pathlib import Path

    from eventarchive.config import ImportConfig
    from eventarchive.domain.catalog_views import CatalogGraph, CatalogStats
    from eventarchive.domain.csv_import import ImportReport
    from eventarchive.domain.ports import CatalogUnitOfWork

UnitOfWorkFactory = Callable[[], "CatalogUnitOfWork"]


log = getLogger(__name__)


def _ensure_started(unit_of_work_factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyCatalogUnitOfWork


def import_csv_exports(
    *,
    root: Path | None = None,
    config: ImportConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ImportReport:
    """Import the identified and unidentified sheet exports."""

    effective_config = config or get_import_config(root=root)
    if not effective_config.root.is_dir():
        raise ConfigurationError(f"Import root is not a directory: {effective_config.root}")
    effective_uow = _ensure_started(unit_of_work_factory)
    layout = SheetLayout(
        identified_dir=effective_config.identified_dir,
        unidentified_dir=effective_config.unidentified_dir,
    )
    log.info(
        "Starting CSV import: identified=%s, unidentified=%s",
        layout.identified_dir,
        layout.unidentified_dir,
    )

    report = run_csv_import(layout, uow=effective_uow())

    log.info("CSV import completed: %s", report.summary())
    return report


def get_catalog_stats(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> CatalogStats:
    effective_uow = _ensure_started(unit_of_work_factory)
    with effective_uow() as uow:
        return catalog_stats(uow.repositories)


def get_catalog_graph(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> CatalogGraph:
    effective_uow = _ensure_started(unit_of_work_factory)
    with effective_uow() as uow:
        return catalog_graph(uow.repositories)
