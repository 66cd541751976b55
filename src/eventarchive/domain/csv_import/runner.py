"""Entry point for running the CSV import inside a unit of work."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .context import ImportContext, ImportReport
from .orchestrator import default_pipeline

if TYPE_CHECKING:
    from eventarchive.domain.ports import CatalogUnitOfWork

    from .orchestrator import CsvImportPipeline
    from .sheets import SheetLayout


def run_csv_import(
    layout: SheetLayout,
    *,
    uow: CatalogUnitOfWork,
    pipeline: CsvImportPipeline | None = None,
) -> ImportReport:
    """Run both import phases and commit once everything succeeded.

    Errors propagate unchanged; the unit of work rolls back on the way out.
    """

    active_pipeline = pipeline or default_pipeline()
    with uow:
        context = ImportContext(repositories=uow.repositories)
        active_pipeline.run(layout, context=context)
        uow.commit()
    return context.report
