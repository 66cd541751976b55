"""Two-phase import of the spreadsheet exports.

The identified phase upserts events and linked entities by their stable
``form_record_id``; the unidentified phase seeds rows lacking such an id by
normalized name, never duplicating what is already catalogued. Re-running the
whole import is the recovery path, so every write is idempotent.
"""

from __future__ import annotations

from .context import ImportContext, ImportReport
from .dedup import DEDUP_RULES, DedupOutcome, DedupResolver, DedupRule, normalize_name
from .links import LinkOutcome, LinkResolver
from .orchestrator import (
    CsvImportPipeline,
    IdentifiedImportPhase,
    ImportPhase,
    UnidentifiedSeedingPhase,
    default_pipeline,
)
from .reader import Sheet, read_sheet
from .runner import run_csv_import
from .sheets import SheetLayout
from .upsert import EntityUpsertResolver

__all__ = [
    "DEDUP_RULES",
    "CsvImportPipeline",
    "DedupOutcome",
    "DedupResolver",
    "DedupRule",
    "EntityUpsertResolver",
    "IdentifiedImportPhase",
    "ImportContext",
    "ImportPhase",
    "ImportReport",
    "LinkOutcome",
    "LinkResolver",
    "Sheet",
    "SheetLayout",
    "UnidentifiedSeedingPhase",
    "default_pipeline",
    "normalize_name",
    "read_sheet",
    "run_csv_import",
]
