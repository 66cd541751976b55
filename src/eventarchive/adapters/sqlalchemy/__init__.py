"""SQLAlchemy adapter package for eventarchive."""

from __future__ import annotations

from .repositories import (
    SqlAlchemyAssociationRepository,
    SqlAlchemyEntityRepository,
    UnsupportedDialectError,
    build_catalog_repositories,
)
from .tables import (
    ASSOCIATION_TABLES,
    ENTITY_TABLES,
    StringListType,
    configure_engine,
    create_all_tables,
    metadata,
)
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "ASSOCIATION_TABLES",
    "ENTITY_TABLES",
    "SqlAlchemyAssociationRepository",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyEntityRepository",
    "StartupError",
    "StringListType",
    "UnsupportedDialectError",
    "build_catalog_repositories",
    "configure_engine",
    "create_all_tables",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
]
