"""Domain ports: persistence contracts the adapters implement."""

from __future__ import annotations

from .persistence import AssociationRepository, EntityRepository
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "AssociationRepository",
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "EntityRepository",
    "RepositoryCollection",
    "UnitOfWork",
]
