"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from eventarchive.domain.model import AssociationKind, EntityKind
    from eventarchive.domain.ports.persistence import (
        AssociationRepository,
        EntityRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


TRepositories = TypeVar("TRepositories", bound=RepositoryCollection)


@runtime_checkable
class UnitOfWork(Protocol[TRepositories]):
    """Generic unit-of-work boundary around a repository collection."""

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class CatalogRepositories(RepositoryCollection):
    """Repositories for every entity kind and every association kind."""

    entities: Mapping[EntityKind, EntityRepository]
    associations: Mapping[AssociationKind, AssociationRepository]

    def entity(self, kind: EntityKind) -> EntityRepository:
        return self.entities[kind]

    def association(self, kind: AssociationKind) -> AssociationRepository:
        return self.associations[kind]


CatalogUnitOfWork: TypeAlias = UnitOfWork[CatalogRepositories]
