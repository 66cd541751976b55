"""Read-only aggregate views over the catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypedDict

from eventarchive.domain.model import AssociationKind, EntityKind

if TYPE_CHECKING:
    from eventarchive.domain.ports import CatalogRepositories


class GraphNode(TypedDict):
    id: str
    label: str
    type: str


class GraphEdge(TypedDict):
    id: str
    source: str
    target: str
    type: str


@dataclass(slots=True)
class CatalogStats:
    totals: dict[EntityKind, int] = field(default_factory=dict[EntityKind, int])
    links: dict[AssociationKind, int] = field(default_factory=dict[AssociationKind, int])

    def as_dict(self) -> dict[str, dict[str, int]]:
        return {
            "totals": {kind.table_name: count for kind, count in self.totals.items()},
            "links": {kind.table_name: count for kind, count in self.links.items()},
        }


@dataclass(slots=True)
class CatalogGraph:
    nodes: list[GraphNode] = field(default_factory=list[GraphNode])
    edges: list[GraphEdge] = field(default_factory=list[GraphEdge])

    def as_dict(self) -> dict[str, list[GraphNode] | list[GraphEdge]]:
        return {"nodes": self.nodes, "edges": self.edges}


def node_id(kind: EntityKind, entity_id: int) -> str:
    return f"{kind.value}:{entity_id}"


def catalog_stats(repositories: CatalogRepositories) -> CatalogStats:
    """Count rows per entity kind and per association kind."""

    return CatalogStats(
        totals={kind: repositories.entity(kind).count() for kind in EntityKind},
        links={kind: repositories.association(kind).count() for kind in AssociationKind},
    )


def catalog_graph(repositories: CatalogRepositories) -> CatalogGraph:
    """Project every entity as a node and every association as an edge."""

    graph = CatalogGraph()
    for kind in EntityKind:
        for entity_id, label in repositories.entity(kind).labels():
            graph.nodes.append(
                GraphNode(
                    id=node_id(kind, entity_id),
                    label=label or kind.fallback_label,
                    type=kind.value,
                )
            )
    for association in AssociationKind:
        for event_id, related_id in repositories.association(association).pairs():
            source = node_id(EntityKind.EVENT, event_id)
            target = node_id(association.related, related_id)
            graph.edges.append(
                GraphEdge(
                    id=f"{source}__{target}",
                    source=source,
                    target=target,
                    type=association.value,
                )
            )
    return graph
