from __future__ import annotations

from typing import Any, Iterable, Tuple, Union

from stationgraph.config.settings import GraphConfig
from stationgraph.graph.graph_schema import Edge, GraphType
from stationgraph.graph.graph_store import GraphStore

EdgeLike = Union[Edge, Tuple[Any, Any]]


class GraphBuilder:
    """
    Populates a GraphStore from plain iterables.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def add_vertices(self, vertices: Iterable[Any]) -> "GraphBuilder":
        self.store.add_vertex(*vertices)
        return self

    def add_edges(self, edges: Iterable[EdgeLike]) -> "GraphBuilder":
        for edge in edges:
            if isinstance(edge, Edge):
                self.store.add_edge(edge.source, edge.target)
            else:
                source, target = edge
                self.store.add_edge(source, target)
        return self

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[EdgeLike],
        graph_type: GraphType | str | None = None,
        *,
        config: GraphConfig | None = None,
    ) -> GraphStore:
        builder = cls(GraphStore(graph_type, config=config))
        builder.add_edges(pairs)
        return builder.store
