from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping

from stationgraph.graph.graph_schema import Edge

if TYPE_CHECKING:
    from stationgraph.graph.graph_store import GraphStore


class _ReciprocalFilter:
    """
    Single-pass filter dropping the reciprocal of every edge already kept.

    Each kept ``(a, b)`` cancels exactly one later ``(b, a)``, so parallel
    edges and repeated pairs are handled as a multiset.
    """

    def __init__(self) -> None:
        self._pending: Counter = Counter()

    def keep(self, edge: Edge) -> bool:
        pair = (edge.source, edge.target)
        if self._pending[pair] > 0:
            self._pending[pair] -= 1
            return False
        self._pending[(edge.target, edge.source)] += 1
        return True

    def filter(self, edges: Iterable[Edge]) -> List[Edge]:
        return [edge for edge in edges if self.keep(edge)]


class SymmetryView:
    """
    Logical edge set of a graph, one entry per undirected edge.

    Vertices are scanned in ascending order and each list in stored order;
    the first direction encountered survives. Directed graphs are returned
    as stored.
    """

    def __init__(self, store: "GraphStore") -> None:
        self.store = store

    def per_vertex(self) -> Mapping[Any, List[Edge]]:
        """
        Copy of the vertex map with reciprocal duplicates removed.

        For directed graphs this is the live map itself.
        """
        if self.store.directed:
            return self.store.edges_by_vertex()

        reciprocal = _ReciprocalFilter()
        result: Dict[Any, List[Edge]] = {}
        for vertex, edges in self.store.edges_by_vertex().items():
            result[vertex] = reciprocal.filter(edges)
        return result

    def flat(self) -> List[Edge]:
        flattened = [
            edge
            for edges in self.store.edges_by_vertex().values()
            for edge in edges
        ]
        if self.store.directed:
            return flattened
        return _ReciprocalFilter().filter(flattened)
