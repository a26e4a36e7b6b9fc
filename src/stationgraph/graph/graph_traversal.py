from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Set

from stationgraph.errors import EmptyGraphError, VertexNotFoundError
from stationgraph.graph.graph_schema import Edge

if TYPE_CHECKING:
    from stationgraph.graph.graph_store import GraphStore


class GraphTraversal:
    """
    Depth-first and breadth-first traversal over a GraphStore.

    Each visited vertex has its edge list sorted by target before its
    neighbours are pushed, so the visit order is fully determined by the
    graph's Ordering and the ``ascending`` flag. Vertices are marked as
    visited when pushed, never twice. Edge targets are replaced by the
    store's canonical instance first, so values equal under the Ordering
    count as one vertex.

    With ``sort_in_place`` (the config default) the sorted order is
    written back into the store.
    """

    def __init__(self, store: "GraphStore", *, sort_in_place: Optional[bool] = None) -> None:
        self.store = store
        self.sort_in_place = (
            store.config.sort_in_place if sort_in_place is None else sort_in_place
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dfs(self, start: Any = None, *, ascending: bool = True) -> List[Any]:
        return list(self.iter_dfs(start, ascending=ascending))

    def bfs(self, start: Any = None, *, ascending: bool = True) -> List[Any]:
        return list(self.iter_bfs(start, ascending=ascending))

    def iter_dfs(self, start: Any = None, *, ascending: bool = True) -> Iterator[Any]:
        first = self._resolve_start(start)
        logging.getLogger("stationgraph.traversal").debug(
            "dfs from %r ascending=%s", first, ascending
        )

        stack: List[Any] = [first]
        visited: Set[Any] = {first}

        while stack:
            vertex = stack.pop()
            yield vertex

            # LIFO: sort against the requested direction so the smallest
            # (or largest) target ends on top of the stack
            for edge in self._sorted_edges(vertex, ascending=not ascending):
                target = self.store.canonical(edge.target)
                if target not in visited:
                    visited.add(target)
                    stack.append(target)

    def iter_bfs(self, start: Any = None, *, ascending: bool = True) -> Iterator[Any]:
        first = self._resolve_start(start)
        logging.getLogger("stationgraph.traversal").debug(
            "bfs from %r ascending=%s", first, ascending
        )

        queue = deque([first])
        visited: Set[Any] = {first}

        while queue:
            vertex = queue.popleft()
            yield vertex

            for edge in self._sorted_edges(vertex, ascending=ascending):
                target = self.store.canonical(edge.target)
                if target not in visited:
                    visited.add(target)
                    queue.append(target)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_start(self, start: Any) -> Any:
        if start is None:
            if self.store.vertex_count() == 0:
                raise EmptyGraphError("Cannot traverse a graph with no vertices")
            return self.store.first_vertex()
        return self.store.get_vertex(start)

    def _sorted_edges(self, vertex: Any, *, ascending: bool) -> List[Edge]:
        try:
            edges = self.store.get_edges(vertex)
        except VertexNotFoundError:
            # reached through a directed edge but never registered
            return []
        return self.store.ordering.sort(
            edges,
            ascending=ascending,
            in_place=self.sort_in_place,
        )
