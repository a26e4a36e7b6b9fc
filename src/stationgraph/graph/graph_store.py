from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from stationgraph.config.loader import default_config
from stationgraph.config.settings import GraphConfig
from stationgraph.errors import EdgeNotFoundError, VertexNotFoundError
from stationgraph.graph.graph_render import render_text
from stationgraph.graph.graph_schema import Edge, GraphType
from stationgraph.graph.graph_traversal import GraphTraversal
from stationgraph.graph.ordering import Ordering
from stationgraph.graph.symmetry import SymmetryView
from stationgraph.graph.vertex_map import VertexMap


def _first_index(edges: List[Edge], predicate) -> Optional[int]:
    for index, edge in enumerate(edges):
        if predicate(edge):
            return index
    return None


class GraphStore:
    """
    Authoritative in-memory adjacency-list graph.

    Vertices are kept in ascending order under the graph's Ordering, each
    with the list of edges leaving it. The graph type decides whether an
    edge implies a reciprocal edge stored under its target.
    """

    def __init__(
        self,
        graph_type: GraphType | str | None = None,
        *,
        config: GraphConfig | None = None,
    ) -> None:
        self.config = config or default_config()
        self.graph_type = GraphType.parse(
            graph_type if graph_type is not None else self.config.graph_type
        )
        self.ordering = Ordering(allow_hash_ordering=self.config.allow_hash_ordering)
        self._edges = VertexMap(self.ordering)
        self.metadata: Dict[str, Any] = {}

    @property
    def directed(self) -> bool:
        return self.graph_type is GraphType.DIRECTED

    # -------------------- Vertices --------------------

    def add_vertex(self, *vertices: Any) -> None:
        for vertex in vertices:
            if vertex in self._edges:
                continue
            self._edges[vertex] = []
            logging.getLogger("stationgraph.store").debug("add vertex %r", vertex)

    def remove_vertex(self, vertex: Any) -> None:
        """
        Remove ``vertex`` and its edge list.

        Edges stored under other vertices that point at ``vertex`` are left
        in place.
        """
        if vertex not in self._edges:
            raise VertexNotFoundError(vertex)
        del self._edges[vertex]
        logging.getLogger("stationgraph.store").debug("remove vertex %r", vertex)

    def exists(self, vertex: Any) -> bool:
        """
        Whether ``vertex`` is known to the graph.

        Directed graphs also count vertices that only appear as an edge
        endpoint, which costs a scan over every stored edge.
        """
        if vertex in self._edges:
            return True
        if not self.directed:
            return False
        return self._endpoint(vertex) is not None

    def get_vertex(self, vertex: Any) -> Any:
        """Return the stored instance equivalent to ``vertex``."""
        if not self.exists(vertex):
            raise VertexNotFoundError(vertex)

        ceiling = self._edges.ceiling_key(vertex)
        if ceiling is not None and self._same(ceiling, vertex):
            return ceiling

        # destination-only vertex of a directed graph
        endpoint = self._endpoint(vertex)
        if endpoint is None:
            raise VertexNotFoundError(vertex)
        return endpoint

    def canonical(self, vertex: Any) -> Any:
        """
        The instance the graph already holds for ``vertex``: its key, else
        the first edge endpoint equal to it under the Ordering, else
        ``vertex`` itself.
        """
        stored = self._edges.stored_key(vertex)
        if stored is not None:
            return stored
        endpoint = self._endpoint(vertex)
        return vertex if endpoint is None else endpoint

    def _same(self, a: Any, b: Any) -> bool:
        return self.ordering.compare(a, b) == 0

    def _endpoint(self, vertex: Any) -> Optional[Any]:
        for edges in self._edges.edge_lists():
            for edge in edges:
                if self._same(edge.source, vertex):
                    return edge.source
                if self._same(edge.target, vertex):
                    return edge.target
        return None

    def first_vertex(self) -> Optional[Any]:
        return self._edges.first_key()

    def vertices(self) -> List[Any]:
        return list(self._edges)

    def vertex_count(self) -> int:
        return len(self._edges)

    # -------------------- Edges --------------------

    def get_edges(self, vertex: Any) -> List[Edge]:
        """
        The live edge list of ``vertex``.

        Appending to it adds an edge without any reciprocal bookkeeping.
        """
        try:
            return self._edges[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def edges_by_vertex(self) -> Mapping[Any, List[Edge]]:
        return MappingProxyType(self._edges)

    def add_edge(self, source: Any, target: Any) -> Edge:
        """
        Store ``source -> target``, registering missing endpoints.

        Undirected graphs also register ``target`` and, when the config
        enables ``symmetrize_on_insert``, store the reciprocal edge. A
        self-loop is stored once. Directed graphs leave ``target``
        unregistered.

        Both endpoints are validated before the graph changes, and the
        stored edge holds the graph's own instances of them.
        """
        loop = self.ordering.compare(source, target) == 0
        self.add_vertex(source)
        if not self.directed:
            self.add_vertex(target)

        source = self._edges.stored_key(source)
        target = source if loop else self.canonical(target)
        edge = Edge(source, target)
        self._edges[source].append(edge)

        if not self.directed and self.config.symmetrize_on_insert and not loop:
            self._edges[target].append(edge.reversed())

        logging.getLogger("stationgraph.store").debug(
            "add edge %r -> %r (%s)", source, target, self.graph_type.value
        )
        return edge

    def has_edge(self, source: Any, target: Any) -> bool:
        if source in self._edges and any(
            self._same(edge.target, target) for edge in self._edges[source]
        ):
            return True
        if self.directed or target not in self._edges:
            return False
        return any(self._same(edge.target, source) for edge in self._edges[target])

    def remove_edge(self, source: Any, target: Any) -> None:
        """
        Remove the first edge ``source -> target``.

        Undirected graphs also drop the first reciprocal entry stored under
        ``target``. Both positions are located before either list changes,
        so a failure leaves the graph untouched.
        """
        edges = self.get_edges(source)
        index = _first_index(edges, lambda e: self._same(e.target, target))
        if index is None:
            raise EdgeNotFoundError(source, target)
        removed = edges[index]

        reverse_edges: Optional[List[Edge]] = None
        reverse_index: Optional[int] = None
        if not self.directed and not self._same(source, target):
            if target in self._edges:
                reverse_edges = self._edges[target]
                reverse_index = _first_index(
                    reverse_edges,
                    lambda e: self._same(e.source, removed.target)
                    and self._same(e.target, removed.source),
                )

        del edges[index]
        if reverse_edges is not None and reverse_index is not None:
            del reverse_edges[reverse_index]

        logging.getLogger("stationgraph.store").debug(
            "remove edge %r -> %r (reciprocal=%s)",
            source,
            target,
            reverse_index is not None,
        )

    def edge_count(self, vertex: Any) -> int:
        return len(self.get_edges(vertex))

    def total_edge_count(self) -> int:
        """
        Sum of all edge-list sizes.

        Each undirected edge is counted once per stored direction; see
        ``logical_edge_count`` for the deduplicated figure.
        """
        return sum(len(edges) for edges in self._edges.edge_lists())

    def logical_edge_count(self) -> int:
        return len(self.without_symmetry_flat())

    def clear(self) -> None:
        self._edges.clear()

    # -------------------- Traversal --------------------

    def dfs(self, start: Any = None, *, ascending: bool = True) -> List[Any]:
        return GraphTraversal(self).dfs(start, ascending=ascending)

    def bfs(self, start: Any = None, *, ascending: bool = True) -> List[Any]:
        return GraphTraversal(self).bfs(start, ascending=ascending)

    # -------------------- Symmetry views --------------------

    def without_symmetry(self) -> Mapping[Any, List[Edge]]:
        return SymmetryView(self).per_vertex()

    def without_symmetry_flat(self) -> List[Edge]:
        return SymmetryView(self).flat()

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore(self.graph_type, config=self.config)
        for vertex, edges in self._edges.items():
            g._edges[vertex] = list(edges)
        g.metadata = dict(self.metadata)
        return g

    # -------------------- Dunder --------------------

    def __contains__(self, vertex: Any) -> bool:
        return self.exists(vertex)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._edges)

    def __len__(self) -> int:
        return self.vertex_count()

    def __str__(self) -> str:
        return render_text(self)

    def __repr__(self) -> str:
        return (
            f"GraphStore(graph_type={self.graph_type.value!r}, "
            f"vertices={self.vertex_count()}, edges={self.total_edge_count()})"
        )
