from __future__ import annotations

from bisect import bisect_left
from collections.abc import MutableMapping
from typing import Any, Iterator, List, Optional, Tuple

from stationgraph.errors import InvalidArgumentError
from stationgraph.graph.graph_schema import Edge
from stationgraph.graph.ordering import Ordering


class VertexMap(MutableMapping):
    """
    Mapping ``vertex -> list[Edge]`` kept in ascending key order.

    Keys are located with the graph's Ordering rather than with ``hash``,
    so any value that compares equal to a stored vertex addresses that
    vertex's entry.
    """

    def __init__(self, ordering: Ordering) -> None:
        self.ordering = ordering
        self._keys: List[Any] = []
        self._entries: List[Tuple[Any, List[Edge]]] = []

    def _locate(self, vertex: Any) -> Tuple[int, bool]:
        if vertex is None:
            raise InvalidArgumentError("None is not an orderable vertex")
        sort_key = self.ordering.key()(vertex)
        index = bisect_left(self._keys, sort_key)
        found = (
            index < len(self._entries)
            and self.ordering.compare(self._entries[index][0], vertex) == 0
        )
        return index, found

    # -------------------- Mapping protocol --------------------

    def __getitem__(self, vertex: Any) -> List[Edge]:
        index, found = self._locate(vertex)
        if not found:
            raise KeyError(vertex)
        return self._entries[index][1]

    def __setitem__(self, vertex: Any, edges: List[Edge]) -> None:
        index, found = self._locate(vertex)
        if found:
            self._entries[index] = (self._entries[index][0], edges)
            return
        self._keys.insert(index, self.ordering.key()(vertex))
        self._entries.insert(index, (vertex, edges))

    def __delitem__(self, vertex: Any) -> None:
        index, found = self._locate(vertex)
        if not found:
            raise KeyError(vertex)
        del self._keys[index]
        del self._entries[index]

    def __iter__(self) -> Iterator[Any]:
        return iter([vertex for vertex, _ in self._entries])

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._keys.clear()
        self._entries.clear()

    # -------------------- Ordered lookups --------------------

    def stored_key(self, vertex: Any) -> Optional[Any]:
        """The stored instance comparing equal to ``vertex``, if any."""
        index, found = self._locate(vertex)
        return self._entries[index][0] if found else None

    def ceiling_key(self, vertex: Any) -> Optional[Any]:
        """Smallest stored key greater than or equal to ``vertex``."""
        index, _ = self._locate(vertex)
        if index < len(self._entries):
            return self._entries[index][0]
        return None

    def first_key(self) -> Optional[Any]:
        return self._entries[0][0] if self._entries else None

    def edge_lists(self) -> Iterator[List[Edge]]:
        for _, edges in self._entries:
            yield edges
