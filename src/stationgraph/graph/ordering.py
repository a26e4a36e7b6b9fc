"""
Ordering contract shared by the vertex map and the traversal engine.

A single three-way comparison decides both the ascending key order of a
graph's vertex map and the order in which edges are expanded during DFS
and BFS.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, List

from stationgraph.errors import InvalidArgumentError, TypeMismatchError
from stationgraph.graph.graph_schema import Edge


class Ordering:
    """
    Three-way comparison over vertex values.

    Values of the same type are ordered by their natural order (``<``).
    Types without one are rejected unless ``allow_hash_ordering`` is set, in
    which case they are ordered by ``hash()``; distinct values with equal
    hashes then compare as equal. Values of a partial order that are
    neither smaller, larger nor equal (disjoint sets, NaN) are rejected.
    """

    def __init__(self, *, allow_hash_ordering: bool = False) -> None:
        self.allow_hash_ordering = allow_hash_ordering
        self._key = cmp_to_key(self.compare)

    def compare(self, x: Any, y: Any) -> int:
        if x is None or y is None:
            raise InvalidArgumentError(
                "None is not an orderable vertex",
                details={"x": x, "y": y},
            )
        if type(x) is not type(y):
            raise TypeMismatchError(
                f"Mismatched types: {type(x).__name__} and {type(y).__name__}",
                details={"x_type": type(x).__name__, "y_type": type(y).__name__},
            )

        try:
            if x < y:
                return -1
            if y < x:
                return 1
        except TypeError:
            if not self.allow_hash_ordering:
                raise TypeMismatchError(
                    f"{type(x).__name__} has no natural order",
                    details={"type": type(x).__name__},
                ) from None
            hx, hy = hash(x), hash(y)
            return (hx > hy) - (hx < hy)

        if self._incomparable(x, y):
            raise TypeMismatchError(
                f"{x!r} and {y!r} are not comparable under a total order",
                details={"type": type(x).__name__},
            )
        return 0

    @staticmethod
    def _incomparable(x: Any, y: Any) -> bool:
        # partial orders (sets, NaN) answer False to <, > and <= alike;
        # types defining only __lt__ are taken as total
        try:
            return not (x <= y)
        except TypeError:
            return False

    def key(self) -> Callable[[Any], Any]:
        """Sort-key adapter for ``sorted``/``list.sort``/``bisect``."""
        return self._key

    def sort(
        self,
        edges: List[Edge],
        *,
        ascending: bool = True,
        in_place: bool = True,
    ) -> List[Edge]:
        """
        Order edges by target vertex.

        With ``in_place`` the given list is reordered and returned;
        otherwise a sorted copy is returned and the list is untouched.
        """
        key = self._key

        def by_target(edge: Edge) -> Any:
            return key(edge.target)

        if in_place:
            edges.sort(key=by_target, reverse=not ascending)
            return edges
        return sorted(edges, key=by_target, reverse=not ascending)


DEFAULT_ORDERING = Ordering()


def compare(x: Any, y: Any) -> int:
    return DEFAULT_ORDERING.compare(x, y)
