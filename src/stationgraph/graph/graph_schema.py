from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Hashable, TypeVar

from stationgraph.errors import InvalidArgumentError

T = TypeVar("T", bound=Hashable)


class GraphType(str, Enum):
    """
    Graph-wide edge semantics, fixed when a graph is constructed.
    """

    UNDIRECTED = "undirected"
    DIRECTED = "directed"

    @classmethod
    def parse(cls, value: "GraphType | str") -> "GraphType":
        if isinstance(value, GraphType):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown graph type {value!r}",
                details={"graph_type": value},
            ) from None


@dataclass(frozen=True, eq=False)
class Edge(Generic[T]):
    """
    Stored connection from ``source`` to ``target``.

    Equality ignores direction: ``Edge(a, b) == Edge(b, a)``. Storage never
    relies on it; lists are manipulated by position so that reciprocal
    entries of an undirected graph remain distinct objects.
    """

    source: T
    target: T

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            raise InvalidArgumentError(
                f"Cannot compare Edge with {type(other).__name__}",
                details={"other": other},
            )
        same = self.source == other.source and self.target == other.target
        return same or self.is_reciprocal_of(other)

    def __hash__(self) -> int:
        return hash(frozenset((self.source, self.target)))

    def contains(self, vertex: T) -> bool:
        return self.source == vertex or self.target == vertex

    def is_reciprocal_of(self, other: "Edge[T]") -> bool:
        return self.source == other.target and self.target == other.source

    def reversed(self) -> "Edge[T]":
        return Edge(self.target, self.source)

    def __str__(self) -> str:
        return f"{self.source}-{self.target}"

    def __repr__(self) -> str:
        return f"Edge(source={self.source!r}, target={self.target!r})"
