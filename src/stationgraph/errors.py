"""
Error hierarchy for stationgraph.

Every failure raised by the graph engine derives from ``GraphError`` and
also from the closest built-in exception, so callers may catch either
``VertexNotFoundError`` or a plain ``LookupError``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GraphError(Exception):
    """
    Base exception for graph engine errors.

    Attributes:
        message: Human-readable description.
        code: Machine-readable, UPPER_SNAKE_CASE error code.
        details: Additional context (offending vertex, edge, operand types).
    """

    default_code = "GRAPH_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message


class VertexNotFoundError(GraphError, LookupError):
    """A vertex required by the operation is not stored in the graph."""

    default_code = "VERTEX_NOT_FOUND"

    def __init__(self, vertex: Any, **kw: Any) -> None:
        kw.setdefault("details", {"vertex": vertex})
        super().__init__(f"Vertex {vertex!r} not found", **kw)
        self.vertex = vertex


class EdgeNotFoundError(GraphError, LookupError):
    """No stored edge connects the requested endpoints."""

    default_code = "EDGE_NOT_FOUND"

    def __init__(self, source: Any, target: Any, **kw: Any) -> None:
        kw.setdefault("details", {"source": source, "target": target})
        super().__init__(f"Edge {source!r} -> {target!r} not found", **kw)
        self.source = source
        self.target = target


class EmptyGraphError(GraphError, LookupError):
    """The operation needs at least one vertex but the graph has none."""

    default_code = "EMPTY_GRAPH"

    def __init__(self, message: str = "Graph has no vertices", **kw: Any) -> None:
        super().__init__(message, **kw)


class InvalidArgumentError(GraphError, ValueError):
    """A ``None`` operand was compared, or an edge was compared to a non-edge."""

    default_code = "INVALID_ARGUMENT"


class TypeMismatchError(GraphError, TypeError):
    """Two vertex values cannot be ordered against each other."""

    default_code = "TYPE_MISMATCH"
