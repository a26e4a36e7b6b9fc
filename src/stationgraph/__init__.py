"""
stationgraph
============

A generic in-memory adjacency-list graph for directed and undirected
graphs, with ordered vertex storage, depth-first and breadth-first
traversal controlled by an ascending/descending ordering, and views that
collapse the reciprocal edges of undirected graphs.

Public API:
- GraphStore
- GraphBuilder
- GraphType
- Edge
"""

from stationgraph.graph.graph_schema import Edge, GraphType
from stationgraph.graph.graph_store import GraphStore
from stationgraph.graph.graph_builder import GraphBuilder
from stationgraph.config.settings import GraphConfig
from stationgraph.errors import (
    GraphError,
    VertexNotFoundError,
    EdgeNotFoundError,
    EmptyGraphError,
    InvalidArgumentError,
    TypeMismatchError,
)

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "GraphType",
    "Edge",
    "GraphConfig",
    "GraphError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "EmptyGraphError",
    "InvalidArgumentError",
    "TypeMismatchError",
]

__version__ = "0.1.0"
