"""
Graph subsystem for stationgraph.

Defines the adjacency-list graph engine:
- ordered vertex storage and directed/undirected mutation
- the ordering contract used for keys and traversal
- depth-first and breadth-first traversal
- symmetry-collapsed views of undirected edge sets
"""

from stationgraph.graph.graph_schema import Edge, GraphType
from stationgraph.graph.ordering import Ordering, compare
from stationgraph.graph.graph_store import GraphStore
from stationgraph.graph.graph_builder import GraphBuilder
from stationgraph.graph.graph_traversal import GraphTraversal
from stationgraph.graph.symmetry import SymmetryView
from stationgraph.graph.graph_render import render_text
from stationgraph.graph.graph_export import to_networkx, adjacency_matrix

__all__ = [
    "Edge",
    "GraphType",
    "Ordering",
    "compare",
    "GraphStore",
    "GraphBuilder",
    "GraphTraversal",
    "SymmetryView",
    "render_text",
    "to_networkx",
    "adjacency_matrix",
]
