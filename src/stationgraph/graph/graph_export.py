"""
Conversions from a GraphStore to the wider scientific Python stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx
import numpy as np

if TYPE_CHECKING:
    from stationgraph.graph.graph_store import GraphStore


def to_networkx(graph: "GraphStore") -> nx.Graph:
    """
    Build a ``networkx.DiGraph`` (directed) or ``networkx.Graph``
    (undirected) with every stored vertex and edge endpoint.

    Reciprocal edges of an undirected graph collapse into one networkx
    edge; dangling targets become plain nodes.
    """
    g = nx.DiGraph() if graph.directed else nx.Graph()
    g.graph["graph_type"] = graph.graph_type.value
    g.graph.update(graph.metadata)

    for vertex, edges in graph.edges_by_vertex().items():
        g.add_node(vertex)
        for edge in edges:
            g.add_edge(graph.canonical(edge.source), graph.canonical(edge.target))
    return g


def adjacency_matrix(graph: "GraphStore") -> np.ndarray:
    """
    Square edge-count matrix over the vertices in ascending order.

    Entry ``[i, j]`` counts the edges stored under vertex ``i`` pointing at
    vertex ``j``, matching targets to vertices through the graph's
    Ordering. Edges to unregistered vertices are not represented.
    """
    vertices = graph.vertices()
    index = {vertex: i for i, vertex in enumerate(vertices)}
    matrix = np.zeros((len(vertices), len(vertices)), dtype=np.int64)

    for vertex, edges in graph.edges_by_vertex().items():
        row = index[vertex]
        for edge in edges:
            col = index.get(graph.canonical(edge.target))
            if col is not None:
                matrix[row, col] += 1
    return matrix
