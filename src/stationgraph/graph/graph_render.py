from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from stationgraph.graph.graph_store import GraphStore


def render_text(graph: "GraphStore", connector: Optional[str] = None) -> str:
    """
    Diagnostic dump: one line per vertex in ascending order, followed by
    its edges sorted by target, e.g. ``"1 : 1-2 1-3 \\n"``.

    Stored edge lists are not reordered. Not a serialization format.
    """
    label = graph.config.render_connector if connector is None else connector

    lines: List[str] = []
    for vertex, edges in graph.edges_by_vertex().items():
        ordered = graph.ordering.sort(edges, ascending=True, in_place=False)
        rendered = "".join(f"{edge.source}-{edge.target} " for edge in ordered)
        lines.append(f"{vertex}{label}{rendered}\n")
    return "".join(lines)
