from __future__ import annotations

from dataclasses import dataclass, replace

# ---------------------------------------------------------------------
# Graph engine policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how a graph stores, orders, traverses and renders its edges.

    Graphs built with the same GraphConfig share one policy; derive a
    variant with ``with_overrides`` instead of mutating it.
    """

    graph_type: str = "undirected"
    symmetrize_on_insert: bool = True
    sort_in_place: bool = True
    allow_hash_ordering: bool = False
    render_connector: str = " : "

    def with_overrides(self, **changes) -> "GraphConfig":
        return replace(self, **changes)
