from dataclasses import dataclass, field

import pytest

from stationgraph import EmptyGraphError, GraphConfig, GraphStore, VertexNotFoundError
from stationgraph.graph.graph_schema import Edge
from stationgraph.graph.graph_traversal import GraphTraversal


@dataclass(frozen=True, order=True)
class Station:
    name: str
    line: str = field(default="", compare=False)


class Milestone:
    """Ordered by ``km`` through ``__lt__`` only; ``==`` is identity."""

    def __init__(self, km: int) -> None:
        self.km = km

    def __lt__(self, other: "Milestone") -> bool:
        return self.km < other.km

    def __repr__(self) -> str:
        return f"Milestone({self.km})"


def _targets(graph, vertex):
    return [e.target for e in graph.get_edges(vertex)]


def test_dfs_ascending_applies_stack_inversion(path_graph):
    assert path_graph.dfs(1, ascending=True) == [1, 2, 4, 3]


def test_bfs_ascending(path_graph):
    assert path_graph.bfs(1, ascending=True) == [1, 2, 3, 4]


def test_descending_orders(path_graph):
    assert path_graph.dfs(1, ascending=False) == [1, 3, 2, 4]
    assert path_graph.bfs(1, ascending=False) == [1, 3, 2, 4]


def test_default_start_is_smallest_vertex(path_graph):
    path_graph.add_vertex(0)
    path_graph.add_edge(0, 4)

    assert path_graph.dfs() == [0, 4, 2, 1, 3]
    assert path_graph.bfs() == [0, 4, 2, 1, 3]


def test_every_reachable_vertex_visited_once(triangle):
    triangle.add_edge(3, 4)
    triangle.add_edge(4, 1)

    for start in triangle.vertices():
        dfs = triangle.dfs(start)
        bfs = triangle.bfs(start)
        assert sorted(dfs) == [1, 2, 3, 4]
        assert sorted(bfs) == [1, 2, 3, 4]
        assert dfs[0] == bfs[0] == start


def test_unreachable_component_not_visited(path_graph):
    path_graph.add_edge(10, 11)

    assert path_graph.bfs(1) == [1, 2, 3, 4]
    assert path_graph.dfs(10) == [10, 11]


def test_traversal_sorts_stored_edges_in_place(undirected):
    undirected.add_edge(1, 3)
    undirected.add_edge(1, 2)
    assert _targets(undirected, 1) == [3, 2]

    undirected.bfs(1, ascending=True)
    assert _targets(undirected, 1) == [2, 3]

    undirected.dfs(1, ascending=True)
    assert _targets(undirected, 1) == [3, 2]


def test_traversal_without_in_place_sort_leaves_store(undirected):
    undirected.add_edge(1, 3)
    undirected.add_edge(1, 2)

    visits = GraphTraversal(undirected, sort_in_place=False).bfs(1)

    assert visits == [1, 2, 3]
    assert _targets(undirected, 1) == [3, 2]


def test_sort_in_place_config_is_respected():
    graph = GraphStore("undirected", config=GraphConfig(sort_in_place=False))
    graph.add_edge(1, 3)
    graph.add_edge(1, 2)

    assert graph.dfs(1) == [1, 2, 3]
    assert _targets(graph, 1) == [3, 2]


def test_directed_traversal_follows_direction(directed):
    directed.add_edge(1, 2)
    directed.add_edge(2, 3)
    directed.add_edge(3, 1)
    directed.add_edge(4, 1)

    assert directed.bfs(1) == [1, 2, 3]
    assert directed.dfs(4) == [4, 1, 2, 3]


def test_directed_destination_only_vertex_is_a_leaf(directed):
    directed.add_edge("A", "B")
    directed.add_edge("A", "C")
    directed.add_edge("C", "D")

    assert directed.dfs("A") == ["A", "B", "C", "D"]
    assert directed.bfs("B") == ["B"]


def test_start_is_canonicalised(config):
    graph = GraphStore("undirected", config=config)
    stored = Station("Seoul", line="1")
    graph.add_edge(stored, Station("Yongsan", line="1"))

    visits = graph.bfs(Station("Seoul", line="?"))

    assert visits[0] is stored
    assert [s.name for s in visits] == ["Seoul", "Yongsan"]


def test_missing_start_raises(path_graph):
    with pytest.raises(VertexNotFoundError):
        path_graph.bfs(99)


def test_empty_graph_without_start_raises(undirected):
    with pytest.raises(EmptyGraphError):
        undirected.dfs()
    with pytest.raises(EmptyGraphError):
        undirected.bfs()


def test_iter_dfs_is_lazy(path_graph):
    walk = GraphTraversal(path_graph).iter_dfs(1)

    assert next(walk) == 1
    assert next(walk) == 2
    assert list(walk) == [4, 3]


def test_directly_appended_edges_are_followed(undirected):
    undirected.add_vertex(1, 2)
    undirected.get_edges(1).append(Edge(1, 2))

    assert undirected.bfs(1) == [1, 2]
    assert undirected.bfs(2) == [2]


def test_ordering_equal_instances_are_visited_once(undirected):
    undirected.add_edge(Milestone(1), Milestone(2))
    undirected.add_edge(Milestone(2), Milestone(3))

    bfs = undirected.bfs(Milestone(1))
    dfs = undirected.dfs(Milestone(1))

    assert [m.km for m in bfs] == [1, 2, 3]
    assert [m.km for m in dfs] == [1, 2, 3]


def test_appended_targets_resolve_to_stored_vertex(undirected):
    start, stored = Milestone(1), Milestone(2)
    undirected.add_vertex(start, stored)
    undirected.get_edges(start).append(Edge(start, Milestone(2)))
    undirected.get_edges(start).append(Edge(start, Milestone(2)))

    visits = undirected.bfs(start)

    assert len(visits) == 2
    assert visits[1] is stored


def test_directed_targets_resolve_to_later_registered_key(directed):
    directed.add_edge(Milestone(1), Milestone(2))
    key = Milestone(2)
    directed.add_edge(key, Milestone(3))

    visits = directed.dfs(Milestone(1))

    assert [m.km for m in visits] == [1, 2, 3]
    assert visits[1] is key
