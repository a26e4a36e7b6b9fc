from __future__ import annotations

import pytest

from stationgraph.config.loader import default_config
from stationgraph.config.settings import GraphConfig
from stationgraph.graph.graph_store import GraphStore

_ENV_KEYS = (
    "GRAPH_TYPE",
    "SYMMETRIZE_ON_INSERT",
    "SORT_IN_PLACE",
    "ALLOW_HASH_ORDERING",
    "RENDER_CONNECTOR",
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(f"STATIONGRAPH_{key}", raising=False)
    default_config.cache_clear()
    yield
    default_config.cache_clear()


@pytest.fixture()
def config() -> GraphConfig:
    return GraphConfig()


@pytest.fixture()
def undirected(config: GraphConfig) -> GraphStore:
    return GraphStore("undirected", config=config)


@pytest.fixture()
def directed(config: GraphConfig) -> GraphStore:
    return GraphStore("directed", config=config)


@pytest.fixture()
def path_graph(undirected: GraphStore) -> GraphStore:
    undirected.add_edge(1, 2)
    undirected.add_edge(1, 3)
    undirected.add_edge(2, 4)
    return undirected


@pytest.fixture()
def triangle(undirected: GraphStore) -> GraphStore:
    undirected.add_edge(1, 2)
    undirected.add_edge(2, 3)
    undirected.add_edge(1, 3)
    return undirected
