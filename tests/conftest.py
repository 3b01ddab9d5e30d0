"""Shared test fixtures for textgraph."""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx
import pytest

from textgraph.exceptions import GraphError
from textgraph.graph.accessor import NetworkXGraphAccessor
from textgraph.graph.models import Edge, Node


class StaticAccessor:
    """In-memory accessor whose edges may point at nodes that do not exist."""

    def __init__(self, nodes: list[Node], edges: list[Edge], broken: set | None = None) -> None:
        self.nodes = {node.id: node for node in nodes}
        self.edges = edges
        self.broken = broken or set()

    def get_node(self, node_id):
        return self.nodes.get(node_id)

    def get_edges_from(self, node_id):
        if node_id in self.broken:
            raise GraphError(f"edge table unavailable for {node_id}")
        return [(node_id, e) for e in self.edges if e.from_id == node_id]


def make_chain(length: int, names: list[str] | None = None) -> nx.MultiDiGraph:
    """Directed chain 1 -> 2 -> ... -> length."""
    graph = nx.MultiDiGraph()
    for i in range(1, length + 1):
        if names:
            graph.add_node(i, name=names[i - 1])
        else:
            graph.add_node(i)
    for i in range(1, length):
        graph.add_edge(i, i + 1, key=f"e{i}", label="next")
    return graph


@pytest.fixture
def chain_graph() -> nx.MultiDiGraph:
    """1 -> 2 -> 3 -> 4, no properties."""
    return make_chain(4)


@pytest.fixture
def chain_accessor(chain_graph: nx.MultiDiGraph) -> NetworkXGraphAccessor:
    return NetworkXGraphAccessor(chain_graph)


@pytest.fixture
def people_accessor() -> NetworkXGraphAccessor:
    """Chain of eight people, one property each."""
    names = ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi"]
    return NetworkXGraphAccessor(make_chain(len(names), names))


@pytest.fixture
def branching_accessor() -> NetworkXGraphAccessor:
    """1 -> 2, 1 -> 3, 2 -> 4."""
    graph = nx.MultiDiGraph()
    graph.add_nodes_from([1, 2, 3, 4])
    graph.add_edge(1, 2, key="a")
    graph.add_edge(1, 3, key="b")
    graph.add_edge(2, 4, key="c")
    return NetworkXGraphAccessor(graph)


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    """A small graph file with integer ids."""
    data = {
        "nodes": [
            {"id": 1, "properties": {"name": "Alice"}},
            {"id": 2, "properties": {"name": "Bob"}},
            {"id": 3, "properties": {"name": "Carol"}},
            {"id": 4, "properties": {}},
        ],
        "edges": [
            {"id": "e1", "from": 1, "to": 2, "label": "knows"},
            {"id": "e2", "from": 2, "to": 3, "label": "knows"},
        ],
    }
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def static_accessor() -> type[StaticAccessor]:
    return StaticAccessor
