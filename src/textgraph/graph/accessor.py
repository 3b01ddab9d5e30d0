"""Read access to a graph for the renderer."""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Protocol

import networkx as nx

from textgraph.graph.models import Edge, Node
from textgraph.graph.stats import GraphCounts, count_graph
from textgraph.graph.store import load_graph


class GraphAccessor(Protocol):
    """Point lookups the renderer needs from a graph store.

    ``get_node`` returns None for an unknown id. ``get_edges_from`` returns
    ``(from_id, edge)`` pairs in a stable order and may raise ``GraphError``.
    """

    def get_node(self, node_id: Hashable) -> Node | None: ...

    def get_edges_from(self, node_id: Hashable) -> list[tuple[Hashable, Edge]]: ...


class NetworkXGraphAccessor:
    """GraphAccessor over a ``networkx.MultiDiGraph``.

    Node attributes become node properties. Edge keys are edge ids; the
    ``label`` and ``properties`` edge attributes are carried through.
    """

    def __init__(self, graph: nx.MultiDiGraph) -> None:
        self.graph = graph

    @classmethod
    def from_file(cls, path: str | Path) -> NetworkXGraphAccessor:
        return cls(load_graph(path))

    def get_node(self, node_id: Hashable) -> Node | None:
        if not self.graph.has_node(node_id):
            return None
        return Node(id=node_id, properties=dict(self.graph.nodes[node_id]))

    def get_edges_from(self, node_id: Hashable) -> list[tuple[Hashable, Edge]]:
        if not self.graph.has_node(node_id):
            return []
        return [
            (
                src,
                Edge(
                    id=key,
                    from_id=src,
                    to_id=tgt,
                    label=data.get("label", ""),
                    properties=dict(data.get("properties", {})),
                ),
            )
            for src, tgt, key, data in self.graph.out_edges(node_id, keys=True, data=True)
        ]

    def counts(self) -> GraphCounts:
        return count_graph(self.graph)

    def coerce_id(self, raw: str) -> Hashable:
        """Map command-line text to an existing node id.

        Graph files may use integer or string ids; the raw string wins when
        both exist. Unknown ids are returned unchanged.
        """
        if self.graph.has_node(raw):
            return raw
        try:
            as_int = int(raw)
        except ValueError:
            return raw
        if self.graph.has_node(as_int):
            return as_int
        return raw
