"""Graph-wide counts supplied to the stats formatter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import networkx as nx


@dataclass(frozen=True)
class GraphCounts:
    """Totals reported by ``render_graph_stats``."""

    total_nodes: int = 0
    total_edges: int = 0
    connected_components: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, int]) -> GraphCounts:
        return cls(
            total_nodes=int(data.get("total_nodes", 0)),
            total_edges=int(data.get("total_edges", 0)),
            connected_components=int(data.get("connected_components", 0)),
        )


def count_graph(graph: nx.MultiDiGraph) -> GraphCounts:
    """Count nodes, edges and weakly connected components of `graph`."""
    if graph.number_of_nodes() == 0:
        return GraphCounts()
    return GraphCounts(
        total_nodes=graph.number_of_nodes(),
        total_edges=graph.number_of_edges(),
        connected_components=nx.number_weakly_connected_components(graph),
    )
