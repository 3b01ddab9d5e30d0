"""Graph entities, access protocol and reference networkx backend."""

from textgraph.graph.accessor import GraphAccessor, NetworkXGraphAccessor
from textgraph.graph.models import Edge, Layout, LayoutPoint, Node
from textgraph.graph.stats import GraphCounts, count_graph

__all__ = [
    "Edge",
    "GraphAccessor",
    "GraphCounts",
    "Layout",
    "LayoutPoint",
    "NetworkXGraphAccessor",
    "Node",
    "count_graph",
]
