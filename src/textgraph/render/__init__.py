"""Subgraph collection, layout and rasterization."""

from textgraph.render.collector import SubgraphCollector
from textgraph.render.layout import LayoutEngine, strategy_for
from textgraph.render.raster import (
    EdgeStrategy,
    NoEdgeStrategy,
    Rasterizer,
    format_node_label,
    grid_to_string,
)
from textgraph.render.renderer import AsciiRenderer, render_graph_stats, render_query_result

__all__ = [
    "AsciiRenderer",
    "EdgeStrategy",
    "LayoutEngine",
    "NoEdgeStrategy",
    "Rasterizer",
    "SubgraphCollector",
    "format_node_label",
    "grid_to_string",
    "render_graph_stats",
    "render_query_result",
    "strategy_for",
]
