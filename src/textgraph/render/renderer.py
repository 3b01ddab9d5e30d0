"""Public render operations.

``AsciiRenderer`` ties the pipeline together: collect (when starting from a
node id or a path), lay out, rasterize. Every call merges its overrides onto
the default config and builds its layout and grid from scratch.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence

from textgraph.config import ConfigOverrides, RenderConfig, merge_config
from textgraph.exceptions import GraphError, NodeNotFoundError
from textgraph.graph.accessor import GraphAccessor
from textgraph.graph.models import Edge, Node
from textgraph.graph.stats import GraphCounts
from textgraph.render.collector import SubgraphCollector
from textgraph.render.layout import LayoutEngine
from textgraph.render.raster import EdgeStrategy, Rasterizer, format_node_inline

logger = logging.getLogger("textgraph.render")

INLINE_PATH_MAX_NODES = 5


def render_query_result(
    nodes: Iterable[Node],
    edges: Sequence[Edge] = (),
    overrides: ConfigOverrides = None,
    edge_strategy: EdgeStrategy | None = None,
) -> str:
    """Render an already-resolved node and edge set."""
    config = merge_config(overrides)
    return _render_layout(list(nodes), edges, config, edge_strategy)


def render_graph_stats(
    counts: GraphCounts | Mapping[str, int], overrides: ConfigOverrides = None
) -> str:
    """Format externally computed graph counts as a fixed text block."""
    # Options are validated for consistency; the block itself has no glyphs
    merge_config(overrides)
    if not isinstance(counts, GraphCounts):
        counts = GraphCounts.from_mapping(counts)
    return (
        "Graph Statistics:\n"
        "────────────────\n"
        f"Total Nodes: {counts.total_nodes}\n"
        f"Total Edges: {counts.total_edges}\n"
        f"Connected Components: {counts.connected_components}\n"
    )


def _render_layout(
    nodes: list[Node],
    edges: Sequence[Edge],
    config: RenderConfig,
    edge_strategy: EdgeStrategy | None,
) -> str:
    layout = LayoutEngine(config).layout(nodes, edges)
    return Rasterizer(config, edge_strategy).rasterize(layout, edges)


class AsciiRenderer:
    """Renders subgraphs, node sets and paths from a graph accessor."""

    def __init__(
        self, accessor: GraphAccessor, edge_strategy: EdgeStrategy | None = None
    ) -> None:
        self.accessor = accessor
        self.edge_strategy = edge_strategy
        self.collector = SubgraphCollector(accessor)

    def render_subgraph(
        self, start_id: Hashable, depth: int = 2, overrides: ConfigOverrides = None
    ) -> str:
        """Render up to `depth` nodes reachable from `start_id`.

        `depth` is a node budget: it caps how many distinct nodes are drawn.
        A missing start node yields an error string instead of a drawing.
        """
        config = merge_config(overrides)
        try:
            nodes, edges = self.collector.collect(start_id, depth)
        except NodeNotFoundError as e:
            return f"Error rendering subgraph: {e}"
        return _render_layout(nodes, edges, config, self.edge_strategy)

    def render_query_result(
        self,
        nodes: Iterable[Node],
        edges: Sequence[Edge] = (),
        overrides: ConfigOverrides = None,
    ) -> str:
        return render_query_result(nodes, edges, overrides, self.edge_strategy)

    def render_path(self, path: Sequence[Hashable], overrides: ConfigOverrides = None) -> str:
        """Render an ordered path of node ids.

        Short paths (up to five nodes) render as an inline chain; longer ones
        go through the full grid pipeline. Unknown ids and missing edges are
        left out.
        """
        config = merge_config(overrides)
        nodes, edges = self.path_data(path)
        layout = LayoutEngine(config).linear(nodes, edges)

        if len(layout) > INLINE_PATH_MAX_NODES:
            return self.render_query_result(nodes, edges, config)

        ordered = sorted(layout, key=lambda node: layout[node].x)
        separator = f" {config.edge_char}{config.edge_char}> "
        return separator.join(format_node_inline(node, config) for node in ordered)

    def render_graph_stats(
        self, counts: GraphCounts | Mapping[str, int], overrides: ConfigOverrides = None
    ) -> str:
        return render_graph_stats(counts, overrides)

    def path_data(self, path: Sequence[Hashable]) -> tuple[list[Node], list[Edge]]:
        """Resolve path ids to nodes and consecutive pairs to edges."""
        path = list(path)
        nodes: list[Node] = []
        for node_id in path:
            node = self.accessor.get_node(node_id)
            if node is None:
                logger.debug("Dropping unknown path node %r", node_id)
                continue
            nodes.append(node)

        edges: list[Edge] = []
        for from_id, to_id in zip(path, path[1:]):
            edge = self.find_edge(from_id, to_id)
            if edge is None:
                logger.debug("No edge from %r to %r on path", from_id, to_id)
                continue
            edges.append(edge)

        return nodes, edges

    def find_edge(self, from_id: Hashable, to_id: Hashable) -> Edge | None:
        try:
            outgoing = self.accessor.get_edges_from(from_id)
        except GraphError as e:
            logger.debug("Ignoring edge lookup failure for %r: %s", from_id, e)
            return None
        for _, edge in outgoing:
            if edge.to_id == to_id:
                return edge
        return None
