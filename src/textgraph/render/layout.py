"""Coordinate layout for rendered nodes.

Three strategies, chosen by node count:

- ``linear`` (n <= 3): evenly spaced along row 5.
- ``circular`` (4 <= n <= 8): around the canvas center, vertically
  compressed by half since terminal cells are taller than wide.
- ``grid`` (n > 8): roughly square rows and columns spread over the canvas.

Index order follows the order nodes are supplied in, so layouts are
deterministic for a given input sequence.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from textgraph.config import DEFAULT_CONFIG, RenderConfig
from textgraph.graph.models import Edge, Layout, LayoutPoint, Node

LINEAR_ROW = 5
LINEAR_MAX_NODES = 3
CIRCULAR_MAX_NODES = 8


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def unique_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Drop repeated node ids, keeping first occurrence order."""
    return list(dict.fromkeys(nodes))


def strategy_for(count: int) -> str:
    """Name of the layout strategy used for `count` nodes."""
    if count <= LINEAR_MAX_NODES:
        return "linear"
    if count <= CIRCULAR_MAX_NODES:
        return "circular"
    return "grid"


class LayoutEngine:
    """Maps nodes to integer canvas coordinates.

    Points are not clamped to the canvas; the rasterizer drops anything out
    of bounds. Edges are accepted by every strategy but not used.
    """

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def layout(self, nodes: Iterable[Node], edges: Sequence[Edge] = ()) -> Layout:
        ordered = unique_nodes(nodes)
        strategy = strategy_for(len(ordered))
        if strategy == "linear":
            return self.linear(ordered, edges)
        if strategy == "circular":
            return self.circular(ordered, edges)
        return self.grid(ordered, edges)

    def linear(self, nodes: Iterable[Node], edges: Sequence[Edge] = ()) -> Layout:
        ordered = unique_nodes(nodes)
        if not ordered:
            return {}
        width = self.config.max_width
        spacing = max(3, (width - 10) // len(ordered))
        return {
            node: LayoutPoint(min(index * spacing, width - 5), LINEAR_ROW)
            for index, node in enumerate(ordered)
        }

    def circular(self, nodes: Iterable[Node], edges: Sequence[Edge] = ()) -> Layout:
        ordered = unique_nodes(nodes)
        count = len(ordered)
        center_x = self.config.max_width // 2
        center_y = self.config.max_height // 2
        radius = min(center_x - 5, center_y - 3)

        layout: Layout = {}
        for index, node in enumerate(ordered):
            angle = 2 * math.pi * index / count
            x = center_x + round_half_away(radius * math.cos(angle))
            # Halved to compensate for tall terminal cells
            y = center_y + round_half_away(radius * math.sin(angle) / 2)
            layout[node] = LayoutPoint(x, y)
        return layout

    def grid(self, nodes: Iterable[Node], edges: Sequence[Edge] = ()) -> Layout:
        ordered = unique_nodes(nodes)
        count = len(ordered)
        if not count:
            return {}
        cols = max(round_half_away(math.sqrt(count)), 1)
        rows = math.ceil(count / cols)
        col_spacing = (self.config.max_width - 10) // max(cols - 1, 1)
        row_spacing = (self.config.max_height - 6) // max(rows - 1, 1)

        return {
            node: LayoutPoint(
                5 + (index % cols) * col_spacing,
                3 + (index // cols) * row_spacing,
            )
            for index, node in enumerate(ordered)
        }
