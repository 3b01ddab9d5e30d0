"""Character-grid rasterization of a layout."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from textgraph.config import DEFAULT_CONFIG, RenderConfig
from textgraph.graph.models import Edge, Layout, Node

logger = logging.getLogger("textgraph.render")

BLANK = " "

Grid = list[list[str]]


class EdgeStrategy(Protocol):
    """Draws connections between laid-out nodes onto a grid in place."""

    def draw(
        self, grid: Grid, layout: Layout, edges: Sequence[Edge], config: RenderConfig
    ) -> None: ...


class NoEdgeStrategy:
    """Leaves edges undrawn."""

    def draw(
        self, grid: Grid, layout: Layout, edges: Sequence[Edge], config: RenderConfig
    ) -> None:
        return None


def printable(text: str) -> str:
    """Replace control characters so a label stays on one grid row."""
    return "".join(char if char.isprintable() else BLANK for char in text)


def empty_grid(config: RenderConfig) -> Grid:
    return [[BLANK] * config.max_width for _ in range(config.max_height)]


def in_bounds(x: int, y: int, config: RenderConfig) -> bool:
    return 0 <= x < config.max_width and 0 <= y < config.max_height


def grid_to_string(grid: Grid) -> str:
    """Serialize rows, trimming trailing blanks per row and trailing newlines."""
    return "\n".join("".join(row).rstrip() for row in grid).rstrip("\n")


def format_node_label(node: Node, config: RenderConfig) -> str:
    """Node id, plus ``(key:value)`` for the first property when enabled."""
    label = f"{node.id}"
    if config.show_properties:
        first = node.first_property()
        if first is not None:
            key, value = first
            label = f"{label}({key}:{value})"
    return label


def format_node_inline(node: Node, config: RenderConfig) -> str:
    return f"{config.node_char}{format_node_label(node, config)}"


class Rasterizer:
    """Writes node markers and labels into a fixed-size grid.

    Out-of-bounds points are dropped without touching the grid. Labels are
    truncated at the right edge, never wrapped. Edge drawing is delegated to
    ``edge_strategy``.
    """

    def __init__(
        self,
        config: RenderConfig = DEFAULT_CONFIG,
        edge_strategy: EdgeStrategy | None = None,
    ) -> None:
        self.config = config
        self.edge_strategy = edge_strategy or NoEdgeStrategy()

    def rasterize(self, layout: Layout, edges: Sequence[Edge] = ()) -> str:
        grid = empty_grid(self.config)
        self.place_nodes(grid, layout)
        self.edge_strategy.draw(grid, layout, edges, self.config)
        return grid_to_string(grid)

    def place_nodes(self, grid: Grid, layout: Layout) -> None:
        for node, (x, y) in layout.items():
            if not in_bounds(x, y, self.config):
                logger.debug("Dropping node %r at out-of-bounds point (%d, %d)", node.id, x, y)
                continue
            grid[y][x] = self.config.node_char
            if self.config.show_labels:
                self.place_text(grid, format_node_label(node, self.config), x + 1, y)

    def place_text(self, grid: Grid, text: str, start_x: int, y: int) -> None:
        for offset, char in enumerate(printable(text)):
            x = start_x + offset
            if x >= self.config.max_width:
                break
            grid[y][x] = char
