"""Tests for grid rasterization."""

from __future__ import annotations

from textgraph.config import RenderConfig
from textgraph.graph.models import Edge, LayoutPoint, Node
from textgraph.render.raster import (
    NoEdgeStrategy,
    Rasterizer,
    empty_grid,
    format_node_label,
    grid_to_string,
)

SMALL = RenderConfig(max_width=10, max_height=3)


class RecordingStrategy:
    """Marks every edge's source with '+' and records what it was given."""

    def __init__(self) -> None:
        self.calls = []

    def draw(self, grid, layout, edges, config):
        self.calls.append((dict(layout), list(edges), config))
        points = {node.id: point for node, point in layout.items()}
        for edge in edges:
            x, y = points[edge.from_id]
            grid[y][x] = "+"


class TestGridToString:
    def test_blank_grid_is_empty(self):
        assert grid_to_string(empty_grid(RenderConfig())) == ""

    def test_blank_small_grid_is_empty(self):
        assert grid_to_string(empty_grid(RenderConfig(max_width=1, max_height=1))) == ""

    def test_trailing_blanks_trimmed(self):
        grid = empty_grid(SMALL)
        grid[1][2] = "x"
        assert grid_to_string(grid) == "\n  x"

    def test_grid_dimensions(self):
        grid = empty_grid(SMALL)
        assert len(grid) == 3
        assert all(len(row) == 10 for row in grid)


class TestLabels:
    def test_id_only(self):
        assert format_node_label(Node(7), RenderConfig()) == "7"

    def test_first_property(self):
        node = Node("u1", {"name": "Alice"})
        assert format_node_label(node, RenderConfig()) == "u1(name:Alice)"

    def test_properties_disabled(self):
        node = Node("u1", {"name": "Alice"})
        assert format_node_label(node, RenderConfig(show_properties=False)) == "u1"

    def test_empty_properties(self):
        assert format_node_label(Node("u1", {}), RenderConfig()) == "u1"


class TestRasterizer:
    def test_node_and_label(self):
        text = Rasterizer(SMALL).rasterize({Node("a"): LayoutPoint(0, 0)})
        assert text == "●a"

    def test_labels_disabled(self):
        config = RenderConfig(max_width=10, max_height=3, show_labels=False)
        text = Rasterizer(config).rasterize({Node("a"): LayoutPoint(2, 1)})
        assert text == "\n  ●"

    def test_custom_node_char(self):
        config = RenderConfig(max_width=10, max_height=3, node_char="*")
        assert Rasterizer(config).rasterize({Node("a"): LayoutPoint(0, 0)}) == "*a"

    def test_label_truncated_at_right_edge(self):
        text = Rasterizer(SMALL).rasterize({Node("abcdefghijkl"): LayoutPoint(5, 1)})
        assert text == "\n     ●abcd"

    def test_marker_on_last_column_has_no_label(self):
        text = Rasterizer(SMALL).rasterize({Node("abc"): LayoutPoint(9, 0)})
        assert text == "         ●"

    def test_out_of_bounds_dropped(self):
        layout = {
            Node("a"): LayoutPoint(10, 0),
            Node("b"): LayoutPoint(-1, 0),
            Node("c"): LayoutPoint(0, 3),
            Node("d"): LayoutPoint(0, -1),
        }
        assert Rasterizer(SMALL).rasterize(layout) == ""

    def test_out_of_bounds_does_not_disturb_others(self):
        layout = {Node("a"): LayoutPoint(0, 0), Node("b"): LayoutPoint(50, 50)}
        assert Rasterizer(SMALL).rasterize(layout) == "●a"

    def test_later_nodes_overwrite_earlier_labels(self):
        layout = {Node("abcdef"): LayoutPoint(0, 0), Node("z"): LayoutPoint(3, 0)}
        assert Rasterizer(SMALL).rasterize(layout) == "●ab●zef"

    def test_control_characters_stay_on_one_row(self):
        node = Node("a", {"k": "x\ny\tz\r"})
        text = Rasterizer(SMALL).rasterize({node: LayoutPoint(0, 1)})
        assert text == "\n●a(k:x y z"

    def test_rows_never_exceed_width(self):
        layout = {Node(f"node-{i}"): LayoutPoint(i, i % 3) for i in range(10)}
        lines = Rasterizer(SMALL).rasterize(layout).split("\n")
        assert len(lines) <= 3
        assert all(len(line) <= 10 for line in lines)


class TestEdgeStage:
    def test_default_strategy_draws_nothing(self):
        layout = {Node(1): LayoutPoint(0, 0), Node(2): LayoutPoint(5, 2)}
        edges = [Edge("e", 1, 2)]
        with_edges = Rasterizer(SMALL).rasterize(layout, edges)
        without_edges = Rasterizer(SMALL).rasterize(layout)
        assert with_edges == without_edges
        assert isinstance(Rasterizer(SMALL).edge_strategy, NoEdgeStrategy)

    def test_custom_strategy_receives_layout_and_edges(self):
        strategy = RecordingStrategy()
        layout = {Node(1): LayoutPoint(0, 0), Node(2): LayoutPoint(5, 2)}
        edges = [Edge("e", 1, 2)]
        text = Rasterizer(SMALL, strategy).rasterize(layout, edges)

        assert len(strategy.calls) == 1
        seen_layout, seen_edges, seen_config = strategy.calls[0]
        assert seen_layout == layout
        assert seen_edges == edges
        assert seen_config == SMALL
        assert text.startswith("+1")
