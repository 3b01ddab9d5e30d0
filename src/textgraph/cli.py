"""Command-line interface for textgraph."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from collections.abc import Callable
from typing import Any

import click

from textgraph import __version__
from textgraph.config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    RenderConfig,
    load_config,
    merge_config,
    save_config,
    set_config_value,
)
from textgraph.exceptions import TextGraphError
from textgraph.ui.console import Console

console = Console()


def _render_options(func: Callable) -> Callable:
    """Options shared by every render command."""
    options = [
        click.option("--config", "config_file", default=None,
                     type=click.Path(dir_okay=False), help="JSON file of render options."),
        click.option("--width", type=int, default=None, help="Canvas width in columns."),
        click.option("--height", type=int, default=None, help="Canvas height in rows."),
        click.option("--node-char", default=None, help="Glyph used for node markers."),
        click.option("--no-labels", is_flag=True, help="Draw markers without labels."),
        click.option("--no-properties", is_flag=True, help="Omit the first property from labels."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(
    config_file: str | None,
    width: int | None,
    height: int | None,
    node_char: str | None,
    no_labels: bool,
    no_properties: bool,
) -> RenderConfig:
    """Merge file options and command-line flags onto the defaults."""
    base = load_config(config_file) if config_file else DEFAULT_CONFIG
    overrides: dict[str, Any] = {}
    if width is not None:
        overrides["max_width"] = width
    if height is not None:
        overrides["max_height"] = height
    if node_char is not None:
        overrides["node_char"] = node_char
    if no_labels:
        overrides["show_labels"] = False
    if no_properties:
        overrides["show_properties"] = False
    return merge_config(overrides, base=base)


def _load_accessor(graph_file: str):
    """Load a graph file into an accessor or exit."""
    from textgraph.graph.accessor import NetworkXGraphAccessor

    try:
        return NetworkXGraphAccessor.from_file(graph_file)
    except TextGraphError as e:
        console.error(str(e))
        sys.exit(1)


def _config_or_exit(**kwargs: Any) -> RenderConfig:
    try:
        return _build_config(**kwargs)
    except TextGraphError as e:
        console.error(str(e))
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="textgraph")
def main():
    """textgraph - draw graph neighborhoods, node sets and paths in the terminal."""
    pass


@main.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.argument("start")
@click.option("--depth", "-d", default=2, type=int, help="Maximum number of nodes to draw.")
@_render_options
def subgraph(graph_file: str, start: str, depth: int, **options: Any):
    """Draw the neighborhood of START."""
    config = _config_or_exit(**options)
    accessor = _load_accessor(graph_file)

    from textgraph.render.renderer import AsciiRenderer

    start_id = accessor.coerce_id(start)
    if accessor.get_node(start_id) is None:
        console.error(f"Node {start} not found")
        sys.exit(1)

    renderer = AsciiRenderer(accessor)
    console.info(f"Graph visualization (depth {depth}):")
    console.drawing(renderer.render_subgraph(start_id, depth, config))


@main.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.argument("node_ids", nargs=-1, required=True)
@_render_options
def path(graph_file: str, node_ids: tuple[str, ...], **options: Any):
    """Draw an ordered path of node ids."""
    config = _config_or_exit(**options)
    accessor = _load_accessor(graph_file)

    from textgraph.render.renderer import AsciiRenderer

    ids = [accessor.coerce_id(raw) for raw in node_ids]
    missing = [raw for raw, node_id in zip(node_ids, ids) if accessor.get_node(node_id) is None]
    if missing:
        console.warning(f"Skipping unknown node(s): {', '.join(missing)}")

    console.drawing(AsciiRenderer(accessor).render_path(ids, config))


@main.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.argument("node_ids", nargs=-1, required=True)
@_render_options
def query(graph_file: str, node_ids: tuple[str, ...], **options: Any):
    """Draw the given nodes and the edges among them."""
    config = _config_or_exit(**options)
    accessor = _load_accessor(graph_file)

    from textgraph.render.collector import SubgraphCollector
    from textgraph.render.renderer import render_query_result

    nodes = []
    for raw in node_ids:
        node = accessor.get_node(accessor.coerce_id(raw))
        if node is None:
            console.warning(f"Skipping unknown node: {raw}")
            continue
        nodes.append(node)

    if not nodes:
        console.error("None of the given nodes exist in the graph")
        sys.exit(1)

    edges = SubgraphCollector(accessor).edges_between(nodes)
    console.drawing(render_query_result(nodes, edges, config))


@main.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
def stats(graph_file: str):
    """Show node, edge and component counts for a graph file."""
    accessor = _load_accessor(graph_file)

    from textgraph.render.renderer import render_graph_stats

    # The block ends with a newline; the console adds its own
    console.drawing(render_graph_stats(accessor.counts()).rstrip("\n"))


# =========================================================================
# Config Management
# =========================================================================

@main.group("config")
def config_group():
    """Inspect and edit render configuration."""
    pass


@config_group.command("show")
@click.option("--config", "config_file", default=None,
              type=click.Path(dir_okay=False), help="JSON file of render options.")
def config_show(config_file: str | None):
    """Show the effective render options."""
    try:
        config = load_config(config_file) if config_file else DEFAULT_CONFIG
    except TextGraphError as e:
        console.error(str(e))
        sys.exit(1)
    console.show_config(config, source=config_file or "defaults")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--config", "config_file", default=CONFIG_FILE, show_default=True,
              type=click.Path(dir_okay=False), help="JSON file of render options to update.")
def config_set(key: str, value: str, config_file: str):
    """Set one render option in a config file, creating it if needed."""
    try:
        config = load_config(config_file) if Path(config_file).exists() else DEFAULT_CONFIG
        try:
            # Try to parse as JSON for non-string values
            parsed_value = json.loads(value)
        except json.JSONDecodeError:
            parsed_value = value
        config = set_config_value(config, key, parsed_value)
    except KeyError:
        console.error(f"Unknown config key: {key}")
        sys.exit(1)
    except TextGraphError as e:
        console.error(str(e))
        sys.exit(1)

    save_config(config_file, config)
    console.success(f"Set {key} = {parsed_value}")


if __name__ == "__main__":
    main()
