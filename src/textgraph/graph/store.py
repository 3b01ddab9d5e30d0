"""Load and save graphs as JSON files.

The file holds two lists::

    {"nodes": [{"id": 1, "properties": {"name": "Alice"}}],
     "edges": [{"id": 1, "from": 1, "to": 2, "label": "knows", "properties": {}}]}

Graphs are loaded into a ``networkx.MultiDiGraph``: node attributes are the
node's properties, edges are keyed by edge id and carry ``label`` and
``properties`` attributes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import networkx as nx

from textgraph.exceptions import GraphError

logger = logging.getLogger("textgraph.graph")


def _entries(data: dict, name: str) -> list:
    entries = data.get(name, [])
    if not isinstance(entries, list):
        raise GraphError(f"Graph '{name}' must be a list")
    return entries


def _properties(raw: dict) -> dict:
    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        raise GraphError(f"Properties must be an object: {raw!r}")
    return dict(properties)


def build_graph(data: dict) -> nx.MultiDiGraph:
    """Build a graph from the decoded JSON structure."""
    if not isinstance(data, dict):
        raise GraphError("Graph data must be a JSON object")

    graph = nx.MultiDiGraph()
    for raw in _entries(data, "nodes"):
        if not isinstance(raw, dict) or "id" not in raw:
            raise GraphError(f"Malformed node entry: {raw!r}")
        try:
            graph.add_node(raw["id"], **_properties(raw))
        except TypeError as e:
            raise GraphError(f"Invalid node id: {raw['id']!r}") from e

    for index, raw in enumerate(_entries(data, "edges")):
        if not isinstance(raw, dict) or "from" not in raw or "to" not in raw:
            raise GraphError(f"Malformed edge entry: {raw!r}")
        src, tgt = raw["from"], raw["to"]
        if not graph.has_node(src) or not graph.has_node(tgt):
            raise GraphError(f"Edge {raw.get('id', index)} references an unknown node")
        try:
            graph.add_edge(
                src, tgt,
                key=raw.get("id", index),
                label=raw.get("label", ""),
                properties=_properties(raw),
            )
        except TypeError as e:
            raise GraphError(f"Invalid edge id: {raw.get('id')!r}") from e

    return graph


def load_graph(path: str | Path) -> nx.MultiDiGraph:
    """Read a graph file."""
    graph_path = Path(path)
    if not graph_path.exists():
        raise GraphError(f"Graph file not found: {graph_path}")
    try:
        data = json.loads(graph_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise GraphError(f"Graph file is not valid UTF-8: {graph_path}") from e
    except json.JSONDecodeError as e:
        raise GraphError(f"Graph file is not valid JSON: {graph_path}") from e

    graph = build_graph(data)
    logger.info(
        "Loaded %d nodes and %d edges from %s",
        graph.number_of_nodes(), graph.number_of_edges(), graph_path,
    )
    return graph


def save_graph(graph: nx.MultiDiGraph, path: str | Path) -> None:
    """Write `graph` in the format read by `load_graph`."""
    nodes = [
        {"id": node_id, "properties": dict(data)}
        for node_id, data in graph.nodes(data=True)
    ]
    edges = [
        {
            "id": key,
            "from": src,
            "to": tgt,
            "label": data.get("label", ""),
            "properties": dict(data.get("properties", {})),
        }
        for src, tgt, key, data in graph.edges(keys=True, data=True)
    ]
    graph_path = Path(path)
    graph_path.parent.mkdir(parents=True, exist_ok=True)
    graph_path.write_text(
        json.dumps({"nodes": nodes, "edges": edges}, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
