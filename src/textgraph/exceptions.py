"""Custom exceptions for textgraph."""

from __future__ import annotations

from collections.abc import Hashable


class TextGraphError(Exception):
    """Base exception for all textgraph errors."""


class ConfigError(TextGraphError):
    """Invalid or unknown render options."""


class GraphError(TextGraphError):
    """Graph access errors."""


class NodeNotFoundError(GraphError):
    """Raised when a node required by a render call does not exist."""

    def __init__(self, node_id: Hashable):
        self.node_id = node_id
        super().__init__(f"Node {node_id} does not exist in the graph")
