"""Immutable snapshots of graph entities used by the renderer."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple


@dataclass(frozen=True)
class Node:
    """A graph node.

    Nodes compare and hash by ``id`` only, so they can key a layout.
    ``properties`` keeps insertion order; the first entry is what compact
    labels display.
    """

    id: Hashable
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def first_property(self) -> tuple[str, Any] | None:
        for key, value in self.properties.items():
            return key, value
        return None


@dataclass(frozen=True)
class Edge:
    """A directed edge between two node ids."""

    id: Hashable
    from_id: Hashable
    to_id: Hashable
    label: str = ""
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)


class LayoutPoint(NamedTuple):
    x: int
    y: int


Layout = dict[Node, LayoutPoint]
