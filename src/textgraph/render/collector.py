"""Budgeted neighborhood collection for subgraph rendering."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable

from textgraph.exceptions import GraphError, NodeNotFoundError
from textgraph.graph.accessor import GraphAccessor
from textgraph.graph.models import Edge, Node

logger = logging.getLogger("textgraph.render")


class SubgraphCollector:
    """Collects a bounded node set around a start node, plus the edges among them.

    The budget limits how many distinct nodes are admitted, not how many hops
    are taken. Neighbors are pushed onto the front of the frontier, so the
    walk leans depth-first.
    """

    def __init__(self, accessor: GraphAccessor) -> None:
        self.accessor = accessor

    def collect(self, start_id: Hashable, budget: int) -> tuple[list[Node], list[Edge]]:
        """Walk from `start_id` admitting at most `budget` nodes.

        Raises NodeNotFoundError if the start node does not exist. Missing
        nodes reached later are skipped.
        """
        nodes = self.walk(start_id, budget)
        return nodes, self.edges_between(nodes)

    def walk(self, start_id: Hashable, budget: int) -> list[Node]:
        frontier: deque[Hashable] = deque([start_id])
        visited: set[Hashable] = set()
        result: list[Node] = []
        remaining = budget

        while remaining > 0 and frontier:
            node_id = frontier.popleft()
            if node_id in visited:
                continue

            node = self.accessor.get_node(node_id)
            if node is None:
                if node_id == start_id:
                    raise NodeNotFoundError(start_id)
                logger.debug("Skipping missing node %r during walk", node_id)
                continue

            visited.add(node_id)
            result.append(node)
            neighbors = [edge.to_id for _, edge in self._edges_from(node_id)]
            frontier.extendleft(reversed(neighbors))
            remaining -= 1

        return result

    def edges_between(self, nodes: list[Node]) -> list[Edge]:
        """Edges whose endpoints both lie in `nodes`, deduplicated by id."""
        node_ids = {node.id for node in nodes}
        seen: set[Hashable] = set()
        edges: list[Edge] = []
        for node in nodes:
            for _, edge in self._edges_from(node.id):
                if edge.to_id not in node_ids or edge.id in seen:
                    continue
                seen.add(edge.id)
                edges.append(edge)
        return edges

    def _edges_from(self, node_id: Hashable) -> list[tuple[Hashable, Edge]]:
        try:
            return self.accessor.get_edges_from(node_id)
        except GraphError as e:
            logger.debug("Ignoring edge lookup failure for %r: %s", node_id, e)
            return []
