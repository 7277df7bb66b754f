"""Breadth-first rank tier traversal."""

import logging
from dataclasses import dataclass, field
from typing import Iterator

from ..graph.model import Edge, Graph, NodeRef
from .errors import DanglingEdgeError, EmptyGraphError

logger = logging.getLogger(__name__)


@dataclass
class Tier:
    """Nodes discovered at the same breadth-first depth from the root.

    ``edges`` holds the outbound edges of the members, in member order and
    then edge order. The maximal tier ends the walk and never carries edges.
    """

    depth: int
    members: list[NodeRef]
    edges: list[Edge] = field(default_factory=list)
    is_max: bool = False


def walk_tiers(graph: Graph) -> Iterator[Tier]:
    """Walk the graph level by level from position 0.

    Every reachable node is visited exactly once and belongs to the tier of
    its first discovery. Edges into already visited nodes are still
    reported on their tier. Unreachable nodes never appear.

    The walk ends at the first tier that discovers no new node. That tier is
    maximal. Its edges are bounds-checked but not reported, so the maximal
    group is always the last statement of an export.

    Args:
        graph: The graph to walk.

    Yields:
        One Tier per depth, the last one with ``is_max`` set.

    Raises:
        EmptyGraphError: If the graph has no nodes.
        DanglingEdgeError: If an edge of a reachable node references a
            missing node.
    """
    if len(graph) == 0:
        raise EmptyGraphError()

    visited = [False] * len(graph)
    visited[0] = True
    frontier: list[NodeRef] = [0]
    processed = 1
    depth = 0

    while True:
        edges: list[Edge] = []
        next_frontier: list[NodeRef] = []
        for ref in frontier:
            for edge in graph.nodes[ref].edges:
                _check_endpoint(graph, edge.source, ref)
                _check_endpoint(graph, edge.to, ref)
                edges.append(edge)
                if not visited[edge.to]:
                    visited[edge.to] = True
                    next_frontier.append(edge.to)

        # Either every node is counted or the rest is unreachable.
        if not next_frontier:
            logger.debug(
                "Tier %d is maximal with %d node(s); %d of %d node(s) reached",
                depth,
                len(frontier),
                processed,
                len(graph),
            )
            yield Tier(depth=depth, members=frontier, is_max=True)
            return

        logger.debug(
            "Tier %d has %d node(s) and %d edge(s)", depth, len(frontier), len(edges)
        )
        yield Tier(depth=depth, members=frontier, edges=edges)

        processed += len(next_frontier)
        frontier = next_frontier
        depth += 1


def rank_tiers(graph: Graph) -> list[list[NodeRef]]:
    """Get the members of every rank tier, in traversal order."""
    return [tier.members for tier in walk_tiers(graph)]


def _check_endpoint(graph: Graph, position: NodeRef, owner: NodeRef) -> None:
    """Raise DanglingEdgeError if a position does not index a node."""
    if not graph.has_node(position):
        raise DanglingEdgeError(position, owner, len(graph))
