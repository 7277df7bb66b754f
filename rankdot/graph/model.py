"""Positional graph model.

Nodes live in a single list owned by the graph. Edges point at other nodes
by their position in that list, so the connectivity may contain cycles
without any node owning another.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

import networkx as nx

NodeRef = int


@dataclass(frozen=True)
class Edge:
    """A directed connection between two node positions.

    ``source`` is informational: in a well-formed graph it equals the
    position of the node that owns the edge.
    """

    source: NodeRef
    to: NodeRef


@dataclass
class Node:
    """A graph vertex with a displayable label and its outbound edges."""

    label: Any
    edges: list[Edge] = field(default_factory=list)


@dataclass
class Graph:
    """An ordered collection of nodes. Position 0 is the traversal root."""

    nodes: list[Node] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    @classmethod
    def from_adjacency(
        cls, adjacency: Iterable[tuple[Any, Sequence[NodeRef]]]
    ) -> "Graph":
        """Build a graph from ``(label, targets)`` pairs.

        Each edge's source is the position of the pair it was listed in.
        A ``None`` label defaults to the node's position.

        Args:
            adjacency: Pairs of label and outbound target positions.

        Returns:
            The constructed Graph. Targets are not range-checked.
        """
        nodes = []
        for position, (label, targets) in enumerate(adjacency):
            nodes.append(
                Node(
                    label=position if label is None else label,
                    edges=[Edge(source=position, to=target) for target in targets],
                )
            )
        return cls(nodes=nodes)

    def has_node(self, ref: NodeRef) -> bool:
        """Check if a position indexes a node in this graph."""
        return 0 <= ref < len(self.nodes)

    def label_text(self, ref: NodeRef) -> str:
        """Get the display text of the node at a position."""
        return str(self.nodes[ref].label)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Project the graph onto a networkx multigraph.

        Parallel edges and self-loops are kept. Edges whose target does not
        index a node are left out.
        """
        graph = nx.MultiDiGraph()
        for position, node in enumerate(self.nodes):
            graph.add_node(position, label=node.label)
        for position, node in enumerate(self.nodes):
            for edge in node.edges:
                if self.has_node(edge.to):
                    graph.add_edge(position, edge.to, source=edge.source)
        return graph
