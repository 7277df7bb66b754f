"""Reachability validator."""

import networkx as nx

from ..graph.model import Graph
from .base import Severity, ValidationResult


def check_unreachable_nodes(graph: Graph) -> ValidationResult:
    """Check for nodes that cannot be reached from the root.

    Unreachable nodes are left out of the export entirely: they get no rank
    group and their outbound edges are not printed.

    Args:
        graph: The graph to check.

    Returns:
        ValidationResult with warnings for unreachable nodes.
    """
    result = ValidationResult()

    if len(graph) == 0:
        return result

    nx_graph = graph.to_networkx()
    reachable = nx.descendants(nx_graph, 0) | {0}

    for position in sorted(set(nx_graph.nodes) - reachable):
        result.report(
            Severity.WARNING,
            "UNREACHABLE_NODE",
            f"Cannot be reached from root '{graph.label_text(0)}' "
            "and will not be exported",
            position,
            graph.label_text(position),
        )

    return result
