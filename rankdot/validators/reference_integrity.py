"""Edge reference integrity validator."""

from ..graph.model import Graph
from .base import Severity, ValidationResult


def check_edge_references(graph: Graph) -> ValidationResult:
    """Check that every edge endpoint indexes a node.

    Unlike export, which only dereferences edges it reaches, this checks
    every node, including ones unreachable from the root. It also warns
    when an edge's recorded source differs from the node that owns it.

    Args:
        graph: The graph to check.

    Returns:
        ValidationResult with errors for dangling edges.
    """
    result = ValidationResult()

    if len(graph) == 0:
        result.report(
            Severity.ERROR,
            "EMPTY_GRAPH",
            "Graph has no nodes; position 0 is required as the root",
        )
        return result

    for position, node in enumerate(graph.nodes):
        label = graph.label_text(position)
        for index, edge in enumerate(node.edges):
            if not graph.has_node(edge.to):
                result.report(
                    Severity.ERROR,
                    "DANGLING_EDGE",
                    f"Edge {index} references undefined node {edge.to}",
                    position,
                    label,
                    position=edge.to,
                    edge_index=index,
                )

            if edge.source == position:
                continue
            if not graph.has_node(edge.source):
                result.report(
                    Severity.ERROR,
                    "DANGLING_EDGE",
                    f"Edge {index} has undefined source node {edge.source}",
                    position,
                    label,
                    position=edge.source,
                    edge_index=index,
                )
            else:
                result.report(
                    Severity.WARNING,
                    "EDGE_SOURCE_MISMATCH",
                    f"Edge {index} records source {edge.source} but is owned by "
                    f"node {position}; the edge is drawn from "
                    f"'{graph.label_text(edge.source)}'",
                    position,
                    label,
                    source=edge.source,
                    edge_index=index,
                )

    return result
