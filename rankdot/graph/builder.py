"""Builder for converting a GraphSpec to a Graph."""

from ..schema.models import GraphSpec
from .model import Graph


def build_graph(spec: GraphSpec) -> Graph:
    """Build a Graph from a parsed graph file.

    Args:
        spec: The parsed graph file.

    Returns:
        A Graph whose node positions follow the file's node order and whose
        labels are always text.
    """
    return Graph.from_adjacency(
        zip(spec.get_labels(), (node_spec.edges for node_spec in spec.nodes))
    )
