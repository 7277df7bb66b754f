"""Built-in example graph."""

from .graph.model import Graph


def demo_graph() -> Graph:
    """Build a three-tier example graph.

    The root fans out to three inner nodes and a leaf; each inner node
    points at the same two leaves.
    """
    return Graph.from_adjacency(
        [
            ("Root", [1, 2, 3, 6]),
            (None, [4, 5]),
            (None, [4, 5]),
            (None, [4, 5]),
            ("Leaf 1", []),
            ("Leaf 2", []),
            ("Leaf 3", []),
        ]
    )
