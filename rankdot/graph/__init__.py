"""Graph layer: positional nodes and edges."""

from .model import Edge, Graph, Node, NodeRef
from .builder import build_graph

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "NodeRef",
    "build_graph",
]
