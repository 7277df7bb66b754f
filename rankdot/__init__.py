"""rankdot: render directed graphs as rank-tiered DOT descriptions."""

from .graph import Edge, Graph, Node, NodeRef, build_graph
from .output import (
    DanglingEdgeError,
    EmptyGraphError,
    ExportError,
    FormatWriteError,
    export,
)
from .output.tiers import Tier, rank_tiers, walk_tiers

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "NodeRef",
    "build_graph",
    "DanglingEdgeError",
    "EmptyGraphError",
    "ExportError",
    "FormatWriteError",
    "export",
    "Tier",
    "rank_tiers",
    "walk_tiers",
]
