"""Export-related exceptions."""

from ..graph.model import NodeRef


class ExportError(Exception):
    """Base exception for a failed export. No partial output is produced."""

    pass


class EmptyGraphError(ExportError):
    """Raised when exporting a graph with no nodes."""

    def __init__(self, message: str = "Cannot export an empty graph"):
        super().__init__(message)


class DanglingEdgeError(ExportError):
    """Raised when an edge references a position outside the graph."""

    def __init__(self, position: NodeRef, node: NodeRef, node_count: int):
        self.position = position
        self.node = node
        self.node_count = node_count
        super().__init__(
            f"Edge of node {node} references position {position}, "
            f"but the graph has {node_count} node(s)"
        )


class FormatWriteError(ExportError):
    """Raised when text cannot be rendered or written to the output buffer."""

    pass
