"""DOT emission with rank-tier grouping.

The output groups every breadth-first tier in a ``rank`` statement and
lists each tier's edges right after it::

    digraph {
      { rank="same"; "Root" }
      "Root" -> "Leaf"
      { rank="max"; "Leaf" }
    }
"""

import io
import logging

from ..graph.model import Graph, NodeRef
from .errors import FormatWriteError
from .tiers import Tier, walk_tiers

logger = logging.getLogger(__name__)

HEADER = "digraph {\n"
FOOTER = "}"


def export(graph: Graph, *, escape_labels: bool = False) -> str:
    """Render a graph as a rank-tiered DOT description.

    Labels are written verbatim inside double quotes unless
    ``escape_labels`` is set, in which case backslashes and double quotes
    are escaped.

    Args:
        graph: The graph to render. Position 0 is the root.
        escape_labels: Escape label text for DOT string literals.

    Returns:
        The complete DOT text.

    Raises:
        EmptyGraphError: If the graph has no nodes.
        DanglingEdgeError: If a traversed edge references a missing node.
        FormatWriteError: If a label cannot be rendered or the text buffer
            cannot be written.
    """
    writer = _DotWriter(graph, escape_labels)
    writer.write(HEADER)
    tier_count = 0
    for tier in walk_tiers(graph):
        writer.write_tier(tier)
        tier_count += 1
    writer.write(FOOTER)

    text = writer.getvalue()
    logger.debug(
        "Exported %d node(s) in %d tier(s), %d character(s)",
        len(graph),
        tier_count,
        len(text),
    )
    return text


def escape_label(text: str) -> str:
    """Escape text for use inside a DOT double-quoted string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


class _DotWriter:
    """Accumulates DOT statements in memory, failing on the first bad write."""

    def __init__(self, graph: Graph, escape_labels: bool):
        self._graph = graph
        self._escape_labels = escape_labels
        self._buffer = io.StringIO()

    def write(self, text: str) -> None:
        try:
            self._buffer.write(text)
        except (MemoryError, ValueError) as e:
            raise FormatWriteError(f"Cannot write output: {e}") from e

    def write_tier(self, tier: Tier) -> None:
        """Write the rank group of a tier followed by its edge statements."""
        rank = "max" if tier.is_max else "same"
        self.write(f'  {{ rank="{rank}"; ')
        for ref in tier.members:
            self.write(f'"{self._label(ref)}" ')
        self.write("}\n")

        for edge in tier.edges:
            self.write(f'  "{self._label(edge.source)}" -> "{self._label(edge.to)}"\n')

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def _label(self, ref: NodeRef) -> str:
        # Looked up on every use; labels are not cached between statements.
        try:
            text = self._graph.label_text(ref)
        except Exception as e:
            raise FormatWriteError(
                f"Cannot render label of node {ref}: {e}"
            ) from e
        if self._escape_labels:
            return escape_label(text)
        return text
