"""Validation runner that orchestrates all validators."""

import logging
from pathlib import Path

from ..graph.builder import build_graph
from ..graph.model import Graph
from ..schema.loader import parse_graph
from .base import ValidationResult
from .labels import check_duplicate_labels, check_label_quoting
from .reachability import check_unreachable_nodes
from .reference_integrity import check_edge_references

logger = logging.getLogger(__name__)


def run_validators(graph: Graph) -> ValidationResult:
    """Run all validators on a graph.

    Args:
        graph: The graph to check.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    # Reference integrity first; it is what makes export fail
    result.merge(check_edge_references(graph))

    result.merge(check_unreachable_nodes(graph))
    result.merge(check_duplicate_labels(graph))
    result.merge(check_label_quoting(graph))

    logger.debug(
        "Checked %d node(s): %d error(s), %d warning(s)",
        len(graph),
        len(result.errors),
        len(result.warnings),
    )
    return result


def validate_graph_file(path: str | Path) -> ValidationResult:
    """Load and check a graph file.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the file fails schema validation.
    """
    spec = parse_graph(path)
    graph = build_graph(spec)
    return run_validators(graph)
