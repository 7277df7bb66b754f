"""Label validators."""

from ..graph.model import Graph
from .base import Severity, ValidationResult


def check_duplicate_labels(graph: Graph) -> ValidationResult:
    """Check for distinct nodes whose labels render to the same text.

    Nodes are identified by their label in the output, so a layout engine
    draws such nodes as one.
    """
    result = ValidationResult()

    first_seen: dict[str, int] = {}
    for position in range(len(graph)):
        text = graph.label_text(position)
        if text not in first_seen:
            first_seen[text] = position
            continue
        result.report(
            Severity.WARNING,
            "DUPLICATE_LABEL",
            f"Label is also used by node {first_seen[text]}; "
            "both will render as one node",
            position,
            text,
            first_node=first_seen[text],
        )

    return result


def check_label_quoting(graph: Graph) -> ValidationResult:
    """Check for labels that produce malformed DOT unless escaped."""
    result = ValidationResult()

    for position in range(len(graph)):
        text = graph.label_text(position)
        if '"' in text or "\\" in text:
            result.report(
                Severity.WARNING,
                "LABEL_NEEDS_ESCAPING",
                "Label contains quote or backslash characters; "
                "export with --escape-labels",
                position,
                text,
            )

    return result
