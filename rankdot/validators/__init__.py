"""Validators for static checks of graphs before export."""

from .base import Severity, ValidationIssue, ValidationResult
from .labels import check_duplicate_labels, check_label_quoting
from .reachability import check_unreachable_nodes
from .reference_integrity import check_edge_references
from .runner import run_validators, validate_graph_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_duplicate_labels",
    "check_label_quoting",
    "check_unreachable_nodes",
    "check_edge_references",
    "run_validators",
    "validate_graph_file",
]
