"""Output layer: DOT export and result formatting."""

from .errors import DanglingEdgeError, EmptyGraphError, ExportError, FormatWriteError
from .dot import escape_label, export
from .formatter import format_validation_result
from .tiers import Tier, rank_tiers, walk_tiers

__all__ = [
    "DanglingEdgeError",
    "EmptyGraphError",
    "ExportError",
    "FormatWriteError",
    "escape_label",
    "export",
    "format_validation_result",
    "Tier",
    "rank_tiers",
    "walk_tiers",
]
