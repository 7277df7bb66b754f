"""Schema layer for parsing and validating YAML graph files."""

from .errors import SchemaError, SchemaLoadError, SchemaValidationError
from .models import GraphSpec, NodeSpec
from .loader import load_yaml, parse_graph, parse_graph_from_string

__all__ = [
    "SchemaError",
    "SchemaLoadError",
    "SchemaValidationError",
    "GraphSpec",
    "NodeSpec",
    "load_yaml",
    "parse_graph",
    "parse_graph_from_string",
]
