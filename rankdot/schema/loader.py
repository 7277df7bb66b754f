"""YAML loading and parsing for graph files."""

import logging
from pathlib import Path
from typing import IO

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import GraphSpec

logger = logging.getLogger(__name__)


def load_yaml(path: str | Path) -> dict:
    """Read a graph file into its raw mapping.

    An empty file is an empty mapping.

    Raises:
        SchemaLoadError: If the file is missing, unreadable, not YAML, or
            not a mapping at its root.
    """
    path = Path(path)
    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise SchemaLoadError(f"{reason}: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = _load_mapping(f, str(path))
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    logger.debug("Loaded %s", path)
    return data


def parse_graph(path: str | Path) -> GraphSpec:
    """Load and validate a graph file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    return _validate(load_yaml(path), str(path))


def parse_graph_from_string(yaml_string: str) -> GraphSpec:
    """Validate graph YAML held in memory.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    return _validate(_load_mapping(yaml_string))


def _load_mapping(source: str | IO[str], path: str | None = None) -> dict:
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )
    return data


def _validate(data: dict, path: str | None = None) -> GraphSpec:
    try:
        return GraphSpec.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Graph file has {len(errors)} schema error(s)", errors, path
        ) from e
