"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from rankdot.graph.builder import build_graph
from rankdot.graph.model import Graph
from rankdot.schema.loader import parse_graph_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def diamond_yaml() -> str:
    """Return a diamond-shaped graph file."""
    return """
nodes:
  - label: root
    edges: [1, 2]
  - label: A
    edges: [3]
  - label: B
    edges: [3]
  - label: C
"""


@pytest.fixture
def diamond_spec(diamond_yaml):
    """Return a parsed diamond graph file."""
    return parse_graph_from_string(diamond_yaml)


@pytest.fixture
def diamond_graph(diamond_spec) -> Graph:
    """Return a graph built from the diamond graph file."""
    return build_graph(diamond_spec)


@pytest.fixture
def single_node_graph() -> Graph:
    """Return a graph with one node and no edges."""
    return Graph.from_adjacency([("only", [])])


@pytest.fixture
def fork_graph() -> Graph:
    """Return a root with two leaf children."""
    return Graph.from_adjacency([("N0", [1, 2]), ("N1", []), ("N2", [])])


@pytest.fixture
def island_graph() -> Graph:
    """Return a graph with a node that cannot be reached from the root."""
    return Graph.from_adjacency(
        [("root", [1]), ("child", []), ("island", [1, 0])]
    )
