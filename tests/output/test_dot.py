"""Tests for DOT export."""

import pytest

from rankdot.demo import demo_graph
from rankdot.graph.model import Graph, Node
from rankdot.output.dot import escape_label, export
from rankdot.output.errors import (
    DanglingEdgeError,
    EmptyGraphError,
    ExportError,
    FormatWriteError,
)


class TestExport:
    def test_single_node(self, single_node_graph):
        dot = export(single_node_graph)

        assert dot == 'digraph {\n  { rank="max"; "only" }\n}'

    def test_fork(self, fork_graph):
        dot = export(fork_graph)

        assert dot == (
            "digraph {\n"
            '  { rank="same"; "N0" }\n'
            '  "N0" -> "N1"\n'
            '  "N0" -> "N2"\n'
            '  { rank="max"; "N1" "N2" }\n'
            "}"
        )

    def test_diamond(self, diamond_graph):
        dot = export(diamond_graph)

        assert dot == (
            "digraph {\n"
            '  { rank="same"; "root" }\n'
            '  "root" -> "A"\n'
            '  "root" -> "B"\n'
            '  { rank="same"; "A" "B" }\n'
            '  "A" -> "C"\n'
            '  "B" -> "C"\n'
            '  { rank="max"; "C" }\n'
            "}"
        )

    def test_demo_graph(self):
        lines = export(demo_graph()).splitlines()

        assert lines[0] == "digraph {"
        assert lines[1] == '  { rank="same"; "Root" }'
        assert lines[2:6] == [
            '  "Root" -> "1"',
            '  "Root" -> "2"',
            '  "Root" -> "3"',
            '  "Root" -> "Leaf 3"',
        ]
        assert lines[6] == '  { rank="same"; "1" "2" "3" "Leaf 3" }'
        assert lines[-2] == '  { rank="max"; "Leaf 1" "Leaf 2" }'
        assert lines[-1] == "}"

    def test_exactly_one_max_group_and_it_is_last(self, diamond_graph):
        lines = export(diamond_graph).splitlines()
        rank_lines = [line for line in lines if "rank=" in line]

        assert sum('rank="max"' in line for line in rank_lines) == 1
        assert 'rank="max"' in rank_lines[-1]

    def test_edge_order_follows_edge_list(self):
        graph = Graph.from_adjacency(
            [("r", [1, 2]), ("x", [3, 2, 1]), ("y", [3]), ("z", [])]
        )

        edge_lines = [line for line in export(graph).splitlines() if "->" in line]

        assert edge_lines == [
            '  "r" -> "x"',
            '  "r" -> "y"',
            '  "x" -> "z"',
            '  "x" -> "y"',
            '  "x" -> "x"',
            '  "y" -> "z"',
        ]

    def test_unreachable_node(self, island_graph):
        dot = export(island_graph)

        assert "island" not in dot
        assert dot.count("->") == 1

    def test_max_group_last_with_unreachable_node(self):
        graph = Graph.from_adjacency([("r", [1]), ("a", [0]), ("island", [])])

        dot = export(graph)

        assert dot == (
            "digraph {\n"
            '  { rank="same"; "r" }\n'
            '  "r" -> "a"\n'
            '  { rank="max"; "a" }\n'
            "}"
        )
        assert dot == export(Graph.from_adjacency([("r", [1]), ("a", [0])]))

    def test_idempotent(self, diamond_graph):
        assert export(diamond_graph) == export(diamond_graph)

    def test_labels_looked_up_by_position(self):
        graph = Graph.from_adjacency([("root", [1]), ("leaf", [])])
        graph.nodes[1].label = "renamed"

        assert '"root" -> "renamed"' in export(graph)

    def test_duplicate_labels_not_disambiguated(self):
        graph = Graph.from_adjacency([("same", [1]), ("same", [])])

        assert '"same" -> "same"' in export(graph)


class TestExportEscaping:
    def test_verbatim_by_default(self):
        graph = Graph.from_adjacency([('say "hi"', [])])

        assert '"say "hi"" ' in export(graph)

    def test_escape_labels(self):
        graph = Graph.from_adjacency([('say "hi"', [1]), ("back\\slash", [])])

        dot = export(graph, escape_labels=True)

        assert '"say \\"hi\\"" -> "back\\\\slash"' in dot

    def test_escape_label(self):
        assert escape_label('a"b\\c') == 'a\\"b\\\\c'


class TestExportErrors:
    def test_empty_graph(self):
        with pytest.raises(EmptyGraphError):
            export(Graph())

    def test_dangling_edge(self):
        graph = Graph.from_adjacency([("r", [1, 3]), ("a", [])])

        with pytest.raises(DanglingEdgeError) as exc_info:
            export(graph)

        assert exc_info.value.position == 3
        assert "3" in str(exc_info.value)

    def test_dangling_edge_on_last_tier(self):
        graph = Graph.from_adjacency([("r", [1]), ("a", [5])])

        with pytest.raises(DanglingEdgeError) as exc_info:
            export(graph)

        assert exc_info.value.position == 5
        assert exc_info.value.node == 1

    def test_errors_share_base(self):
        assert issubclass(EmptyGraphError, ExportError)
        assert issubclass(DanglingEdgeError, ExportError)
        assert issubclass(FormatWriteError, ExportError)

    def test_label_rendering_failure(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("no text")

        graph = Graph(nodes=[Node(label=Broken())])

        with pytest.raises(FormatWriteError) as exc_info:
            export(graph)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
