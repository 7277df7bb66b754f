"""Command-line interface for rankdot."""

import logging
import sys
from pathlib import Path

import click

from .demo import demo_graph
from .graph.builder import build_graph
from .output.dot import export
from .output.errors import DanglingEdgeError, ExportError
from .output.formatter import format_validation_result
from .schema.errors import SchemaError
from .schema.loader import parse_graph
from .validators.runner import validate_graph_file

logger = logging.getLogger(__name__)


def _exit_on_schema_error(e: SchemaError) -> None:
    """Report a file or schema error and exit with status 2."""
    for line in e.describe():
        click.echo(line, err=True)
    sys.exit(2)


@click.group()
@click.version_option(package_name="rankdot")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """rankdot: render directed graphs as rank-tiered Graphviz DOT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command("export")
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write DOT to this file instead of stdout",
)
@click.option(
    "--escape-labels/--no-escape-labels",
    envvar="RANKDOT_ESCAPE_LABELS",
    default=False,
    help="Escape quotes and backslashes in labels",
)
def export_cmd(graph_file: str, output_path: str | None, escape_labels: bool):
    """Export a graph file as DOT.

    GRAPH_FILE is the path to a YAML graph file. Node 0 is the root.

    Exit codes:
      0 - Success
      2 - File, schema, or export error
    """
    try:
        graph = build_graph(parse_graph(graph_file))
    except SchemaError as e:
        _exit_on_schema_error(e)

    try:
        dot = export(graph, escape_labels=escape_labels)
    except DanglingEdgeError as e:
        click.echo(f"Dangling edge: {e}", err=True)
        sys.exit(2)
    except ExportError as e:
        click.echo(f"Export failed: {e}", err=True)
        sys.exit(2)

    if output_path is None:
        click.echo(dot)
    else:
        Path(output_path).write_text(dot + "\n", encoding="utf-8")
        logger.info("Wrote %s", output_path)
        click.echo(f"Wrote: {output_path}")
    sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def check(graph_file: str, output_format: str, strict: bool):
    """Check a graph file for problems before exporting it.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - Check passed
      1 - Check failed (errors found)
      2 - File or schema error
    """
    try:
        result = validate_graph_file(graph_file)
    except SchemaError as e:
        _exit_on_schema_error(e)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if not result.is_valid:
        sys.exit(1)
    elif strict and result.warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
def demo():
    """Print the DOT export of the built-in example graph."""
    click.echo(export(demo_graph()))


if __name__ == "__main__":
    main()
