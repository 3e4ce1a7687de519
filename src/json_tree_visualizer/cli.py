"""CLI for the JSON tree visualizer (visualize, search, MCP server)."""

import json
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from json_tree_visualizer.config import SAMPLE_DOCUMENT
from json_tree_visualizer.core.clipboard import NullClipboard, SystemClipboard
from json_tree_visualizer.core.importer.json_reader import load_json_source
from json_tree_visualizer.core.path.resolver import find_node_by_path
from json_tree_visualizer.core.path.tokenizer import tokenize
from json_tree_visualizer.core.tree.builder import build_tree
from json_tree_visualizer.core.tree.export import graph_to_flow, node_to_dict
from json_tree_visualizer.core.tree.outline import render_outline
from json_tree_visualizer.logging_config import configure_logging
from json_tree_visualizer.models.node import JSONValue
from json_tree_visualizer.protocols import ClipboardProtocol

app = typer.Typer(help="JSON tree visualizer: render JSON as a node-link tree and search it by path.")


class OutputFormat(StrEnum):
    OUTLINE = "outline"
    JSON = "json"
    FLOW = "flow"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load(source: Path) -> JSONValue:
    """Load a document, exiting with status 1 on missing files or bad JSON."""
    try:
        return load_json_source(source)
    except FileNotFoundError:
        logger.error("File not found: {}", source)
        raise typer.Exit(1) from None
    except OSError as e:
        logger.error("Cannot read {}: {}", source, e)
        raise typer.Exit(1) from None
    except ValueError as e:
        typer.echo(f"Invalid JSON: {e}")
        raise typer.Exit(1) from None


@app.command()
def visualize(
    source: Path = typer.Argument(..., help="JSON file, or - for stdin"),
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="outline, json (node summaries) or flow (renderer payload)"),
    ] = OutputFormat.OUTLINE,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render in outline mode"),
    ] = None,
    show_paths: bool = typer.Option(False, "--paths", "-p", help="Show node paths in the outline"),
) -> None:
    """Build the node-link tree for a JSON document and print it."""
    graph = build_tree(_load(source))

    if output_format is OutputFormat.FLOW:
        typer.echo(json.dumps(graph_to_flow(graph), indent=2))
    elif output_format is OutputFormat.JSON:
        data = {
            "nodes": [node_to_dict(n) for n in graph.nodes],
            "edges": [{"id": e.id, "source": e.source, "target": e.target} for e in graph.edges],
            "count": len(graph),
        }
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(render_outline(graph, max_depth=max_depth, show_paths=show_paths), nl=False)


@app.command()
def search(
    source: Path = typer.Argument(..., help="JSON file, or - for stdin"),
    path: str = typer.Argument(..., help="Path expression, e.g. $.user.address.city or items[0].name"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the matched path to the clipboard"),
) -> None:
    """Find the node addressed by a path expression."""
    if not path.strip():
        typer.echo("Enter a JSON path to search.")
        raise typer.Exit(1)

    graph = build_tree(_load(source))
    tokens = tokenize(path)
    node = find_node_by_path(graph.nodes, tokens)

    if node is None:
        if output_json:
            typer.echo(json.dumps({"query": path, "tokens": tokens, "match": None}, indent=2))
        else:
            typer.echo("No match found.")
        raise typer.Exit(1)

    clipboard: ClipboardProtocol = SystemClipboard() if copy else NullClipboard()
    copied = clipboard.write_text(node.path)

    if output_json:
        data: dict[str, Any] = {"query": path, "tokens": tokens, "match": node_to_dict(node)}
        if copy:
            data["copied"] = copied
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(f"{node.label}")
        typer.echo(f"    id={node.id}  path={node.path}  type={node.kind}")
        if copied:
            typer.echo(f"Copied path: {node.path}")


@app.command()
def sample() -> None:
    """Print the bundled sample document."""
    typer.echo(SAMPLE_DOCUMENT)


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from json_tree_visualizer.mcp.server import run_mcp_server

    run_mcp_server()
