"""MCP server exposing a JSON tree visualizer session as tools."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from json_tree_visualizer.config import resolve_initial_document
from json_tree_visualizer.core.tree.export import graph_to_flow, node_to_dict
from json_tree_visualizer.session import VisualizerSession


def _session_state(session: VisualizerSession) -> dict[str, Any]:
    selected = session.selected_node
    return {
        "node_count": len(session.graph),
        "edge_count": len(session.graph.edges),
        "selected": node_to_dict(selected) if selected else None,
        "message": session.message,
    }


# --- Core functions (testable without MCP context) ---


def json_tree_visualize(
    session: VisualizerSession,
    *,
    json_text: str | None = None,
    include_layout: bool = False,
) -> dict[str, Any]:
    """Parse JSON text and rebuild the session's node-link tree.

    Args:
        json_text: New document text (None = rebuild the current text).
        include_layout: Include the full renderer payload (nodes, edges, styles).
    """
    if not session.visualize(json_text):
        return {"error": session.error, "node_count": 0, "edge_count": 0}

    output = _session_state(session)
    output["nodes"] = [node_to_dict(n) for n in session.graph.nodes]
    if include_layout:
        output["layout"] = graph_to_flow(session.graph)
    return output


def json_tree_search(session: VisualizerSession, *, path: str) -> dict[str, Any]:
    """Locate and select the node addressed by a path expression.

    Paths use dots for object keys and [i] for array indices, optionally
    prefixed with $ (e.g. $.user.address.city, items[0].name). A partial
    path matches the first node whose path ends with it.
    """
    result = session.search(path)
    if result is None:
        return {"error": session.message}
    output = _session_state(session)
    output["query"] = result.query
    output["tokens"] = list(result.tokens)
    output["match"] = node_to_dict(result.node) if result.node else None
    output["focus"] = (
        {"x": session.focus.x, "y": session.focus.y} if result.node and session.focus else None
    )
    return output


def json_tree_select(session: VisualizerSession, *, node_id: str) -> dict[str, Any]:
    """Select a node by id and copy its path to the clipboard."""
    try:
        node = session.graph.get(node_id)
    except KeyError:
        return {"error": f"Node '{node_id}' not found."}
    copied = session.select_node(node)
    return {"node": node_to_dict(node), "path": node.path, "copied": copied, "message": session.message}


def json_tree_reset(session: VisualizerSession) -> dict[str, Any]:
    """Clear the session's document, tree and selection."""
    session.reset()
    return _session_state(session)


# --- MCP Server Setup ---


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime."""

    session: VisualizerSession


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Create the visualizer session on startup."""
    session = VisualizerSession(resolve_initial_document())
    if session.error:
        logger.warning("Initial document did not parse: {}", session.error)
    yield ServerContext(session=session)


mcp_server = FastMCP(
    "json-tree-visualizer",
    instructions="""\
Renders a JSON document as a node-link tree. Every object, array and primitive
becomes a node; edges link parents to children.

1. Load a document with json_tree_visualize_tool (pass json_text).
2. Find a value with json_tree_search_tool using a path such as
   $.user.address.city or items[0].name. Partial paths match the first node
   whose path ends with them.
3. json_tree_select_tool copies a node's path to the clipboard.
""",
    lifespan=server_lifespan,
)


def _ctx(mcp_ctx: Context) -> ServerContext:
    return mcp_ctx.request_context.lifespan_context  # type: ignore[return-value]


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def json_tree_visualize_tool(
    ctx: Context,
    json_text: str | None = None,
    include_layout: bool = False,
) -> dict[str, Any]:
    """Parse JSON text and build its node-link tree.

    Omit json_text to rebuild the current document. Set include_layout to get
    positioned nodes and edges ready for a renderer.
    """
    return json_tree_visualize(
        _ctx(ctx).session, json_text=json_text, include_layout=include_layout
    )


@mcp_server.tool()
async def json_tree_search_tool(ctx: Context, path: str) -> dict[str, Any]:
    """Find and select a node by path expression (e.g. $.user.address.city, items[0].name)."""
    return json_tree_search(_ctx(ctx).session, path=path)


@mcp_server.tool()
async def json_tree_select_tool(ctx: Context, node_id: str) -> dict[str, Any]:
    """Select a node by id and copy its path to the clipboard."""
    return json_tree_select(_ctx(ctx).session, node_id=node_id)


@mcp_server.tool()
async def json_tree_reset_tool(ctx: Context) -> dict[str, Any]:
    """Clear the current document and tree."""
    return json_tree_reset(_ctx(ctx).session)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from json_tree_visualizer.logging_config import configure_logging

    configure_logging(verbose=False)
    mcp_server.run(transport="stdio")
