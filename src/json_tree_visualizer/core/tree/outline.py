"""Render tree graphs as indented text outlines."""

import io
from collections import Counter

from json_tree_visualizer.models.node import TreeGraph


def render_outline(
    graph: TreeGraph,
    *,
    max_depth: int | None = None,
    show_paths: bool = False,
) -> str:
    """Render a graph as an indented bullet list.

    Args:
        graph: Graph from ``build_tree``.
        max_depth: Deepest level to include (None = unlimited).
        show_paths: Append each node's path after its label.

    Returns:
        Outline text, empty for an empty graph.
    """
    child_counts = Counter(e.source for e in graph.edges)

    out = io.StringIO()
    for node in graph.nodes:
        if max_depth is not None and node.depth > max_depth:
            continue
        indent = "    " * node.depth
        line = f"{indent}- {node.label}"
        if show_paths:
            line += f"  ({node.path})"
        out.write(line + "\n")

        # Truncation indicator when children are cut off by max_depth
        child_count = child_counts[node.id]
        if max_depth is not None and node.depth == max_depth and child_count > 0:
            child_indent = "    " * (node.depth + 1)
            noun = "child" if child_count == 1 else "children"
            out.write(f"{child_indent}- ... ({child_count} more {noun})\n")

    return out.getvalue()
