"""Serialize tree graphs for presentation shells and JSON output."""

from typing import Any

from json_tree_visualizer.core.tree.style import EDGE_MARKER, STROKE_COLORS, node_style
from json_tree_visualizer.models.node import Edge, TreeGraph, TreeNode


def node_to_dict(node: TreeNode) -> dict[str, Any]:
    """Flat summary of a node, without the underlying value."""
    return {
        "id": node.id,
        "label": node.label,
        "path": node.path,
        "type": str(node.kind),
        "depth": node.depth,
        "position": {"x": node.position.x, "y": node.position.y},
    }


def _flow_node(node: TreeNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "data": {
            "label": node.label,
            "path": node.path,
            "value": node.value,
            "type": str(node.kind),
        },
        "position": {"x": node.position.x, "y": node.position.y},
        "style": node_style(node.kind),
    }


def _flow_edge(edge: Edge) -> dict[str, Any]:
    return {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "markerEnd": dict(EDGE_MARKER),
    }


def graph_to_flow(graph: TreeGraph) -> dict[str, Any]:
    """Convert a graph to node-link JSON a flow-chart renderer can draw directly.

    Returns:
        Dict with ``nodes``, ``edges`` and the per-kind ``legend`` stroke colours.
    """
    return {
        "nodes": [_flow_node(n) for n in graph.nodes],
        "edges": [_flow_edge(e) for e in graph.edges],
        "legend": {str(kind): color for kind, color in STROKE_COLORS.items()},
    }
