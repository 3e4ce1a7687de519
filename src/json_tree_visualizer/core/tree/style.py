"""Per-kind colours and base node styling for presentation shells."""

from typing import Any

from json_tree_visualizer.models.node import NodeKind

BACKGROUND_COLORS: dict[NodeKind, str] = {
    NodeKind.OBJECT: "#eef2ff",
    NodeKind.ARRAY: "#ecfdf5",
    NodeKind.PRIMITIVE: "#fff7ed",
}

# Stroke colour used by overview widgets such as a minimap.
STROKE_COLORS: dict[NodeKind, str] = {
    NodeKind.OBJECT: "#5B21B6",
    NodeKind.ARRAY: "#059669",
    NodeKind.PRIMITIVE: "#B45309",
}

BASE_NODE_STYLE: dict[str, Any] = {
    "minWidth": 140,
    "padding": 8,
    "borderRadius": 8,
    "border": "2px solid #ddd",
}

EDGE_MARKER: dict[str, str] = {"type": "arrow", "color": "#999"}


def node_style(kind: NodeKind) -> dict[str, Any]:
    return {**BASE_NODE_STYLE, "background": BACKGROUND_COLORS[kind]}
