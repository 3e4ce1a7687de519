"""Build flat node and edge lists from a parsed JSON document."""

import math
from dataclasses import dataclass, field

from loguru import logger

from json_tree_visualizer.config import SPACING_X, SPACING_Y
from json_tree_visualizer.models.node import (
    Edge,
    JSONValue,
    NodeKind,
    Position,
    TreeGraph,
    TreeNode,
)

ROOT_PATH = "$"


def classify(value: JSONValue) -> NodeKind:
    """Classify a JSON value; ``None`` counts as a primitive."""
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    return NodeKind.PRIMITIVE


def format_primitive(value: JSONValue) -> str:
    """Render a primitive using JSON spelling (``true``, ``null``, ``1`` for ``1.0``)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_label(key: str | int | None, value: JSONValue, kind: NodeKind) -> str:
    """Build the display label for a node.

    Array indices show as ``[i]``, object keys as-is, the root as ``root``.
    Primitives get ``: <value>`` appended.
    """
    if isinstance(key, int):
        label = f"[{key}]"
    elif key is None:
        label = "root"
    else:
        label = key
    if kind is NodeKind.PRIMITIVE:
        label += f": {format_primitive(value)}"
    return label


def child_path(parent_path: str, key: str | int) -> str:
    """Path of a child below ``parent_path``.

    Object keys directly below the root drop the ``$`` (``user``, not ``$.user``);
    array indices always append to the parent path (``$[0]``).
    """
    if isinstance(key, int):
        return f"{parent_path}[{key}]"
    return key if parent_path == ROOT_PATH else f"{parent_path}.{key}"


@dataclass
class _BuildContext:
    """Mutable state scoped to a single build."""

    spacing_x: float
    spacing_y: float
    next_id: int = 1
    # Next free sibling slot per depth, shared by every branch at that depth.
    depth_counters: list[int] = field(default_factory=list)
    nodes: list[TreeNode] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def new_id(self) -> str:
        node_id = f"node_{self.next_id}"
        self.next_id += 1
        return node_id

    def take_slot(self, depth: int) -> int:
        while len(self.depth_counters) <= depth:
            self.depth_counters.append(0)
        slot = self.depth_counters[depth]
        self.depth_counters[depth] += 1
        return slot


def build_tree(
    document: JSONValue,
    *,
    spacing_x: float = SPACING_X,
    spacing_y: float = SPACING_Y,
) -> TreeGraph:
    """Walk a JSON value pre-order and lay it out as nodes and edges.

    Args:
        document: Parsed JSON value (acyclic).
        spacing_x: Horizontal distance between depth levels.
        spacing_y: Vertical distance between sibling slots.

    Returns:
        TreeGraph with nodes in pre-order and one edge per non-root node.
    """
    ctx = _BuildContext(spacing_x=spacing_x, spacing_y=spacing_y)

    # Explicit stack instead of recursion so deep documents do not overflow.
    # Entries: (value, key, depth, path, parent_id)
    stack: list[tuple[JSONValue, str | int | None, int, str, str | None]] = [
        (document, None, 0, ROOT_PATH, None)
    ]
    while stack:
        value, key, depth, path, parent_id = stack.pop()
        kind = classify(value)
        node_id = ctx.new_id()
        slot = ctx.take_slot(depth)

        ctx.nodes.append(
            TreeNode(
                id=node_id,
                label=format_label(key, value, kind),
                path=path,
                value=value,
                kind=kind,
                position=Position(x=depth * ctx.spacing_x, y=slot * ctx.spacing_y),
                depth=depth,
                parent_id=parent_id,
            )
        )
        if parent_id is not None:
            ctx.edges.append(Edge(id=f"e_{parent_id}_{node_id}", source=parent_id, target=node_id))

        children: list[tuple[str | int, JSONValue]]
        if isinstance(value, dict):
            children = [(str(k), v) for k, v in value.items()]
        elif isinstance(value, list):
            children = list(enumerate(value))
        else:
            continue

        # Pushed in reverse so the first child is popped (visited) first.
        for child_key, child_value in reversed(children):
            stack.append((child_value, child_key, depth + 1, child_path(path, child_key), node_id))

    logger.debug("Built tree: {} nodes, {} edges", len(ctx.nodes), len(ctx.edges))
    return TreeGraph(nodes=tuple(ctx.nodes), edges=tuple(ctx.edges))
