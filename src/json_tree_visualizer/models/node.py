"""Domain models for the JSON tree visualizer."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


class NodeKind(StrEnum):
    """Visual classification of a JSON value."""

    OBJECT = "object"
    ARRAY = "array"
    PRIMITIVE = "primitive"


@dataclass(frozen=True)
class Position:
    """Layout coordinates: x along the depth axis, y along the sibling axis."""

    x: float
    y: float


@dataclass(frozen=True)
class TreeNode:
    """A single visual node, one per JSON value in the document."""

    id: str
    label: str
    path: str
    value: JSONValue
    kind: NodeKind
    position: Position
    depth: int = 0
    parent_id: str | None = None


@dataclass(frozen=True)
class Edge:
    """A parent-contains-child link between two nodes."""

    id: str
    source: str
    target: str


@dataclass(frozen=True)
class TreeGraph:
    """Flat node and edge lists produced by one build."""

    nodes: tuple[TreeNode, ...] = ()
    edges: tuple[Edge, ...] = ()

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> TreeNode | None:
        return self.nodes[0] if self.nodes else None

    def get(self, node_id: str) -> TreeNode:
        """Return the node with the given id, raising KeyError if absent."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        msg = f"Node {node_id!r} not found"
        raise KeyError(msg)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a path search; node is None when nothing matched."""

    query: str
    tokens: tuple[str, ...]
    node: TreeNode | None = None

    @property
    def found(self) -> bool:
        return self.node is not None
