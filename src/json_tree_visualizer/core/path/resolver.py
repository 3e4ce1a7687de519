"""Locate a tree node from a tokenized path expression."""

from collections.abc import Iterable, Sequence

from loguru import logger

from json_tree_visualizer.core.path.tokenizer import strip_root_marker, tokenize
from json_tree_visualizer.models.node import TreeNode


def find_node_by_path(nodes: Iterable[TreeNode], tokens: Sequence[str]) -> TreeNode | None:
    """Return the first node whose path equals or ends with the joined tokens.

    Nodes are scanned in list order, so when several paths share the same
    trailing segment (``city`` under two objects) the earliest node wins.
    The suffix check is a plain string comparison: ``ity`` matches ``user.city``.

    Args:
        nodes: Nodes in build order.
        tokens: Output of ``tokenize``.

    Returns:
        The matched node, or None if nothing matched.
    """
    joined = ".".join(tokens)
    for node in nodes:
        if not node.path:
            continue
        normalized = strip_root_marker(node.path)
        if normalized == joined or normalized.endswith(joined):
            logger.debug("Path {!r} matched node {} ({})", joined, node.id, node.path)
            return node
    logger.debug("Path {!r} matched nothing", joined)
    return None


def resolve_path(nodes: Iterable[TreeNode], expression: str) -> TreeNode | None:
    """Tokenize ``expression`` and look it up among ``nodes``."""
    return find_node_by_path(nodes, tokenize(expression))
