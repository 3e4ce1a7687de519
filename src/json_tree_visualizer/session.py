"""Interactive visualizer session: build, search, select, copy."""

from loguru import logger

from json_tree_visualizer.config import SAMPLE_DOCUMENT
from json_tree_visualizer.core.clipboard import SystemClipboard
from json_tree_visualizer.core.importer.json_reader import parse_json_text
from json_tree_visualizer.core.path.resolver import find_node_by_path
from json_tree_visualizer.core.path.tokenizer import tokenize
from json_tree_visualizer.core.tree.builder import build_tree
from json_tree_visualizer.models.node import Position, SearchResult, TreeGraph, TreeNode
from json_tree_visualizer.protocols import ClipboardProtocol

EMPTY_QUERY_MESSAGE = "Enter a JSON path to search."
MATCH_MESSAGE = "Match found and centered."
NO_MATCH_MESSAGE = "No match found."


class VisualizerSession:
    """State of one visualizer session.

    Holds the current JSON text, the graph built from it, the selected node
    and the latest error / status message. Every action runs to completion
    synchronously and replaces the graph wholesale, so a failed action never
    leaves a partial tree behind.
    """

    def __init__(
        self,
        json_text: str = SAMPLE_DOCUMENT,
        *,
        clipboard: ClipboardProtocol | None = None,
    ) -> None:
        self.json_text = json_text
        self.clipboard: ClipboardProtocol = clipboard if clipboard is not None else SystemClipboard()
        self.graph = TreeGraph()
        self.error = ""
        self.message = ""
        self.selected_node_id: str | None = None
        if json_text:
            self.visualize()

    @property
    def selected_node(self) -> TreeNode | None:
        if self.selected_node_id is None:
            return None
        try:
            return self.graph.get(self.selected_node_id)
        except KeyError:
            return None

    @property
    def focus(self) -> Position | None:
        """Point a renderer should centre on, i.e. the selected node's position."""
        node = self.selected_node
        return node.position if node else None

    def visualize(self, json_text: str | None = None) -> bool:
        """Parse the current text and rebuild the graph.

        Returns:
            True if the text parsed and the graph was rebuilt.
        """
        if json_text is not None:
            self.json_text = json_text
        self.error = ""
        self.message = ""
        try:
            document = parse_json_text(self.json_text)
        except ValueError as e:
            self.error = f"Invalid JSON: {e}"
            self.graph = TreeGraph()
            self.selected_node_id = None
            logger.debug(self.error)
            return False

        self.graph = build_tree(document)
        self.selected_node_id = None
        return True

    def reset(self) -> None:
        """Clear text, graph, messages and selection."""
        self.json_text = ""
        self.graph = TreeGraph()
        self.error = ""
        self.message = ""
        self.selected_node_id = None

    def search(self, query: str) -> SearchResult | None:
        """Find and select the node addressed by a path expression.

        Returns:
            The search result, or None when the query was blank.
        """
        self.message = ""
        query = query.strip()
        if not query:
            self.message = EMPTY_QUERY_MESSAGE
            return None

        tokens = tokenize(query)
        node = find_node_by_path(self.graph.nodes, tokens)
        if node is None:
            # Previous selection is kept.
            self.message = NO_MATCH_MESSAGE
        else:
            self.selected_node_id = node.id
            self.message = MATCH_MESSAGE
        return SearchResult(query=query, tokens=tuple(tokens), node=node)

    def select_node(self, node: TreeNode | str) -> bool:
        """Handle a click on a node by copying its path to the clipboard.

        Args:
            node: The clicked node or its id.

        Returns:
            True if the path was copied.

        Raises:
            KeyError: If a node id is given that is not in the current graph.
        """
        if isinstance(node, str):
            node = self.graph.get(node)
        if not node.path:
            return False
        try:
            copied = self.clipboard.write_text(node.path)
        except Exception:
            logger.opt(exception=True).debug("Clipboard write failed for {!r}", node.path)
            copied = False
        if not copied:
            return False
        self.message = f"Copied path: {node.path}"
        return True
