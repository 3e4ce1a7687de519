"""Render JSON documents as node-link trees and search them by path."""

from json_tree_visualizer.core.path.resolver import find_node_by_path, resolve_path
from json_tree_visualizer.core.path.tokenizer import tokenize
from json_tree_visualizer.core.tree.builder import build_tree
from json_tree_visualizer.protocols import ClipboardProtocol
from json_tree_visualizer.session import VisualizerSession

__all__ = [
    "ClipboardProtocol",
    "VisualizerSession",
    "build_tree",
    "find_node_by_path",
    "resolve_path",
    "tokenize",
]
