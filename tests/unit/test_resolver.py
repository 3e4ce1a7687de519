"""Tests for finding nodes by path expression."""

from json_tree_visualizer.core.path.resolver import find_node_by_path, resolve_path
from json_tree_visualizer.core.path.tokenizer import tokenize
from json_tree_visualizer.core.tree.builder import build_tree
from json_tree_visualizer.models.node import NodeKind, Position, TreeGraph, TreeNode


def test_full_path_round_trips(sample_graph: TreeGraph) -> None:
    for node in sample_graph.nodes[1:]:
        assert find_node_by_path(sample_graph.nodes, tokenize(node.path)) is node


def test_dollar_prefixed_path_matches(sample_graph: TreeGraph) -> None:
    node = resolve_path(sample_graph.nodes, "$.user.address.city")
    assert node is not None
    assert node.path == "user.address.city"
    assert node.label == "city: Wonderland"


def test_array_index_path_matches(sample_graph: TreeGraph) -> None:
    node = resolve_path(sample_graph.nodes, "items[1].price")
    assert node is not None
    assert node.label == "price: 19.99"


def test_partial_path_matches_first_node_in_list_order(sample_graph: TreeGraph) -> None:
    node = resolve_path(sample_graph.nodes, "name")
    assert node is not None
    assert node.path == "user.name"  # earlier than items[0].name


def test_suffix_match_is_a_plain_string_suffix(sample_graph: TreeGraph) -> None:
    node = resolve_path(sample_graph.nodes, "ity")
    assert node is not None
    assert node.path == "user.address.city"


def test_bare_index_matches_first_path_ending_with_it(sample_graph: TreeGraph) -> None:
    node = resolve_path(sample_graph.nodes, "[1]")
    assert node is not None
    assert node.path == "user.tags[1]"


def test_root_marker_alone_matches_root(sample_graph: TreeGraph) -> None:
    node = resolve_path(sample_graph.nodes, "$")
    assert node is sample_graph.root


def test_no_match_returns_none(sample_graph: TreeGraph) -> None:
    assert resolve_path(sample_graph.nodes, "x") is None
    assert resolve_path(sample_graph.nodes, "user.address.country") is None


def test_empty_node_list_returns_none() -> None:
    assert find_node_by_path([], ["a"]) is None
    assert find_node_by_path((), []) is None


def test_simple_document_search() -> None:
    graph = build_tree({"a": {"b": 1}})
    node = resolve_path(graph.nodes, "a.b")
    assert node is not None
    assert node.id == graph.nodes[2].id
    assert resolve_path(graph.nodes, "x") is None


def test_nodes_without_path_are_skipped() -> None:
    pathless = TreeNode(
        id="node_1", label="root", path="", value={}, kind=NodeKind.OBJECT, position=Position(0, 0)
    )
    target = TreeNode(
        id="node_2", label="a: 1", path="a", value=1, kind=NodeKind.PRIMITIVE, position=Position(1, 0)
    )
    assert find_node_by_path([pathless, target], []) is target


def test_root_array_paths_resolve_with_or_without_dollar() -> None:
    graph = build_tree([1, {"a": 2}])
    nested = resolve_path(graph.nodes, "$[1].a")
    assert nested is not None
    assert nested.path == "$[1].a"
    assert resolve_path(graph.nodes, "[1].a") is nested
    first = resolve_path(graph.nodes, "[0]")
    assert first is not None
    assert first.label == "[0]: 1"
