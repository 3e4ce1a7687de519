"""Shared test fixtures."""

import json

import pytest

from json_tree_visualizer.config import SAMPLE_DOCUMENT
from json_tree_visualizer.core.tree.builder import build_tree
from json_tree_visualizer.models.node import TreeGraph
from json_tree_visualizer.session import VisualizerSession
from tests.unit.fakes import FakeClipboard

# Same shape as SAMPLE_DOCUMENT; 17 nodes in pre-order:
#   $, user, user.id, user.name, user.address, user.address.city, user.address.zip,
#   user.tags, user.tags[0], user.tags[1], items, items[0], items[0].name,
#   items[0].price, items[1], items[1].name, items[1].price
SAMPLE_DATA = json.loads(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_graph() -> TreeGraph:
    """Graph built from the bundled sample document."""
    return build_tree(SAMPLE_DATA)


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def session(fake_clipboard: FakeClipboard) -> VisualizerSession:
    """Session loaded with the sample document and a recording clipboard."""
    return VisualizerSession(SAMPLE_DOCUMENT, clipboard=fake_clipboard)
