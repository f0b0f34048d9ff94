#!/usr/bin/env python3
"""
Test all examples from the README to ensure they work correctly.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from treequery import (
    CardinalityError,
    MissingArgumentError,
    MutableTreeNode,
    Relations,
    ancestors,
    depth,
    descendants,
    leaves,
    memoize,
    to_forest,
    to_tree,
    traverse,
    values,
)
from treequery.testing import counting_relations


@dataclass(frozen=True)
class Category:
    id: int
    parent_id: Optional[int]
    name: str


ROWS = [
    Category(1, None, "catalog"),
    Category(2, 1, "books"),
    Category(3, 1, "music"),
    Category(4, 2, "fantasy"),
]


@pytest.fixture
def owned_tree():
    root = MutableTreeNode("root")
    docs = root.add_value("docs")
    docs.add_value("readme")
    root.add_value("src")
    return root


def test_owned_tree_example(owned_tree):
    """The Owned trees example."""
    assert values(descendants(owned_tree)) == ["docs", "readme", "src"]
    assert values(descendants(owned_tree, mode="post")) == ["readme", "docs", "src"]


def test_flat_data_example():
    """The Trees over flat data example."""
    tree = to_tree(ROWS, key=lambda c: c.id, parent_key=lambda c: c.parent_id)

    fantasy = next(leaves(tree))
    assert [c.value().name for c in ancestors(fantasy)] == ["books", "catalog"]
    assert depth(fantasy) == 2


def test_to_tree_requires_one_root():
    rows = ROWS + [Category(9, None, "orphan")]
    with pytest.raises(CardinalityError):
        to_tree(rows, key=lambda c: c.id, parent_key=lambda c: c.parent_id)

    forest = to_forest(rows, key=lambda c: c.id, parent_key=lambda c: c.parent_id)
    assert [n.value().name for n in forest] == ["catalog", "orphan"]


def test_memoization_example():
    """Second walk over a memoized tree does not reach the relations."""
    relations, counter = counting_relations(
        Relations.from_keys(ROWS, lambda c: c.id, lambda c: c.parent_id)
    )
    cached = memoize(to_tree(ROWS, relations))
    counter.reset()

    list(descendants(cached))
    first = counter.calls('children_of')
    list(descendants(cached))

    assert first == len(ROWS)
    assert counter.calls('children_of') == first


def test_eager_argument_check():
    with pytest.raises(MissingArgumentError):
        descendants(None)


def test_traverse_example(owned_tree):
    sizes = {}
    traverse(owned_tree, lambda n: sizes.setdefault(n.value(), len(n)), mode="post")
    assert sizes == {"readme": 0, "docs": 1, "src": 0, "root": 2}


def test_logging_example(owned_tree, caplog):
    caplog.set_level(logging.DEBUG, logger="treequery")
    traverse(owned_tree, lambda n: None)
    assert any("Traversed 4 nodes" in message for message in caplog.messages)
