"""Test fixtures for TreeQuery consumers.

These helpers make the cost of navigation observable (how often each
relationship function ran) and provide small, well-known hierarchies for
test suites of projects that build on TreeQuery.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.relations import Relations
from ..nodes.mutable import MutableTreeNode


class CallCounter:
    """Counts calls to the relationship functions of a Relations object.

    Example:
        relations, counter = counting_relations(Relations.from_keys(rows, key, parent_key))
        node = to_tree(rows, relations)
        list(node.children())
        assert counter.calls('children_of') == 1
    """

    def __init__(self):
        self._counts: Counter = Counter()

    def record(self, name: str) -> None:
        self._counts[name] += 1

    def calls(self, name: Optional[str] = None) -> int:
        """Calls to one function, or to all of them when ``name`` is None."""
        if name is None:
            return sum(self._counts.values())
        return self._counts[name]

    def reset(self) -> None:
        self._counts.clear()

    def get_summary(self) -> Dict[str, int]:
        """Returns the call count of every relationship function."""
        return {
            'children_of': self._counts['children_of'],
            'parent_of': self._counts['parent_of'],
            'has_parent': self._counts['has_parent'],
            'total': self.calls(),
        }


def counting_relations(relations: Relations) -> Tuple[Relations, CallCounter]:
    """Wrap each function of ``relations`` so its calls are counted."""
    counter = CallCounter()

    def children_of(value):
        counter.record('children_of')
        return relations.children_of(value)

    def parent_of(value):
        counter.record('parent_of')
        return relations.parent_of(value)

    def has_parent(value):
        counter.record('has_parent')
        return relations.has_parent(value)

    return Relations(children_of, parent_of, has_parent), counter


@dataclass(frozen=True)
class Row:
    """A row of an adjacency-list table: primary key, foreign key, label."""
    id: int
    parent_id: Optional[int]
    name: str = ""


def sample_rows() -> List[Row]:
    """Four rows forming one tree.

    Structure:
        1
        ├── 2
        │   └── 4
        └── 3
    """
    return [
        Row(1, None, "root"),
        Row(2, 1, "left"),
        Row(3, 1, "right"),
        Row(4, 2, "left-child"),
    ]


def category_rows() -> List[Row]:
    """A deeper single-root table, listed out of tree order.

    Structure:
        1 catalog
        ├── 2 books
        │   ├── 5 fiction
        │   │   └── 8 fantasy
        │   └── 6 science
        ├── 3 music
        │   └── 7 jazz
        └── 4 games
    """
    return [
        Row(5, 2, "fiction"),
        Row(1, None, "catalog"),
        Row(2, 1, "books"),
        Row(8, 5, "fantasy"),
        Row(3, 1, "music"),
        Row(6, 2, "science"),
        Row(4, 1, "games"),
        Row(7, 3, "jazz"),
    ]


def build_mutable_tree(rows: Iterable[Row]) -> Dict[int, MutableTreeNode]:
    """Build an owned tree mirroring ``rows``, keyed by row id.

    Children are attached in row order.
    """
    rows = list(rows)
    nodes = {row.id: MutableTreeNode(row) for row in rows}
    for row in rows:
        if row.parent_id is not None:
            nodes[row.parent_id].add(nodes[row.id])
    return nodes


def chain_rows(length: int) -> List[Row]:
    """A single path 0 -> 1 -> ... -> length-1, for depth stress tests."""
    return [Row(i, i - 1 if i else None, f"n{i}") for i in range(length)]
