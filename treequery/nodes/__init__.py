"""Node variants implementing the TreeNode contract."""

from .mutable import MutableTreeNode
from .computed import ComputedTreeNode, node_from
from .memoized import MemoArena, MemoizedTreeNode, memoize

__all__ = [
    'MutableTreeNode',
    'ComputedTreeNode',
    'node_from',
    'MemoArena',
    'MemoizedTreeNode',
    'memoize',
]
