"""Core abstractions for TreeQuery.

This module contains the node contract, the relationship bundle used by
virtual trees, and the traversal algorithms.
"""

from .node import TreeNode, node_value
from .relations import Relations
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

__all__ = [
    "TreeNode",
    "node_value",
    "Relations",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
]
