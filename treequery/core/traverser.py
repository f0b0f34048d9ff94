"""Tree traversal strategies for TreeQuery.

Traversers implement different algorithms for walking through a sub-tree.
They only use the TreeNode contract, making them universal across the
owned, computed and memoized node variants.

All traversers are iterative (explicit stack or level list), so deep
trees do not hit the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple, Union

from .._common.sequences import ordered
from ..config import Direction, TraverseMode, parse_direction, parse_mode
from .node import TreeNode

_DONE = object()


class TreeTraverser(ABC):
    """Abstract base class for descendant traversal strategies.

    Children are enumerated in ``direction`` order, applied uniformly at
    every level of the walk.
    """

    def __init__(self, direction: Direction = Direction.LEFT_TO_RIGHT):
        """Initialize traverser with a child direction.

        Args:
            direction: Order in which the children of each node are visited
        """
        self.direction = direction

    @abstractmethod
    def traverse(self, root: TreeNode, include_self: bool = False) -> Iterator[TreeNode]:
        """Traverse the sub-tree below ``root``.

        Args:
            root: Starting node for traversal
            include_self: Whether ``root`` itself is yielded

        Yields:
            Descendant nodes in the traverser's order
        """
        pass

    def _ordered_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Children of ``node`` in the configured direction."""
        return ordered(node.children(), self.direction)


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its children. Fully lazy: the children of a node
    are only requested once the consumer has pulled the node itself and
    asks for the next element.
    """

    def traverse(self, root: TreeNode, include_self: bool = False) -> Iterator[TreeNode]:
        if include_self:
            yield root

        # Stack of child iterators, one per open level
        stack: List[Iterator[TreeNode]] = [self._ordered_children(root)]

        while stack:
            child = next(stack[-1], _DONE)
            if child is _DONE:
                stack.pop()
                continue

            yield child
            stack.append(self._ordered_children(child))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before their parent. Processes nodes after their
    entire subtree has been processed, which is what aggregation and
    bottom-up teardown need.
    """

    def traverse(self, root: TreeNode, include_self: bool = False) -> Iterator[TreeNode]:
        # Stack of (node, iterator over its remaining children)
        stack: List[Tuple[TreeNode, Iterator[TreeNode]]] = [
            (root, self._ordered_children(root))
        ]

        while stack:
            node, remaining = stack[-1]
            child = next(remaining, _DONE)
            if child is _DONE:
                stack.pop()
                # The bottom of the stack is the starting node
                if stack or include_self:
                    yield node
                continue

            stack.append((child, self._ordered_children(child)))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1. Each
    level is materialized before its first node is yielded.
    """

    def traverse(self, root: TreeNode, include_self: bool = False) -> Iterator[TreeNode]:
        if include_self:
            yield root

        level: List[TreeNode] = [root]

        while level:
            level = [
                child
                for node in level
                for child in self._ordered_children(node)
            ]
            yield from level


# Factory function for creating traversers by mode
def create_traverser(mode: Union[TraverseMode, str],
                     direction: Union[Direction, str] = Direction.LEFT_TO_RIGHT) -> TreeTraverser:
    """Create a traverser instance for a traversal mode.

    Args:
        mode: TraverseMode or alias string (pre, post, level, bfs, ...)
        direction: Direction or alias string (ltr, rtl)

    Returns:
        TreeTraverser instance

    Raises:
        InvalidConfigError: If the mode or direction is not recognized
    """
    strategies = {
        TraverseMode.PRE_ORDER: PreOrderTraverser,
        TraverseMode.POST_ORDER: PostOrderTraverser,
        TraverseMode.LEVEL_ORDER: LevelOrderTraverser,
    }

    return strategies[parse_mode(mode)](parse_direction(direction))
