"""TreeNode abstraction for TreeQuery.

The TreeNode is the navigational contract every position in a hierarchy
exposes. The operators in ``treequery.api`` only ever talk to this
interface, so they work unchanged over owned, computed and memoized trees.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class TreeNode(ABC, Generic[T]):
    """Abstract base class for a position in a hierarchy.

    A node holds one value and knows how to reach its parent and its
    children. A well-formed node graph is a tree: every non-root node
    has exactly one parent and no node is its own ancestor. This is NOT
    verified; a cycle in the relationships makes traversals run forever.
    """

    @abstractmethod
    def is_root(self) -> bool:
        """Check if this node has no parent.

        When this returns True, ``parent()`` returns None.
        """
        pass

    @abstractmethod
    def parent(self) -> Optional['TreeNode[T]']:
        """Return the parent node, or None for a root."""
        pass

    @abstractmethod
    def value(self) -> T:
        """Return the value held by this node."""
        pass

    @abstractmethod
    def children(self) -> Iterable['TreeNode[T]']:
        """Return the child nodes in source order.

        Implementations may return a lazy iterable. Calling ``children()``
        again must enumerate the same children again.
        """
        pass

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Only pulls the first child, so it is cheap even for lazy nodes.
        """
        for _ in self.children():
            return False
        return True

    def __iter__(self) -> Iterator['TreeNode[T]']:
        """Iterate over the child nodes."""
        return iter(self.children())

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value()!r})"


def node_value(node: TreeNode[Any]) -> Any:
    """Key function returning a node's value; handy for sorted()/map()."""
    return node.value()
