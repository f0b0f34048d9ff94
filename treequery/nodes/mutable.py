"""Owned, mutable tree nodes.

A MutableTreeNode holds its value, a direct reference to its parent and an
ordered list of children. The parent reference and the child list are
only changed together, through ``add()``, ``remove()`` and ``clear()`` on
the parent, so they never disagree.
"""

import logging
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from ..core.node import TreeNode
from ..errors import AlreadyParentedError, require

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MutableTreeNode(TreeNode[T], Generic[T]):
    """Explicitly constructed tree node with add/remove/clear operations.

    Example:
        >>> root = MutableTreeNode("root")
        >>> docs = root.add_value("docs")
        >>> readme = docs.add(MutableTreeNode("readme"))
        >>> [n.value() for n in root.children()]
        ['docs']

    Not safe for concurrent mutation; callers sharing a tree across
    threads must serialize add/remove/clear themselves.
    """

    def __init__(self, value: T, children: Optional[Iterable['MutableTreeNode[T]']] = None):
        """Initialize a detached node.

        Args:
            value: Value held by the node
            children: Optional nodes to attach, in order (each must be detached)
        """
        self._value = value
        self._parent: Optional['MutableTreeNode[T]'] = None
        self._children: List['MutableTreeNode[T]'] = []

        for child in children or ():
            self.add(child)

    # TreeNode contract

    def is_root(self) -> bool:
        return self._parent is None

    def parent(self) -> Optional['MutableTreeNode[T]']:
        return self._parent

    def value(self) -> T:
        return self._value

    def children(self) -> Tuple['MutableTreeNode[T]', ...]:
        """Return a snapshot of the children, so mutating while iterating is safe."""
        return tuple(self._children)

    # Mutation

    def set_value(self, value: T) -> None:
        """Replace the value held by this node."""
        self._value = value

    def add(self, child: 'MutableTreeNode[T]') -> 'MutableTreeNode[T]':
        """Append a detached node as the last child.

        Args:
            child: Node to attach

        Returns:
            The attached child, for chaining

        Raises:
            MissingArgumentError: If child is None
            AlreadyParentedError: If child already has a parent
        """
        require(child, "child")

        if child.parent() is not None:
            raise AlreadyParentedError(
                f"{child!r} already has a parent; remove it from {child.parent()!r} first"
            )

        self._children.append(child)
        child._parent = self
        logger.debug("Attached %r under %r", child, self)
        return child

    def add_value(self, value: T) -> 'MutableTreeNode[T]':
        """Create a node for ``value``, attach it as the last child and return it."""
        return self.add(type(self)(value))

    def remove(self, child: 'MutableTreeNode[T]') -> bool:
        """Detach ``child`` from this node.

        Children are matched by identity, not by value.

        Returns:
            True if the child was found and removed, False otherwise
        """
        require(child, "child")

        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child._parent = None
                logger.debug("Detached %r from %r", child, self)
                return True

        return False

    def clear(self) -> None:
        """Detach every child."""
        for child in self._children:
            child._parent = None

        logger.debug("Cleared %d children from %r", len(self._children), self)
        self._children.clear()

    # Container protocol over the children

    def __len__(self) -> int:
        return len(self._children)

    def __contains__(self, node: object) -> bool:
        return any(existing is node for existing in self._children)

    def __bool__(self) -> bool:
        # A node with no children is still a node
        return True
