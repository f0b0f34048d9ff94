"""Virtual tree nodes computed from relationship functions.

No shadow structure is built: every call to ``parent()`` or
``children()`` asks the Relations again and wraps the answer in fresh
nodes. Two computed nodes are equal when their values are equal, so
nodes built independently for the same value behave as the same
position.
"""

from typing import Any, Generic, Iterator, Optional, TypeVar

from ..core.node import TreeNode
from ..core.relations import ChildrenOf, HasParent, ParentOf, Relations
from ..errors import InvalidConfigError, require

T = TypeVar("T")

_NO_SENTINEL = object()


class ComputedTreeNode(TreeNode[T], Generic[T]):
    """Stateless view of one value under a set of Relations."""

    def __init__(self, value: T, relations: Relations[T]):
        self._value = value
        self._relations = require(relations, "relations")

    @property
    def relations(self) -> Relations[T]:
        """The relationship functions this node navigates with."""
        return self._relations

    def is_root(self) -> bool:
        return not self._relations.has_parent(self._value)

    def parent(self) -> Optional['ComputedTreeNode[T]']:
        if self.is_root():
            return None
        return ComputedTreeNode(self._relations.parent_of(self._value), self._relations)

    def value(self) -> T:
        return self._value

    def children(self) -> Iterator['ComputedTreeNode[T]']:
        relations = self._relations
        return (ComputedTreeNode(child, relations) for child in relations.children_of(self._value))

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they hold equal values."""
        if not isinstance(other, ComputedTreeNode):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        """Hash based on value for use in sets and dicts (value must be hashable)."""
        return hash(self._value)


def node_from(value: T,
              relations: Optional[Relations[T]] = None,
              *,
              children_of: Optional[ChildrenOf] = None,
              parent_of: Optional[ParentOf] = None,
              has_parent: Optional[HasParent] = None,
              sentinel: Any = _NO_SENTINEL) -> ComputedTreeNode[T]:
    """Provide tree navigation for a single value.

    Pass either a ready Relations object or the selector functions. With
    ``has_parent`` omitted, a parent equal to ``sentinel`` (default None)
    marks a root.

    Example:
        >>> node = node_from(category, children_of=subcategories, parent_of=lambda c: c.parent)
    """
    if relations is not None:
        selectors = (children_of, parent_of, has_parent)
        if any(s is not None for s in selectors) or sentinel is not _NO_SENTINEL:
            raise InvalidConfigError("Pass either relations or selector functions, not both")
        return ComputedTreeNode(value, relations)

    require(children_of, "children_of")
    require(parent_of, "parent_of")

    if has_parent is not None:
        if sentinel is not _NO_SENTINEL:
            raise InvalidConfigError("sentinel is only used when has_parent is omitted")
        return ComputedTreeNode(value, Relations(children_of, parent_of, has_parent))

    return ComputedTreeNode(
        value,
        Relations.with_sentinel(children_of, parent_of,
                                None if sentinel is _NO_SENTINEL else sentinel),
    )
