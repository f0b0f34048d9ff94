"""Query operators for TreeQuery.

This module provides the functional interface over the TreeNode contract:
ancestors, descendants, siblings, roots, leaves, depth and the traverse
driver. They work with any node variant (mutable, computed, memoized).

Every operator checks its arguments immediately and only then returns a
lazy iterator, so a None node fails at the call site rather than on the
first ``next()``. Only ``traverse``, ``depth`` and the counting helpers
are eager.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar, Union

from ._common.sequences import is_empty, ordered, single
from .config import (
    Direction,
    SelfPosition,
    TraversalConfig,
    TraverseMode,
    parse_direction,
    parse_mode,
)
from .core.node import TreeNode
from .core.traverser import create_traverser
from .errors import InvalidConfigError, require, require_callable

logger = logging.getLogger(__name__)

T = TypeVar("T")

ModeArg = Union[TraverseMode, str]
DirectionArg = Union[Direction, str]


# Upwards

def ancestors(node: TreeNode[T],
              include_self: bool = False,
              self_position: SelfPosition = SelfPosition.SELF_FIRST) -> Iterator[TreeNode[T]]:
    """Walk the parent chain from ``node`` up to its root.

    Yields each parent in turn, ending with the root. A root has no
    ancestors. With ``include_self``, ``node`` is yielded before its
    parent (SELF_FIRST) or after the root (SELF_LAST).

    A cycle in the parent chain makes this run forever.

    Example:
        >>> [n.value() for n in ancestors(leaf)]
        ['parent', 'grandparent', 'root']
    """
    require(node, "node")
    if not isinstance(self_position, SelfPosition):
        raise InvalidConfigError(f"self_position must be a SelfPosition, got {self_position!r}")

    def _walk() -> Iterator[TreeNode[T]]:
        if include_self and self_position is SelfPosition.SELF_FIRST:
            yield node

        current = node
        while not current.is_root():
            parent = current.parent()
            if parent is None:
                break
            yield parent
            current = parent

        if include_self and self_position is SelfPosition.SELF_LAST:
            yield node

    return _walk()


def depth(node: TreeNode, include_self: bool = False) -> int:
    """Count the ancestors of ``node``; a root has depth 0.

    With ``include_self`` the node itself is counted as well.
    """
    require(node, "node")
    return sum(1 for _ in ancestors(node)) + (1 if include_self else 0)


# Downwards

def descendants(node: TreeNode[T],
                mode: ModeArg = TraverseMode.PRE_ORDER,
                direction: DirectionArg = Direction.LEFT_TO_RIGHT,
                include_self: bool = False,
                config: Optional[TraversalConfig] = None) -> Iterator[TreeNode[T]]:
    """Enumerate the sub-tree below ``node``.

    Args:
        node: Starting node
        mode: Pre-order, post-order or level-order (enum or alias string)
        direction: Child order at every level (enum or alias string)
        include_self: Whether ``node`` is part of the result
        config: Full TraversalConfig; when given it overrides the other
            keyword arguments

    Returns:
        Lazy iterator over the nodes

    Raises:
        MissingArgumentError: If node is None
        InvalidConfigError: If the mode, direction or config is invalid
    """
    require(node, "node")
    config = _build_config(mode, direction, include_self, config)
    traverser = create_traverser(config.mode, config.direction)
    return traverser.traverse(node, include_self=config.include_self)


def leaves(node: TreeNode[T],
           direction: DirectionArg = Direction.LEFT_TO_RIGHT,
           include_self: bool = False,
           mode: ModeArg = TraverseMode.PRE_ORDER) -> Iterator[TreeNode[T]]:
    """Enumerate the nodes below ``node`` that have no children.

    With ``include_self``, ``node`` itself is reported when it is a leaf.
    """
    require(node, "node")
    return (
        candidate
        for candidate in descendants(node, mode, direction, include_self)
        if is_leaf(candidate)
    )


def is_leaf(node: TreeNode) -> bool:
    """Check whether ``node`` has no children."""
    require(node, "node")
    return is_empty(node.children())


# Sideways

def siblings(node: TreeNode[T],
             direction: DirectionArg = Direction.LEFT_TO_RIGHT,
             include_self: bool = False) -> Iterator[TreeNode[T]]:
    """Enumerate the other children of ``node``'s parent.

    A root has no siblings. ``node`` is excluded by equality, so a
    computed node is recognized even when the parent hands out fresh
    instances.
    """
    require(node, "node")
    direction = parse_direction(direction)

    def _siblings() -> Iterator[TreeNode[T]]:
        if node.is_root():
            return

        for sibling in ordered(node.parent().children(), direction):
            if include_self or sibling != node:
                yield sibling

    return _siblings()


# Across a set of nodes

def roots(nodes: Iterable[TreeNode[T]]) -> Iterator[TreeNode[T]]:
    """Filter ``nodes`` down to the roots, preserving order."""
    require(nodes, "nodes")
    return (node for node in nodes if node.is_root())


def root(nodes: Iterable[TreeNode[T]]) -> TreeNode[T]:
    """Return the single root among ``nodes``.

    Raises:
        CardinalityError: If there is no root or more than one
    """
    return single(roots(nodes), "root")


# Driver

def traverse(node: TreeNode[T],
             action: Callable[[TreeNode[T]], Any],
             mode: ModeArg = TraverseMode.PRE_ORDER,
             direction: DirectionArg = Direction.LEFT_TO_RIGHT,
             exclude_self: bool = False) -> int:
    """Run ``action`` on ``node`` and every descendant, eagerly.

    Nodes are visited in the order ``descendants()`` yields them.
    Exceptions raised by ``action`` propagate and stop the traversal.

    Returns:
        Number of nodes visited

    Example:
        >>> traverse(root, lambda n: print(n.value()), mode="post")
    """
    require(node, "node")
    require_callable(action, "action")

    visited = 0
    for current in descendants(node, mode, direction, include_self=not exclude_self):
        action(current)
        visited += 1

    logger.debug("Traversed %d nodes from %r", visited, node)
    return visited


def count_nodes(node: TreeNode, **kwargs) -> int:
    """Count the nodes ``descendants(node, **kwargs)`` would yield."""
    return sum(1 for _ in descendants(node, **kwargs))


def find_nodes(node: TreeNode[T],
               predicate: Callable[[TreeNode[T]], bool],
               **kwargs) -> Iterator[TreeNode[T]]:
    """Yield the descendants of ``node`` matching ``predicate``.

    Accepts the keyword arguments of ``descendants()``.
    """
    require_callable(predicate, "predicate")
    return (candidate for candidate in descendants(node, **kwargs) if predicate(candidate))


# Value projections

def values(nodes: Iterable[TreeNode[T]]) -> List[T]:
    """Return the values of ``nodes`` as a list."""
    require(nodes, "nodes")
    return [node.value() for node in nodes]


def child_values(node: TreeNode[T]) -> List[T]:
    """Return the values of ``node``'s children."""
    require(node, "node")
    return values(node.children())


def parent_value(node: TreeNode[T]) -> Optional[T]:
    """Return the value of ``node``'s parent, or None for a root."""
    require(node, "node")
    parent = node.parent()
    return None if parent is None else parent.value()


def root_value(nodes: Iterable[TreeNode[T]]) -> T:
    """Return the value of the single root among ``nodes``."""
    return root(nodes).value()


# Helper functions

def _build_config(mode: ModeArg,
                  direction: DirectionArg,
                  include_self: bool,
                  config: Optional[TraversalConfig]) -> TraversalConfig:
    """Build and validate a TraversalConfig from keyword arguments.

    Raises:
        InvalidConfigError: If the resulting config is invalid
    """
    if config is None:
        config = TraversalConfig(
            mode=parse_mode(mode),
            direction=parse_direction(direction),
            include_self=include_self,
        )
    return config.ensure_valid()
