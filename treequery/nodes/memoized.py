"""Memoizing decorator for any TreeNode.

``memoize(node)`` evaluates each navigation of the wrapped node once and
remembers the answer. It is still lazy: nothing is evaluated before it is
asked for. This pays off for the key-based and children-only builders,
where every navigation re-scans the source collection.

Storage is an arena. Every logical position reached through a memoized
node gets a slot index in a MemoArena; the slot remembers the wrapped
node and a small cache dict holding ``is_root``, ``value``, the parent's
slot index and the children's slot indices. A MemoizedTreeNode is just a
handle ``(arena, index)``; the arena hands out one handle per slot, so
navigating to the same slot twice returns the same object.

Caches are per arena, not per logical value: two separate ``memoize()``
calls on the same node share nothing.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from cachetools import cachedmethod

from ..core.node import TreeNode
from ..errors import require

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()

# Slot cache keys
_IS_ROOT = "is_root"
_VALUE = "value"
_PARENT = "parent"
_CHILDREN = "children"


def _slot_cache(handle: 'MemoizedTreeNode') -> Dict[str, Any]:
    return handle._arena.slot(handle._index)


def _field(name: str):
    """Cache key function that ignores the call arguments."""
    return lambda *args, **kwargs: name


class MemoArena:
    """Backing store for a family of memoized nodes.

    Slots are append-only; indices stay valid for the arena's lifetime.
    """

    def __init__(self):
        self._wrapped: List[TreeNode] = []
        self._slots: List[Dict[str, Any]] = []
        self._handles: List['MemoizedTreeNode'] = []

    def allocate(self, node: TreeNode, parent_index: Any = _UNSET) -> int:
        """Create a slot for ``node`` and return its index.

        Args:
            node: The node to wrap
            parent_index: Slot index of the node's parent, when already
                known; it is seeded into the slot so ``parent()`` never
                asks the wrapped node
        """
        index = len(self._slots)
        slot: Dict[str, Any] = {}
        if parent_index is not _UNSET:
            slot[_PARENT] = parent_index

        self._wrapped.append(node)
        self._slots.append(slot)
        self._handles.append(MemoizedTreeNode(self, index))
        return index

    def handle(self, index: int) -> 'MemoizedTreeNode':
        return self._handles[index]

    def wrapped(self, index: int) -> TreeNode:
        return self._wrapped[index]

    def slot(self, index: int) -> Dict[str, Any]:
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)


class MemoizedTreeNode(TreeNode[T], Generic[T]):
    """Handle to one arena slot; evaluates each navigation at most once.

    Created through ``memoize()``, never directly.
    """

    def __init__(self, arena: MemoArena, index: int):
        self._arena = arena
        self._index = index

    @property
    def wrapped(self) -> TreeNode[T]:
        """The node this handle decorates."""
        return self._arena.wrapped(self._index)

    @cachedmethod(_slot_cache, key=_field(_IS_ROOT))
    def is_root(self) -> bool:
        return self.wrapped.is_root()

    @cachedmethod(_slot_cache, key=_field(_VALUE))
    def value(self) -> T:
        return self.wrapped.value()

    def parent(self) -> Optional['MemoizedTreeNode[T]']:
        index = self._parent_index()
        if index is None:
            return None
        return self._arena.handle(index)

    def children(self) -> Tuple['MemoizedTreeNode[T]', ...]:
        return tuple(self._arena.handle(index) for index in self._children_indices())

    @cachedmethod(_slot_cache, key=_field(_PARENT))
    def _parent_index(self) -> Optional[int]:
        parent = self.wrapped.parent()
        if parent is None:
            return None
        return self._arena.allocate(parent)

    @cachedmethod(_slot_cache, key=_field(_CHILDREN))
    def _children_indices(self) -> Tuple[int, ...]:
        indices = tuple(
            self._arena.allocate(child, parent_index=self._index)
            for child in self.wrapped.children()
        )
        logger.debug("Memoized %d children; arena now holds %d slots",
                     len(indices), len(self._arena))
        return indices

    def __eq__(self, other: object) -> bool:
        """Same slot, or equal wrapped nodes."""
        if not isinstance(other, MemoizedTreeNode):
            return NotImplemented
        if self._arena is other._arena and self._index == other._index:
            return True
        return self.wrapped == other.wrapped

    def __hash__(self) -> int:
        return hash(self.wrapped)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.wrapped!r})"


def memoize(node: TreeNode[T]) -> MemoizedTreeNode[T]:
    """Wrap ``node`` so each navigation is evaluated only once.

    Every node reached from the result (parents, children, their parents
    and so on) is memoized too. Children materialized through
    ``children()`` remember the node they came from as their parent.

    Memoizing an already memoized node returns it unchanged.

    Raises:
        MissingArgumentError: If node is None
    """
    require(node, "node")

    if isinstance(node, MemoizedTreeNode):
        return node

    arena = MemoArena()
    return arena.handle(arena.allocate(node))
