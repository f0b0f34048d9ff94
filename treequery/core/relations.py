"""Relationship functions for virtual trees.

A Relations object bundles the three functions that describe a hierarchy
over plain values:

- ``children_of(value)`` -> iterable of child values, in source order
- ``parent_of(value)`` -> the parent value
- ``has_parent(value)`` -> whether the value has a parent at all

The classmethods below derive the full trio from less information. All of
them are closures over the source collection and re-scan it on every call;
nothing is indexed.
"""

import logging
from collections.abc import Iterator as IteratorABC
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, List, Optional, TypeVar

from .._common.sequences import single, single_or_none
from ..errors import require, require_callable

logger = logging.getLogger(__name__)

T = TypeVar("T")

ChildrenOf = Callable[[T], Iterable[T]]
ParentOf = Callable[[T], Optional[T]]
HasParent = Callable[[T], bool]
KeyOf = Callable[[T], Hashable]


def materialize(source: Iterable[T]) -> Iterable[T]:
    """Return a source that can be iterated repeatedly.

    One-shot iterators (generators, ``map`` objects, ...) are copied into a
    list; any other iterable is returned as is and must support stable,
    repeatable iteration for as long as the tree is in use.
    """
    require(source, "source")
    if isinstance(source, IteratorABC):
        items: List[T] = list(source)
        logger.debug("Materialized one-shot source into %d items", len(items))
        return items
    return source


@dataclass(frozen=True)
class Relations(Generic[T]):
    """The three relationship functions of a virtual tree."""

    children_of: ChildrenOf
    parent_of: ParentOf
    has_parent: HasParent

    def __post_init__(self):
        require_callable(self.children_of, "children_of")
        require_callable(self.parent_of, "parent_of")
        require_callable(self.has_parent, "has_parent")

    @classmethod
    def with_sentinel(cls,
                      children_of: ChildrenOf,
                      parent_of: ParentOf,
                      sentinel: Any = None) -> 'Relations[T]':
        """Derive ``has_parent`` from a "no value" parent.

        A value has a parent unless ``parent_of(value)`` is (or equals)
        ``sentinel``, which defaults to None.
        """
        require_callable(children_of, "children_of")
        require_callable(parent_of, "parent_of")

        def has_parent(value: T) -> bool:
            parent = parent_of(value)
            return not (parent is sentinel or parent == sentinel)

        return cls(children_of, parent_of, has_parent)

    @classmethod
    def from_keys(cls,
                  source: Iterable[T],
                  key: KeyOf,
                  parent_key: KeyOf) -> 'Relations[T]':
        """Derive relationships from a primary key and a foreign key.

        Example:
            >>> Relations.from_keys(rows, key=lambda r: r.id, parent_key=lambda r: r.parent_id)

        ``parent_of`` requires exactly one row whose key matches the
        foreign key, while ``has_parent`` only checks that one exists, so
        an ambiguous foreign key reports a parent yet fails on access.
        """
        source = materialize(source)
        require_callable(key, "key")
        require_callable(parent_key, "parent_key")

        def children_of(value: T) -> Iterable[T]:
            own_key = key(value)
            return (item for item in source if parent_key(item) == own_key)

        def parent_of(value: T) -> T:
            wanted = parent_key(value)
            return single(
                (item for item in source if key(item) == wanted),
                f"parent with key {wanted!r}",
            )

        def has_parent(value: T) -> bool:
            wanted = parent_key(value)
            return any(key(item) == wanted for item in source)

        return cls(children_of, parent_of, has_parent)

    @classmethod
    def from_children(cls,
                      source: Iterable[T],
                      children_of: ChildrenOf) -> 'Relations[T]':
        """Derive relationships from a children selector alone.

        Note: finding a parent searches the whole source and calls
        ``children_of`` on every element, which makes this the most
        expensive strategy. Wrap the resulting nodes with ``memoize()``
        when navigating upwards repeatedly.
        """
        source = materialize(source)
        require_callable(children_of, "children_of")

        def parent_of(value: T) -> Optional[T]:
            return single_or_none(
                (item for item in source if value in children_of(item)),
                f"parent of {value!r}",
            )

        def has_parent(value: T) -> bool:
            return any(value in children_of(item) for item in source)

        return cls(children_of, parent_of, has_parent)
