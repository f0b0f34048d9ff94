"""Building virtual trees from flat collections.

``to_forest`` wraps every element of a source collection in a
ComputedTreeNode and keeps the roots; ``to_tree`` additionally requires
there to be exactly one root. Both accept either a Relations object or
the selector keywords of one of the four construction strategies:

=======================================  =====================================
Keywords                                 Strategy
=======================================  =====================================
children_of, parent_of, has_parent       general
children_of, parent_of [, sentinel]      parent equal to sentinel marks a root
key, parent_key                          primary key / foreign key
children_of                              children only (parents are searched)
=======================================  =====================================
"""

import logging
from typing import Any, Iterable, List, Optional, TypeVar

from .api import roots
from ._common.sequences import single
from .core.relations import ChildrenOf, HasParent, KeyOf, ParentOf, Relations, materialize
from .errors import InvalidConfigError, MissingArgumentError, require
from .nodes.computed import ComputedTreeNode

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NO_SENTINEL = object()


def to_forest(source: Iterable[T],
              relations: Optional[Relations[T]] = None,
              *,
              children_of: Optional[ChildrenOf] = None,
              parent_of: Optional[ParentOf] = None,
              has_parent: Optional[HasParent] = None,
              key: Optional[KeyOf] = None,
              parent_key: Optional[KeyOf] = None,
              sentinel: Any = _NO_SENTINEL) -> List[ComputedTreeNode[T]]:
    """Realize the trees hidden in a flat collection and return their roots.

    Args:
        source: Values to build nodes for; one-shot iterators are copied
        relations: Ready-made relationship functions
        children_of: Gets the child values of a value
        parent_of: Gets the parent value of a value
        has_parent: Determines whether a value has a parent
        key: Primary key selector (key-based strategy)
        parent_key: Foreign key selector (key-based strategy)
        sentinel: Parent value marking a root when has_parent is omitted

    Returns:
        Root nodes, in source order

    Example:
        >>> roots = to_forest(categories, key=lambda c: c.id, parent_key=lambda c: c.parent_id)
    """
    source = materialize(source)
    relations = _resolve_relations(
        source, relations,
        children_of=children_of, parent_of=parent_of, has_parent=has_parent,
        key=key, parent_key=parent_key, sentinel=sentinel,
    )

    nodes = [ComputedTreeNode(value, relations) for value in source]
    forest = list(roots(nodes))
    logger.debug("Built %d nodes, found %d roots", len(nodes), len(forest))
    return forest


def to_tree(source: Iterable[T],
            relations: Optional[Relations[T]] = None,
            **selectors) -> ComputedTreeNode[T]:
    """Realize a single tree from a flat collection and return its root.

    Takes the same arguments as ``to_forest``.

    Raises:
        CardinalityError: If the source holds no root or several roots
    """
    return single(to_forest(source, relations, **selectors), "root")


def _resolve_relations(source: Iterable[T],
                       relations: Optional[Relations[T]],
                       *,
                       children_of: Optional[ChildrenOf],
                       parent_of: Optional[ParentOf],
                       has_parent: Optional[HasParent],
                       key: Optional[KeyOf],
                       parent_key: Optional[KeyOf],
                       sentinel: Any) -> Relations[T]:
    """Pick the construction strategy from the arguments that were given.

    Raises:
        InvalidConfigError: If the arguments mix strategies
        MissingArgumentError: If no usable selector was given
    """
    selectors = {
        'children_of': children_of,
        'parent_of': parent_of,
        'has_parent': has_parent,
        'key': key,
        'parent_key': parent_key,
    }
    given = sorted(name for name, value in selectors.items() if value is not None)
    if sentinel is not _NO_SENTINEL:
        given.append('sentinel')

    if relations is not None:
        if given:
            raise InvalidConfigError(
                f"Pass either relations or selectors, not both (got {', '.join(given)})"
            )
        logger.debug("Using caller-supplied relations")
        return relations

    if key is not None or parent_key is not None:
        extra = [name for name in given if name not in ('key', 'parent_key')]
        if extra:
            raise InvalidConfigError(
                f"key/parent_key cannot be combined with {', '.join(extra)}"
            )
        require(key, "key")
        require(parent_key, "parent_key")
        logger.debug("Using key-based relations")
        return Relations.from_keys(source, key, parent_key)

    if children_of is None:
        raise MissingArgumentError("children_of")

    if has_parent is not None:
        if sentinel is not _NO_SENTINEL:
            raise InvalidConfigError("sentinel is only used when has_parent is omitted")
        require(parent_of, "parent_of")
        logger.debug("Using general relations")
        return Relations(children_of, parent_of, has_parent)

    if parent_of is not None:
        logger.debug("Using sentinel-parent relations")
        return Relations.with_sentinel(
            children_of, parent_of, None if sentinel is _NO_SENTINEL else sentinel
        )

    if sentinel is not _NO_SENTINEL:
        raise InvalidConfigError("sentinel requires parent_of")

    logger.debug("Using children-only relations; parent lookups scan the whole source")
    return Relations.from_children(source, children_of)
