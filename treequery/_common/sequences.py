"""Pure iterable helpers shared across TreeQuery."""

from typing import Iterable, Iterator, Optional, TypeVar

from ..config import Direction
from ..errors import CardinalityError

T = TypeVar("T")

_MISSING = object()


def single(items: Iterable[T], description: str) -> T:
    """Return the only element of ``items``.

    Stops scanning as soon as a second element is seen.

    Raises:
        CardinalityError: If ``items`` holds zero or more than one element
    """
    iterator = iter(items)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        raise CardinalityError(description, 0)
    if next(iterator, _MISSING) is not _MISSING:
        # Count the rest for a useful message
        raise CardinalityError(description, 2 + sum(1 for _ in iterator))
    return first


def single_or_none(items: Iterable[T], description: str) -> Optional[T]:
    """Return the only element of ``items``, or None when it is empty.

    Raises:
        CardinalityError: If ``items`` holds more than one element
    """
    iterator = iter(items)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return None
    if next(iterator, _MISSING) is not _MISSING:
        raise CardinalityError(description, 2 + sum(1 for _ in iterator))
    return first


def is_empty(items: Iterable) -> bool:
    """Check whether an iterable yields nothing, pulling at most one element."""
    return next(iter(items), _MISSING) is _MISSING


def ordered(items: Iterable[T], direction: Direction) -> Iterator[T]:
    """Enumerate ``items`` in the given direction.

    Left-to-right stays lazy; right-to-left has to materialize the
    items first.
    """
    if direction is Direction.RIGHT_TO_LEFT:
        return reversed(list(items))
    return iter(items)
