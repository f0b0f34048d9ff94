"""Exceptions raised by TreeQuery.

Every error derives from TreeQueryError so callers can catch the whole
family at once. The concrete classes also inherit the closest builtin
exception (ValueError) where that reads naturally at the call site.
"""

from typing import Any, Optional, TypeVar

T = TypeVar("T")


class TreeQueryError(Exception):
    """Base class for all TreeQuery errors."""
    pass


class MissingArgumentError(TreeQueryError, ValueError):
    """Raised when a required argument is None.

    Operators check their arguments before building any generator, so
    this is raised at call time rather than on the first ``next()``.
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class CardinalityError(TreeQueryError, ValueError):
    """Raised when exactly one match was required but zero or several were found."""

    def __init__(self, expected: str, found: int):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected exactly one {expected}, found {found}")


class AlreadyParentedError(TreeQueryError):
    """Raised when attaching a node that already has a parent.

    Detach it from its current parent with ``remove()`` first.
    """
    pass


class InvalidConfigError(TreeQueryError, ValueError):
    """Raised for unknown traversal names, invalid configs or conflicting builder arguments."""
    pass


def require(value: Optional[T], name: str) -> T:
    """Return ``value`` unchanged, raising MissingArgumentError if it is None."""
    if value is None:
        raise MissingArgumentError(name)
    return value


def require_callable(value: Any, name: str):
    """Like require() but also rejects non-callables."""
    require(value, name)
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")
    return value
