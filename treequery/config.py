"""Configuration system for TreeQuery.

This module defines how users describe a traversal: the order in which
descendants are visited, the direction children are enumerated at each
level, and whether the starting node takes part.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .errors import InvalidConfigError


class TraverseMode(Enum):
    """Order of enumerating the nodes of a sub-tree."""
    PRE_ORDER = "pre_order"       # Node before its children
    POST_ORDER = "post_order"     # Children before the node
    LEVEL_ORDER = "level_order"   # Level by level (breadth-first)


class Direction(Enum):
    """Order of enumerating the children of a single node.

    Applied uniformly at every level of a traversal.
    """
    LEFT_TO_RIGHT = "ltr"   # Source order
    RIGHT_TO_LEFT = "rtl"   # Reversed source order


class SelfPosition(Enum):
    """Where a starting node is placed when it is included in the result."""
    SELF_FIRST = "first"
    SELF_LAST = "last"


@dataclass
class TraversalConfig:
    """Complete description of a descendant traversal.

    This is what ``descendants()`` and ``traverse()`` build from their
    keyword arguments; power users can construct one directly and pass
    it as ``config=``.
    """

    mode: TraverseMode = TraverseMode.PRE_ORDER
    direction: Direction = Direction.LEFT_TO_RIGHT
    include_self: bool = False

    # Convenience constructors for common configurations

    @classmethod
    def pre_order(cls, direction: Direction = Direction.LEFT_TO_RIGHT,
                  include_self: bool = False) -> 'TraversalConfig':
        """Config for a depth-first, parent-before-children walk."""
        return cls(TraverseMode.PRE_ORDER, direction, include_self)

    @classmethod
    def post_order(cls, direction: Direction = Direction.LEFT_TO_RIGHT,
                   include_self: bool = False) -> 'TraversalConfig':
        """Config for a depth-first, children-before-parent walk.

        Good for aggregation and for tearing a tree down bottom-up.
        """
        return cls(TraverseMode.POST_ORDER, direction, include_self)

    @classmethod
    def level_order(cls, direction: Direction = Direction.LEFT_TO_RIGHT,
                    include_self: bool = False) -> 'TraversalConfig':
        """Config for a breadth-first walk."""
        return cls(TraverseMode.LEVEL_ORDER, direction, include_self)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, TraverseMode):
            errors.append(f"mode must be a TraverseMode, got {self.mode!r}")

        if not isinstance(self.direction, Direction):
            errors.append(f"direction must be a Direction, got {self.direction!r}")

        if not isinstance(self.include_self, bool):
            errors.append(f"include_self must be a bool, got {self.include_self!r}")

        return errors

    def ensure_valid(self) -> 'TraversalConfig':
        """Return self, raising InvalidConfigError if validate() reports problems."""
        errors = self.validate()
        if errors:
            raise InvalidConfigError(f"Invalid configuration: {'; '.join(errors)}")
        return self


_MODE_ALIASES = {
    'pre': TraverseMode.PRE_ORDER,
    'preorder': TraverseMode.PRE_ORDER,
    'pre_order': TraverseMode.PRE_ORDER,
    'dfs': TraverseMode.PRE_ORDER,
    'dfs_pre': TraverseMode.PRE_ORDER,
    'depth_first_pre': TraverseMode.PRE_ORDER,
    'post': TraverseMode.POST_ORDER,
    'postorder': TraverseMode.POST_ORDER,
    'post_order': TraverseMode.POST_ORDER,
    'dfs_post': TraverseMode.POST_ORDER,
    'depth_first_post': TraverseMode.POST_ORDER,
    'level': TraverseMode.LEVEL_ORDER,
    'levelorder': TraverseMode.LEVEL_ORDER,
    'level_order': TraverseMode.LEVEL_ORDER,
    'bfs': TraverseMode.LEVEL_ORDER,
    'breadth_first': TraverseMode.LEVEL_ORDER,
}

_DIRECTION_ALIASES = {
    'ltr': Direction.LEFT_TO_RIGHT,
    'left_to_right': Direction.LEFT_TO_RIGHT,
    'forward': Direction.LEFT_TO_RIGHT,
    'rtl': Direction.RIGHT_TO_LEFT,
    'right_to_left': Direction.RIGHT_TO_LEFT,
    'reverse': Direction.RIGHT_TO_LEFT,
    'reversed': Direction.RIGHT_TO_LEFT,
}


def parse_mode(mode: Union[TraverseMode, str]) -> TraverseMode:
    """Parse a traversal mode from an enum member or a string alias.

    Raises:
        InvalidConfigError: If the name is not recognized
    """
    if isinstance(mode, TraverseMode):
        return mode

    if isinstance(mode, str) and mode.lower() in _MODE_ALIASES:
        return _MODE_ALIASES[mode.lower()]

    raise InvalidConfigError(
        f"Unknown traverse mode: {mode!r}. "
        f"Choose from: {', '.join(_MODE_ALIASES)}"
    )


def parse_direction(direction: Union[Direction, str]) -> Direction:
    """Parse a child direction from an enum member or a string alias.

    Raises:
        InvalidConfigError: If the name is not recognized
    """
    if isinstance(direction, Direction):
        return direction

    if isinstance(direction, str) and direction.lower() in _DIRECTION_ALIASES:
        return _DIRECTION_ALIASES[direction.lower()]

    raise InvalidConfigError(
        f"Unknown direction: {direction!r}. "
        f"Choose from: {', '.join(_DIRECTION_ALIASES)}"
    )
