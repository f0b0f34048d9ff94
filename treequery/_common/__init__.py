"""Common helpers shared by the node variants and the operators.

This internal package contains pure computation only. It should NOT be
imported directly by users.

Important: This package must NEVER import from nodes, build or api to
avoid circular dependencies.
"""

from .sequences import single, single_or_none, is_empty, ordered

__all__ = [
    'single',
    'single_or_none',
    'is_empty',
    'ordered',
]
