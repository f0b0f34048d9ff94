"""TreeQuery - Navigational queries over hierarchical data.

TreeQuery exposes one read-only navigation contract (TreeNode) over any
hierarchy, three ways to obtain nodes, and a set of query operators that
work with all of them.

Build nodes:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Owned, mutable tree:
    from treequery import MutableTreeNode

Virtual tree over a flat collection:
    from treequery import to_tree, to_forest

Evaluate each navigation once:
    from treequery import memoize
━━━━━━━━━━━━━━━━━━━━━━━━━━

Query them:
    from treequery import ancestors, descendants, siblings, leaves, depth, traverse
"""

import logging

__version__ = "0.3.0"

from .errors import (
    TreeQueryError,
    MissingArgumentError,
    CardinalityError,
    AlreadyParentedError,
    InvalidConfigError,
)
from .config import (
    TraverseMode,
    Direction,
    SelfPosition,
    TraversalConfig,
    parse_mode,
    parse_direction,
)
from .core import (
    TreeNode,
    node_value,
    Relations,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .nodes import (
    MutableTreeNode,
    ComputedTreeNode,
    node_from,
    MemoArena,
    MemoizedTreeNode,
    memoize,
)
from .api import (
    ancestors,
    descendants,
    siblings,
    roots,
    root,
    leaves,
    is_leaf,
    depth,
    traverse,
    count_nodes,
    find_nodes,
    values,
    child_values,
    parent_value,
    root_value,
)
from .build import to_forest, to_tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    'TreeQueryError',
    'MissingArgumentError',
    'CardinalityError',
    'AlreadyParentedError',
    'InvalidConfigError',
    # Config
    'TraverseMode',
    'Direction',
    'SelfPosition',
    'TraversalConfig',
    'parse_mode',
    'parse_direction',
    # Core
    'TreeNode',
    'node_value',
    'Relations',
    'TreeTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    # Nodes
    'MutableTreeNode',
    'ComputedTreeNode',
    'node_from',
    'MemoArena',
    'MemoizedTreeNode',
    'memoize',
    # Builders
    'to_forest',
    'to_tree',
    # Operators
    'ancestors',
    'descendants',
    'siblings',
    'roots',
    'root',
    'leaves',
    'is_leaf',
    'depth',
    'traverse',
    'count_nodes',
    'find_nodes',
    'values',
    'child_values',
    'parent_value',
    'root_value',
]
