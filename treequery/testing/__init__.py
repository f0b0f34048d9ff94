"""Testing utilities for TreeQuery."""

from .fixtures import (
    CallCounter,
    counting_relations,
    Row,
    sample_rows,
    category_rows,
    build_mutable_tree,
    chain_rows,
)

__all__ = [
    'CallCounter',
    'counting_relations',
    'Row',
    'sample_rows',
    'category_rows',
    'build_mutable_tree',
    'chain_rows',
]
