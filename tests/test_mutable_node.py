"""Unit tests for the owned, mutable tree.

Covers the add/remove/clear operations and the guarantee that a child's
parent reference always agrees with its parent's child list.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treequery import (
    MutableTreeNode,
    AlreadyParentedError,
    MissingArgumentError,
    TreeQueryError,
    values,
)


class TestMutableTreeStructure(unittest.TestCase):
    """Test building trees with add()."""

    def setUp(self):
        """Create a small tree: root -> (a -> a1, b)."""
        self.root = MutableTreeNode("root")
        self.a = self.root.add_value("a")
        self.b = self.root.add_value("b")
        self.a1 = self.a.add_value("a1")

    def test_new_node_is_detached_root(self):
        node = MutableTreeNode("x")
        self.assertTrue(node.is_root())
        self.assertIsNone(node.parent())
        self.assertEqual(node.children(), ())
        self.assertTrue(node.is_leaf())

    def test_add_sets_parent(self):
        self.assertIs(self.a.parent(), self.root)
        self.assertIs(self.a1.parent(), self.a)
        self.assertFalse(self.a.is_root())

    def test_children_keep_insertion_order(self):
        self.assertEqual(values(self.root.children()), ["a", "b"])
        self.root.add_value("c")
        self.assertEqual(values(self.root.children()), ["a", "b", "c"])

    def test_add_returns_child(self):
        child = MutableTreeNode("c")
        self.assertIs(self.root.add(child), child)

    def test_constructor_attaches_children(self):
        x, y = MutableTreeNode("x"), MutableTreeNode("y")
        parent = MutableTreeNode("p", children=[x, y])
        self.assertEqual(values(parent.children()), ["x", "y"])
        self.assertIs(x.parent(), parent)
        self.assertIs(y.parent(), parent)

    def test_set_value(self):
        self.a.set_value("renamed")
        self.assertEqual(self.a.value(), "renamed")
        self.assertEqual(values(self.root.children()), ["renamed", "b"])

    def test_container_protocol(self):
        self.assertEqual(len(self.root), 2)
        self.assertIn(self.a, self.root)
        self.assertNotIn(self.a1, self.root)
        self.assertEqual(list(self.root), [self.a, self.b])
        # Leaves are still truthy
        self.assertTrue(self.a1)

    def test_children_is_a_snapshot(self):
        snapshot = self.root.children()
        self.root.add_value("c")
        self.assertEqual(len(snapshot), 2)


class TestMutableTreeInvariants(unittest.TestCase):
    """Test the already-parented guard and detaching."""

    def setUp(self):
        self.root = MutableTreeNode("root")
        self.other = MutableTreeNode("other")
        self.child = self.root.add_value("child")

    def test_add_already_parented_fails(self):
        with self.assertRaises(AlreadyParentedError):
            self.other.add(self.child)

        # Nothing changed
        self.assertIs(self.child.parent(), self.root)
        self.assertEqual(len(self.other), 0)

    def test_same_child_cannot_be_added_twice(self):
        with self.assertRaises(AlreadyParentedError):
            self.root.add(self.child)
        self.assertEqual(len(self.root), 1)

    def test_already_parented_is_a_treequery_error(self):
        with self.assertRaises(TreeQueryError):
            self.other.add(self.child)

    def test_add_none_fails(self):
        with self.assertRaises(MissingArgumentError) as ctx:
            self.root.add(None)
        self.assertEqual(ctx.exception.argument, "child")

    def test_remove_clears_parent(self):
        self.assertTrue(self.root.remove(self.child))
        self.assertIsNone(self.child.parent())
        self.assertTrue(self.child.is_root())
        self.assertEqual(self.root.children(), ())

    def test_remove_missing_child_returns_false(self):
        self.assertFalse(self.root.remove(self.other))
        self.assertFalse(self.other.remove(self.child))
        # The real parent link is untouched
        self.assertIs(self.child.parent(), self.root)

    def test_remove_matches_identity_not_value(self):
        lookalike = MutableTreeNode("child")
        self.assertFalse(self.root.remove(lookalike))
        self.assertEqual(len(self.root), 1)

    def test_reparent_requires_detach(self):
        self.root.remove(self.child)
        self.other.add(self.child)
        self.assertIs(self.child.parent(), self.other)
        self.assertNotIn(self.child, self.root)

    def test_clear_detaches_all(self):
        second = self.root.add_value("second")
        self.root.clear()

        self.assertEqual(len(self.root), 0)
        self.assertIsNone(self.child.parent())
        self.assertIsNone(second.parent())

        # Detached nodes can be attached elsewhere
        self.other.add(second)
        self.assertIs(second.parent(), self.other)


if __name__ == "__main__":
    unittest.main()
