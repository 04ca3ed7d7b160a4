"""Tests for the RedBlackTree engine.

Covers insert/delete fix-ups, parent links, manual recoloring and the
JSON snapshot format.
"""

import json
import random
import unittest

import pytest

from searchtreelib import (
    RedBlackTree,
    RBNode,
    BSTNode,
    Color,
    ColorEncoding,
    SnapshotConfig,
    SnapshotError,
    validate_red_black,
    validate_tree,
)
from searchtreelib.engines.red_black import RED, BLACK


def make_rbt(*values):
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
    return tree


class TestRedBlackInsert(unittest.TestCase):

    def test_three_ascending_inserts(self):
        tree = make_rbt(10, 20, 30)
        self.assertEqual(tree.root.value, 20)
        self.assertIs(tree.root.color, BLACK)
        self.assertEqual(tree.root.left.value, 10)
        self.assertIs(tree.root.left.color, RED)
        self.assertEqual(tree.root.right.value, 30)
        self.assertIs(tree.root.right.color, RED)
        self.assertEqual(tree.level_order(), [20, 10, 30])

    def test_uncle_recolor_case(self):
        tree = make_rbt(10, 20, 30, 40)
        self.assertIs(tree.root.color, BLACK)
        self.assertIs(tree.search(10).color, BLACK)
        self.assertIs(tree.search(30).color, BLACK)
        self.assertIs(tree.search(40).color, RED)

    def test_inner_child_double_rotation(self):
        tree = make_rbt(30, 10, 20)
        self.assertEqual(tree.level_order(), [20, 10, 30])
        self.assertEqual(validate_tree(tree), [])

    def test_every_step_is_valid(self):
        tree = RedBlackTree()
        for value in range(1, 64):
            tree.insert(value)
            self.assertEqual(validate_tree(tree), [])
        self.assertEqual(tree.inorder(), list(range(1, 64)))

    def test_parent_links(self):
        tree = make_rbt(*range(15))
        self.assertIsNone(tree.root.parent)
        for node in (tree.search(v) for v in range(15)):
            for child in node.children():
                self.assertIs(child.parent, node)

    def test_duplicate_insert_is_ignored(self):
        tree = make_rbt(10, 20, 30)
        before = tree.to_dict()
        tree.insert(20)
        self.assertEqual(tree.to_dict(), before)
        self.assertEqual(len(tree), 3)

    def test_black_height(self):
        self.assertEqual(RedBlackTree().black_height(), 0)
        self.assertEqual(make_rbt(10, 20, 30).black_height(), 1)
        self.assertEqual(make_rbt(10, 20, 30, 40).black_height(), 2)


class TestRedBlackDelete(unittest.TestCase):

    def test_delete_black_leaf_rebalances(self):
        tree = make_rbt(10, 20, 30, 40)   # 20B(10B, 30B(_, 40R))
        self.assertTrue(tree.delete(10))
        self.assertEqual(tree.level_order(), [30, 20, 40])
        self.assertTrue(all(tree.search(v).color is BLACK for v in (20, 30, 40)))
        self.assertEqual(validate_tree(tree), [])

    def test_delete_red_leaf(self):
        tree = make_rbt(10, 20, 30)
        self.assertTrue(tree.delete(30))
        self.assertEqual(tree.level_order(), [20, 10])
        self.assertEqual(validate_tree(tree), [])

    def test_delete_root_with_two_children(self):
        tree = make_rbt(10, 20, 30)
        self.assertTrue(tree.delete(20))
        self.assertEqual(tree.root.value, 30)
        self.assertIs(tree.root.color, BLACK)
        self.assertEqual(tree.inorder(), [10, 30])
        self.assertEqual(validate_tree(tree), [])

    def test_removed_node_is_detached(self):
        tree = make_rbt(10, 20, 30)
        node = tree.search(10)
        tree.delete(10)
        self.assertIsNone(node.parent)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)

    def test_delete_absent_value_is_noop(self):
        tree = make_rbt(10, 20, 30)
        self.assertFalse(tree.delete(99))
        self.assertFalse(RedBlackTree().delete(1))
        self.assertEqual(len(tree), 3)

    def test_delete_all_in_random_order(self):
        values = list(range(100))
        tree = make_rbt(*values)
        random.Random(11).shuffle(values)
        for value in values:
            self.assertTrue(tree.delete(value))
            self.assertEqual(validate_tree(tree), [])
        self.assertIsNone(tree.root)
        self.assertEqual(len(tree), 0)


class TestFlipNodeColor(unittest.TestCase):

    def test_flip_root(self):
        tree = make_rbt(10, 20, 30)
        self.assertTrue(tree.flip_node_color(20))
        self.assertIs(tree.root.color, RED)
        self.assertTrue(any("Root violation" in e for e in validate_red_black(tree.root)))
        self.assertTrue(tree.flip_node_color(20))
        self.assertEqual(validate_tree(tree), [])

    def test_flip_missing_value(self):
        tree = make_rbt(10, 20, 30)
        before = tree.to_dict()
        self.assertFalse(tree.flip_node_color(99))
        self.assertEqual(tree.to_dict(), before)

    def test_insert_after_red_root_terminates(self):
        tree = make_rbt(10)
        tree.flip_node_color(10)
        tree.insert(5)
        self.assertIs(tree.root.color, BLACK)
        self.assertEqual(validate_tree(tree), [])


class TestRedBlackSnapshots(unittest.TestCase):

    def test_to_dict_shape(self):
        self.assertEqual(make_rbt(10, 20, 30).to_dict(), {
            'value': 20, 'color': 'BLACK',
            'left': {'value': 10, 'color': 'RED', 'left': None, 'right': None},
            'right': {'value': 30, 'color': 'RED', 'left': None, 'right': None},
        })

    def test_int_color_encoding(self):
        record = make_rbt(10, 20).to_dict(SnapshotConfig(color_encoding=ColorEncoding.INT))
        self.assertEqual(record['color'], 1)
        self.assertEqual(record['right']['color'], 0)

    def test_empty_tree(self):
        tree = RedBlackTree()
        self.assertIsNone(tree.to_dict())
        self.assertEqual(tree.to_json(), 'null')
        self.assertIsNone(RedBlackTree.from_json('null').root)

    def test_json_round_trip(self):
        tree = make_rbt(*range(30))
        text = tree.to_json()
        rebuilt = RedBlackTree.from_json(text)
        self.assertEqual(rebuilt.to_dict(), tree.to_dict())
        self.assertEqual(json.loads(text), tree.to_dict())
        self.assertEqual(validate_tree(rebuilt), [])
        self.assertEqual(len(rebuilt), 30)

    def test_from_dict_accepts_int_colors(self):
        tree = RedBlackTree.from_dict({
            'value': 2, 'color': 1,
            'left': {'value': 1, 'color': 0, 'left': None, 'right': None},
            'right': None,
        })
        self.assertIs(tree.root.color, BLACK)
        self.assertIs(tree.root.left.color, RED)
        self.assertIs(tree.root.left.parent, tree.root)
        self.assertEqual(validate_tree(tree), [])

    def test_from_dict_keeps_invalid_coloring(self):
        tree = RedBlackTree.from_dict({'value': 1, 'color': 'RED', 'left': None, 'right': None})
        self.assertIs(tree.root.color, RED)
        self.assertNotEqual(validate_tree(tree), [])

    def test_from_dict_rejects_bad_colors(self):
        with self.assertRaises(SnapshotError):
            RedBlackTree.from_dict({'value': 1, 'color': 'GREEN'})
        with self.assertRaises(SnapshotError):
            RedBlackTree.from_dict({'value': 1, 'color': True})
        with self.assertRaises(SnapshotError):
            RedBlackTree.from_dict({'value': 1})

    def test_rebuilt_tree_is_mutable(self):
        tree = RedBlackTree.from_dict(make_rbt(10, 20, 30).to_dict())
        tree.insert(40)
        tree.delete(10)
        self.assertEqual(validate_tree(tree), [])


@pytest.mark.parametrize("raw, expected", [
    ("RED", Color.RED),
    ("black", Color.BLACK),
    (0, Color.RED),
    (1, Color.BLACK),
    (Color.BLACK, Color.BLACK),
])
def test_color_parse(raw, expected):
    assert Color.parse(raw) is expected


@pytest.mark.parametrize("raw", [2, -1, False, None, "PURPLE", 1.0])
def test_color_parse_rejects(raw):
    with pytest.raises(SnapshotError):
        Color.parse(raw)


def test_constructor_rebuilds_parent_links():
    root = RBNode(2, BLACK)
    root.attach('left', RBNode(1))
    tree = RedBlackTree(root)
    assert tree.root is not root
    assert tree.root.left.parent is tree.root
    assert validate_tree(tree) == []
    with pytest.raises(TypeError):
        RedBlackTree(BSTNode(1))


def test_clone_is_independent():
    tree = make_rbt(10, 20, 30)
    copy = tree.clone()
    copy.flip_node_color(10)
    copy.delete(30)
    assert tree.search(10).color is RED
    assert tree.inorder() == [10, 20, 30]


@pytest.mark.slow
def test_random_operations_keep_red_black_invariants():
    rng = random.Random(2024)
    tree = RedBlackTree()
    expected = set()
    for _ in range(5000):
        value = rng.randrange(600)
        if rng.random() < 0.55:
            tree.insert(value)
            expected.add(value)
        else:
            assert tree.delete(value) == (value in expected)
            expected.discard(value)
        assert validate_tree(tree) == []
    assert tree.inorder() == sorted(expected)
