"""Tests for traversers, collectors, the adapter and ExecutionPlan.

All tests walk the same small BST unless noted::

        5
       / \\
      3   8
     / \\
    1   4
"""

import sys
import unittest

import pytest

from searchtreelib import (
    BinarySearchTree,
    RedBlackTree,
    BinaryTreeAdapter,
    ExecutionPlan,
    TraversalConfig,
    TraversalOrder,
    DataRequirement,
    DepthConfig,
    ConfigurationError,
    create_traverser,
)
from searchtreelib.core import (
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    DataCollector,
    MetadataCollector,
)
from searchtreelib.config import parse_order, parse_tree_kind, TreeKind


def sample_tree():
    tree = BinarySearchTree()
    for value in (5, 3, 8, 1, 4):
        tree.insert(value)
    return tree


def walk(traverser_class, tree, **kwargs):
    traverser = traverser_class(tree.adapter())
    return [(node.value, depth) for node, depth in traverser.traverse(tree.root, **kwargs)]


class TestTraversers(unittest.TestCase):

    def setUp(self):
        self.tree = sample_tree()

    def test_depths_are_reported(self):
        self.assertEqual(walk(LevelOrderTraverser, self.tree),
                         [(5, 0), (3, 1), (8, 1), (1, 2), (4, 2)])
        self.assertEqual(walk(InOrderTraverser, self.tree),
                         [(1, 2), (3, 1), (4, 2), (5, 0), (8, 1)])

    def test_max_depth(self):
        self.assertEqual(walk(LevelOrderTraverser, self.tree, max_depth=1),
                         [(5, 0), (3, 1), (8, 1)])
        self.assertEqual(walk(InOrderTraverser, self.tree, max_depth=1),
                         [(3, 1), (5, 0), (8, 1)])
        self.assertEqual(walk(PreOrderTraverser, self.tree, max_depth=1),
                         [(5, 0), (3, 1), (8, 1)])
        self.assertEqual(walk(PostOrderTraverser, self.tree, max_depth=1),
                         [(3, 1), (8, 1), (5, 0)])
        self.assertEqual(walk(PreOrderTraverser, self.tree, max_depth=0), [(5, 0)])

    def test_min_depth(self):
        self.assertEqual(walk(PreOrderTraverser, self.tree, min_depth=2), [(1, 2), (4, 2)])
        self.assertEqual(walk(PostOrderTraverser, self.tree, min_depth=1),
                         [(1, 2), (4, 2), (3, 1), (8, 1)])

    def test_empty_tree(self):
        empty = BinarySearchTree()
        for traverser_class in (PreOrderTraverser, InOrderTraverser,
                                PostOrderTraverser, LevelOrderTraverser):
            self.assertEqual(walk(traverser_class, empty), [])


@pytest.mark.parametrize("name, expected", [
    ("pre", PreOrderTraverser),
    ("preorder", PreOrderTraverser),
    ("in", InOrderTraverser),
    ("inorder", InOrderTraverser),
    ("post", PostOrderTraverser),
    ("postorder", PostOrderTraverser),
    ("level", LevelOrderTraverser),
    ("level_order", LevelOrderTraverser),
    ("levelOrder", LevelOrderTraverser),
    ("bfs", LevelOrderTraverser),
    (TraversalOrder.INORDER, InOrderTraverser),
])
def test_create_traverser_aliases(name, expected):
    assert isinstance(create_traverser(name, BinaryTreeAdapter()), expected)


def test_unknown_order_raises():
    with pytest.raises(ValueError):
        create_traverser("zigzag", BinaryTreeAdapter())
    with pytest.raises(ValueError):
        sample_tree().traverse("sideways")


def test_parse_tree_kind_aliases():
    assert parse_tree_kind("rbt") is TreeKind.RED_BLACK
    assert parse_tree_kind("AVL") is TreeKind.AVL
    assert parse_tree_kind(TreeKind.BST) is TreeKind.BST
    assert parse_order("IN") is TraversalOrder.INORDER
    with pytest.raises(ValueError):
        parse_tree_kind("splay")


def test_traverse_method_accepts_names():
    tree = sample_tree()
    assert tree.traverse("levelOrder") == [5, 3, 8, 1, 4]
    assert tree.traverse("post") == [1, 4, 3, 8, 5]


def test_deep_tree_traversal_beyond_recursion_limit():
    n = sys.getrecursionlimit() + 500
    tree = BinarySearchTree()
    for value in range(n, 0, -1):
        tree.insert(value)
    for order in ("pre", "in", "post", "level"):
        assert len(tree.traverse(order)) == n


class TestAdapter(unittest.TestCase):

    def setUp(self):
        self.tree = sample_tree()
        self.adapter = self.tree.adapter()

    def test_parent_found_by_descent(self):
        four = self.tree.search(4)
        self.assertIs(self.adapter.get_parent(four), self.tree.search(3))
        self.assertIsNone(self.adapter.get_parent(self.tree.root))

    def test_parent_of_foreign_node(self):
        other = sample_tree()
        self.assertIsNone(self.adapter.get_parent(other.search(4)))

    def test_parent_link_used_when_present(self):
        rbt = RedBlackTree()
        for value in (10, 20, 30):
            rbt.insert(value)
        adapter = BinaryTreeAdapter()   # no root needed
        self.assertIs(adapter.get_parent(rbt.search(10)), rbt.root)

    def test_depth_and_siblings(self):
        self.assertEqual(self.adapter.get_depth(self.tree.search(1)), 2)
        self.assertEqual(self.adapter.get_depth(self.tree.root), 0)
        siblings = [n.value for n in self.adapter.get_siblings(self.tree.search(1))]
        self.assertEqual(siblings, [4])
        self.assertEqual(list(self.adapter.get_siblings(self.tree.root)), [])

    def test_estimated_size(self):
        self.assertEqual(self.adapter.estimated_size(self.tree.root), 5)
        self.assertEqual(self.adapter.estimated_size(self.tree.search(3)), 3)
        self.assertEqual(self.adapter.estimated_size(None), 0)


class TestConfig(unittest.TestCase):

    def test_default_config_is_valid(self):
        self.assertEqual(TraversalConfig().validate(), [])
        self.assertEqual(TraversalConfig.sorted_values().validate(), [])

    def test_validation_errors(self):
        config = TraversalConfig(
            depth=DepthConfig(min_depth=3, max_depth=1),
            max_nodes=0,
            data_requirements=DataRequirement.CUSTOM,
        )
        errors = config.validate()
        self.assertIn("max_depth cannot be less than min_depth", errors)
        self.assertIn("max_nodes must be positive", errors)
        self.assertIn("custom_collector required when data_requirements is CUSTOM", errors)

    def test_negative_depth(self):
        errors = TraversalConfig(depth=DepthConfig(min_depth=-1)).validate()
        self.assertIn("min_depth cannot be negative", errors)

    def test_string_order_is_rejected(self):
        self.assertTrue(TraversalConfig(order="inorder").validate())

    def test_shallow_preset(self):
        config = TraversalConfig.shallow()
        self.assertEqual(config.order, TraversalOrder.LEVEL_ORDER)
        self.assertEqual(config.depth.max_depth, 1)
        self.assertEqual(config.data_requirements, DataRequirement.DEPTH)


class TestExecutionPlan(unittest.TestCase):

    def setUp(self):
        self.tree = sample_tree()

    def run_plan(self, config):
        plan = ExecutionPlan(config, self.tree.adapter())
        return [data for _, data in plan.execute(self.tree.root)]

    def test_invalid_config_raises(self):
        config = TraversalConfig(max_nodes=-5)
        with self.assertRaises(ConfigurationError) as ctx:
            ExecutionPlan(config, self.tree.adapter())
        self.assertIn("max_nodes must be positive", str(ctx.exception))

    def test_values_in_order(self):
        self.assertEqual(self.run_plan(TraversalConfig()), [1, 3, 4, 5, 8])

    def test_shallow_depth_pairs(self):
        self.assertEqual(self.run_plan(TraversalConfig.shallow()), [(5, 0), (3, 1), (8, 1)])

    def test_filter_and_max_nodes(self):
        config = TraversalConfig(order=TraversalOrder.PREORDER,
                                 include_filter=lambda node: node.value % 2 == 0)
        self.assertEqual(self.run_plan(config), [4, 8])
        self.assertEqual(self.run_plan(TraversalConfig(max_nodes=2)), [1, 3])

    def test_metadata_collector(self):
        rbt = RedBlackTree()
        for value in (10, 20, 30):
            rbt.insert(value)
        config = TraversalConfig(order=TraversalOrder.LEVEL_ORDER,
                                 data_requirements=DataRequirement.METADATA)
        plan = ExecutionPlan(config, rbt.adapter())
        records = [data for _, data in plan.execute(rbt.root)]
        self.assertEqual(records[0], {'value': 20, 'color': 'BLACK', 'depth': 0, 'child_count': 2})
        self.assertEqual(records[1]['color'], 'RED')

    def test_full_node_collector(self):
        config = TraversalConfig(data_requirements=DataRequirement.FULL_NODE)
        nodes = self.run_plan(config)
        self.assertIs(nodes[3], self.tree.root)

    def test_custom_callable_collector(self):
        config = TraversalConfig(data_requirements=DataRequirement.CUSTOM,
                                 custom_collector=lambda node, depth: node.value * 10 + depth)
        self.assertEqual(self.run_plan(config), [12, 31, 42, 50, 81])

    def test_custom_collector_instance(self):
        class LeafFlagCollector(DataCollector):
            def collect(self, node, depth):
                return node.is_leaf()

        adapter = self.tree.adapter()
        config = TraversalConfig(data_requirements=DataRequirement.CUSTOM,
                                 custom_collector=LeafFlagCollector(adapter))
        plan = ExecutionPlan(config, adapter)
        self.assertEqual([flag for _, flag in plan.execute(self.tree.root)],
                         [True, False, True, False, True])

    def test_summary(self):
        plan = ExecutionPlan(TraversalConfig.shallow(2), self.tree.adapter())
        summary = plan.get_summary()
        self.assertEqual(summary['order'], 'level_order')
        self.assertEqual(summary['max_depth'], 2)
        self.assertEqual(summary['traverser'], 'LevelOrderTraverser')
        self.assertEqual(summary['collector'], 'DepthCollector')

    def test_empty_tree(self):
        plan = ExecutionPlan(TraversalConfig(), BinaryTreeAdapter())
        self.assertEqual(list(plan.execute(None)), [])


def test_metadata_collector_child_count():
    tree = sample_tree()
    collector = MetadataCollector(tree.adapter())
    assert collector.collect(tree.search(3), 1) == {'value': 3, 'depth': 1, 'child_count': 2}
