import pytest

from algorithms.step import StepKind, StepStream
from algorithms.trees import binary_tree_ops as bt
from algorithms.trees import bst_ops as bst
from structures import BinaryTree, InvalidContainerError
from structures.datagen import random_array


def run(gen):
    stream = StepStream(gen)
    return stream.drain(), stream.result


def build(insert, values):
    tree = BinaryTree()
    for v in values:
        run(insert(tree, v))
    return tree


# ---------------------------------------------------------------------------
# Plain binary tree
# ---------------------------------------------------------------------------
def test_level_order_insert_fills_left_to_right():
    tree = build(bt.insert, [1, 2, 3, 4, 5])
    assert tree.level_order_values() == [1, 2, 3, 4, 5]
    root = tree.node(tree.root)
    assert tree.node(root.left).value == 2
    assert tree.node(root.right).value == 3


def test_insert_into_empty_tree_sets_root():
    tree = BinaryTree()
    steps, node_id = run(bt.insert(tree, 1))
    assert tree.root == node_id
    assert steps[0].extensions.new_root == node_id
    assert steps[0].to_dict()["newRoot"] == node_id


def test_insert_compares_each_dequeued_node():
    tree = build(bt.insert, [1, 2, 3])
    steps, _ = run(bt.insert(tree, 4))
    # root is full, so the scan moves on to its left child
    assert [s.kind for s in steps] == [StepKind.COMPARE, StepKind.COMPARE, StepKind.INSERT]


@pytest.mark.parametrize("traversal, expected", [
    (bt.in_order,    [4, 2, 5, 1, 3]),
    (bt.pre_order,   [1, 2, 4, 5, 3]),
    (bt.post_order,  [4, 5, 2, 3, 1]),
    (bt.level_order, [1, 2, 3, 4, 5]),
])
def test_traversals(traversal, expected):
    tree = build(bt.insert, [1, 2, 3, 4, 5])
    steps, order = run(traversal(tree))
    assert order == expected

    visits = [s for s in steps if s.kind == StepKind.SEARCH]
    assert len(visits) == 5
    assert visits[-1].auxiliary["order"] == expected
    assert visits[0].message.startswith(f"Visited: {expected[0]} | Order:")
    assert steps[-1].kind == StepKind.SORTED


def test_traversal_of_empty_tree_is_rejected():
    steps, order = run(bt.in_order(BinaryTree()))
    assert order == []
    assert len(steps) == 1 and steps[0].rejected


def test_binary_tree_search():
    tree = build(bt.insert, [1, 2, 3, 4])
    _, node_id = run(bt.search(tree, 4))
    assert tree.node(node_id).value == 4
    steps, node_id = run(bt.search(tree, 10))
    assert node_id is None
    assert sum(1 for s in steps if s.kind == StepKind.COMPARE) == 4


# ---------------------------------------------------------------------------
# BST
# ---------------------------------------------------------------------------
def test_bst_insert_descends_with_active_hops():
    tree = build(bst.insert, [5, 3, 8, 1])
    steps, _ = run(bst.insert(tree, 4))
    assert [s.kind for s in steps] == [
        StepKind.COMPARE, StepKind.ACTIVE, StepKind.COMPARE, StepKind.INSERT,
    ]
    assert tree.in_order_values() == [1, 3, 4, 5, 8]


def test_bst_rejects_duplicates():
    tree = build(bst.insert, [5, 3, 8])
    steps, node_id = run(bst.insert(tree, 3))
    assert node_id is None
    assert steps[-1].rejected
    assert len(tree) == 3


def test_bst_in_order_is_sorted_for_random_input():
    values = random_array(40, 0, 30, seed=7)
    tree = build(bst.insert, values)
    out = tree.in_order_values()
    assert out == sorted(set(values))


def test_bst_search():
    tree = build(bst.insert, [5, 3, 8, 1, 4])
    steps, node_id = run(bst.search(tree, 4))
    assert tree.node(node_id).value == 4
    assert sum(1 for s in steps if s.kind == StepKind.COMPARE) == 3
    assert run(bst.search(tree, 7))[1] is None


def test_bst_min_max():
    tree = build(bst.insert, [5, 3, 8, 1, 4, 9])
    assert run(bst.find_min(tree))[1] == 1
    assert run(bst.find_max(tree))[1] == 9
    assert run(bst.find_min(BinaryTree()))[0][0].rejected


def test_validate_accepts_a_real_bst():
    tree = build(bst.insert, [5, 3, 8, 1, 4])
    steps, valid = run(bst.validate(tree))
    assert valid is True
    assert steps[-1].message == "Valid BST"


def test_validate_short_circuits_on_first_violation():
    tree = BinaryTree.from_dict({
        "root": "node-0",
        "nodes": [
            {"id": "node-0", "value": 5, "left": "node-1", "right": "node-2"},
            {"id": "node-1", "value": 3, "left": None, "right": "node-3"},
            {"id": "node-2", "value": 8},
            {"id": "node-3", "value": 7},
        ],
    })
    steps, valid = run(bst.validate(tree))
    assert valid is False
    assert not any(s.message == "Valid BST" for s in steps)
    assert not any("node-2" in s.node_ids for s in steps)
    assert steps[-1].node_ids == ["node-3"]


def test_validate_empty_tree():
    assert run(bst.validate(BinaryTree()))[1] is True


def test_validate_handles_a_degenerate_tree():
    n = 1000
    tree = BinaryTree.from_dict({
        "root": "node-0",
        "nodes": [
            {"id": f"node-{i}", "value": i, "right": f"node-{i + 1}" if i + 1 < n else None}
            for i in range(n)
        ],
    })
    steps, valid = run(bst.validate(tree))
    assert valid is True
    assert sum(1 for s in steps if s.kind == StepKind.COMPARE) == n


def test_validate_checks_left_subtree_first():
    tree = build(bst.insert, [5, 3, 8])
    steps, _ = run(bst.validate(tree))
    checked = [tree.node(s.node_ids[0]).value for s in steps if s.kind == StepKind.COMPARE]
    assert checked == [5, 3, 8]


# ---------------------------------------------------------------------------
# Snapshot loading
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("nodes", [
    # cycle back to the root
    [{"id": "node-0", "value": 1, "left": "node-1"}, {"id": "node-1", "value": 2, "right": "node-0"}],
    # shared child
    [
        {"id": "node-0", "value": 1, "left": "node-1", "right": "node-2"},
        {"id": "node-1", "value": 2, "left": "node-3"},
        {"id": "node-2", "value": 3, "left": "node-3"},
        {"id": "node-3", "value": 4},
    ],
    # same node on both sides
    [{"id": "node-0", "value": 1, "left": "node-1", "right": "node-1"}, {"id": "node-1", "value": 2}],
    # child id with no node
    [{"id": "node-0", "value": 1, "left": "node-7"}],
    # node not reachable from the root
    [{"id": "node-0", "value": 1}, {"id": "node-1", "value": 2}],
])
def test_from_dict_rejects_malformed_shapes(nodes):
    with pytest.raises(InvalidContainerError):
        BinaryTree.from_dict({"root": "node-0", "nodes": nodes})
