"""
bst_ops.py — Binary Search Tree Operations
===========================================
Ordering is strict: left subtree < node < right subtree, no duplicates.
Inserting an existing value is rejected with a single guard step.

`validate` checks every node against an open interval (low, high) that is
tightened at each descent and stops at the first violation; its verdict is
the generator's return value.
"""

from typing import Generator, List, Optional, Tuple

from algorithms.step import Step, StepExtensions, StepKind, guard, make_step
from structures.tree import BinaryTree


PSEUDOCODE: List[str] = [
    "def insert(node, value):",                        # 0
    "    if node is None: return new Node(value)",     # 1
    "    if value == node.value: reject duplicate",    # 2
    "    if value < node.value:",                      # 3
    "        node.left = insert(node.left, value)",    # 4
    "    else:",                                       # 5
    "        node.right = insert(node.right, value)",  # 6
]


def insert(tree: BinaryTree, value: float) -> Generator[Step, None, Optional[str]]:
    if tree.root is None:
        node = tree.create_node(value)
        tree.root = node.id
        yield make_step(
            StepKind.INSERT, node_ids=[node.id], message=f"Inserted {value} as the root",
            extensions=StepExtensions(new_root=node.id, new_node_id=node.id),
        )
        return node.id

    current = tree.node(tree.root)
    while True:
        yield make_step(StepKind.COMPARE, node_ids=[current.id], message=f"Comparing {value} with {current.value}")
        if value == current.value:
            yield guard(f"Value {value} already exists in the BST", node_ids=[current.id])
            return None

        side = "left" if value < current.value else "right"
        child = getattr(current, side)
        if child is None:
            node = tree.create_node(value)
            setattr(current, side, node.id)
            yield make_step(
                StepKind.INSERT, node_ids=[current.id, node.id],
                message=f"Inserted {value} as {side} child of {current.value}",
                extensions=StepExtensions(new_node_id=node.id),
            )
            return node.id

        current = tree.node(child)
        yield make_step(StepKind.ACTIVE, node_ids=[current.id], message=f"Moving {side} to {current.value}")


def search(tree: BinaryTree, target: float) -> Generator[Step, None, Optional[str]]:
    if tree.root is None:
        yield guard("Tree is empty")
        return None

    current_id: Optional[str] = tree.root
    while current_id is not None:
        node = tree.node(current_id)
        yield make_step(StepKind.COMPARE, node_ids=[node.id], message=f"Comparing {target} with {node.value}")
        if target == node.value:
            yield make_step(StepKind.SEARCH, node_ids=[node.id], message=f"Found {target}")
            return node.id
        current_id = node.left if target < node.value else node.right

    yield make_step(StepKind.HIGHLIGHT, message=f"{target} not found in BST")
    return None


def _spine(tree: BinaryTree, side: str, label: str) -> Generator[Step, None, Optional[float]]:
    if tree.root is None:
        yield guard("Tree is empty")
        return None

    node = tree.node(tree.root)
    yield make_step(StepKind.ACTIVE, node_ids=[node.id], message=f"Starting at root {node.value}")
    while getattr(node, side) is not None:
        node = tree.node(getattr(node, side))
        yield make_step(StepKind.ACTIVE, node_ids=[node.id], message=f"Moving {side} to {node.value}")

    yield make_step(StepKind.SEARCH, node_ids=[node.id], message=f"{label} value is {node.value}")
    return node.value


def find_min(tree: BinaryTree) -> Generator[Step, None, Optional[float]]:
    return (yield from _spine(tree, "left", "Minimum"))


def find_max(tree: BinaryTree) -> Generator[Step, None, Optional[float]]:
    return (yield from _spine(tree, "right", "Maximum"))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def validate(tree: BinaryTree) -> Generator[Step, None, bool]:
    if tree.root is None:
        yield make_step(StepKind.SORTED, message="An empty tree is a valid BST")
        return True

    # (node_id, low, high); the left child is pushed last so it is checked first
    pending: List[Tuple[str, float, float]] = [(tree.root, float("-inf"), float("inf"))]
    while pending:
        node_id, low, high = pending.pop()
        node = tree.node(node_id)
        yield make_step(StepKind.COMPARE, node_ids=[node.id], message=f"Checking {low} < {node.value} < {high}")
        if not low < node.value < high:
            yield make_step(
                StepKind.HIGHLIGHT, node_ids=[node.id],
                message=f"Invalid BST: {node.value} is outside ({low}, {high})",
            )
            return False

        if node.right is not None:
            pending.append((node.right, node.value, high))
        if node.left is not None:
            pending.append((node.left, low, node.value))

    yield make_step(StepKind.SORTED, node_ids=list(tree.nodes), message="Valid BST")
    return True
