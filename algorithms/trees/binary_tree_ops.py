"""
binary_tree_ops.py — Plain Binary Tree Operations
==================================================
Insertion fills the tree level by level (first node missing a child, left
before right), so the tree stays complete.  Traversals use an explicit
stack or queue and emit one SEARCH step per visited node carrying the
running output in `auxiliary["order"]`.

Each traversal returns the visited values (read via StepStream).
"""

from collections import deque
from typing import Generator, List, Optional

from algorithms.step import Step, StepExtensions, StepKind, guard, make_step
from structures.tree import BinaryTree, TreeNode


PSEUDOCODE: List[str] = [
    "def insert(root, value):",                        # 0
    "    queue ← [root]",                              # 1
    "    while queue:",                                # 2
    "        node ← queue.dequeue()",                  # 3
    "        if node.left is None: node.left = new",   # 4
    "        elif node.right is None: node.right = new",  # 5
    "        else: enqueue(node.left, node.right)",    # 6
]


def insert(tree: BinaryTree, value: float) -> Generator[Step, None, str]:
    if tree.root is None:
        node = tree.create_node(value)
        tree.root = node.id
        yield make_step(
            StepKind.INSERT, node_ids=[node.id], message=f"Inserted {value} as the root",
            extensions=StepExtensions(new_root=node.id, new_node_id=node.id),
        )
        return node.id

    queue = deque([tree.root])
    while queue:
        current = tree.node(queue.popleft())
        yield make_step(StepKind.COMPARE, node_ids=[current.id], message=f"Checking node {current.value} for a free child")

        for side in ("left", "right"):
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
            queue.append(child)

    # a non-empty tree always has a node with a free child slot
    raise AssertionError("level-order insert found no free slot")


def search(tree: BinaryTree, target: float) -> Generator[Step, None, Optional[str]]:
    """Level-order scan.  Returns the id of the first match, or None."""
    if tree.root is None:
        yield guard("Tree is empty")
        return None

    queue = deque([tree.root])
    while queue:
        node = tree.node(queue.popleft())
        yield make_step(StepKind.COMPARE, node_ids=[node.id], message=f"Checking {node.value}")
        if node.value == target:
            yield make_step(StepKind.SEARCH, node_ids=[node.id], message=f"Found {target}")
            return node.id
        queue.extend(c for c in (node.left, node.right) if c is not None)

    yield make_step(StepKind.HIGHLIGHT, message=f"{target} not found in tree")
    return None


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def _visit(node: TreeNode, order: List[float]) -> Step:
    order.append(node.value)
    return make_step(
        StepKind.SEARCH, node_ids=[node.id],
        message=f"Visited: {node.value} | Order: {order}",
        auxiliary={"order": list(order)},
    )


def _finish(name: str, visited: List[str], order: List[float]) -> Step:
    return make_step(
        StepKind.SORTED, node_ids=visited,
        message=f"{name} traversal complete: {order}",
        auxiliary={"order": list(order)},
    )


def in_order(tree: BinaryTree) -> Generator[Step, None, List[float]]:
    if tree.root is None:
        yield guard("Tree is empty")
        return []
    yield make_step(StepKind.HIGHLIGHT, node_ids=[tree.root], message="Starting in-order traversal (left, root, right)")

    order: List[float] = []
    visited: List[str] = []
    stack: List[str] = []
    current = tree.root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = tree.node(current).left
        node = tree.node(stack.pop())
        visited.append(node.id)
        yield _visit(node, order)
        current = node.right

    yield _finish("In-order", visited, order)
    return order


def pre_order(tree: BinaryTree) -> Generator[Step, None, List[float]]:
    if tree.root is None:
        yield guard("Tree is empty")
        return []
    yield make_step(StepKind.HIGHLIGHT, node_ids=[tree.root], message="Starting pre-order traversal (root, left, right)")

    order: List[float] = []
    visited: List[str] = []
    stack = [tree.root]
    while stack:
        node = tree.node(stack.pop())
        visited.append(node.id)
        yield _visit(node, order)
        # right first so left is popped first
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)

    yield _finish("Pre-order", visited, order)
    return order


def post_order(tree: BinaryTree) -> Generator[Step, None, List[float]]:
    if tree.root is None:
        yield guard("Tree is empty")
        return []
    yield make_step(StepKind.HIGHLIGHT, node_ids=[tree.root], message="Starting post-order traversal (left, right, root)")

    order: List[float] = []
    visited: List[str] = []
    stack: List[str] = []
    last: Optional[str] = None
    current = tree.root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = tree.node(current).left
            continue
        top = tree.node(stack[-1])
        if top.right is not None and last != top.right:
            current = top.right
        else:
            visited.append(top.id)
            yield _visit(top, order)
            last = stack.pop()

    yield _finish("Post-order", visited, order)
    return order


def level_order(tree: BinaryTree) -> Generator[Step, None, List[float]]:
    if tree.root is None:
        yield guard("Tree is empty")
        return []
    yield make_step(StepKind.HIGHLIGHT, node_ids=[tree.root], message="Starting level-order traversal")

    order: List[float] = []
    visited: List[str] = []
    queue = deque([tree.root])
    while queue:
        node = tree.node(queue.popleft())
        visited.append(node.id)
        yield _visit(node, order)
        queue.extend(c for c in (node.left, node.right) if c is not None)

    yield _finish("Level-order", visited, order)
    return order
