"""
tree.py — Binary Tree Arena
============================
Shared container for the plain binary tree and the BST.  Nodes are stored
in a dict keyed by id with `left` / `right` children held as ids.

BST ordering (no duplicates, left < node < right) is enforced by the BST
operation generators, not by the container.
"""

import itertools
from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional

from structures.errors import ContainerIntegrityError, InvalidContainerError


@dataclass
class TreeNode:
    id:    str
    value: float
    left:  Optional[str] = None
    right: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "left": self.left, "right": self.right}


class BinaryTree:
    """
    Attributes:
        nodes : {node_id: TreeNode}
        root  : id of the root node, or None for an empty tree
    """

    def __init__(self):
        self.nodes: Dict[str, TreeNode] = {}
        self.root:  Optional[str]       = None
        self._ids = itertools.count()

    def new_id(self) -> str:
        return f"node-{next(self._ids)}"

    def create_node(self, value: float) -> TreeNode:
        node = TreeNode(id=self.new_id(), value=value)
        self.nodes[node.id] = node
        return node

    def node(self, node_id: str) -> TreeNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise ContainerIntegrityError("binary tree", node_id) from None

    def __len__(self) -> int:
        return len(self.nodes)

    # ------------------------------------------------------------------
    # Plain (non-animated) traversals — used by tests and snapshots
    # ------------------------------------------------------------------
    def in_order_values(self) -> List[float]:
        out: List[float] = []
        stack: List[str] = []
        current = self.root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = self.node(current).left
            node = self.node(stack.pop())
            out.append(node.value)
            current = node.right
        return out

    def level_order_values(self) -> List[float]:
        if self.root is None:
            return []
        out: List[float] = []
        queue = deque([self.root])
        while queue:
            node = self.node(queue.popleft())
            out.append(node.value)
            for child in (node.left, node.right):
                if child is not None:
                    queue.append(child)
        return out

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "root":  self.root,
            "nodes": [n.to_dict() for n in self.nodes.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BinaryTree":
        tree = cls()
        highest = -1
        for nd in data.get("nodes", []):
            node = TreeNode(id=nd["id"], value=nd["value"], left=nd.get("left"), right=nd.get("right"))
            tree.nodes[node.id] = node
            suffix = node.id.rsplit("-", 1)[-1]
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        tree.root = data.get("root")
        if tree.root is not None and tree.root not in tree.nodes:
            raise InvalidContainerError(f"root '{tree.root}' is not a node of the tree")
        tree._check_shape()
        tree._ids = itertools.count(highest + 1)
        return tree

    def _check_shape(self) -> None:
        """Every node must hang from exactly one parent, reached from the root."""
        seen = set()
        pending = [] if self.root is None else [self.root]
        while pending:
            node_id = pending.pop()
            if node_id in seen:
                raise InvalidContainerError(f"node '{node_id}' is reached twice (cycle or shared child)")
            if node_id not in self.nodes:
                raise InvalidContainerError(f"child '{node_id}' is not a node of the tree")
            seen.add(node_id)
            node = self.nodes[node_id]
            pending.extend(c for c in (node.left, node.right) if c is not None)
        detached = sorted(set(self.nodes) - seen)
        if detached:
            raise InvalidContainerError(f"node(s) not reachable from root: {', '.join(detached)}")

    def __repr__(self) -> str:
        return f"BinaryTree(size={len(self.nodes)}, root={self.root})"
