"""
linked_list.py — Singly-Linked List Arena
==========================================
Nodes live in a single dict keyed by id; `next` is stored as an id (or None),
never as an object reference.  `head` is the id of the first node.

Design decisions:
  - Ids come from a per-list counter ("node-0", "node-1", …).  They are never
    reused, even after deletion, and the same sequence of operations on the
    same starting list always produces the same ids.
  - Looking up a missing id raises ContainerIntegrityError instead of quietly
    stopping a traversal.
"""

import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from structures.errors import ContainerIntegrityError, InvalidContainerError


@dataclass
class ListNode:
    id:    str
    value: float
    next:  Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "next": self.next}


class LinkedList:
    """
    Attributes:
        nodes : {node_id: ListNode}
        head  : id of the first node, or None for an empty list
    """

    def __init__(self):
        self.nodes: Dict[str, ListNode] = {}
        self.head:  Optional[str]       = None
        self._ids = itertools.count()

    # ------------------------------------------------------------------
    # Arena access
    # ------------------------------------------------------------------
    def new_id(self) -> str:
        return f"node-{next(self._ids)}"

    def create_node(self, value: float, next_id: Optional[str] = None) -> ListNode:
        node = ListNode(id=self.new_id(), value=value, next=next_id)
        self.nodes[node.id] = node
        return node

    def node(self, node_id: str) -> ListNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise ContainerIntegrityError("linked list", node_id) from None

    def walk(self) -> Iterator[ListNode]:
        """Nodes from head to tail."""
        current = self.head
        while current is not None:
            node = self.node(current)
            yield node
            current = node.next

    def values(self) -> List[float]:
        return [n.value for n in self.walk()]

    def __len__(self) -> int:
        return len(self.nodes)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "head":  self.head,
            "nodes": [n.to_dict() for n in self.nodes.values()],
        }

    @classmethod
    def from_values(cls, values: List[float]) -> "LinkedList":
        ll = cls()
        prev: Optional[ListNode] = None
        for v in values:
            node = ll.create_node(v)
            if prev is None:
                ll.head = node.id
            else:
                prev.next = node.id
            prev = node
        return ll

    @classmethod
    def from_dict(cls, data: dict) -> "LinkedList":
        if "values" in data:
            return cls.from_values(list(data["values"]))
        ll = cls()
        highest = -1
        for nd in data.get("nodes", []):
            node = ListNode(id=nd["id"], value=nd["value"], next=nd.get("next"))
            ll.nodes[node.id] = node
            suffix = node.id.rsplit("-", 1)[-1]
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        ll.head = data.get("head")
        if ll.head is not None and ll.head not in ll.nodes:
            raise InvalidContainerError(f"head '{ll.head}' is not a node of the list")
        ll._check_chain()
        ll._ids = itertools.count(highest + 1)
        return ll

    def _check_chain(self) -> None:
        """Every node must be reached exactly once walking `next` from head."""
        seen = set()
        current = self.head
        while current is not None:
            if current in seen:
                raise InvalidContainerError(f"cycle in linked list at '{current}'")
            if current not in self.nodes:
                raise InvalidContainerError(f"next '{current}' is not a node of the list")
            seen.add(current)
            current = self.nodes[current].next
        detached = sorted(set(self.nodes) - seen)
        if detached:
            raise InvalidContainerError(f"node(s) not reachable from head: {', '.join(detached)}")

    def __repr__(self) -> str:
        return f"LinkedList({' -> '.join(str(v) for v in self.values())})"
