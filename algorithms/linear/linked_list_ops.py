"""
linked_list_ops.py — Singly-Linked List Operations
===================================================
Every generator works on a LinkedList arena and keeps `ll.head` current
itself.  Steps that move the head or tail carry the new id in
StepExtensions so a caller holding its own reference can follow along; the
generator's return value (read via StepStream) is the id of the node created,
or the value removed.

Head operations are O(1) and emit no traversal steps.  Tail and positional
operations emit one COMPARE per node walked before the splice.
"""

from typing import Generator, Optional

from algorithms.step import Step, StepExtensions, StepKind, guard, make_step
from structures.errors import ContainerIntegrityError
from structures.linked_list import LinkedList, ListNode


def _nth(ll: LinkedList, index: int) -> Generator[Step, None, ListNode]:
    """Walk to the node at `index` (caller checks range), one COMPARE per node."""
    for i, node in enumerate(ll.walk()):
        yield make_step(StepKind.COMPARE, node_ids=[node.id], message=f"Traversing: at position {i}, value {node.value}")
        if i == index:
            return node
    raise ContainerIntegrityError("linked list", f"position {index}")


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------
def insert_head(ll: LinkedList, value: float) -> Generator[Step, None, str]:
    was_empty = ll.head is None
    node = ll.create_node(value, next_id=ll.head)
    ll.head = node.id
    yield make_step(
        StepKind.INSERT,
        node_ids=[node.id],
        message=f"Inserted {value} at the head",
        extensions=StepExtensions(
            new_head=node.id,
            head_changed=True,
            new_node_id=node.id,
            new_tail=node.id if was_empty else None,
        ),
    )
    return node.id


def insert_tail(ll: LinkedList, value: float) -> Generator[Step, None, str]:
    if ll.head is None:
        return (yield from insert_head(ll, value))

    tail = None
    for i, node in enumerate(ll.walk()):
        yield make_step(StepKind.COMPARE, node_ids=[node.id], message=f"Traversing: at position {i}, value {node.value}")
        tail = node

    new = ll.create_node(value)
    tail.next = new.id
    yield make_step(
        StepKind.INSERT,
        node_ids=[tail.id, new.id],
        message=f"Inserted {value} at the tail, after {tail.value}",
        extensions=StepExtensions(new_tail=new.id, new_node_id=new.id),
    )
    return new.id


def insert_at(ll: LinkedList, position: int, value: float) -> Generator[Step, None, Optional[str]]:
    if position < 0 or position > len(ll.values()):
        yield guard(f"Invalid position {position}: list has {len(ll.values())} node(s)")
        return None
    if position == 0:
        return (yield from insert_head(ll, value))

    prev = yield from _nth(ll, position - 1)
    new = ll.create_node(value, next_id=prev.next)
    prev.next = new.id
    yield make_step(
        StepKind.INSERT,
        node_ids=[prev.id, new.id],
        message=f"Inserted {value} at position {position}",
        extensions=StepExtensions(new_node_id=new.id, new_tail=new.id if new.next is None else None),
    )
    return new.id


# ---------------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------------
def delete_head(ll: LinkedList) -> Generator[Step, None, Optional[float]]:
    if ll.head is None:
        yield guard("List is empty - nothing to delete")
        return None

    old = ll.node(ll.head)
    yield make_step(StepKind.HIGHLIGHT, node_ids=[old.id], message=f"Deleting head {old.value}")
    ll.head = old.next
    del ll.nodes[old.id]
    yield make_step(
        StepKind.DELETE,
        node_ids=[old.id],
        message=f"Deleted {old.value}" + ("" if ll.head is None else f", new head is {ll.node(ll.head).value}"),
        auxiliary={"value": old.value},
        extensions=StepExtensions(new_head=ll.head, head_changed=True, tail_changed=ll.head is None),
    )
    return old.value


def delete_tail(ll: LinkedList) -> Generator[Step, None, Optional[float]]:
    if ll.head is None:
        yield guard("List is empty - nothing to delete")
        return None
    if ll.node(ll.head).next is None:
        return (yield from delete_head(ll))

    # no back-links: walk to the second-to-last node
    prev = yield from _nth(ll, len(ll.values()) - 2)
    tail = ll.node(prev.next)
    prev.next = None
    del ll.nodes[tail.id]
    yield make_step(
        StepKind.DELETE,
        node_ids=[tail.id],
        message=f"Deleted tail {tail.value}, new tail is {prev.value}",
        auxiliary={"value": tail.value},
        extensions=StepExtensions(new_tail=prev.id),
    )
    return tail.value


def delete_at(ll: LinkedList, position: int) -> Generator[Step, None, Optional[float]]:
    length = len(ll.values())
    if position < 0 or position >= length:
        yield guard(f"Invalid position {position}: list has {length} node(s)")
        return None
    if position == 0:
        return (yield from delete_head(ll))

    prev = yield from _nth(ll, position - 1)
    target = ll.node(prev.next)
    prev.next = target.next
    del ll.nodes[target.id]
    yield make_step(
        StepKind.DELETE,
        node_ids=[target.id],
        message=f"Deleted {target.value} from position {position}",
        auxiliary={"value": target.value},
        extensions=StepExtensions(new_tail=prev.id if prev.next is None else None),
    )
    return target.value


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def search(ll: LinkedList, target: float) -> Generator[Step, None, Optional[str]]:
    """Returns the id of the first node holding `target`, or None."""
    for i, node in enumerate(ll.walk()):
        yield make_step(StepKind.COMPARE, node_ids=[node.id], message=f"Checking position {i}: {node.value}")
        if node.value == target:
            yield make_step(StepKind.SEARCH, node_ids=[node.id], message=f"Found {target} at position {i}")
            return node.id
    yield make_step(StepKind.HIGHLIGHT, message=f"{target} not found in list")
    return None


def is_empty(ll: LinkedList) -> Generator[Step, None, bool]:
    empty = ll.head is None
    yield make_step(StepKind.HIGHLIGHT, message="List is EMPTY" if empty else "List is NOT EMPTY")
    return empty


def size(ll: LinkedList) -> Generator[Step, None, int]:
    ids = [n.id for n in ll.walk()]
    yield make_step(StepKind.HIGHLIGHT, node_ids=ids, message=f"List size: {len(ids)}")
    return len(ids)
