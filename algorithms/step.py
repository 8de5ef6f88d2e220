"""
step.py — Animation Step Model
===============================
Every operation is a generator that yields Step objects.
A Step is one discrete, observable state change the front end can
play, pause, step through and rewind:

    • What kind of change happened (compare, swap, insert, visit, …)
    • Which positions of a linear container it touches
    • Which node ids of a tree / list / graph it touches
    • A plain-English narration of the transition
    • Optional operation-specific payload (distance table, running order, …)

Design decisions:
  - Step is a frozen dataclass. The generator is the only writer of the
    container; the recorder / stepper / renderer are pure readers.
  - Effects are applied to the container BEFORE the step describing them is
    yielded, so a consumer looking at the container right after receiving a
    step sees the post-mutation state.
  - Linear containers can be re-derived from the steps alone.  The effect of
    a step is carried in `auxiliary` using a tiny vocabulary:
        • "write"    – values[positions[0]] = v
        • "inserted" – values.insert(positions[0], v)
        • "removed"  – del values[positions[0]]
        • a SWAP step with two positions and none of the above swaps them
    Every other step is narration only.
  - Guard failures (underflow, overflow, bad index, duplicate key, …) are a
    single HIGHLIGHT step tagged `rejected=True`.  Nothing is raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generator, Iterable, Iterator, List, Optional


# ---------------------------------------------------------------------------
# Step kinds — closed vocabulary shared by every generator
# ---------------------------------------------------------------------------
class StepKind(str, Enum):
    COMPARE          = "compare"
    SWAP             = "swap"
    SORTED           = "sorted"
    ACTIVE           = "active"
    VISITED          = "visited"
    PATH             = "path"
    MINIMUM          = "minimum"
    INSERT           = "insert"
    DELETE           = "delete"
    SEARCH           = "search"
    HIGHLIGHT        = "highlight"
    UPDATE_DISTANCES = "update-distances"


# ---------------------------------------------------------------------------
# Extension fields for structure-mutating operations
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StepExtensions:
    """
    Identifiers a caller needs to update the references it holds.

    Attributes:
        new_head     : Head id of a linked list after the step.
        new_tail     : Tail id of a linked list after an append or tail delete.
        new_root     : Root id of a tree after the step.
        new_node_id  : Id of the node created by this step.
        head_changed : True when `new_head` is authoritative, including the
                       case where the list became empty (new_head is None).
        tail_changed : Same for `new_tail`; set when the last node is deleted.
    """

    new_head:     Optional[str] = None
    new_tail:     Optional[str] = None
    new_root:     Optional[str] = None
    new_node_id:  Optional[str] = None
    head_changed: bool          = False
    tail_changed: bool          = False


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind       : One of StepKind.
        positions  : Indices into the linear container (empty when n/a).
        node_ids   : Ids into a node-keyed container (trees / lists / graphs).
        message    : Narration for the UI.  Not semantically authoritative.
        auxiliary  : Operation-specific payload:
                       • "write" / "inserted" / "removed" – replay vocabulary
                       • "distances" – Dijkstra's tentative distance table
                       • "order"     – running traversal output
                       • "path"      – reconstructed route
        extensions : StepExtensions for head / tail / root updates, or None.
        rejected   : True on the terminal step of a failed guard condition.
    """

    kind:       StepKind
    positions:  List[int]                = field(default_factory=list)
    node_ids:   List[str]                = field(default_factory=list)
    message:    str                      = ""
    auxiliary:  Dict[str, Any]           = field(default_factory=dict)
    extensions: Optional[StepExtensions] = None
    rejected:   bool                     = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "kind":      self.kind.value,
            "positions": list(self.positions),
            "nodeIds":   list(self.node_ids),
            "message":   self.message,
            "auxiliary": dict(self.auxiliary),
            "rejected":  self.rejected,
        }
        ext = self.extensions
        if ext is not None:
            if ext.head_changed or ext.new_head is not None:
                data["newHead"] = ext.new_head
            if ext.tail_changed or ext.new_tail is not None:
                data["newTail"] = ext.new_tail
            if ext.new_root is not None:
                data["newRoot"] = ext.new_root
            if ext.new_node_id is not None:
                data["newNodeId"] = ext.new_node_id
        return data


# ---------------------------------------------------------------------------
# Construction helpers so generators don't spell out every kwarg
# ---------------------------------------------------------------------------
def make_step(
    kind: StepKind,
    positions: Iterable[int] = (),
    message: str = "",
    node_ids: Iterable[str] = (),
    auxiliary: Optional[Dict[str, Any]] = None,
    extensions: Optional[StepExtensions] = None,
) -> Step:
    """Build a Step, copying every collection so later mutation can't leak in."""
    return Step(
        kind=kind,
        positions=list(positions),
        node_ids=list(node_ids),
        message=message,
        auxiliary=dict(auxiliary) if auxiliary else {},
        extensions=extensions,
    )


def guard(message: str, positions: Iterable[int] = (), node_ids: Iterable[str] = ()) -> Step:
    """Terminal step for a failed precondition. The container is untouched."""
    return Step(
        kind=StepKind.HIGHLIGHT,
        positions=list(positions),
        node_ids=list(node_ids),
        message=message,
        rejected=True,
    )


def all_positions(length: int) -> List[int]:
    return list(range(length))


# ---------------------------------------------------------------------------
# StepStream — a step iterator with an explicit result slot
# ---------------------------------------------------------------------------
class StepStream:
    """
    Wraps an operation generator.  Iterating yields its Steps; once the
    stream is exhausted `result` holds the operation's final value
    (quicksort partition index, new head / root id, Dijkstra result, …).

    Usage:
        part = StepStream(_partition(arr, low, high))
        yield from part
        pivot = part.result
    """

    def __init__(self, source: Generator[Step, None, Any]):
        self._source = source
        self.result: Any = None
        self.done: bool = False

    def __iter__(self) -> Iterator[Step]:
        if self.done:
            return
        self.result = yield from self._source
        self.done = True

    def drain(self) -> List[Step]:
        """Run the operation to completion and return every Step in order."""
        return list(self)
