"""
algorithms/__init__.py — Operation Registry
=============================================
Single source of truth for every operation the visualizer knows about.

    from algorithms import REGISTRY, get_operation

REGISTRY is a dict keyed "<family>.<name>":
    {
        "sorting.bubble": OperationInfo(key, family, container, label, fn, …),
        "stack.push":     OperationInfo(…),
        …
    }

Every `fn` takes the container first, then the operands named in
`operands` as keyword arguments, and returns a Step generator.  Adding an
operation is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List

from structures.errors import UnknownOperationError

# ---------------------------------------------------------------------------
# Import all operation modules
# ---------------------------------------------------------------------------
from algorithms.sorting.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.sorting.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.sorting.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.sorting.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.sorting.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algorithms.sorting.heap_sort      import heap_sort      as _heap_sort, PSEUDOCODE as _heap_sort_pc
from algorithms.linear  import array_ops, stack_ops, queue_ops, linked_list_ops
from algorithms.trees   import binary_tree_ops, bst_ops, heap_ops, hash_table_ops
from algorithms.graphs.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.graphs.dfs      import dfs      as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.graphs.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc


# ---------------------------------------------------------------------------
# Container kinds — what shape of container each family operates on
# ---------------------------------------------------------------------------
LIST        = "list"
LINKED_LIST = "linked_list"
TREE        = "tree"
HASH_TABLE  = "hash_table"
GRAPH       = "graph"


# ---------------------------------------------------------------------------
# OperationInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OperationInfo:
    key:                str                    # registry key, e.g. "stack.push"
    family:             str                    # e.g. "stack"
    container:          str                    # one of the container kinds above
    label:              str                    # human label, e.g. "Push"
    fn:                 Callable               # the generator function
    operands:           List[str] = field(default_factory=list)   # keyword operands after the container
    pseudocode:         List[str] = field(default_factory=list)
    complexity_best:    str = ""               # e.g. "O(n)"
    complexity_average: str = ""
    complexity_worst:   str = ""
    complexity_space:   str = ""
    description:        str = ""               # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "family":      self.family,
            "container":   self.container,
            "label":       self.label,
            "operands":    list(self.operands),
            "pseudocode":  list(self.pseudocode),
            "complexity": {
                "best":    self.complexity_best,
                "average": self.complexity_average,
                "worst":   self.complexity_worst,
                "space":   self.complexity_space,
            },
            "description": self.description,
        }


def _o1(key, family, container, label, fn, operands=(), description="", space="O(1)"):
    """Card for a constant-time query / update."""
    return OperationInfo(
        key=key, family=family, container=container, label=label, fn=fn, operands=list(operands),
        complexity_best="O(1)", complexity_average="O(1)", complexity_worst="O(1)",
        complexity_space=space, description=description,
    )


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_ENTRIES: List[OperationInfo] = [

    # ---------------- sorting ----------------
    OperationInfo(
        key="sorting.bubble", family="sorting", container=LIST, label="Bubble Sort",
        fn=_bubble, pseudocode=_bubble_pc,
        complexity_best="O(n)", complexity_average="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs. Stops early on a pass with no swaps.",
    ),
    OperationInfo(
        key="sorting.selection", family="sorting", container=LIST, label="Selection Sort",
        fn=_selection, pseudocode=_selection_pc,
        complexity_best="O(n²)", complexity_average="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        description="Selects the minimum of the unsorted suffix and swaps it into place.",
    ),
    OperationInfo(
        key="sorting.insertion", family="sorting", container=LIST, label="Insertion Sort",
        fn=_insertion, pseudocode=_insertion_pc,
        complexity_best="O(n)", complexity_average="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        description="Sinks each element into the sorted prefix. Fast on nearly-sorted input.",
    ),
    OperationInfo(
        key="sorting.merge", family="sorting", container=LIST, label="Merge Sort",
        fn=_merge, pseudocode=_merge_pc,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(n)",
        description="Divide and conquer: sort both halves, then merge them left to right.",
    ),
    OperationInfo(
        key="sorting.quick", family="sorting", container=LIST, label="Quick Sort",
        fn=_quick, pseudocode=_quick_pc,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n²)",
        complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurse on both sides.",
    ),
    OperationInfo(
        key="sorting.heap", family="sorting", container=LIST, label="Heap Sort",
        fn=_heap_sort, pseudocode=_heap_sort_pc,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(1)",
        description="Builds a max heap, then repeatedly moves the root behind the heap.",
    ),

    # ---------------- array ----------------
    OperationInfo(
        key="array.insert", family="array", container=LIST, label="Insert",
        fn=array_ops.array_insert, operands=["index", "value"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Shifts every later element right, then writes the value.",
    ),
    OperationInfo(
        key="array.delete", family="array", container=LIST, label="Delete",
        fn=array_ops.array_delete, operands=["index"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Removes the value and shifts every later element left.",
    ),
    OperationInfo(
        key="array.search", family="array", container=LIST, label="Linear Search",
        fn=array_ops.array_search, operands=["target"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Scans from index 0 until the target is found.",
    ),
    _o1("array.access", "array", LIST, "Access", array_ops.array_access, ["index"],
        "Reads the value at an index directly."),
    _o1("array.update", "array", LIST, "Update", array_ops.array_update, ["index", "value"],
        "Overwrites the value at an index."),

    # ---------------- stack ----------------
    _o1("stack.push", "stack", LIST, "Push", stack_ops.stack_push, ["value", "capacity"],
        "Adds a value on top. Rejected when the stack is at capacity."),
    _o1("stack.pop", "stack", LIST, "Pop", stack_ops.stack_pop, [],
        "Removes the top value. Rejected on an empty stack."),
    _o1("stack.peek", "stack", LIST, "Peek", stack_ops.stack_peek, [], "Reads the top value."),
    _o1("stack.is_empty", "stack", LIST, "Is Empty", stack_ops.stack_is_empty),
    _o1("stack.size", "stack", LIST, "Size", stack_ops.stack_size),
    OperationInfo(
        key="stack.search", family="stack", container=LIST, label="Search",
        fn=stack_ops.stack_search, operands=["target"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Scans from the top down.",
    ),

    # ---------------- queue ----------------
    _o1("queue.enqueue", "queue", LIST, "Enqueue", queue_ops.enqueue, ["value", "capacity"],
        "Adds a value at the rear. Rejected when the queue is at capacity."),
    OperationInfo(
        key="queue.dequeue", family="queue", container=LIST, label="Dequeue",
        fn=queue_ops.dequeue,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Removes the front value; the list representation shifts the rest forward.",
    ),
    _o1("queue.peek", "queue", LIST, "Peek", queue_ops.queue_peek, [], "Reads the front value."),
    _o1("queue.rear", "queue", LIST, "Rear", queue_ops.queue_rear, [], "Reads the rear value."),
    _o1("queue.is_empty", "queue", LIST, "Is Empty", queue_ops.queue_is_empty),
    _o1("queue.size", "queue", LIST, "Size", queue_ops.queue_size),
    OperationInfo(
        key="queue.search", family="queue", container=LIST, label="Search",
        fn=queue_ops.queue_search, operands=["target"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Scans from front to rear.",
    ),

    # ---------------- linked list ----------------
    _o1("linked_list.insert_head", "linked_list", LINKED_LIST, "Insert at Head",
        linked_list_ops.insert_head, ["value"], "New node points at the old head."),
    OperationInfo(
        key="linked_list.insert_tail", family="linked_list", container=LINKED_LIST, label="Insert at Tail",
        fn=linked_list_ops.insert_tail, operands=["value"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walks to the last node and links the new node after it.",
    ),
    OperationInfo(
        key="linked_list.insert_at", family="linked_list", container=LINKED_LIST, label="Insert at Position",
        fn=linked_list_ops.insert_at, operands=["position", "value"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walks to the node before the position and splices the new node in.",
    ),
    _o1("linked_list.delete_head", "linked_list", LINKED_LIST, "Delete Head",
        linked_list_ops.delete_head, [], "The second node becomes the head."),
    OperationInfo(
        key="linked_list.delete_tail", family="linked_list", container=LINKED_LIST, label="Delete Tail",
        fn=linked_list_ops.delete_tail,
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walks to the second-to-last node (no back-links) and unlinks the tail.",
    ),
    OperationInfo(
        key="linked_list.delete_at", family="linked_list", container=LINKED_LIST, label="Delete at Position",
        fn=linked_list_ops.delete_at, operands=["position"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walks to the node before the position and unlinks its successor.",
    ),
    OperationInfo(
        key="linked_list.search", family="linked_list", container=LINKED_LIST, label="Search",
        fn=linked_list_ops.search, operands=["target"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Follows next links from the head until the value is found.",
    ),
    _o1("linked_list.is_empty", "linked_list", LINKED_LIST, "Is Empty", linked_list_ops.is_empty),
    OperationInfo(
        key="linked_list.size", family="linked_list", container=LINKED_LIST, label="Size",
        fn=linked_list_ops.size,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Counts the nodes reachable from the head.",
    ),

    # ---------------- binary tree ----------------
    OperationInfo(
        key="binary_tree.insert", family="binary_tree", container=TREE, label="Insert (level order)",
        fn=binary_tree_ops.insert, operands=["value"], pseudocode=binary_tree_ops.PSEUDOCODE,
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(n)",
        description="Fills the first free child slot in breadth-first order.",
    ),
    OperationInfo(
        key="binary_tree.search", family="binary_tree", container=TREE, label="Search",
        fn=binary_tree_ops.search, operands=["target"],
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(n)",
        description="Level-order scan for the value.",
    ),
    OperationInfo(
        key="binary_tree.in_order", family="binary_tree", container=TREE, label="In-order Traversal",
        fn=binary_tree_ops.in_order,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(h)",
        description="Left subtree, node, right subtree. Sorted output on a BST.",
    ),
    OperationInfo(
        key="binary_tree.pre_order", family="binary_tree", container=TREE, label="Pre-order Traversal",
        fn=binary_tree_ops.pre_order,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(h)",
        description="Node, left subtree, right subtree.",
    ),
    OperationInfo(
        key="binary_tree.post_order", family="binary_tree", container=TREE, label="Post-order Traversal",
        fn=binary_tree_ops.post_order,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(h)",
        description="Left subtree, right subtree, node.",
    ),
    OperationInfo(
        key="binary_tree.level_order", family="binary_tree", container=TREE, label="Level-order Traversal",
        fn=binary_tree_ops.level_order,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(w)",
        description="Breadth-first, one level at a time.",
    ),

    # ---------------- BST ----------------
    OperationInfo(
        key="bst.insert", family="bst", container=TREE, label="Insert",
        fn=bst_ops.insert, operands=["value"], pseudocode=bst_ops.PSEUDOCODE,
        complexity_best="O(log n)", complexity_average="O(log n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Descends left or right by comparison. Duplicates are rejected.",
    ),
    OperationInfo(
        key="bst.search", family="bst", container=TREE, label="Search",
        fn=bst_ops.search, operands=["target"],
        complexity_best="O(1)", complexity_average="O(log n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Descends left or right by comparison until found.",
    ),
    OperationInfo(
        key="bst.find_min", family="bst", container=TREE, label="Find Min",
        fn=bst_ops.find_min,
        complexity_best="O(1)", complexity_average="O(log n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walks the left spine.",
    ),
    OperationInfo(
        key="bst.find_max", family="bst", container=TREE, label="Find Max",
        fn=bst_ops.find_max,
        complexity_best="O(1)", complexity_average="O(log n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Walks the right spine.",
    ),
    OperationInfo(
        key="bst.validate", family="bst", container=TREE, label="Validate",
        fn=bst_ops.validate,
        complexity_best="O(1)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(h)",
        description="Checks every node against a shrinking (min, max) interval.",
    ),

    # ---------------- heap ----------------
    OperationInfo(
        key="heap.insert", family="heap", container=LIST, label="Insert",
        fn=heap_ops.heap_insert, operands=["value"], pseudocode=heap_ops.PSEUDOCODE,
        complexity_best="O(1)", complexity_average="O(log n)", complexity_worst="O(log n)", complexity_space="O(1)",
        description="Appends, then bubbles up while smaller than the parent.",
    ),
    OperationInfo(
        key="heap.extract_min", family="heap", container=LIST, label="Extract Min",
        fn=heap_ops.heap_extract_min,
        complexity_best="O(1)", complexity_average="O(log n)", complexity_worst="O(log n)", complexity_space="O(1)",
        description="Moves the last value to the root and sinks it.",
    ),
    OperationInfo(
        key="heap.heapify", family="heap", container=LIST, label="Heapify",
        fn=heap_ops.heap_heapify,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Sinks every internal node, last to first.",
    ),
    _o1("heap.peek", "heap", LIST, "Peek", heap_ops.heap_peek, [], "Reads the minimum at the root."),
    _o1("heap.size", "heap", LIST, "Size", heap_ops.heap_size),
    _o1("heap.is_empty", "heap", LIST, "Is Empty", heap_ops.heap_is_empty),
    OperationInfo(
        key="heap.heap_sort", family="heap", container=LIST, label="Heap Sort",
        fn=_heap_sort, pseudocode=_heap_sort_pc,
        complexity_best="O(n log n)", complexity_average="O(n log n)", complexity_worst="O(n log n)",
        complexity_space="O(1)",
        description="Ascending in-place sort over a max heap.",
    ),

    # ---------------- hash table ----------------
    OperationInfo(
        key="hash_table.insert", family="hash_table", container=HASH_TABLE, label="Insert",
        fn=hash_table_ops.insert, operands=["key", "value"],
        complexity_best="O(1)", complexity_average="O(1)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Linear probing from hash(key). Updates the value of an existing key.",
    ),
    OperationInfo(
        key="hash_table.search", family="hash_table", container=HASH_TABLE, label="Search",
        fn=hash_table_ops.search, operands=["key"],
        complexity_best="O(1)", complexity_average="O(1)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Probes until the key or an empty slot.",
    ),
    OperationInfo(
        key="hash_table.delete", family="hash_table", container=HASH_TABLE, label="Delete",
        fn=hash_table_ops.delete, operands=["key"],
        complexity_best="O(1)", complexity_average="O(1)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Empties the key's slot (no tombstone).",
    ),
    OperationInfo(
        key="hash_table.get_keys", family="hash_table", container=HASH_TABLE, label="Get Keys",
        fn=hash_table_ops.get_keys,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(n)",
        description="Lists the keys in slot order.",
    ),
    _o1("hash_table.load_factor", "hash_table", HASH_TABLE, "Load Factor", hash_table_ops.load_factor),
    OperationInfo(
        key="hash_table.clear", family="hash_table", container=HASH_TABLE, label="Clear",
        fn=hash_table_ops.clear,
        complexity_best="O(n)", complexity_average="O(n)", complexity_worst="O(n)", complexity_space="O(1)",
        description="Empties every slot and resets the counters.",
    ),
    _o1("hash_table.collision_stats", "hash_table", HASH_TABLE, "Collision Stats", hash_table_ops.collision_stats),

    # ---------------- graph ----------------
    OperationInfo(
        key="graph.bfs", family="graph", container=GRAPH, label="Breadth-First Search",
        fn=_bfs, operands=["source"], pseudocode=_bfs_pc,
        complexity_best="O(V + E)", complexity_average="O(V + E)", complexity_worst="O(V + E)",
        complexity_space="O(V)",
        description="Explores layer by layer, neighbours in lexicographic order.",
    ),
    OperationInfo(
        key="graph.dfs", family="graph", container=GRAPH, label="Depth-First Search",
        fn=_dfs, operands=["source"], pseudocode=_dfs_pc,
        complexity_best="O(V + E)", complexity_average="O(V + E)", complexity_worst="O(V + E)",
        complexity_space="O(V + E)",
        description="Dives deep before backtracking, using an explicit stack.",
    ),
    OperationInfo(
        key="graph.dijkstra", family="graph", container=GRAPH, label="Dijkstra's Algorithm",
        fn=_dijkstra, operands=["source", "target"], pseudocode=_dij_pc,
        complexity_best="O(V²)", complexity_average="O(V²)", complexity_worst="O(V²)", complexity_space="O(V)",
        description="Repeatedly finalises the closest unvisited node. Non-negative weights only.",
    ),
]

REGISTRY: Dict[str, OperationInfo] = {info.key: info for info in _ENTRIES}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(key: str) -> OperationInfo:
    """Return OperationInfo by key.  Raises UnknownOperationError."""
    try:
        return REGISTRY[key]
    except KeyError:
        raise UnknownOperationError(key) from None


def list_operations() -> List[OperationInfo]:
    """Return all registered operations in insertion order."""
    return list(REGISTRY.values())


def operations_by_family(family: str) -> List[OperationInfo]:
    return [op for op in REGISTRY.values() if op.family == family]


def families() -> List[str]:
    return list(dict.fromkeys(op.family for op in REGISTRY.values()))


__all__ = [
    "OperationInfo",
    "REGISTRY",
    "get_operation",
    "list_operations",
    "operations_by_family",
    "families",
    "LIST", "LINKED_LIST", "TREE", "HASH_TABLE", "GRAPH",
]
