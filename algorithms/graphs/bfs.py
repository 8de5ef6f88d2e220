"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS traversal.  Yields a Step at every meaningful event:
  1. Start             →  HIGHLIGHT the source
  2. Dequeue a node    →  ACTIVE (this is the visit order)
  3. Examine an edge   →  COMPARE on both endpoints
  4. Enqueue unseen    →  VISITED (marked on discovery)
  5. Queue exhausted   →  SORTED over the whole visit order

Neighbours are taken in lexicographic id order at every node, so the
traversal is identical no matter in which order the edges were added.

The visit order is the generator's return value.
"""

from collections import deque
from typing import Generator, List

from algorithms.step import Step, StepKind, guard, make_step
from structures.graph import Graph


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",                 # 0
    "    queue ← [source]",                    # 1
    "    visited ← {source}",                  # 2
    "    while queue is not empty:",           # 3
    "        node ← queue.dequeue()",          # 4
    "        for neighbour in sorted(adj(node)):",  # 5
    "            if neighbour not visited:",    # 6
    "                visited.add(neighbour)",  # 7
    "                queue.enqueue(neighbour)",  # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, source: str) -> Generator[Step, None, List[str]]:
    """
    Args:
        graph  : The graph to traverse.
        source : Starting node id.

    Yields:
        Step – one per event (start, dequeue, edge check, enqueue, done).
    """
    if not graph.has_node(source):
        yield guard(f"Start node '{source}' is not in the graph")
        return []

    queue   = deque([source])
    visited = {source}
    order: List[str] = []

    yield make_step(
        StepKind.HIGHLIGHT, node_ids=[source],
        message=f"Starting BFS from '{source}': it is queued and marked visited",
        auxiliary={"queue": list(queue)},
    )

    while queue:
        node = queue.popleft()
        order.append(node)
        yield make_step(
            StepKind.ACTIVE, node_ids=[node],
            message=f"Dequeue '{node}' | Order: {order}",
            auxiliary={"order": list(order), "queue": list(queue)},
        )

        for nbr in sorted(graph.neighbors(node)):
            if nbr in visited:
                continue
            yield make_step(
                StepKind.COMPARE, node_ids=[node, nbr],
                message=f"Examine edge {node}→{nbr}: '{nbr}' is new",
                auxiliary={"edge": [node, nbr]},
            )
            visited.add(nbr)
            queue.append(nbr)
            yield make_step(
                StepKind.VISITED, node_ids=[nbr],
                message=f"Enqueue '{nbr}' (discovered from '{node}')",
                auxiliary={"queue": list(queue)},
            )

    yield make_step(
        StepKind.SORTED, node_ids=order,
        message=f"BFS complete. Order: {order}",
        auxiliary={"order": list(order)},
    )
    return order
