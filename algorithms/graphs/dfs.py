"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Start                      →  HIGHLIGHT the source
  2. Pop an unvisited node      →  ACTIVE (this is the visit order)
  3. Push an unvisited neighbour →  COMPARE on the edge
  4. Pop an already-visited one →  HIGHLIGHT, skipped
  5. Stack empty                →  SORTED over the whole visit order

Neighbours are pushed in REVERSE lexicographic order so they pop in forward
order.  Nodes are marked visited on pop, not on push: a node reachable over
several edges can sit on the stack more than once before its first visit.
Those stale entries are popped and skipped with their own step.
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, guard, make_step
from structures.graph import Graph


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, source):",                 # 0
    "    stack ← [source]",                    # 1
    "    visited ← {}",                        # 2
    "    while stack is not empty:",           # 3
    "        node ← stack.pop()",              # 4
    "        if node in visited: continue",    # 5
    "        visited.add(node)",               # 6
    "        for neighbour in reversed(sorted(adj(node))):",  # 7
    "            if neighbour not visited:",    # 8
    "                stack.push(neighbour)",   # 9
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, source: str) -> Generator[Step, None, List[str]]:
    if not graph.has_node(source):
        yield guard(f"Start node '{source}' is not in the graph")
        return []

    stack = [source]
    visited: set = set()
    order: List[str] = []

    yield make_step(
        StepKind.HIGHLIGHT, node_ids=[source],
        message=f"Starting DFS from '{source}': it is pushed onto the stack",
        auxiliary={"stack": list(stack)},
    )

    while stack:
        node = stack.pop()
        if node in visited:
            yield make_step(
                StepKind.HIGHLIGHT, node_ids=[node],
                message=f"Pop '{node}': already visited, skip",
                auxiliary={"stack": list(stack)},
            )
            continue

        visited.add(node)
        order.append(node)
        yield make_step(
            StepKind.ACTIVE, node_ids=[node],
            message=f"Pop '{node}' and visit it | Order: {order}",
            auxiliary={"order": list(order), "stack": list(stack)},
        )

        for nbr in sorted(graph.neighbors(node), reverse=True):
            if nbr in visited:
                continue
            stack.append(nbr)
            yield make_step(
                StepKind.COMPARE, node_ids=[node, nbr],
                message=f"Examine edge {node}→{nbr}: push '{nbr}'",
                auxiliary={"edge": [node, nbr], "stack": list(stack)},
            )

    yield make_step(
        StepKind.SORTED, node_ids=order,
        message=f"DFS complete. Order: {order}",
        auxiliary={"order": list(order)},
    )
    return order
