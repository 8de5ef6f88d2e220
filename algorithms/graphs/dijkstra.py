"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra with an O(V²) selection: every round scans the
unvisited set (in node insertion order, strictly-smaller wins) for the
smallest tentative distance.  No priority queue.

Yields a Step at:
  1. Initialise distances            →  UPDATE_DISTANCES
  2. Select the closest node         →  VISITED
  3. Each relaxation attempt         →  COMPARE (always, before any update)
  4. Successful relaxation           →  UPDATE_DISTANCES
  5. Target reached                  →  one PATH step per edge of the route
  6. No target / target unreachable  →  SORTED summary

Every step's auxiliary carries the full "distances" table.

Correctness note: Dijkstra requires non-negative weights.  Unweighted
edges cost 1.
"""

from dataclasses import dataclass, field
from typing import Dict, Generator, List, Optional

from algorithms.step import Step, StepKind, guard, make_step
from structures.graph import Graph


INF = float("inf")


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",        # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    unvisited ← V",                           # 3
    "    while unvisited is not empty:",           # 4
    "        u ← argmin dist[v] over unvisited",   # 5
    "        if dist[u] = ∞: break",               # 6
    "        remove u from unvisited",             # 7
    "        if u == target: break",               # 8
    "        for (v, w) in adj(u):",               # 9
    "            if dist[u] + w < dist[v]:",       # 10
    "                dist[v] ← dist[u] + w",       # 11
    "                prev[v] ← u",                 # 12
    "    return path via prev",                    # 13
]


@dataclass
class DijkstraResult:
    distances: Dict[str, float]         = field(default_factory=dict)
    previous:  Dict[str, Optional[str]] = field(default_factory=dict)
    path:      List[str]                = field(default_factory=list)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, Optional[DijkstraResult]]:

    if not graph.has_node(source):
        yield guard(f"Start node '{source}' is not in the graph")
        return None
    if target is not None and not graph.has_node(target):
        yield guard(f"Target node '{target}' is not in the graph")
        return None

    dist:     Dict[str, float]         = {nid: INF for nid in graph.nodes}
    previous: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    dist[source] = 0
    unvisited = graph.node_ids()

    yield make_step(
        StepKind.UPDATE_DISTANCES, node_ids=[source],
        message=f"Initialise: all distances = ∞ except source '{source}' = 0",
        auxiliary={"distances": dict(dist)},
    )

    # --- main loop ---
    while unvisited:
        u = unvisited[0]
        for nid in unvisited[1:]:
            if dist[nid] < dist[u]:
                u = nid
        if dist[u] == INF:
            # everything left is unreachable
            break
        unvisited.remove(u)

        yield make_step(
            StepKind.VISITED, node_ids=[u],
            message=f"Visit '{u}' with distance {dist[u]}: smallest among unvisited, now final",
            auxiliary={"distances": dict(dist)},
        )
        if u == target:
            break

        for edge in sorted(graph.edges(u), key=lambda e: e.target):
            v = edge.target
            if v not in unvisited:
                continue
            alt = dist[u] + edge.cost
            yield make_step(
                StepKind.COMPARE, node_ids=[u, v],
                message=f"Relax {u}→{v}: {dist[u]} + {edge.cost} = {alt} vs current {dist[v]}",
                auxiliary={"edge": [u, v], "distances": dict(dist)},
            )
            if alt < dist[v]:
                dist[v] = alt
                previous[v] = u
                yield make_step(
                    StepKind.UPDATE_DISTANCES, node_ids=[v],
                    message=f"Update distance of '{v}' to {alt} (via '{u}')",
                    auxiliary={"distances": dict(dist)},
                )

    result = DijkstraResult(distances=dict(dist), previous=dict(previous))

    if target is None:
        yield make_step(
            StepKind.SORTED, node_ids=[n for n in graph.nodes if dist[n] < INF],
            message=f"Shortest distances from '{source}' computed",
            auxiliary={"distances": dict(dist)},
        )
        return result

    if dist[target] == INF:
        yield make_step(
            StepKind.SORTED, node_ids=[n for n in graph.nodes if dist[n] < INF],
            message=f"Target '{target}' is NOT reachable from '{source}'",
            auxiliary={"distances": dict(dist)},
        )
        return result

    # --- path reconstruction ---
    result.path = _reconstruct(previous, target)
    path = result.path
    for a, b in zip(path, path[1:]):
        yield make_step(
            StepKind.PATH, node_ids=[a, b],
            message=f"Shortest path edge {a}→{b} (total distance {dist[target]}): {' → '.join(path)}",
            auxiliary={"path": list(path), "edge": [a, b], "distances": dict(dist)},
        )
    if len(path) == 1:
        yield make_step(
            StepKind.PATH, node_ids=[target],
            message=f"Target '{target}' is the source: distance 0",
            auxiliary={"path": list(path), "distances": dict(dist)},
        )
    return result


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _reconstruct(previous: Dict[str, Optional[str]], target: str) -> List[str]:
    path = []
    cur: Optional[str] = target
    while cur is not None:
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path
