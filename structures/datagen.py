"""
datagen.py — Random Seed Data
==============================
Collaborator utilities that produce initial containers.  Operation
generators never call these; the caller generates data up front and passes
it in, so every run is reproducible from (data, operation, operands).

All functions take an optional `seed` and use their own Random instance.
"""

import random
from typing import List, Optional, Tuple

import config
from structures.graph import Graph, circle_layout


def random_array(
    size: int = config.DEFAULT_ARRAY_SIZE,
    low: int = config.VALUE_RANGE[0],
    high: int = config.VALUE_RANGE[1],
    seed: Optional[int] = None,
) -> List[int]:
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def sorted_array(size: int = config.DEFAULT_ARRAY_SIZE, seed: Optional[int] = None) -> List[int]:
    return sorted(random_array(size, seed=seed))


def reverse_sorted_array(size: int = config.DEFAULT_ARRAY_SIZE, seed: Optional[int] = None) -> List[int]:
    return sorted(random_array(size, seed=seed), reverse=True)


def nearly_sorted_array(size: int = config.DEFAULT_ARRAY_SIZE, seed: Optional[int] = None) -> List[int]:
    """Sorted, then ~10% random swaps — shows off insertion sort's best case."""
    rng = random.Random(seed)
    values = sorted(random_array(size, seed=seed))
    for _ in range(size // 10):
        i, j = rng.randrange(size), rng.randrange(size)
        values[i], values[j] = values[j], values[i]
    return values


ARRAY_PRESETS = {
    "random":         random_array,
    "sorted":         sorted_array,
    "reverse":        reverse_sorted_array,
    "nearly-sorted":  nearly_sorted_array,
}


def random_graph(
    num_nodes: int = 8,
    edge_probability: float = 0.3,
    directed: bool = False,
    weighted: bool = True,
    weight_range: Tuple[int, int] = (1, 10),
    seed: Optional[int] = None,
    canvas_w: float = 800,
    canvas_h: float = 500,
) -> Graph:
    """
    Erdős–Rényi style random graph on nodes "0".."n-1".
    Each possible edge is included with probability `edge_probability`,
    then a random spanning path guarantees connectivity.
    """
    rng = random.Random(seed)
    g = Graph(directed=directed, weighted=weighted)

    ids = [str(i) for i in range(num_nodes)]
    for nid, (x, y) in zip(ids, circle_layout(num_nodes, canvas_w, canvas_h)):
        # jitter so it looks natural
        g.add_node(nid, int(nid), x + rng.uniform(-30, 30), y + rng.uniform(-30, 30))

    def weight():
        return rng.randint(*weight_range) if weighted else None

    for i in range(num_nodes):
        for j in range(num_nodes):
            if i == j or (not directed and j < i):
                continue
            if rng.random() < edge_probability:
                g.add_edge(ids[i], ids[j], weight())

    # spanning-path backbone
    shuffled = list(ids)
    rng.shuffle(shuffled)
    for a, b in zip(shuffled, shuffled[1:]):
        if not g.has_edge(a, b):
            g.add_edge(a, b, weight())

    return g
