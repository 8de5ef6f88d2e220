"""
heap.py — Implicit Binary Heap Helpers
=======================================
A heap is a plain list; the tree shape is implicit in the indices.
"""

from typing import Callable, List, Sequence


def parent(i: int) -> int:
    return (i - 1) // 2


def left_child(i: int) -> int:
    return 2 * i + 1


def right_child(i: int) -> int:
    return 2 * i + 2


def last_internal(size: int) -> int:
    """Index of the last non-leaf node (-1 when there is none)."""
    return size // 2 - 1


def _holds(values: Sequence[float], ok: Callable[[float, float], bool]) -> bool:
    return all(ok(values[parent(i)], values[i]) for i in range(1, len(values)))


def is_min_heap(values: Sequence[float]) -> bool:
    return _holds(values, lambda p, c: p <= c)


def is_max_heap(values: Sequence[float]) -> bool:
    return _holds(values, lambda p, c: p >= c)


def swap(values: List[float], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]
