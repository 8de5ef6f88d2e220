"""
heap_sort.py — Heap Sort
=========================
Ascending in-place sort over a MAX-heap.  Phase 1 builds the heap bottom-up,
phase 2 repeatedly swaps the root with the last unsorted slot, marks that
slot SORTED and sifts the new root down over the shrunken heap.

`sift_down_max` is shared with the heap family's `heap_sort` operation; the
interactive min-heap operations use their own min-ordered sift.
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, all_positions, make_step
from structures.heap import last_internal, left_child, right_child


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",                             # 0
    "    for i in range(n // 2 - 1, -1, -1):",         # 1
    "        sift_down(arr, n, i)",                    # 2
    "    for end in range(n - 1, 0, -1):",             # 3
    "        swap(arr[0], arr[end])",                  # 4
    "        sift_down(arr, end, 0)",                  # 5
]


def heap_sort(arr: List[float]) -> Generator[Step, None, None]:
    n = len(arr)
    yield make_step(StepKind.ACTIVE, all_positions(n), "Building max heap")

    for i in range(last_internal(n), -1, -1):
        yield from sift_down_max(arr, n, i)

    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        yield make_step(StepKind.SWAP, [0, end], f"Moving max {arr[end]} to position {end}")
        yield make_step(StepKind.SORTED, [end], f"Element {arr[end]} is now in its correct position")
        yield from sift_down_max(arr, end, 0)

    if n:
        yield make_step(StepKind.SORTED, [0], f"Element {arr[0]} is now in its correct position")
    yield make_step(StepKind.SORTED, all_positions(n), "Sorting complete!")


def sift_down_max(arr: List[float], size: int, root: int) -> Generator[Step, None, None]:
    """Restore max-heap order below `root`, considering only arr[:size]."""
    while True:
        largest = root
        left, right = left_child(root), right_child(root)
        yield make_step(StepKind.ACTIVE, [root], f"Heapifying at index {root}")

        if left < size:
            yield make_step(StepKind.COMPARE, [left, largest], f"Comparing {arr[left]} with {arr[largest]}")
            if arr[left] > arr[largest]:
                largest = left
        if right < size:
            yield make_step(StepKind.COMPARE, [right, largest], f"Comparing {arr[right]} with {arr[largest]}")
            if arr[right] > arr[largest]:
                largest = right

        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        yield make_step(StepKind.SWAP, [root, largest], f"Swapping {arr[largest]} and {arr[root]}")
        root = largest
