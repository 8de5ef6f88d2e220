"""
heap_ops.py — Min-Heap Operations
==================================
The interactive heap is a MIN-heap stored in a plain list.  Insert bubbles
the new value up, extract-min moves the last value to the root and sinks
it, heapify sinks every internal node from the last one back to the root.

All moves are SWAP steps and the append / pop carry "inserted" / "removed",
so the heap array can be rebuilt from the steps alone.

Ascending heap sort uses a MAX-heap and lives in algorithms.sorting.heap_sort.
"""

from typing import Generator, List, Optional

from algorithms.step import Step, StepKind, all_positions, guard, make_step
from structures.heap import last_internal, left_child, parent, right_child, swap


PSEUDOCODE: List[str] = [
    "def insert(heap, value):",                        # 0
    "    heap.append(value); i = len(heap) - 1",       # 1
    "    while i > 0 and heap[parent(i)] > heap[i]:",  # 2
    "        swap(heap[i], heap[parent(i)])",          # 3
    "        i = parent(i)",                           # 4
]


def heap_insert(heap: List[float], value: float) -> Generator[Step, None, None]:
    yield make_step(StepKind.HIGHLIGHT, [], f"Inserting {value} into the heap")
    heap.append(value)
    current = len(heap) - 1
    yield make_step(StepKind.INSERT, [current], f"Added {value} at index {current}", auxiliary={"inserted": value})

    while current > 0:
        p = parent(current)
        yield make_step(StepKind.COMPARE, [current, p], f"Comparing {heap[current]} with parent {heap[p]}")
        if heap[current] >= heap[p]:
            yield make_step(StepKind.SORTED, [current], "Heap property satisfied")
            return
        swap(heap, current, p)
        yield make_step(StepKind.SWAP, [current, p], f"Swapping {heap[p]} with parent {heap[current]}")
        current = p

    yield make_step(StepKind.SORTED, [0], f"{heap[0]} is the new minimum")


def heap_extract_min(heap: List[float]) -> Generator[Step, None, Optional[float]]:
    if not heap:
        yield guard("Heap is empty - nothing to extract")
        return None

    minimum = heap[0]
    yield make_step(StepKind.SEARCH, [0], f"Minimum element is {minimum}")

    last = len(heap) - 1
    if last > 0:
        swap(heap, 0, last)
        yield make_step(StepKind.SWAP, [0, last], f"Moving last element {heap[0]} to the root")
    heap.pop()
    yield make_step(StepKind.DELETE, [last], f"Removed {minimum}", auxiliary={"removed": minimum})

    if heap:
        yield from _sift_down_min(heap, 0)
    return minimum


def heap_heapify(heap: List[float]) -> Generator[Step, None, None]:
    if len(heap) <= 1:
        yield make_step(StepKind.SORTED, all_positions(len(heap)), "Array is already a valid heap")
        return

    yield make_step(StepKind.HIGHLIGHT, all_positions(len(heap)), "Building min heap from the last internal node")
    for i in range(last_internal(len(heap)), -1, -1):
        yield from _sift_down_min(heap, i)
    yield make_step(StepKind.SORTED, all_positions(len(heap)), "Min heap built")


def heap_peek(heap: List[float]) -> Generator[Step, None, Optional[float]]:
    if not heap:
        yield guard("Heap is empty")
        return None
    yield make_step(StepKind.SEARCH, [0], f"Minimum element is {heap[0]}")
    return heap[0]


def heap_size(heap: List[float]) -> Generator[Step, None, int]:
    yield make_step(StepKind.HIGHLIGHT, all_positions(len(heap)), f"Heap size: {len(heap)}")
    return len(heap)


def heap_is_empty(heap: List[float]) -> Generator[Step, None, bool]:
    empty = not heap
    yield make_step(StepKind.HIGHLIGHT, all_positions(len(heap)), "Heap is EMPTY" if empty else "Heap is NOT EMPTY")
    return empty


def _sift_down_min(heap: List[float], index: int) -> Generator[Step, None, None]:
    size = len(heap)
    while True:
        smallest = index
        left, right = left_child(index), right_child(index)
        yield make_step(StepKind.ACTIVE, [index], f"Sifting down {heap[index]} at index {index}")

        if left < size:
            yield make_step(StepKind.COMPARE, [left, smallest], f"Comparing left child {heap[left]} with {heap[smallest]}")
            if heap[left] < heap[smallest]:
                smallest = left
        if right < size:
            yield make_step(StepKind.COMPARE, [right, smallest], f"Comparing right child {heap[right]} with {heap[smallest]}")
            if heap[right] < heap[smallest]:
                smallest = right

        if smallest == index:
            yield make_step(StepKind.SORTED, [index], "Heap property restored")
            return
        swap(heap, index, smallest)
        yield make_step(StepKind.SWAP, [index, smallest], f"Swapping {heap[smallest]} with {heap[index]}")
        index = smallest
