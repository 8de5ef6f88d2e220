"""
insertion_sort.py — Insertion Sort
===================================
The key sinks into the sorted prefix by adjacent swaps, so every move is a
replayable SWAP.  A pass whose first comparison needs no swap ends right
there: on already-sorted input that is one comparison per element and no
swaps at all.  That per-key break is insertion sort's clean-pass short-circuit.

Nothing is marked SORTED before the end — a later key can still shift any
slot of the prefix.
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, all_positions, make_step


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                        # 0
    "    for i in range(1, n):",                       # 1
    "        j = i",                                   # 2
    "        while j > 0 and arr[j - 1] > arr[j]:",    # 3
    "            swap(arr[j - 1], arr[j])",            # 4
    "            j -= 1",                              # 5
]


def insertion_sort(arr: List[float]) -> Generator[Step, None, None]:
    n = len(arr)

    for i in range(1, n):
        key = arr[i]
        yield make_step(StepKind.ACTIVE, [i], f"Selecting {key} to insert into sorted portion")

        j = i
        while j > 0:
            yield make_step(StepKind.COMPARE, [j - 1, j], f"Comparing {arr[j - 1]} with {key}")
            if arr[j - 1] <= arr[j]:
                break
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            yield make_step(StepKind.SWAP, [j - 1, j], f"{arr[j]} > {key}, shifting {arr[j]} right")
            j -= 1

        yield make_step(StepKind.ACTIVE, [j], f"Placed {key} at position {j}")

    yield make_step(StepKind.SORTED, all_positions(n), "Sorting complete!")
