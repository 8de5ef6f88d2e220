"""
selection_sort.py — Selection Sort
===================================
Each pass tracks the running MINIMUM of the unsorted suffix, swaps it into
place, and marks that slot SORTED (it never moves again).
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, all_positions, make_step


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                        # 0
    "    for i in range(n - 1):",                      # 1
    "        min_idx = i",                             # 2
    "        for j in range(i + 1, n):",               # 3
    "            if arr[j] < arr[min_idx]:",           # 4
    "                min_idx = j",                     # 5
    "        swap(arr[i], arr[min_idx])",              # 6
]


def selection_sort(arr: List[float]) -> Generator[Step, None, None]:
    n = len(arr)

    for i in range(n - 1):
        min_idx = i
        yield make_step(StepKind.MINIMUM, [i], f"Starting position {i}, current minimum: {arr[i]}")

        for j in range(i + 1, n):
            yield make_step(
                StepKind.COMPARE, [min_idx, j],
                f"Comparing current minimum {arr[min_idx]} with {arr[j]}",
            )
            if arr[j] < arr[min_idx]:
                min_idx = j
                yield make_step(StepKind.MINIMUM, [j], f"New minimum found: {arr[j]} at index {j}")

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield make_step(StepKind.SWAP, [i, min_idx], f"Swapping {arr[min_idx]} with minimum {arr[i]}")

        yield make_step(StepKind.SORTED, [i], f"Element {arr[i]} is now in its correct position")

    yield make_step(StepKind.SORTED, all_positions(n), "Sorting complete!")
