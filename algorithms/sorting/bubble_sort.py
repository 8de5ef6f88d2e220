"""
bubble_sort.py — Bubble Sort
=============================
Yields a Step at:
  1. Every adjacent comparison          →  COMPARE
  2. Every swap that comparison causes  →  SWAP
  3. End of each pass                   →  SORTED for the slot just fixed
  4. A pass with no swaps               →  one SORTED for everything left, stop
  5. Completion                         →  one SORTED covering the whole array
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, all_positions, make_step


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                           # 0
    "    for i in range(n - 1):",                      # 1
    "        swapped = False",                         # 2
    "        for j in range(n - i - 1):",              # 3
    "            if arr[j] > arr[j + 1]:",             # 4
    "                swap(arr[j], arr[j + 1])",        # 5
    "                swapped = True",                  # 6
    "        if not swapped: break",                   # 7
]


def bubble_sort(arr: List[float]) -> Generator[Step, None, None]:
    n = len(arr)

    for i in range(n - 1):
        swapped = False
        last = n - i - 1

        for j in range(last):
            yield make_step(StepKind.COMPARE, [j, j + 1], f"Comparing {arr[j]} and {arr[j + 1]}")

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield make_step(StepKind.SWAP, [j, j + 1], f"Swapping {arr[j + 1]} and {arr[j]}")

        # the largest remaining value has bubbled to the end of this pass
        yield make_step(StepKind.SORTED, [last], f"Element {arr[last]} is now in its correct position")

        if not swapped:
            yield make_step(
                StepKind.SORTED,
                all_positions(last),
                "No swaps made in this pass - the rest of the array is already sorted",
            )
            break

    yield make_step(StepKind.SORTED, all_positions(n), "Sorting complete!")
