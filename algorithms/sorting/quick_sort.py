"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot = last element of the current subrange.  `_partition` is a generator
whose return value is the pivot's final index; the caller reads it through a
StepStream instead of relying on the bare generator-return protocol.
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, StepStream, all_positions, make_step


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, low, high):",                 # 0
    "    if low < high:",                              # 1
    "        p = partition(arr, low, high)",           # 2
    "        quick_sort(arr, low, p - 1)",             # 3
    "        quick_sort(arr, p + 1, high)",            # 4
    "def partition(arr, low, high):",                  # 5
    "    pivot = arr[high]; i = low - 1",              # 6
    "    for j in range(low, high):",                  # 7
    "        if arr[j] < pivot:",                      # 8
    "            i += 1; swap(arr[i], arr[j])",        # 9
    "    swap(arr[i + 1], arr[high])",                 # 10
    "    return i + 1",                                # 11
]


def quick_sort(arr: List[float]) -> Generator[Step, None, None]:
    # pending subranges; the left one is popped first
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            if low == high:
                yield make_step(StepKind.SORTED, [low], f"Single element {arr[low]} is in place")
            continue

        part = StepStream(_partition(arr, low, high))
        yield from part
        pivot_idx: int = part.result

        pending.append((pivot_idx + 1, high))
        pending.append((low, pivot_idx - 1))

    yield make_step(StepKind.SORTED, all_positions(len(arr)), "Sorting complete!")


def _partition(arr: List[float], low: int, high: int) -> Generator[Step, None, int]:
    pivot = arr[high]
    yield make_step(StepKind.ACTIVE, [high], f"Pivot selected: {pivot}")

    i = low - 1
    for j in range(low, high):
        yield make_step(StepKind.COMPARE, [j, high], f"Comparing {arr[j]} with pivot {pivot}")
        if arr[j] < pivot:
            i += 1
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                yield make_step(StepKind.SWAP, [i, j], f"Swapping {arr[j]} and {arr[i]}")

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    yield make_step(StepKind.SWAP, [i + 1, high], f"Placing pivot {pivot} at position {i + 1}")
    yield make_step(StepKind.SORTED, [i + 1], f"Pivot {pivot} is now in its correct position")
    return i + 1
