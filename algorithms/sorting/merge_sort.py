"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  Each merge fills its destination range strictly
left-to-right; every placement is a SWAP step carrying `{"write": v}` so the
range can be rebuilt from the steps alone.

Design decisions:
  - The comparison step for slot k names k and carries the two candidate
    values (`left`, `right`) in `auxiliary`; the source halves live in
    temporary copies, not in the container.
  - A merged range is marked SORTED index by index only after the whole
    merge completes.  Those marks mean "settled within this subrange"; the
    final full-array SORTED step is the global guarantee.
"""

from typing import Generator, List

from algorithms.step import Step, StepKind, all_positions, make_step


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, left, right):",               # 0
    "    if left >= right: return",                    # 1
    "    mid = (left + right) // 2",                   # 2
    "    merge_sort(arr, left, mid)",                  # 3
    "    merge_sort(arr, mid + 1, right)",             # 4
    "    merge(arr, left, mid, right)",                # 5
]


def merge_sort(arr: List[float]) -> Generator[Step, None, None]:
    yield from _sort(arr, 0, len(arr) - 1)
    yield make_step(StepKind.SORTED, all_positions(len(arr)), "Sorting complete!")


def _sort(arr: List[float], left: int, right: int) -> Generator[Step, None, None]:
    if left >= right:
        return
    mid = (left + right) // 2
    yield from _sort(arr, left, mid)
    yield from _sort(arr, mid + 1, right)
    yield from _merge(arr, left, mid, right)


def _merge(arr: List[float], left: int, mid: int, right: int) -> Generator[Step, None, None]:
    left_half  = arr[left:mid + 1]
    right_half = arr[mid + 1:right + 1]
    i = j = 0
    k = left

    while i < len(left_half) and j < len(right_half):
        a, b = left_half[i], right_half[j]
        yield make_step(
            StepKind.COMPARE, [k], f"Comparing {a} and {b}",
            auxiliary={"left": a, "right": b},
        )
        if a <= b:
            arr[k] = a
            i += 1
        else:
            arr[k] = b
            j += 1
        yield make_step(StepKind.SWAP, [k], f"Placing {arr[k]} at position {k}", auxiliary={"write": arr[k]})
        k += 1

    for rest, idx in ((left_half, i), (right_half, j)):
        while idx < len(rest):
            arr[k] = rest[idx]
            yield make_step(StepKind.SWAP, [k], f"Placing {arr[k]} at position {k}", auxiliary={"write": arr[k]})
            idx += 1
            k += 1

    for pos in range(left, right + 1):
        yield make_step(StepKind.SORTED, [pos], f"Position {pos} merged")
