"""
array_ops.py — Array Operations
================================
Insert and delete visualise their O(n) shift cost: one ACTIVE step per
element that moves, then the INSERT / DELETE, then a SORTED step over every
index to say the array has settled.  Access and update are O(1).

Valid indices: insert accepts 0..n (n appends), everything else 0..n-1.
"""

from typing import Generator, List, Optional

from algorithms.step import Step, StepKind, all_positions, guard, make_step


def _bad_index(index: int, length: int) -> Step:
    return guard(f"Invalid index {index}: valid range is 0 to {max(length - 1, 0)}")


def array_insert(arr: List[float], index: int, value: float) -> Generator[Step, None, None]:
    if not 0 <= index <= len(arr):
        yield guard(f"Invalid index {index}: valid range is 0 to {len(arr)}")
        return

    yield make_step(StepKind.HIGHLIGHT, [index], f"Inserting {value} at index {index}")

    for i in range(len(arr) - 1, index - 1, -1):
        yield make_step(StepKind.ACTIVE, [i, i + 1], f"Shifting {arr[i]} from index {i} to {i + 1}")

    arr.insert(index, value)
    yield make_step(StepKind.INSERT, [index], f"Inserted {value} at index {index}", auxiliary={"inserted": value})
    yield make_step(StepKind.SORTED, all_positions(len(arr)), "Insertion complete")


def array_delete(arr: List[float], index: int) -> Generator[Step, None, Optional[float]]:
    if not 0 <= index < len(arr):
        yield _bad_index(index, len(arr))
        return None

    removed = arr[index]
    yield make_step(StepKind.HIGHLIGHT, [index], f"Deleting {removed} at index {index}")

    for i in range(index, len(arr) - 1):
        yield make_step(StepKind.ACTIVE, [i, i + 1], f"Shifting {arr[i + 1]} from index {i + 1} to {i}")

    del arr[index]
    yield make_step(StepKind.DELETE, [index], f"Deleted {removed} from index {index}", auxiliary={"removed": removed})
    yield make_step(StepKind.SORTED, all_positions(len(arr)), "Deletion complete")
    return removed


def array_access(arr: List[float], index: int) -> Generator[Step, None, Optional[float]]:
    if not 0 <= index < len(arr):
        yield _bad_index(index, len(arr))
        return None
    yield make_step(StepKind.HIGHLIGHT, [index], f"Accessing index {index}")
    yield make_step(StepKind.SEARCH, [index], f"Value at index {index} is {arr[index]}")
    return arr[index]


def array_update(arr: List[float], index: int, value: float) -> Generator[Step, None, None]:
    if not 0 <= index < len(arr):
        yield _bad_index(index, len(arr))
        return
    old = arr[index]
    yield make_step(StepKind.HIGHLIGHT, [index], f"Updating index {index}")
    arr[index] = value
    yield make_step(StepKind.INSERT, [index], f"Updated index {index}: {old} → {value}", auxiliary={"write": value})


def array_search(arr: List[float], target: float) -> Generator[Step, None, int]:
    """Linear scan, index 0 → n-1.  Returns the first matching index or -1."""
    yield make_step(StepKind.HIGHLIGHT, [], f"Searching for {target}")
    for i, v in enumerate(arr):
        yield make_step(StepKind.COMPARE, [i], f"Checking index {i}: {v}")
        if v == target:
            yield make_step(StepKind.SEARCH, [i], f"Found {target} at index {i}")
            return i
    yield make_step(StepKind.HIGHLIGHT, [], f"{target} not found in array")
    return -1
