"""
queue_ops.py — Queue Operations
================================
A queue is a plain list; the front is index 0, the rear the last element.
Dequeue shows the O(n) shift of the list representation with one ACTIVE
step per element that moves forward.
"""

from typing import Generator, List, Optional

from algorithms.step import Step, StepKind, all_positions, guard, make_step


def enqueue(queue: List[float], value: float, capacity: Optional[int] = None) -> Generator[Step, None, None]:
    if capacity is not None and len(queue) >= capacity:
        yield guard(f"Queue is full! Cannot enqueue {value}: capacity {capacity} reached")
        return

    yield make_step(StepKind.HIGHLIGHT, [], f"Enqueuing {value} at the rear")
    queue.append(value)
    rear = len(queue) - 1
    yield make_step(StepKind.INSERT, [rear], f"Enqueued {value}", auxiliary={"inserted": value})
    yield make_step(StepKind.ACTIVE, [rear], f"Rear is now {value}")


def dequeue(queue: List[float]) -> Generator[Step, None, Optional[float]]:
    if not queue:
        yield guard("Queue is empty! Cannot dequeue")
        return None

    yield make_step(StepKind.HIGHLIGHT, [0], f"Dequeuing {queue[0]} from the front")
    for i in range(1, len(queue)):
        yield make_step(StepKind.ACTIVE, [i, i - 1], f"Shifting {queue[i]} forward to index {i - 1}")

    value = queue.pop(0)
    yield make_step(StepKind.DELETE, [0], f"Dequeued {value}", auxiliary={"removed": value})

    if queue:
        yield make_step(StepKind.ACTIVE, [0], f"Front is now {queue[0]}")
    else:
        yield make_step(StepKind.HIGHLIGHT, [], "Queue is now empty")
    return value


def queue_peek(queue: List[float]) -> Generator[Step, None, Optional[float]]:
    if not queue:
        yield guard("Queue is empty - nothing at the front")
        return None
    yield make_step(StepKind.SEARCH, [0], f"Front element is {queue[0]}")
    return queue[0]


def queue_rear(queue: List[float]) -> Generator[Step, None, Optional[float]]:
    if not queue:
        yield guard("Queue is empty - nothing at the rear")
        return None
    yield make_step(StepKind.SEARCH, [len(queue) - 1], f"Rear element is {queue[-1]}")
    return queue[-1]


def queue_is_empty(queue: List[float]) -> Generator[Step, None, bool]:
    empty = not queue
    yield make_step(StepKind.HIGHLIGHT, all_positions(len(queue)), "Queue is EMPTY" if empty else "Queue is NOT EMPTY")
    return empty


def queue_size(queue: List[float]) -> Generator[Step, None, int]:
    yield make_step(StepKind.HIGHLIGHT, all_positions(len(queue)), f"Queue size: {len(queue)}")
    return len(queue)


def queue_search(queue: List[float], target: float) -> Generator[Step, None, int]:
    """Scan front → rear.  Returns the index of the match or -1."""
    yield make_step(StepKind.HIGHLIGHT, [], f"Searching for {target} from the front")
    for i, v in enumerate(queue):
        yield make_step(StepKind.COMPARE, [i], f"Checking {v} at position {i}")
        if v == target:
            yield make_step(StepKind.SEARCH, [i], f"Found {target} at position {i}")
            return i
    yield make_step(StepKind.HIGHLIGHT, [], f"{target} not found in queue")
    return -1
