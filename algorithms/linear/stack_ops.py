"""
stack_ops.py — Stack Operations
================================
A stack is a plain list; the top is the LAST element.  `capacity=None`
means unbounded.
"""

from typing import Generator, List, Optional

from algorithms.step import Step, StepKind, all_positions, guard, make_step


def stack_push(stack: List[float], value: float, capacity: Optional[int] = None) -> Generator[Step, None, None]:
    if capacity is not None and len(stack) >= capacity:
        yield guard(f"Stack Overflow! Cannot push {value}: capacity {capacity} reached")
        return

    yield make_step(StepKind.HIGHLIGHT, [], f"Pushing {value} onto the stack")
    stack.append(value)
    top = len(stack) - 1
    yield make_step(StepKind.INSERT, [top], f"Pushed {value}", auxiliary={"inserted": value})
    yield make_step(StepKind.ACTIVE, [top], f"Top is now {value}")


def stack_pop(stack: List[float]) -> Generator[Step, None, Optional[float]]:
    if not stack:
        yield guard("Stack Underflow! Cannot pop from an empty stack")
        return None

    top = len(stack) - 1
    yield make_step(StepKind.HIGHLIGHT, [top], f"Popping {stack[top]} from the top")
    value = stack.pop()
    yield make_step(StepKind.DELETE, [top], f"Popped {value}", auxiliary={"removed": value})

    if stack:
        yield make_step(StepKind.ACTIVE, [len(stack) - 1], f"Top is now {stack[-1]}")
    else:
        yield make_step(StepKind.HIGHLIGHT, [], "Stack is now empty")
    return value


def stack_peek(stack: List[float]) -> Generator[Step, None, Optional[float]]:
    if not stack:
        yield guard("Stack is empty - nothing to peek")
        return None
    yield make_step(StepKind.SEARCH, [len(stack) - 1], f"Top element is {stack[-1]}")
    return stack[-1]


def stack_is_empty(stack: List[float]) -> Generator[Step, None, bool]:
    empty = not stack
    yield make_step(StepKind.HIGHLIGHT, all_positions(len(stack)), "Stack is EMPTY" if empty else "Stack is NOT EMPTY")
    return empty


def stack_size(stack: List[float]) -> Generator[Step, None, int]:
    yield make_step(StepKind.HIGHLIGHT, all_positions(len(stack)), f"Stack size: {len(stack)}")
    return len(stack)


def stack_search(stack: List[float], target: float) -> Generator[Step, None, int]:
    """Scan top → bottom.  Returns the list index of the match or -1."""
    yield make_step(StepKind.HIGHLIGHT, [], f"Searching for {target} from the top")
    for i in range(len(stack) - 1, -1, -1):
        depth = len(stack) - 1 - i
        yield make_step(StepKind.COMPARE, [i], f"Checking {stack[i]} ({depth} from the top)")
        if stack[i] == target:
            yield make_step(StepKind.SEARCH, [i], f"Found {target} at {depth} from the top")
            return i
    yield make_step(StepKind.HIGHLIGHT, [], f"{target} not found in stack")
    return -1
