import pytest

from algorithms.linear.array_ops import (
    array_access, array_delete, array_insert, array_search, array_update,
)
from algorithms.linear.queue_ops import (
    dequeue, enqueue, queue_is_empty, queue_peek, queue_rear, queue_search, queue_size,
)
from algorithms.linear.stack_ops import (
    stack_is_empty, stack_peek, stack_pop, stack_push, stack_search, stack_size,
)
from algorithms.step import StepKind, StepStream
from engine import Recorder, replay_values


def run(gen):
    stream = StepStream(gen)
    return stream.drain(), stream.result


def kinds(steps):
    return [s.kind for s in steps]


# ---------------------------------------------------------------------------
# Array
# ---------------------------------------------------------------------------
def test_array_insert_shifts_then_inserts():
    arr = [1, 2, 3]
    steps, _ = run(array_insert(arr, 1, 9))
    assert arr == [1, 9, 2, 3]
    assert kinds(steps) == [
        StepKind.HIGHLIGHT, StepKind.ACTIVE, StepKind.ACTIVE, StepKind.INSERT, StepKind.SORTED,
    ]
    assert steps[-1].positions == [0, 1, 2, 3]


def test_array_insert_at_end_needs_no_shift():
    arr = [1, 2]
    steps, _ = run(array_insert(arr, 2, 3))
    assert arr == [1, 2, 3]
    assert StepKind.ACTIVE not in kinds(steps)


@pytest.mark.parametrize("index", [-1, 4])
def test_array_insert_bad_index_is_rejected(index):
    arr = [1, 2, 3]
    steps, _ = run(array_insert(arr, index, 9))
    assert len(steps) == 1
    assert steps[0].rejected
    assert arr == [1, 2, 3]


def test_array_delete():
    arr = [1, 2, 3, 4]
    steps, removed = run(array_delete(arr, 1))
    assert removed == 2
    assert arr == [1, 3, 4]
    assert kinds(steps).count(StepKind.ACTIVE) == 2
    assert steps[-2].auxiliary == {"removed": 2}


def test_array_delete_on_empty_is_rejected():
    steps, removed = run(array_delete([], 0))
    assert removed is None
    assert [s.rejected for s in steps] == [True]


def test_array_access_and_update():
    arr = [4, 5, 6]
    steps, value = run(array_access(arr, 2))
    assert value == 6
    assert kinds(steps) == [StepKind.HIGHLIGHT, StepKind.SEARCH]

    steps, _ = run(array_update(arr, 0, 40))
    assert arr == [40, 5, 6]
    assert steps[-1].kind == StepKind.INSERT
    assert steps[-1].auxiliary == {"write": 40}


def test_array_search_hit_and_miss():
    steps, idx = run(array_search([7, 8, 9], 8))
    assert idx == 1
    assert [s.positions for s in steps if s.kind == StepKind.COMPARE] == [[0], [1]]
    assert steps[-1].kind == StepKind.SEARCH

    steps, idx = run(array_search([7, 8, 9], 1))
    assert idx == -1
    assert kinds(steps).count(StepKind.COMPARE) == 3
    assert steps[-1].kind == StepKind.HIGHLIGHT
    assert not steps[-1].rejected


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def test_stack_push_and_pop():
    stack = [1, 2]
    steps, _ = run(stack_push(stack, 3))
    assert stack == [1, 2, 3]
    assert steps[-1].kind == StepKind.ACTIVE
    assert steps[-1].positions == [2]

    steps, value = run(stack_pop(stack))
    assert value == 3
    assert stack == [1, 2]
    assert steps[-1].message == "Top is now 2"


def test_stack_overflow_and_underflow_are_rejected():
    stack = [1, 2]
    steps, _ = run(stack_push(stack, 3, capacity=2))
    assert len(steps) == 1 and steps[0].rejected
    assert "Overflow" in steps[0].message
    assert stack == [1, 2]

    steps, value = run(stack_pop([]))
    assert value is None
    assert len(steps) == 1 and steps[0].rejected
    assert "Underflow" in steps[0].message


def test_stack_unbounded_by_default():
    stack = list(range(500))
    run(stack_push(stack, 500))
    assert len(stack) == 501


def test_stack_pop_last_element_reports_empty():
    steps, _ = run(stack_pop([1]))
    assert steps[-1].message == "Stack is now empty"


def test_stack_queries():
    stack = [1, 2, 3]
    assert run(stack_peek(stack))[1] == 3
    assert run(stack_size(stack))[1] == 3
    assert run(stack_is_empty(stack))[1] is False
    steps, empty = run(stack_is_empty([]))
    assert empty is True
    assert steps[0].message == "Stack is EMPTY"
    assert run(stack_peek([]))[0][0].rejected


def test_stack_search_scans_top_to_bottom():
    steps, idx = run(stack_search([1, 2, 3], 2))
    assert idx == 1
    assert [s.positions for s in steps if s.kind == StepKind.COMPARE] == [[2], [1]]


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def test_enqueue_and_dequeue():
    queue = [1, 2, 3]
    steps, value = run(dequeue(queue))
    assert value == 1
    assert queue == [2, 3]
    assert kinds(steps).count(StepKind.ACTIVE) == 3   # two shifts + new front
    assert steps[-1].message == "Front is now 2"

    steps, _ = run(enqueue(queue, 4))
    assert queue == [2, 3, 4]
    assert steps[-1].message == "Rear is now 4"


def test_queue_full_and_empty_are_rejected():
    queue = [1]
    steps, _ = run(enqueue(queue, 2, capacity=1))
    assert steps[0].rejected and len(steps) == 1
    assert queue == [1]

    steps, value = run(dequeue([]))
    assert value is None
    assert steps[0].rejected and len(steps) == 1


def test_queue_queries():
    queue = [5, 6, 7]
    assert run(queue_peek(queue))[1] == 5
    assert run(queue_rear(queue))[1] == 7
    assert run(queue_size(queue))[1] == 3
    assert run(queue_is_empty(queue))[1] is False
    assert run(queue_rear([]))[0][0].rejected


def test_queue_search_scans_front_to_rear():
    steps, idx = run(queue_search([5, 6, 7], 7))
    assert idx == 2
    assert [s.positions for s in steps if s.kind == StepKind.COMPARE] == [[0], [1], [2]]


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key, container, operands", [
    ("array.insert", [1, 2, 3], {"index": 0, "value": 9}),
    ("array.delete", [1, 2, 3], {"index": 1}),
    ("array.update", [1, 2, 3], {"index": 2, "value": 0}),
    ("stack.push", [1, 2], {"value": 3}),
    ("stack.pop", [1, 2], {}),
    ("queue.enqueue", [1], {"value": 2}),
    ("queue.dequeue", [1, 2, 3], {}),
])
def test_linear_ops_replay_from_steps(key, container, operands):
    rec = Recorder()
    rec.start(key, container, **operands)
    rec.run_to_completion()
    r = rec.recording
    for k, snap in enumerate(r.snapshots):
        assert replay_values(r.initial, r.steps, k) == snap
    assert r.snapshots[-1] == container
