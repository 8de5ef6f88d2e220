import pytest

from algorithms.step import StepKind, StepStream
from algorithms.trees import hash_table_ops as ops
from structures import HashTable, InvalidContainerError


def run(gen):
    stream = StepStream(gen)
    return stream.drain(), stream.result


def filled(capacity, pairs):
    table = HashTable(capacity=capacity)
    for k, v in pairs:
        run(ops.insert(table, k, v))
    return table


def test_hash_uses_absolute_value():
    table = HashTable(capacity=10)
    assert table.hash(23) == 3
    assert table.hash(-23) == 3


def test_capacity_must_be_positive():
    with pytest.raises(InvalidContainerError):
        HashTable(capacity=0)


def test_inserted_keys_are_all_found():
    keys = [3, 13, 23, 7, 17, 42, -5]
    table = filled(10, [(k, k * 10) for k in keys])
    assert table.size == len(keys)
    for k in keys:
        assert run(ops.search(table, k))[1] == k * 10


def test_linear_probing_counts_collisions():
    table = HashTable(capacity=10)
    assert run(ops.insert(table, 1, "a"))[1] == 1
    steps, slot = run(ops.insert(table, 11, "b"))
    assert slot == 2
    assert [s.positions for s in steps if s.kind == StepKind.COMPARE] == [[1], [2]]
    assert run(ops.insert(table, 21, "c"))[1] == 3
    assert table.collisions == 3


def test_insert_existing_key_updates_value():
    table = filled(5, [(2, "old")])
    run(ops.insert(table, 2, "new"))
    assert table.size == 1
    assert run(ops.search(table, 2))[1] == "new"


def test_load_factor_warning():
    table = filled(10, [(k, k) for k in range(7)])
    steps, _ = run(ops.insert(table, 7, 7))
    assert any("Load factor" in s.message for s in steps)
    assert table.size == 8


def test_full_table_is_rejected():
    table = filled(2, [(0, "a"), (1, "b")])
    steps, slot = run(ops.insert(table, 5, "c"))
    assert slot is None
    assert len(steps) == 1 and steps[0].rejected
    # updating a present key still works
    assert run(ops.insert(table, 1, "z"))[1] == 1


def test_search_miss_stops_at_empty_slot():
    table = filled(10, [(4, "x")])
    steps, value = run(ops.search(table, 14))
    assert value is None
    assert [s.positions for s in steps if s.kind == StepKind.COMPARE] == [[4], [5]]
    assert steps[-1].kind == StepKind.HIGHLIGHT


def test_delete():
    table = filled(10, [(4, "x"), (5, "y")])
    steps, removed = run(ops.delete(table, 4))
    assert removed is True
    assert steps[-1].kind == StepKind.DELETE
    assert table.size == 1
    assert run(ops.delete(table, 4))[1] is False


def test_delete_breaks_probe_chain_without_tombstones():
    table = filled(10, [(1, "a"), (11, "b")])
    run(ops.delete(table, 1))
    assert run(ops.search(table, 11))[1] is None


def test_keys_load_factor_and_stats():
    table = filled(4, [(1, "a"), (5, "b")])
    steps, keys = run(ops.get_keys(table))
    assert keys == [1, 5]
    assert steps[0].positions == [1, 2]
    assert run(ops.load_factor(table))[1] == 0.5
    stats = run(ops.collision_stats(table))[1]
    assert stats == {"collisions": 1, "size": 2, "capacity": 4, "loadFactor": 0.5}


def test_clear():
    table = filled(4, [(1, "a"), (5, "b")])
    run(ops.clear(table))
    assert table.size == 0 and table.collisions == 0
    assert table.table == [None] * 4


def test_snapshot_round_trip():
    table = filled(4, [(1, "a"), (5, "b")])
    copy = HashTable.from_dict(table.to_dict())
    assert copy.to_dict() == table.to_dict()
