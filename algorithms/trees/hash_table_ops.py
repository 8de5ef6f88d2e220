"""
hash_table_ops.py — Hash Table Operations
==========================================
Division hashing on |key| with linear probing.  Step positions are slot
indices.  Every probe is one COMPARE; the slot that ends the probe is
INSERT / SEARCH / DELETE, or a HIGHLIGHT when the key is absent.

Inserting an existing key overwrites its value.  The table never resizes:
crossing the load-factor warning threshold only adds a HIGHLIGHT.
"""

from typing import Generator, List, Optional

import config
from algorithms.step import Step, StepKind, all_positions, guard, make_step
from structures.hash_table import HashEntry, HashTable


def _probe_start(table: HashTable, key: int) -> Step:
    slot = table.hash(key)
    return make_step(StepKind.ACTIVE, [slot], f"hash({key}) = |{key}| mod {table.capacity} = {slot}")


def insert(table: HashTable, key: int, value: float) -> Generator[Step, None, Optional[int]]:
    """Returns the slot written, or None when the table is full."""
    if table.size >= table.capacity and key not in table.keys():
        yield guard(f"Hash table is full! Cannot insert key {key}")
        return None

    yield make_step(StepKind.HIGHLIGHT, [], f"Inserting key {key} with value {value}")
    if table.load_factor >= config.LOAD_FACTOR_WARNING:
        yield make_step(
            StepKind.HIGHLIGHT, [],
            f"Load factor {table.load_factor:.2f} ≥ {config.LOAD_FACTOR_WARNING} - collisions are getting likely",
        )

    start = table.hash(key)
    yield _probe_start(table, key)
    for attempt in range(table.capacity):
        slot = (start + attempt) % table.capacity
        entry = table.table[slot]
        yield make_step(StepKind.COMPARE, [slot], f"Probing slot {slot}")

        if entry is None:
            table.table[slot] = HashEntry(key=key, value=value, index=slot)
            table.size += 1
            yield make_step(
                StepKind.INSERT, [slot], f"Inserted key {key} at slot {slot}",
                auxiliary={"key": key, "value": value},
            )
            return slot
        if entry.key == key:
            entry.value = value
            yield make_step(
                StepKind.INSERT, [slot], f"Key {key} exists - updated value to {value}",
                auxiliary={"key": key, "value": value},
            )
            return slot

        table.collisions += 1
        yield make_step(StepKind.HIGHLIGHT, [slot], f"Collision at slot {slot} (holds key {entry.key}), probing next slot")

    # unreachable: the size check above guarantees a free or matching slot
    raise AssertionError("linear probe exhausted a non-full table")


def search(table: HashTable, key: int) -> Generator[Step, None, Optional[float]]:
    """Returns the stored value, or None when the key is absent."""
    slot = yield from _locate(table, key)
    if slot is None:
        return None
    entry = table.table[slot]
    yield make_step(StepKind.SEARCH, [slot], f"Found key {key} at slot {slot}: value {entry.value}")
    return entry.value


def delete(table: HashTable, key: int) -> Generator[Step, None, bool]:
    slot = yield from _locate(table, key)
    if slot is None:
        return False
    entry = table.table[slot]
    # no tombstone: the slot goes straight back to empty
    table.table[slot] = None
    table.size -= 1
    yield make_step(
        StepKind.DELETE, [slot], f"Deleted key {key} from slot {slot}",
        auxiliary={"key": entry.key, "value": entry.value},
    )
    return True


def _locate(table: HashTable, key: int) -> Generator[Step, None, Optional[int]]:
    """Probe for `key`; emits the not-found HIGHLIGHT itself."""
    start = table.hash(key)
    yield _probe_start(table, key)
    for attempt in range(table.capacity):
        slot = (start + attempt) % table.capacity
        entry = table.table[slot]
        yield make_step(StepKind.COMPARE, [slot], f"Probing slot {slot}")
        if entry is None:
            break
        if entry.key == key:
            return slot
    yield make_step(StepKind.HIGHLIGHT, [], f"Key {key} not found")
    return None


def get_keys(table: HashTable) -> Generator[Step, None, List[int]]:
    keys = table.keys()
    occupied = [i for i, e in enumerate(table.table) if e is not None]
    yield make_step(StepKind.HIGHLIGHT, occupied, f"Keys: {keys}")
    return keys


def load_factor(table: HashTable) -> Generator[Step, None, float]:
    yield make_step(
        StepKind.HIGHLIGHT, [],
        f"Load factor: {table.size}/{table.capacity} = {table.load_factor:.2f}",
        auxiliary={"loadFactor": table.load_factor},
    )
    return table.load_factor


def clear(table: HashTable) -> Generator[Step, None, None]:
    table.table = [None] * table.capacity
    table.size = 0
    table.collisions = 0
    yield make_step(StepKind.DELETE, all_positions(table.capacity), "Hash table cleared")


def collision_stats(table: HashTable) -> Generator[Step, None, dict]:
    stats = {
        "collisions": table.collisions,
        "size":       table.size,
        "capacity":   table.capacity,
        "loadFactor": table.load_factor,
    }
    yield make_step(
        StepKind.HIGHLIGHT, [],
        f"Collisions: {table.collisions}, load factor {table.load_factor:.2f}",
        auxiliary=stats,
    )
    return stats
