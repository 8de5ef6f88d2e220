"""
hash_table.py — Open-Addressing Hash Table
===========================================
Fixed-capacity slot array with linear probing.

Deletion sets the slot straight back to empty (no tombstones).  A key that
was placed past a collision can become unreachable once the slot it probed
over is emptied.  This is a known limitation of the demo, kept on purpose.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from structures.errors import InvalidContainerError


@dataclass
class HashEntry:
    key:   int
    value: float
    index: int

    def to_dict(self) -> dict:
        return {"key": self.key, "value": self.value, "index": self.index}


@dataclass
class HashTable:
    """
    Attributes:
        capacity   : number of slots (fixed — no resize is implemented)
        table      : slot array, None for an empty slot
        size       : number of occupied slots
        collisions : running count of probes past an occupied slot
    """

    capacity:   int
    table:      List[Optional[HashEntry]] = field(default_factory=list)
    size:       int = 0
    collisions: int = 0

    def __post_init__(self):
        if self.capacity < 1:
            raise InvalidContainerError("hash table capacity must be at least 1")
        if not self.table:
            self.table = [None] * self.capacity

    def hash(self, key: int) -> int:
        """Division method on |key| so negative keys still land in range."""
        return abs(key) % self.capacity

    @property
    def load_factor(self) -> float:
        return self.size / self.capacity

    def keys(self) -> List[int]:
        return [e.key for e in self.table if e is not None]

    def to_dict(self) -> dict:
        return {
            "capacity":   self.capacity,
            "size":       self.size,
            "collisions": self.collisions,
            "table":      [e.to_dict() if e else None for e in self.table],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HashTable":
        capacity = int(data.get("capacity", 0))
        ht = cls(capacity=capacity)
        if "table" in data:
            slots = data["table"]
            if len(slots) != capacity:
                raise InvalidContainerError("table length does not match capacity")
            for i, slot in enumerate(slots):
                if slot is not None:
                    ht.table[i] = HashEntry(key=int(slot["key"]), value=slot["value"], index=i)
                    ht.size += 1
            ht.collisions = int(data.get("collisions", 0))
        return ht
