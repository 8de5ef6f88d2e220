"""
replay.py — Re-derive Linear Container State
=============================================
Rebuilds the values of an array / stack / queue / heap / sort input after
any step, using only the initial values and the step sequence.  Lets the UI
scrub backwards without re-running the generator.

Vocabulary (see algorithms.step):
    "write"    – values[positions[0]] = v
    "inserted" – values.insert(positions[0], v)
    "removed"  – del values[positions[0]]
    SWAP with two positions and no payload – swap them
"""

from typing import List, Sequence

from algorithms.step import Step, StepKind


def apply_step(values: List[float], step: Step) -> None:
    """Apply one step's effect to `values` in place.  Narration steps are no-ops."""
    aux = step.auxiliary
    if "write" in aux:
        values[step.positions[0]] = aux["write"]
    elif "inserted" in aux:
        values.insert(step.positions[0], aux["inserted"])
    elif "removed" in aux:
        del values[step.positions[0]]
    elif step.kind == StepKind.SWAP and len(step.positions) == 2:
        i, j = step.positions
        values[i], values[j] = values[j], values[i]


def replay_values(initial: Sequence[float], steps: Sequence[Step], upto: int) -> List[float]:
    """
    Values after steps[0..upto] (inclusive) have been applied to `initial`.
    `upto = -1` returns a copy of the initial values.
    """
    if upto >= len(steps):
        raise IndexError(f"step {upto} out of range (recording has {len(steps)} steps)")
    values = list(initial)
    for step in steps[:upto + 1]:
        apply_step(values, step)
    return values
