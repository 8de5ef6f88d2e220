"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete operation run: every Step, a container snapshot after
every Step, and the operation's result.  Then computes the metrics the UI
shows in its analytics panel and in Comparison Mode.

Usage:
    rec = Recorder()
    rec.start("sorting.quick", [3, 1, 2])
    rec.run_to_completion()          # drains the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for replay

Comparison Mode:
    Two Recorders run two operations on copies of the SAME input, then
    compare(rec1, rec2) → ComparisonResult.

Snapshot k is the container state immediately after step k was yielded.
Lists are copied; every other container is captured via its to_dict().
"""

import copy
import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import OperationInfo, get_operation
from algorithms.step import Step, StepKind, StepStream

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    operation_key:   str   = ""
    operation_label: str   = ""
    family:          str   = ""
    total_steps:     int   = 0          # number of Steps yielded
    compares:        int   = 0
    swaps:           int   = 0
    writes:          int   = 0          # steps carrying write / inserted / removed
    rejected:        bool  = False      # run ended on a guard
    wall_time_ms:    float = 0.0        # wall-clock time to run to completion


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:    str = ""   # which operation needed fewer steps
    winner_compares: str = ""
    winner_swaps:    str = ""


# ---------------------------------------------------------------------------
# Recording — the drained run
# ---------------------------------------------------------------------------
@dataclass
class Recording:
    operation_key: str
    initial:       Any
    steps:         List[Step] = field(default_factory=list)
    snapshots:     List[Any]  = field(default_factory=list)
    result:        Any        = None

    def __len__(self) -> int:
        return len(self.steps)


def snapshot(container: Any) -> Any:
    if isinstance(container, list):
        return list(container)
    if hasattr(container, "to_dict"):
        return container.to_dict()
    return copy.deepcopy(container)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        recording : The Recording (available after run_to_completion).
        metrics   : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.recording: Optional[Recording]  = None
        self.metrics:   Optional[RunMetrics] = None

        self._info:      Optional[OperationInfo] = None
        self._container: Any                     = None
        self._stream:    Optional[StepStream]    = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, key: str, container: Any, **operands: Any) -> None:
        """Look the operation up and build its generator over `container`."""
        info = get_operation(key)
        unknown = set(operands) - set(info.operands)
        if unknown:
            raise TypeError(f"{key} got unexpected operand(s): {', '.join(sorted(unknown))}")

        self._info      = info
        self._container = container
        self._stream    = StepStream(info.fn(container, **operands))
        self.recording  = Recording(operation_key=key, initial=snapshot(container))
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Drain the generator, snapshot after every step, compute metrics."""
        if self._stream is None or self.recording is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        for step in self._stream:
            self.recording.steps.append(step)
            self.recording.snapshots.append(snapshot(self._container))
        self.recording.result = self._stream.result
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "%s finished: %d steps in %.2f ms",
            self.recording.operation_key, self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def steps(self) -> List[Step]:
        return self.recording.steps if self.recording else []

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.recording is None:
            raise RuntimeError("Call start() first.")
        rec = self.recording
        return {
            "operation": rec.operation_key,
            "initial":   rec.initial,
            "steps":     [s.to_dict() for s in rec.steps],
            "snapshots": list(rec.snapshots),
            "result":    rec.result,
            "metrics":   asdict(self.metrics) if self.metrics else {},
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info  = self._info
        steps = self.recording.steps
        return RunMetrics(
            operation_key=info.key,
            operation_label=info.label,
            family=info.family,
            total_steps=len(steps),
            compares=sum(1 for s in steps if s.kind == StepKind.COMPARE),
            swaps=sum(1 for s in steps if s.kind == StepKind.SWAP and "write" not in s.auxiliary),
            writes=sum(1 for s in steps if {"write", "inserted", "removed"} & s.auxiliary.keys()),
            rejected=bool(steps) and steps[-1].rejected,
            wall_time_ms=round(wall_ms, 2),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.operation_label if l_val < r_val else r.operation_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_compares=winner(l.compares, r.compares),
        winner_swaps=winner(l.swaps, r.swaps),
    )
