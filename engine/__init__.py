"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare, replay_values
"""

from engine.recorder import Recorder, Recording, RunMetrics, ComparisonResult, compare, snapshot
from engine.stepper  import Stepper, StepperState
from engine.replay   import apply_step, replay_values

__all__ = [
    "Stepper",
    "StepperState",
    "Recorder",
    "Recording",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "snapshot",
    "apply_step",
    "replay_values",
]
