"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object a front end drives during playback.  It
holds a fully materialised Recording (generation always runs to completion
before playback starts) and exposes a play/pause/next/prev/speed API over
it, including the container snapshot matching the current step.

State machine:
    IDLE     →  load()          →  PAUSED
    PAUSED   →  play()          →  PLAYING
    PLAYING  →  pause()         →  PAUSED
    PLAYING  →  (last step)     →  FINISHED
    FINISHED →  prev / rewind   →  PAUSED
    any      →  reset()         →  IDLE

Speed is a multiplier: the delay between auto-advance ticks is
BASE_DELAY_SECONDS / multiplier, floored at MIN_DELAY_SECONDS.

Thread safety:
  This class is NOT thread-safe.  Call tick() from a single timer / event
  loop.
"""

import time
from enum import Enum
from typing import Any, Callable, Optional

import config
from algorithms.step import Step
from engine.recorder import Recording


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        recording   : The Recording being played, or None when IDLE.
        current_idx : Index of the displayed step; -1 shows the initial state.
        multiplier  : Speed multiplier (1.0 = one step per BASE_DELAY_SECONDS).
        on_step     : Optional callback(Step or None) fired every time the
                      current step changes.  The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Optional[Step]], None]] = None):
        self.recording:   Optional[Recording] = None
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.multiplier:  float        = config.SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Optional[Step]], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, recording: Recording) -> None:
        """Attach a recording and show its initial (pre-step) state."""
        self.recording   = recording
        self.state       = StepperState.PAUSED
        self._goto(-1)

    def reset(self) -> None:
        """Back to IDLE — caller must load() again."""
        self.recording   = None
        self.current_idx = -1
        self.state       = StepperState.IDLE
        self._notify(None)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.recording is None:
            return False
        target = self.current_idx + 1
        if target >= len(self.recording):
            self.state = StepperState.FINISHED
            return False
        self._goto(target)
        if target == len(self.recording) - 1:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the initial state."""
        if self.recording is None or self.current_idx < 0:
            return False
        self._goto(self.current_idx - 1)
        self._unfinish()
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index (-1 is the initial state)."""
        if self.recording is None or not -1 <= idx < len(self.recording):
            return False
        self._goto(idx)
        if idx == len(self.recording) - 1:
            self.state = StepperState.FINISHED
        else:
            self._unfinish()
        return True

    def rewind(self) -> None:
        """Jump back to the initial state."""
        if self.recording is None:
            return
        self._goto(-1)
        self._unfinish()

    def jump_to_end(self) -> None:
        if self.recording is None:
            return
        if len(self.recording):
            self._goto(len(self.recording) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and at least
        `delay` seconds have passed since the last advance, moves one step
        forward.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.delay:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.multiplier = config.SPEED_PRESETS.get(preset, config.SPEED_PRESETS["medium"])

    def set_speed_multiplier(self, multiplier: float) -> None:
        if multiplier <= 0:
            raise ValueError("speed multiplier must be positive")
        self.multiplier = multiplier

    @property
    def delay(self) -> float:
        """Seconds between auto-advance ticks."""
        return max(config.MIN_DELAY_SECONDS, config.BASE_DELAY_SECONDS / self.multiplier)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if self.recording is not None and 0 <= self.current_idx < len(self.recording):
            return self.recording.steps[self.current_idx]
        return None

    @property
    def current_snapshot(self) -> Any:
        """Container state matching the displayed step."""
        if self.recording is None:
            return None
        if self.current_idx < 0:
            return self.recording.initial
        return self.recording.snapshots[self.current_idx]

    @property
    def total_steps(self) -> int:
        return len(self.recording) if self.recording is not None else 0

    @property
    def progress(self) -> float:
        """Fraction of the recording shown, 0.0 … 1.0."""
        if not self.total_steps:
            return 0.0
        return (self.current_idx + 1) / self.total_steps

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _unfinish(self) -> None:
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.current_step)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step:
            self.on_step(step)
