"""A value that follows its source over a short transition instead of jumping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from gosu.ctrl.settings import countdowns


class DelayedMode(IntEnum):
    EXP = 0  # converges toward the source
    LINEAR = 1


@dataclass
class Delayed:
    """Shown value, its target source, and the state of the running transition."""

    value: float = 0.0
    source: float = 0.0
    mode: DelayedMode = DelayedMode.EXP
    feedback: float = 0.0
    countdown: int = 0

    def update(self, source: float) -> None:
        """Advance one tick toward source, starting a new transition if it changed."""
        if self.source != source:
            self._set_source(source)
        if self.countdown == 0:
            self.value = self.source
            return
        if self.mode == DelayedMode.EXP:
            self.value += (self.source - self.value) * self.feedback
        elif self.mode == DelayedMode.LINEAR:
            self.value += self.feedback
        self.countdown -= 1

    def _set_source(self, source: float) -> None:
        ticks = countdowns().trans
        self.source = source
        self.countdown = ticks
        diff = self.source - self.value
        if diff < 0.1 or ticks == 0:
            return
        # Keeps the speed of a transition the same whatever the tick rate.
        if self.mode == DelayedMode.EXP:
            self.feedback = 1 - math.exp(-math.log(diff) / ticks)
        elif self.mode == DelayedMode.LINEAR:
            self.feedback = diff / ticks