"""Timing state for things drawn for a while and for frame animations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

from gosu.draws.point import _divide


@dataclass
class BaseDrawer:
    """Counts down the ticks something stays on screen.

    A max_countdown of zero means it is drawn permanently.
    """

    countdown: int = 0
    max_countdown: int = 0

    def update(self, reloaded: bool) -> None:
        """Advance one tick; restart the countdown when reloaded."""
        if self.countdown > 0:
            self.countdown -= 1
        if reloaded:
            self.countdown = self.max_countdown

    def age(self) -> float:
        """Fraction of the countdown elapsed: 0 when fresh, 1 when expired."""
        return 1 - _divide(float(self.countdown), float(self.max_countdown))


@dataclass
class AnimationDrawer:
    """Picks the frame of a looping animation for the current time."""

    time: int = 0
    duration: int = 0
    start_time: int = 0
    frames: Sequence[Any] = field(default_factory=tuple)

    def update(self, time: int, duration: int, reset: bool) -> None:
        """Set the current time and loop duration; restart the loop on reset."""
        self.time = time
        self.duration = duration
        if reset:
            self.start_time = self.time

    def frame(self) -> int:
        """Index of the frame to show."""
        if self.duration == 0:
            raise ValueError("animation duration must be non-zero")
        elapsed = float(self.time - self.start_time)
        duration = float(self.duration)
        rate = math.remainder(elapsed, duration) / duration
        if rate < 0:
            rate += 1
        return int(rate * len(self.frames))

    def current(self) -> Any:
        """The frame to show."""
        return self.frames[self.frame()]