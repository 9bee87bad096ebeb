"""Tick counts for control timings, derived from the game's ticks per second."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TPS = 1000

TRANS_DURATION = 400  # milliseconds
LONG_DURATION = 200
SHORT_DURATION = 80


def _ticks(duration: int, tps: float) -> int:
    return int(duration / 1000 * tps)


@dataclass
class Countdowns:
    """Durations in ticks: value transition, first key repeat, later key repeats."""

    trans: int = _ticks(TRANS_DURATION, DEFAULT_TPS)
    long: int = _ticks(LONG_DURATION, DEFAULT_TPS)
    short: int = _ticks(SHORT_DURATION, DEFAULT_TPS)

    def set_tps(self, tps: float) -> None:
        """Recompute the tick counts for a new ticks-per-second rate."""
        self.trans = _ticks(TRANS_DURATION, tps)
        self.long = _ticks(LONG_DURATION, tps)
        self.short = _ticks(SHORT_DURATION, tps)


_shared = Countdowns()


def set_tps(tps: float) -> None:
    """Set the ticks-per-second rate used by all controls."""
    _shared.set_tps(tps)


def countdowns() -> Countdowns:
    """The tick counts shared by all controls."""
    return _shared