"""Entries of the [TimingPoints] section of .osu charts."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gosu.osu.event import _parse_float, _parse_int, _parse_truncated

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def _divide(numerator: float, denominator: float) -> float:
    """Float division giving signed infinity or NaN on a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class TimingPoint:
    """A timing point: uninherited points set BPM, inherited ones scale speed."""

    time: int = 0
    beat_length: float = 0.0
    meter: int = 0
    sample_set: int = 0
    sample_index: int = 0
    volume: int = 0
    uninherited: bool = False
    effects: int = 0

    def is_inherited(self) -> bool:
        return not self.uninherited

    def bpm(self) -> float:
        """Beats per minute; meaningful for uninherited points."""
        return _divide(1000.0 * 60, self.beat_length)

    def beat_length_scale(self) -> float:
        """Speed factor, 1 being standard; meaningful for inherited points."""
        return _divide(100.0, -self.beat_length)

    def is_kiai(self) -> bool:
        return self.effects & 1 != 0

    def is_first_bar_omitted(self) -> bool:
        return self.effects & (1 << 3) != 0


def parse_timing_point(line: str) -> TimingPoint:
    """Parse 'time,beatLength,meter,sampleSet,sampleIndex,volume,uninherited,effects'."""
    values = line.split(",")
    if len(values) < 8:
        raise ValueError("invalid timing point: not enough length")
    time = _parse_truncated(values[0])
    try:
        beat_length = _parse_float(values[1])
    except ValueError:
        if values[1] == "∞":
            beat_length = math.inf
        elif values[1] == "-∞":
            beat_length = -math.inf
        else:
            raise
    return TimingPoint(
        time=time,
        beat_length=beat_length,
        meter=_parse_truncated(values[2]),
        sample_set=_parse_int(values[3]),
        sample_index=_parse_int(values[4]),
        volume=_parse_truncated(values[5]),
        uninherited=_parse_bool(values[6]),
        effects=_parse_int(values[7]),
    )