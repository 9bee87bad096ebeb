"""Chart summaries shown on the song selection screen."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from gosu.chartheader import ChartHeader
from gosu.mode import GameMode


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


@dataclass
class ChartInfo:
    """A chart's path, header and the figures needed to list it."""

    path: str = ""
    header: ChartHeader = field(default_factory=ChartHeader)
    mode: GameMode = GameMode.NONE
    sub_mode: int = 0
    level: float = 0.0

    duration: int = 0  # milliseconds
    note_counts: list[int] = field(default_factory=list)
    main_bpm: float = 0.0
    min_bpm: float = 0.0
    max_bpm: float = 0.0

    def text(self) -> str:
        """One-line label for the chart; empty for modes without one."""
        if self.mode in (GameMode.PIANO4, GameMode.PIANO7):
            return (
                f"({self.sub_mode}K Level {self.level:3.1f}) "
                f"{self.header.music_name} [{self.header.chart_name}]"
            )
        if self.mode == GameMode.DRUM:
            return f"(Level {self.level:3.1f}) {self.header.music_name} [{self.header.chart_name}]"
        return ""

    def background_path(self) -> str:
        return self.header.background_path(self.path)

    def time_string(self) -> str:
        """Duration as minutes and seconds, 'mm:ss'."""
        seconds = _trunc_div(int(self.duration), 1000)
        return f"{_trunc_div(seconds, 60):02d}:{_trunc_mod(seconds, 60):02d}"

    def bpm_string(self) -> str:
        return f"{self.main_bpm:.0f} BPM ({self.min_bpm:.0f} ~ {self.max_bpm:.0f})"

    def note_count_string(self) -> str:
        """The first note count after a circle mark; needs at least one count."""
        if not self.note_counts:
            raise ValueError("chart has no note counts")
        return f"◎ {self.note_counts[0]}"


_HEADER_FIELDS = frozenset(f.name for f in fields(ChartHeader))
_INFO_FIELDS = frozenset(f.name for f in fields(ChartInfo)) - {"header"}


def _chart_info_from_mapping(data: Any) -> ChartInfo:
    """Rebuild a ChartInfo from the mapping it was stored as."""
    if not isinstance(data, Mapping):
        raise ValueError(f"chart info must be a mapping, not {type(data).__name__}")
    header_data = data.get("header") or {}
    if not isinstance(header_data, Mapping):
        raise ValueError("chart header must be a mapping")
    header = ChartHeader(**{k: v for k, v in header_data.items() if k in _HEADER_FIELDS})
    kwargs = {k: v for k, v in data.items() if k in _INFO_FIELDS}
    if "mode" in kwargs:
        kwargs["mode"] = GameMode(kwargs["mode"])
    if "note_counts" in kwargs:
        kwargs["note_counts"] = list(kwargs["note_counts"])
    return ChartInfo(header=header, **kwargs)