"""Entries of the [Events] section of .osu charts: backgrounds, videos and breaks."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Optional

BACKGROUND = "Background"
VIDEO = "Video"
BREAK = "Break"

_EVENT_TYPES = {
    "0": BACKGROUND,
    "1": VIDEO,
    "Video": VIDEO,
    "2": BREAK,
    "Break": BREAK,
}

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_float(text: str) -> float:
    """Parse a decimal float strictly: no surrounding spaces, no underscores."""
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def _parse_int(text: str) -> int:
    """Parse a plain decimal integer within the 64-bit range."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_truncated(text: str) -> int:
    """Parse a float and truncate it toward zero."""
    value = _parse_float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value where an integer is expected: {text!r}")
    return int(value)


@dataclass
class Event:
    """A background, video or break event; storyboard events are not modelled."""

    type: str = ""
    start_time: int = 0
    end_time: int = 0
    filename: str = ""
    x_offset: int = 0
    y_offset: int = 0


def parse_event(line: str) -> Event:
    """Parse one line of the [Events] section."""
    values = line.split(",")
    event = Event(type=_EVENT_TYPES.get(values[0], ""))
    if event.type in (BACKGROUND, VIDEO):
        if len(values) < 5:
            raise ValueError("invalid event: not enough length")
        event.start_time = _parse_truncated(values[1])
        event.filename = values[2].strip('"')
        event.x_offset = _parse_truncated(values[3])
        event.y_offset = _parse_truncated(values[4])
    elif event.type == BREAK:
        if len(values) < 3:
            raise ValueError("invalid event: not enough length")
        event.start_time = _parse_truncated(values[1])
        event.end_time = _parse_truncated(values[2])
    return event


def _first_of_type(events: Iterable[Event], kind: str) -> Optional[Event]:
    return next((event for event in events if event.type == kind), None)


def background(events: Iterable[Event]) -> Optional[Event]:
    """Return the first background event, or None."""
    return _first_of_type(events, BACKGROUND)


def video(events: Iterable[Event]) -> Optional[Event]:
    """Return the first video event, or None."""
    return _first_of_type(events, VIDEO)