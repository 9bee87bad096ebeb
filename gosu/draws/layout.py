"""Boxes, grids and rectangles: positions and sizes of on-screen elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional, Protocol, Sequence

from gosu.draws.point import Point, scalar


class Mode(IntEnum):
    """Which edge of an extent is meant: the low end, the middle or the high end."""

    MIN = 0
    MID = 1
    MAX = 2


@dataclass(frozen=True)
class ModeXY:
    x: Mode = Mode.MIN
    y: Mode = Mode.MIN


AT_MIN = ModeXY(Mode.MIN, Mode.MIN)
AT_MID = ModeXY(Mode.MID, Mode.MID)
AT_MAX = ModeXY(Mode.MAX, Mode.MAX)

WHITE = (255, 255, 255, 255)


class Subject(Protocol):
    def size(self) -> Point: ...

    def set_size(self, size: Point) -> None: ...


@dataclass
class Rectangle:
    """A filled rectangle, optionally centred on a larger outer rectangle."""

    size_: Point = field(default_factory=Point)
    color: tuple[int, int, int, int] = WHITE
    outer: Optional[Rectangle] = None

    def size(self) -> Point:
        return self.size_

    def set_size(self, size: Point) -> None:
        self.size_ = size


def outer_size(inner: Subject, pad: Point) -> Point:
    """Size of inner with pad added on every side."""
    return inner.size() + pad * scalar(2)


def _anchor_offset(mode: Mode, extent: float) -> float:
    if mode == Mode.MID:
        return extent / 2
    if mode == Mode.MAX:
        return extent
    return 0.0


def _align_offset(mode: Mode, pad: float) -> float:
    if mode == Mode.MIN:
        return pad
    if mode == Mode.MAX:
        return -pad
    return 0.0


@dataclass
class Box:
    """An inner subject placed in an outer one, with padding and a position.

    origin tells which spot of the outer subject sits at point; align tells
    where the inner subject goes inside it.
    """

    inner: Optional[Subject] = None
    pad: Point = field(default_factory=Point)
    point: Point = field(default_factory=Point)
    origin: ModeXY = AT_MIN
    align: ModeXY = AT_MIN
    outer: Optional[Subject] = None

    def _outer(self) -> Subject:
        if self.outer is None:
            raise ValueError("box has no outer subject")
        return self.outer

    def _inner(self) -> Subject:
        if self.inner is None:
            raise ValueError("box has no inner subject")
        return self.inner

    def size(self) -> Point:
        """Size of the outer subject, or of the padded inner one when there is none."""
        if self.outer is not None:
            return self.outer.size()
        return self.outer_size()

    def set_size(self, size: Point) -> None:
        self._outer().set_size(size)

    def outer_size(self) -> Point:
        """Size the outer subject needs to hold the padded inner one."""
        return outer_size(self._inner(), self.pad)

    def outer_min(self) -> Point:
        w, h = self._outer().size().xy
        return Point(
            self.point.x - _anchor_offset(self.origin.x, w),
            self.point.y - _anchor_offset(self.origin.y, h),
        )

    def inner_min(self) -> Point:
        low = self.outer_min()
        return Point(
            low.x + _align_offset(self.align.x, self.pad.x),
            low.y + _align_offset(self.align.y, self.pad.y),
        )

    def outer_max(self) -> Point:
        return self.outer_min() + self._outer().size()

    def inner_max(self) -> Point:
        return self.inner_min() + self._inner().size()

    def contains(self, p: Point) -> bool:
        """Whether p, usually the cursor, lies within the outer subject."""
        rel = p - self.outer_min()
        w, h = self._outer().size().xy
        return 0 <= rel.x <= w and 0 <= rel.y <= h


@dataclass
class Grid:
    """Rows of boxes laid out in fixed columns and rows."""

    rows: list[list[Box]] = field(default_factory=list)

    def __iter__(self) -> Iterator[list[Box]]:
        return iter(self.rows)

    def size(self) -> Point:
        """Lower right corner of the last cell."""
        return self.rows[-1][-1].outer_max()

    def set_size(self, size: Point) -> None:
        """Cells keep their own sizes, so resizing a grid leaves it unchanged."""
        return None


def new_grid(
    boxes: list[list[Box]],
    widths: Sequence[float],
    heights: Sequence[float],
    gap: Point,
) -> Grid:
    """Size and place each box in its cell; every box needs an outer subject."""
    y = 0.0
    for row, height in zip(boxes, heights):
        x = 0.0
        for box, width in zip(row, widths):
            box.set_size(Point(width, height))
            box.point = Point(x, y)
            box.origin = AT_MIN
            x += width + gap.x
        y += height + gap.y
    return Grid(boxes)