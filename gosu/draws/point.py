"""Two-dimensional points and sizes used for layout."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _divide(numerator: float, denominator: float) -> float:
    """Float division giving signed infinity or NaN on a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(frozen=True)
class Point:
    """A position or a size; arithmetic works component by component."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def mul(self, other: Point) -> Point:
        return Point(self.x * other.x, self.y * other.y)

    def div(self, other: Point) -> Point:
        return Point(_divide(self.x, other.x), _divide(self.y, other.y))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div

    @property
    def xy(self) -> tuple[float, float]:
        return self.x, self.y

    @property
    def xy_int(self) -> tuple[int, int]:
        """Both components truncated toward zero."""
        return int(self.x), int(self.y)


def int_pt(x: int, y: int) -> Point:
    """A point from integer coordinates."""
    return Point(float(x), float(y))


def scalar(v: float) -> Point:
    """A point with both components equal to v."""
    return Point(v, v)