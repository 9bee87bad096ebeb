"""Anchor points of a sprite: which of its nine spots sits at its position."""

from __future__ import annotations

from enum import IntEnum

LEFT, CENTER, RIGHT = 0, 1, 2
TOP, MIDDLE, BOTTOM = 0, 1, 2


class Origin(IntEnum):
    LEFT_TOP = 0  # the default
    LEFT_MIDDLE = 1
    LEFT_BOTTOM = 2
    CENTER_TOP = 3
    CENTER_MIDDLE = 4
    CENTER_BOTTOM = 5
    RIGHT_TOP = 6
    RIGHT_MIDDLE = 7
    RIGHT_BOTTOM = 8

    def position_x(self) -> int:
        """LEFT, CENTER or RIGHT."""
        return int(self) // 3

    def position_y(self) -> int:
        """TOP, MIDDLE or BOTTOM."""
        return int(self) % 3