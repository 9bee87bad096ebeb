"""Chart level from the difficulties of its sections."""

from __future__ import annotations

import math
from typing import Iterable

DECAY_FACTOR = 0.95
LEVEL_POWER = 1.15
LEVEL_SCALE = 0.02


def level(difficulties: Iterable[float]) -> tuple[float, tuple[float, float, float]]:
    """Return the level and the variation factors.

    Difficulties are summed from the largest down, each weighted by a further
    DECAY_FACTOR.
    """
    total, weight = 0.0, 1.0
    for term in sorted(difficulties, reverse=True):
        total += weight * term
        weight *= DECAY_FACTOR
    value = math.nan if total < 0 else math.pow(total, LEVEL_POWER) * LEVEL_SCALE
    return value, (0.5, 5.0, 2.0)