"""What a key did between two consecutive samples."""

from __future__ import annotations

from enum import IntEnum


class KeyAction(IntEnum):
    IDLE = 0
    HIT = 1
    RELEASE = 2
    HOLD = 3


_ACTIONS = {
    (False, False): KeyAction.IDLE,
    (False, True): KeyAction.HIT,
    (True, False): KeyAction.RELEASE,
    (True, True): KeyAction.HOLD,
}


def current_key_action(last: bool, now: bool) -> KeyAction:
    """Classify a key from its previous and current pressed state."""
    return _ACTIONS[bool(last), bool(now)]