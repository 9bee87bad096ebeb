"""Keyboard key codes, their names and their Windows virtual-key codes."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence


class Key(IntEnum):
    """A keyboard key; the numbering follows the game engine's key order."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25
    ALT_LEFT = 26
    ALT_RIGHT = 27
    ARROW_DOWN = 28
    ARROW_LEFT = 29
    ARROW_RIGHT = 30
    ARROW_UP = 31
    BACKQUOTE = 32
    BACKSLASH = 33
    BACKSPACE = 34
    BRACKET_LEFT = 35
    BRACKET_RIGHT = 36
    CAPS_LOCK = 37
    COMMA = 38
    CONTEXT_MENU = 39
    CONTROL_LEFT = 40
    CONTROL_RIGHT = 41
    DELETE = 42
    DIGIT0 = 43
    DIGIT1 = 44
    DIGIT2 = 45
    DIGIT3 = 46
    DIGIT4 = 47
    DIGIT5 = 48
    DIGIT6 = 49
    DIGIT7 = 50
    DIGIT8 = 51
    DIGIT9 = 52
    END = 53
    ENTER = 54
    EQUAL = 55
    ESCAPE = 56
    F1 = 57
    F2 = 58
    F3 = 59
    F4 = 60
    F5 = 61
    F6 = 62
    F7 = 63
    F8 = 64
    F9 = 65
    F10 = 66
    F11 = 67
    F12 = 68
    HOME = 69
    INSERT = 70
    META_LEFT = 71
    META_RIGHT = 72
    MINUS = 73
    NUM_LOCK = 74
    NUMPAD0 = 75
    NUMPAD1 = 76
    NUMPAD2 = 77
    NUMPAD3 = 78
    NUMPAD4 = 79
    NUMPAD5 = 80
    NUMPAD6 = 81
    NUMPAD7 = 82
    NUMPAD8 = 83
    NUMPAD9 = 84
    NUMPAD_ADD = 85
    NUMPAD_DECIMAL = 86
    NUMPAD_DIVIDE = 87
    NUMPAD_ENTER = 88
    NUMPAD_EQUAL = 89
    NUMPAD_MULTIPLY = 90
    NUMPAD_SUBTRACT = 91
    PAGE_DOWN = 92
    PAGE_UP = 93
    PAUSE = 94
    PERIOD = 95
    PRINT_SCREEN = 96
    QUOTE = 97
    SCROLL_LOCK = 98
    SEMICOLON = 99
    SHIFT_LEFT = 100
    SHIFT_RIGHT = 101
    SLASH = 102
    SPACE = 103
    TAB = 104
    RESERVED0 = 105
    RESERVED1 = 106
    RESERVED2 = 107
    RESERVED3 = 108

    @property
    def label(self) -> str:
        """The key's name as written in settings, e.g. 'AltLeft' or 'Digit0'."""
        return "".join(part.capitalize() for part in self.name.split("_"))


_BY_LABEL = {key.label: key for key in Key}

# Windows virtual-key codes. Reserved keys have none and map to 0.
_VIRTUAL_KEYS = {
    **{Key[chr(code)]: code for code in range(ord("A"), ord("Z") + 1)},
    **{Key[f"DIGIT{n}"]: 0x30 + n for n in range(10)},
    **{Key[f"NUMPAD{n}"]: 0x60 + n for n in range(10)},
    **{Key[f"F{n}"]: 0x6F + n for n in range(1, 13)},
    Key.ALT_LEFT: 0xA4,
    Key.ALT_RIGHT: 0xA5,
    Key.ARROW_DOWN: 0x28,
    Key.ARROW_LEFT: 0x25,
    Key.ARROW_RIGHT: 0x27,
    Key.ARROW_UP: 0x26,
    Key.BACKQUOTE: 0xC0,
    Key.BACKSLASH: 0xDC,
    Key.BACKSPACE: 0x08,
    Key.BRACKET_LEFT: 0xDB,
    Key.BRACKET_RIGHT: 0xDD,
    Key.CAPS_LOCK: 0x14,
    Key.COMMA: 0xBC,
    Key.CONTEXT_MENU: 0x5D,
    Key.CONTROL_LEFT: 0xA2,
    Key.CONTROL_RIGHT: 0xA3,
    Key.DELETE: 0x2E,
    Key.END: 0x23,
    Key.ENTER: 0x0D,
    Key.EQUAL: 0xBB,
    Key.ESCAPE: 0x1B,
    Key.HOME: 0x24,
    Key.INSERT: 0x2D,
    Key.META_LEFT: 0x5B,
    Key.META_RIGHT: 0x5C,
    Key.MINUS: 0xBD,
    Key.NUM_LOCK: 0x90,
    Key.NUMPAD_ADD: 0x6B,
    Key.NUMPAD_DECIMAL: 0x6E,
    Key.NUMPAD_DIVIDE: 0x6F,
    Key.NUMPAD_ENTER: 0x0D,
    Key.NUMPAD_EQUAL: 0xBB,
    Key.NUMPAD_MULTIPLY: 0x6A,
    Key.NUMPAD_SUBTRACT: 0x6D,
    Key.PAGE_DOWN: 0x22,
    Key.PAGE_UP: 0x21,
    Key.PAUSE: 0x13,
    Key.PERIOD: 0xBE,
    Key.PRINT_SCREEN: 0x2C,
    Key.QUOTE: 0xDE,
    Key.SCROLL_LOCK: 0x91,
    Key.SEMICOLON: 0xBA,
    Key.SHIFT_LEFT: 0xA0,
    Key.SHIFT_RIGHT: 0xA1,
    Key.SLASH: 0xBF,
    Key.SPACE: 0x20,
    Key.TAB: 0x09,
}


def name_to_key(name: str) -> Key:
    """Return the key with the given name; raise ValueError for an unknown name."""
    try:
        return _BY_LABEL[name]
    except KeyError:
        raise ValueError(f"unknown key name: {name!r}") from None


def names_to_keys(names: Iterable[str]) -> list[Key]:
    """Convert key names to keys, keeping their order."""
    return [name_to_key(name) for name in names]


def is_keys_valid(keys: Sequence[Key]) -> bool:
    """True when no key appears twice."""
    return len(set(keys)) == len(keys)


def to_virtual_key(key: Key) -> int:
    """Windows virtual-key code of a key; 0 when it has none."""
    return _VIRTUAL_KEYS.get(key, 0x00)