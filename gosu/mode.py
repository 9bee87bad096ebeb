"""Game modes and telling which mode a chart file is played in."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Union

from gosu.osu.parser import MODE_MANIA, MODE_TAIKO, detect_mode


class GameMode(IntEnum):
    NONE = -1
    PIANO4 = 0  # 1 to 4 keys, and 6 keys
    PIANO7 = 1  # 5 keys and 7 or more keys
    DRUM = 2
    KARAOKE = 3


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def chart_file_mode(path: Union[str, os.PathLike]) -> GameMode:
    """Return the mode a chart file belongs to, judged by its extension and header."""
    path = os.fspath(path)
    ext = _extension(path).lower()
    if ext == ".osu":
        mode, key_count = detect_mode(path)
        if mode == MODE_MANIA:
            if key_count <= 4 or key_count == 6:
                return GameMode.PIANO4
            return GameMode.PIANO7
        if mode == MODE_TAIKO:
            return GameMode.DRUM
        return GameMode.NONE
    if ext in (".ojn", ".bms"):
        return GameMode.PIANO7
    return GameMode.NONE