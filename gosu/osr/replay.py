"""Reading .osr replay files."""

from __future__ import annotations

import logging
import lzma
import re
import struct
from dataclasses import dataclass, field
from typing import Union

from gosu.osu.event import _parse_float, _parse_int

_log = logging.getLogger(__name__)

_MAX_VARINT_LEN = 10
_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


class ReplayError(ValueError):
    """Raised when replay data is truncated or corrupted."""


@dataclass
class Action:
    """One replay frame."""

    w: int = 0  # elapsed time since the previous frame
    x: float = 0.0  # cursor x; pressed keys as bits in mania
    y: float = 0.0  # cursor y
    z: int = 0  # pressed keys in standard


@dataclass
class Replay:
    game_mode: int = 0
    game_version: int = 0
    beatmap_md5: str = ""
    player_name: str = ""
    replay_md5: str = ""
    num_300: int = 0
    num_100: int = 0
    num_50: int = 0
    num_geki: int = 0
    num_katu: int = 0
    num_miss: int = 0
    score: int = 0
    combo: int = 0
    full_combo: bool = False
    mods_bits: int = 0
    life_bar: str = ""
    timestamp: int = 0
    replay_data: list[Action] = field(default_factory=list)
    online_id: int = 0

    def md5(self) -> bytes:
        """The chart's MD5 digest as 16 bytes; all zero if the hex text is invalid."""
        digest = bytearray()
        for position in range(16):
            pair = self.beatmap_md5[position * 2 : position * 2 + 2]
            if not _HEX_PAIR.fullmatch(pair):
                _log.warning("invalid beatmap MD5: %r", self.beatmap_md5)
                return bytes(16)
            digest.append(int(pair, 16))
        return bytes(digest)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def _at_end(self) -> bool:
        return self._pos >= len(self._data)

    def take(self, size: int) -> bytes:
        if size > len(self._data) - self._pos:
            raise ReplayError("unexpected end of data")
        chunk = self._data[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def read_some(self, size: int) -> bytes:
        """Read up to size bytes; fails only when nothing is left."""
        if self._at_end():
            raise ReplayError("unexpected end of data")
        chunk = self._data[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk

    def unpack(self, fmt: str):
        layout = struct.Struct("<" + fmt)
        return layout.unpack(self.take(layout.size))[0]

    def uvarint(self) -> int:
        value = 0
        shift = 0
        for index in range(_MAX_VARINT_LEN):
            byte = self.take(1)[0]
            if byte < 0x80:
                if index == _MAX_VARINT_LEN - 1 and byte > 1:
                    raise ReplayError("varint overflows a 64-bit integer")
                return value | (byte << shift)
            value |= (byte & 0x7F) << shift
            shift += 7
        raise ReplayError("varint overflows a 64-bit integer")

    def string(self) -> str:
        header = self.take(1)[0]
        if header == 0x00:
            return ""
        if header != 0x0B:
            raise ReplayError("invalid replay file: corrupted string header")
        length = self.uvarint()
        raw = self.read_some(length)
        if len(raw) < length:
            raise ReplayError("unexpected end of data")
        return raw.decode("utf-8", errors="replace")


def _parse_action(frame: str) -> Action:
    values = frame.split("|")
    if len(values) != 4:
        raise ReplayError("invalid replay file: corrupted Action data; length is not 4")
    parsed = []
    for name, text, convert in zip("WXYZ", values, (_parse_int, _parse_float, _parse_float, _parse_int)):
        try:
            parsed.append(convert(text))
        except ValueError as err:
            raise ReplayError(f"invalid replay file: {name} is corrupted") from err
    return Action(*parsed)


def _parse_replay_data(reader: _Reader) -> list[Action]:
    length = reader.unpack("i")
    if length < 0:
        raise ReplayError("invalid replay file: negative ReplayData length")
    compressed = reader.read_some(length)
    if len(compressed) != length:
        raise ReplayError("invalid replay file: corrupted ReplayData length")
    try:
        raw = lzma.decompress(compressed, format=lzma.FORMAT_ALONE)
    except lzma.LZMAError as err:
        raise ReplayError(f"invalid replay file: {err}") from err
    frames = raw.decode("utf-8", errors="replace").split(",")
    # The stream ends with a separator, so the last piece is dropped.
    return [_parse_action(frame) for frame in frames[:-1]]


def parse(data: Union[bytes, bytearray]) -> Replay:
    """Parse the contents of a .osr file."""
    reader = _Reader(bytes(data))
    replay = Replay()
    replay.game_mode = reader.unpack("b")
    replay.game_version = reader.unpack("i")
    replay.beatmap_md5 = reader.string()
    replay.player_name = reader.string()
    replay.replay_md5 = reader.string()
    replay.num_300 = reader.unpack("h")
    replay.num_100 = reader.unpack("h")
    replay.num_50 = reader.unpack("h")
    replay.num_geki = reader.unpack("h")
    replay.num_katu = reader.unpack("h")
    replay.num_miss = reader.unpack("h")
    replay.score = reader.unpack("i")
    replay.combo = reader.unpack("h")
    replay.full_combo = reader.unpack("B") != 0
    replay.mods_bits = reader.unpack("i")
    replay.life_bar = reader.string()
    replay.timestamp = reader.unpack("q")
    replay.replay_data = _parse_replay_data(reader)
    replay.online_id = reader.unpack("q")
    return replay