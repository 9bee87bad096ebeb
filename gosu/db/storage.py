"""Saving and loading plain data files as JSON or MessagePack."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Union

import msgpack

_log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class MarshalType(str, Enum):
    JSON = "json"
    MSGPACK = "msgpack"


DEFAULT_MARSHAL_TYPE = MarshalType.JSON


def _plain(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"cannot serialise {type(obj).__name__}")


def marshal(obj: Any, kind: Union[MarshalType, str] = DEFAULT_MARSHAL_TYPE) -> bytes:
    """Encode obj; dataclasses are written as mappings of their fields."""
    kind = MarshalType(kind)
    if kind == MarshalType.JSON:
        text = json.dumps(obj, default=_plain, separators=(",", ":"), ensure_ascii=False)
        return text.encode("utf-8")
    return msgpack.packb(obj, default=_plain, use_bin_type=True)


def unmarshal(data: bytes, kind: Union[MarshalType, str] = DEFAULT_MARSHAL_TYPE) -> Any:
    """Decode data; raise ValueError when it is malformed."""
    kind = MarshalType(kind)
    try:
        if kind == MarshalType.JSON:
            return json.loads(data)
        return msgpack.unpackb(data, raw=False, strict_map_key=False)
    except (ValueError, TypeError) as err:
        raise ValueError(f"invalid {kind.value} data: {err}") from err


def _mark_crashed(path: Path) -> None:
    try:
        os.replace(path, str(path) + ".crashed")
    except OSError:
        pass


def load_data(path: PathLike, kind: Union[MarshalType, str] = DEFAULT_MARSHAL_TYPE) -> Any:
    """Read and decode a data file.

    On failure the file, if present, is renamed with a '.crashed' suffix and
    the error is raised.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError:
        _mark_crashed(path)
        raise
    try:
        return unmarshal(data, kind)
    except ValueError:
        _mark_crashed(path)
        raise


def save_data(path: PathLike, obj: Any, kind: Union[MarshalType, str] = DEFAULT_MARSHAL_TYPE) -> bool:
    """Encode and write obj; return False and log the reason if that fails."""
    try:
        data = marshal(obj, kind)
    except (TypeError, ValueError) as err:
        _log.error("Failed to save data by an error: %s", err)
        return False
    try:
        Path(path).write_bytes(data)
    except OSError as err:
        _log.error("Failed to save data by an error: %s", err)
        return False
    return True