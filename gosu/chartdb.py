"""Per-mode chart lists: scanning the music folder, storing and tidying them."""

from __future__ import annotations

import bisect
import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

from gosu.chartinfo import ChartInfo, _chart_info_from_mapping
from gosu.db.storage import DEFAULT_MARSHAL_TYPE, MarshalType, load_data, save_data
from gosu.input.keys import Key
from gosu.mode import GameMode, chart_file_mode

_log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _db_filename(kind: Union[MarshalType, str]) -> str:
    return "chart.json" if MarshalType(kind) == MarshalType.JSON else "chart.db"


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


@dataclass
class ModeProp:
    """A game mode's settings and its list of charts.

    new_chart_info reads a chart file into a ChartInfo and raises on failure.
    last_update_time is the time of the last scan, in seconds since the epoch.
    """

    name: str
    mode: GameMode
    chart_infos: list[ChartInfo] = field(default_factory=list)
    cursor: int = 0
    results: dict[bytes, Any] = field(default_factory=dict)
    last_update_time: float = 0.0
    new_chart_info: Optional[Callable[[str], ChartInfo]] = None
    key_settings: dict[int, list[Key]] = field(default_factory=dict)

    def _is_new(self, entry: os.DirEntry) -> bool:
        try:
            mtime = entry.stat().st_mtime
        except OSError as err:
            _log.warning("%s", err)
            return False
        return mtime > self.last_update_time

    def load_new_chart_infos(self, music_root: PathLike) -> list[ChartInfo]:
        """Read charts of this mode changed since the last scan, sorted by path.

        Only files one folder below music_root are looked at.
        """
        if self.new_chart_info is None:
            raise ValueError(f"mode {self.name!r} has no chart reader")
        infos: list[ChartInfo] = []
        with os.scandir(music_root) as it:
            folders = sorted(it, key=lambda e: e.name)
        for folder in folders:
            if not folder.is_dir() or not self._is_new(folder):
                continue
            try:
                with os.scandir(folder.path) as it:
                    files = sorted(it, key=lambda e: e.name)
            except OSError as err:
                _log.warning("%s", err)
                continue
            for entry in files:
                if entry.is_dir() or not self._is_new(entry):
                    continue
                chart_path = os.path.join(folder.path, entry.name)
                if chart_file_mode(chart_path) != self.mode:
                    continue
                try:
                    info = self.new_chart_info(chart_path)
                except Exception as err:  # a broken chart must not stop the scan
                    _log.warning("error at %s: %s", entry.name, err)
                    continue
                put_chart_info(infos, info)
        self.last_update_time = time.time()
        return infos


def load_chart_infos_set(
    mode_props: Sequence[ModeProp],
    path: Optional[PathLike] = None,
    kind: Union[MarshalType, str] = DEFAULT_MARSHAL_TYPE,
) -> None:
    """Fill each mode's chart list from the stored file.

    Raises OSError or ValueError when the file is missing or malformed, and
    ValueError when it holds a different number of modes.
    """
    data = load_data(path if path is not None else _db_filename(kind), kind)
    if not isinstance(data, list):
        raise ValueError("chart data must be a list of chart lists")
    if len(mode_props) != len(data):
        raise ValueError("mismatch game's modes length and db's modes length")
    loaded = []
    for infos in data:
        if not isinstance(infos, list):
            raise ValueError("chart data must be a list of chart lists")
        loaded.append([_chart_info_from_mapping(item) for item in infos])
    for prop, infos in zip(mode_props, loaded):
        prop.chart_infos = infos


def tidy_chart_infos_set(mode_props: Sequence[ModeProp]) -> None:
    """Drop charts whose files no longer exist."""
    for prop in mode_props:
        prop.chart_infos = [info for info in prop.chart_infos if _exists(info.path)]


def save_chart_infos_set(
    mode_props: Sequence[ModeProp],
    directory: PathLike = ".",
    kind: Union[MarshalType, str] = DEFAULT_MARSHAL_TYPE,
) -> bool:
    """Store every mode's chart list; return False if writing failed."""
    data = [prop.chart_infos for prop in mode_props]
    return save_data(Path(directory) / _db_filename(kind), data, kind)


def put_chart_info(infos: list[ChartInfo], info: ChartInfo) -> list[ChartInfo]:
    """Insert info keeping infos sorted by path, replacing one with the same path."""
    index = bisect.bisect_left(infos, info.path, key=lambda c: c.path)
    if index < len(infos) and infos[index].path == info.path:
        infos[index] = info
    else:
        infos.insert(index, info)
    return infos