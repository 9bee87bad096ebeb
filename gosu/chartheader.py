"""Descriptive data of a chart that does not affect how it plays."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

from gosu.osu.format import Format


def _join(directory: str, name: str) -> str:
    return os.path.normpath(os.path.join(directory, name))


@dataclass
class ChartHeader:
    """Names, credits and file references of a chart."""

    chart_id: int = 0
    music_name: str = ""
    music_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    music_source: str = ""
    chart_name: str = ""
    charter: str = ""
    holder_id: int = 0

    preview_time: int = 0
    music_filename: str = ""
    image_filename: str = ""
    video_filename: str = ""
    video_time_offset: int = 0

    def music_path(self, chart_path: str) -> Optional[str]:
        """Path of the music file next to the chart, or None when it has none."""
        if self.music_filename in ("", "virtual"):
            return None
        return _join(os.path.dirname(os.fspath(chart_path)), self.music_filename)

    def background_path(self, chart_path: str) -> str:
        """Path of the background image next to the chart."""
        return _join(os.path.dirname(os.fspath(chart_path)), self.image_filename)


def new_chart_header(fmt: Any) -> ChartHeader:
    """Build a header from a parsed chart; unknown inputs give a blank header."""
    if not isinstance(fmt, Format):
        return ChartHeader()
    header = ChartHeader(
        music_name=fmt.metadata.title,
        music_unicode=fmt.metadata.title_unicode,
        artist=fmt.metadata.artist,
        artist_unicode=fmt.metadata.artist_unicode,
        music_source=fmt.metadata.source,
        chart_name=fmt.metadata.version,
        charter=fmt.metadata.creator,
        preview_time=fmt.general.preview_time,
        music_filename=fmt.general.audio_filename,
    )
    bg = fmt.background()
    if bg is not None:
        header.image_filename = bg.filename
    clip = fmt.video()
    if clip is not None:
        header.video_filename = clip.filename
        header.video_time_offset = clip.start_time
    return header