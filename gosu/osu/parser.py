"""Reading .osu chart files into Format values."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Union

from gosu.osu.event import _parse_float, _parse_int, _parse_truncated, parse_event
from gosu.osu.format import RGBA, Format
from gosu.osu.hitobject import parse_hit_object
from gosu.osu.timingpoint import _parse_bool, parse_timing_point

MODE_STANDARD = 0
MODE_TAIKO = 1
MODE_CATCH = 2
MODE_MANIA = 3
MODE_DEFAULT = MODE_STANDARD
MODE_ERROR = -1

# Characters that count as white space when trimming lines and values.
_SPACES = (
    "\t\n\v\f\r \x85\xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


class OsuParseError(ValueError):
    """Raised when a line of a chart cannot be read."""


def _rstrip(text: str) -> str:
    return text.rstrip(_SPACES)


def _strip(text: str) -> str:
    return text.strip(_SPACES)


def _parse_bookmarks(text: str) -> list[int]:
    bookmarks = []
    for part in text.split(","):
        try:
            bookmarks.append(_parse_int(part))
        except ValueError:
            continue
    return bookmarks


def _parse_tags(text: str) -> list[str]:
    return text.split(" ")


Converter = Callable[[str], object]

_GENERAL: dict[str, tuple[str, Converter]] = {
    "AudioFilename": ("audio_filename", str),
    "AudioLeadIn": ("audio_lead_in", _parse_truncated),
    "AudioHash": ("audio_hash", str),
    "PreviewTime": ("preview_time", _parse_truncated),
    "Countdown": ("countdown", _parse_int),
    "SampleSet": ("sample_set", str),
    "StackLeniency": ("stack_leniency", _parse_float),
    "Mode": ("mode", _parse_int),
    "LetterboxInBreaks": ("letterbox_in_breaks", _parse_bool),
    "StoryFireInFront": ("story_fire_in_front", _parse_bool),
    "UseSkinSprites": ("use_skin_sprites", _parse_bool),
    "AlwaysShowPlayfield": ("always_show_playfield", _parse_bool),
    "OverlayPosition": ("overlay_position", str),
    "SkinPreference": ("skin_preference", str),
    "EpilepsyWarning": ("epilepsy_warning", _parse_bool),
    "CountdownOffset": ("countdown_offset", _parse_truncated),
    "SpecialStyle": ("special_style", _parse_bool),
    "WidescreenStoryboard": ("widescreen_storyboard", _parse_bool),
    "SamplesMatchPlaybackRate": ("samples_match_playback_rate", _parse_bool),
}

_EDITOR: dict[str, tuple[str, Converter]] = {
    "Bookmarks": ("bookmarks", _parse_bookmarks),
    "DistanceSpacing": ("distance_spacing", _parse_float),
    "BeatDivisor": ("beat_divisor", _parse_float),
    "GridSize": ("grid_size", _parse_truncated),
    "TimelineZoom": ("timeline_zoom", _parse_float),
}

_METADATA: dict[str, tuple[str, Converter]] = {
    "Title": ("title", str),
    "TitleUnicode": ("title_unicode", str),
    "Artist": ("artist", str),
    "ArtistUnicode": ("artist_unicode", str),
    "Creator": ("creator", str),
    "Version": ("version", str),
    "Source": ("source", str),
    "Tags": ("tags", _parse_tags),
    "BeatmapID": ("beatmap_id", _parse_int),
    "BeatmapSetID": ("beatmap_set_id", _parse_int),
}

_DIFFICULTY: dict[str, tuple[str, Converter]] = {
    "HPDrainRate": ("hp_drain_rate", _parse_float),
    "CircleSize": ("circle_size", _parse_float),
    "OverallDifficulty": ("overall_difficulty", _parse_float),
    "ApproachRate": ("approach_rate", _parse_float),
    "SliderMultiplier": ("slider_multiplier", _parse_float),
    "SliderTickRate": ("slider_tick_rate", _parse_float),
}

# Section name -> (key/value separator, value trimmer, Format attribute, field table).
_KEY_VALUE_SECTIONS = {
    "General": (": ", _rstrip, "general", _GENERAL),
    "Editor": (": ", _strip, "editor", _EDITOR),
    "Metadata": (":", _rstrip, "metadata", _METADATA),
    "Difficulty": (":", _strip, "difficulty", _DIFFICULTY),
}

_COMBO_SLOTS = {f"Combo{n}": n - 1 for n in range(1, 9)}


def _parse_rgb(text: str) -> RGBA:
    channels = [0, 0, 0]
    for position, part in enumerate(text.split(",")[:3]):
        try:
            value = _parse_float(part)
        except ValueError:
            value = 0.0
        channels[position] = int(value) & 0xFF if value == value and abs(value) != float("inf") else 0
    return channels[0], channels[1], channels[2], 255


def _is_section(line: str) -> bool:
    return bool(line) and line[0] == "[" and line[-1] == "]"


def _apply_colour(chart: Format, line: str) -> None:
    parts = line.split(" : ")
    if len(parts) < 2:
        raise OsuParseError(f"error at {line}: invalid colour entry")
    key, rgb = parts[0], _parse_rgb(parts[1])
    if key in _COMBO_SLOTS:
        chart.colours.combos[_COMBO_SLOTS[key]] = rgb
    elif key == "SliderTrackOverride":
        chart.colours.slider_track_override = rgb
    elif key == "SliderBorder":
        chart.colours.slider_border = rgb


def parse(data: Union[bytes, bytearray, str]) -> Format:
    """Parse the contents of a .osu file."""
    text = data if isinstance(data, str) else bytes(data).decode("utf-8", errors="replace")
    text = text.replace("\r\n", "\n")
    chart = Format()
    section = ""
    for raw in text.split("\n"):
        line = raw.lstrip(_SPACES)
        if not line or line.startswith("//"):
            continue
        if _is_section(line):
            section = line.strip("[]")
            continue

        if section in _KEY_VALUE_SECTIONS:
            separator, trim, attribute, table = _KEY_VALUE_SECTIONS[section]
            key, found, value = line.partition(separator)
            if not found or key not in table:
                continue
            field_name, convert = table[key]
            try:
                setattr(getattr(chart, attribute), field_name, convert(trim(value)))
            except ValueError as err:
                raise OsuParseError(f"error at {line}: {err}") from err
        elif section == "Events":
            try:
                chart.events.append(parse_event(line))
            except ValueError:
                continue
        elif section == "TimingPoints":
            try:
                chart.timing_points.append(parse_timing_point(line))
            except ValueError as err:
                raise OsuParseError(f"error at {line}: {err}") from err
        elif section == "Colours":
            _apply_colour(chart, line)
        elif section == "HitObjects":
            try:
                chart.hit_objects.append(parse_hit_object(line))
            except ValueError as err:
                raise OsuParseError(f"error at {line}: {err}") from err
    return chart


def detect_mode(path: Union[str, os.PathLike]) -> tuple[int, int]:
    """Return (mode, key count) read from a chart file without parsing it whole.

    The mode is MODE_ERROR when the file cannot be read or its mode is malformed.
    """
    try:
        data = Path(path).read_bytes()
    except OSError:
        return MODE_ERROR, 0
    mode = 0
    for raw in data.split(b"\n"):
        line = raw[:-1] if raw.endswith(b"\r") else raw
        text = line.decode("utf-8", errors="replace")
        if text.startswith("Mode: "):
            parts = text.split("Mode: ")
            if len(parts) != 2:
                return MODE_DEFAULT, 0
            try:
                mode = _parse_int(parts[1])
            except ValueError:
                return MODE_ERROR, 0
        if text.startswith("CircleSize:"):
            parts = text.split("CircleSize:")
            if len(parts) != 2:
                return mode, 0
            try:
                key_count = _parse_int(parts[1])
            except ValueError:
                return mode, 0
            return mode, key_count
    return MODE_DEFAULT, 0