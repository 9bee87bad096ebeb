"""In-memory representation of a parsed .osu chart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gosu.osu.event import Event, background, video
from gosu.osu.hitobject import HitObject
from gosu.osu.timingpoint import TimingPoint

RGBA = tuple[int, int, int, int]


@dataclass
class General:
    audio_filename: str = ""
    audio_lead_in: int = 0
    audio_hash: str = ""
    preview_time: int = -1
    countdown: int = 1
    sample_set: str = "Normal"
    stack_leniency: float = 0.7
    mode: int = 0
    letterbox_in_breaks: bool = False
    story_fire_in_front: bool = True
    use_skin_sprites: bool = False
    always_show_playfield: bool = False
    overlay_position: str = "NoChange"
    skin_preference: str = ""
    epilepsy_warning: bool = False
    countdown_offset: int = 0
    special_style: bool = False
    widescreen_storyboard: bool = False
    samples_match_playback_rate: bool = False


@dataclass
class Editor:
    bookmarks: list[int] = field(default_factory=list)
    distance_spacing: float = 0.0
    beat_divisor: float = 0.0
    grid_size: int = 0
    timeline_zoom: float = 0.0


@dataclass
class Metadata:
    title: str = ""
    title_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    creator: str = ""
    version: str = ""
    source: str = ""
    tags: list[str] = field(default_factory=list)
    beatmap_id: int = 0
    beatmap_set_id: int = 0


@dataclass
class Difficulty:
    hp_drain_rate: float = 0.0
    circle_size: float = 0.0
    overall_difficulty: float = 0.0
    approach_rate: float = 0.0
    slider_multiplier: float = 0.0
    slider_tick_rate: float = 0.0


def _blank_combos() -> list[RGBA]:
    return [(0, 0, 0, 0)] * 8


@dataclass
class Colours:
    combos: list[RGBA] = field(default_factory=_blank_combos)
    slider_track_override: RGBA = (0, 0, 0, 0)
    slider_border: RGBA = (0, 0, 0, 0)


@dataclass
class Format:
    """A whole chart, section by section."""

    format_version: int = 0
    general: General = field(default_factory=General)
    editor: Editor = field(default_factory=Editor)
    metadata: Metadata = field(default_factory=Metadata)
    difficulty: Difficulty = field(default_factory=Difficulty)
    events: list[Event] = field(default_factory=list)
    timing_points: list[TimingPoint] = field(default_factory=list)
    colours: Colours = field(default_factory=Colours)
    hit_objects: list[HitObject] = field(default_factory=list)

    def background(self) -> Optional[Event]:
        """The chart's first background event, or None."""
        return background(self.events)

    def video(self) -> Optional[Event]:
        """The chart's first video event, or None."""
        return video(self.events)