"""Entries of the [HitObjects] section of .osu charts."""

from __future__ import annotations

from dataclasses import dataclass, field

from gosu.osu.event import _parse_float, _parse_int, _parse_truncated

HIT_TYPE_NOTE = 1 << 0
HIT_TYPE_SLIDER = 1 << 1
NEW_COMBO = 1 << 2
HIT_TYPE_SPINNER = 1 << 3
COMBO_COLOUR_SKIP1 = 1 << 4
COMBO_COLOUR_SKIP2 = 1 << 5
COMBO_COLOUR_SKIP3 = 1 << 6
HIT_TYPE_HOLD_NOTE = 1 << 7

COMBO_MASK = ~(NEW_COMBO + COMBO_COLOUR_SKIP1 + COMBO_COLOUR_SKIP2 + COMBO_COLOUR_SKIP3)

HIT_SOUND_NORMAL = 1 << 0
HIT_SOUND_WHISTLE = 1 << 1
HIT_SOUND_FINISH = 1 << 2
HIT_SOUND_CLAP = 1 << 3

HIT_SOUNDS = ("normal", "whistle", "finish", "clap")
SAMPLE_SETS = ("x", "normal", "soft", "drum")
YET_DETERMINED = "?"

TAIKO_KAT_MASK = HIT_SOUND_WHISTLE | HIT_SOUND_CLAP
TAIKO_BIG_MASK = HIT_SOUND_FINISH


@dataclass
class SliderParams:
    curve_type: str = ""
    curve_points: list[tuple[int, int]] = field(default_factory=list)
    slides: int = 0
    length: float = 0.0
    edge_sounds: list[int] = field(default_factory=list)
    edge_sets: list[tuple[int, int]] = field(default_factory=list)


@dataclass
class HitSample:
    normal_set: int = 0
    addition_set: int = 0
    index: int = 0
    volume: int = 0
    filename: str = ""


@dataclass
class HitObject:
    x: int = 0
    y: int = 0
    time: int = 0
    note_type: int = 0
    hit_sound: int = 0
    end_time: int = 0
    slider_params: SliderParams = field(default_factory=SliderParams)
    hit_sample: HitSample = field(default_factory=HitSample)

    def column(self, column_count: int) -> int:
        """Index of the column on a mania playfield of the given width."""
        product = column_count * self.x
        quotient = abs(product) // 512
        return quotient if product >= 0 else -quotient

    def slider_length(self) -> float:
        if self.note_type & HIT_TYPE_SLIDER == 0:
            return 0.0
        return self.slider_params.slides * self.slider_params.length

    def slider_duration(self, speed: float) -> int:
        if self.note_type & HIT_TYPE_SLIDER == 0:
            return 0
        return int(self.slider_length() / speed)


def is_kat(ho: HitObject) -> bool:
    return ho.hit_sound & TAIKO_KAT_MASK != 0


def is_don(ho: HitObject) -> bool:
    return ho.hit_sound & TAIKO_KAT_MASK == 0


def is_big(ho: HitObject) -> bool:
    return ho.hit_sound & TAIKO_BIG_MASK != 0


def _parse_pair(text: str) -> tuple[int, int]:
    parts = text.split(":")
    if len(parts) > 2:
        raise ValueError(f"invalid pair: {text!r}")
    values = [_parse_truncated(part) for part in parts]
    values += [0] * (2 - len(values))
    return values[0], values[1]


def parse_hit_object(line: str) -> HitObject:
    """Parse 'x,y,time,type,hitSound,objectParams,hitSample'."""
    values = line.split(",", 5)
    if len(values) < 5:
        raise ValueError(f"invalid hit object: {values} (not enough length; requires 6)")
    ho = HitObject(
        x=_parse_truncated(values[0]),
        y=_parse_truncated(values[1]),
        time=_parse_truncated(values[2]),
        note_type=_parse_int(values[3]),
        hit_sound=_parse_int(values[4]),
    )
    if len(values) == 5:
        if ho.note_type != HIT_TYPE_NOTE:
            raise ValueError(
                f"invalid hit object: {values}; not enough length for non-normal note; requires 6"
            )
        return ho

    kind = ho.note_type & COMBO_MASK
    if kind in (HIT_TYPE_NOTE, HIT_TYPE_SLIDER, HIT_TYPE_SPINNER):
        params = values[5].split(",")
    elif kind == HIT_TYPE_HOLD_NOTE:
        # Older charts separate the end time of hold notes with a comma.
        params = values[5].replace(",", ":", 1).split(":", 1)
    else:
        raise ValueError(f"invalid hit object: error at {line}; invalid note type {kind}")

    skip_sample = False
    if kind == HIT_TYPE_SLIDER:
        if ":" in params[-1]:
            slider_text = ",".join(params[:-1])
        else:
            slider_text = ",".join(params)
            skip_sample = True
        ho.slider_params = parse_slider_params(slider_text)
    elif kind in (HIT_TYPE_SPINNER, HIT_TYPE_HOLD_NOTE):
        ho.end_time = _parse_truncated(params[0])

    if not skip_sample:
        ho.hit_sample = parse_hit_sample(params[-1])
    return ho


def parse_slider_params(s: str) -> SliderParams:
    """Parse 'curveType|curvePoints,slides,length[,edgeSounds,edgeSets]'."""
    values = s.split(",")
    if len(values) < 3:
        raise ValueError(
            f"invalid hit object: error at slider parameter {s}; no enough length at {values}"
        )
    curve = values[0].split("|")
    params = SliderParams(
        curve_type=curve[0],
        curve_points=[_parse_pair(point) for point in curve[1:]],
        slides=_parse_truncated(values[1]),
        length=_parse_float(values[2]),
    )
    if len(values) == 3:
        return params
    if len(values) < 5:
        raise ValueError(
            f"invalid hit object: error at slider parameter {s}; "
            f"no enough length at edge sound samples in slider parameter ({values})"
        )
    params.edge_sounds = [_parse_truncated(v) for v in values[3].split("|")]
    params.edge_sets = [_parse_pair(v) for v in values[4].split("|")]
    return params


def parse_hit_sample(s: str) -> HitSample:
    """Parse 'normalSet:additionSet:index:volume:filename'; trailing parts are optional."""
    values = s.split(":")
    sample = HitSample(normal_set=_parse_int(values[0]))
    if len(values) == 1:
        return sample
    sample.addition_set = _parse_int(values[1])
    if len(values) == 2:
        return sample
    sample.index = _parse_int(values[2])
    if len(values) == 3:
        return sample
    sample.volume = _parse_truncated(values[3])
    if len(values) == 4:
        return sample
    sample.filename = values[4]
    return sample