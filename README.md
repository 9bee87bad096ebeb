# gosu

Building blocks for a rhythm game: readers for `.osu` charts and `.osr`
replays, keyboard key names, value handlers with key repeat, layout
geometry, chart levels and a store for per-mode chart lists.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Reading a chart

```python
from pathlib import Path
from gosu.osu.parser import parse, detect_mode

chart = parse(Path("song.osu").read_bytes())
print(chart.metadata.title, chart.metadata.version)
for obj in chart.hit_objects:
    print(obj.time, obj.column(4))

bg = chart.background()   # first background Event, or None
mode, key_count = detect_mode("song.osu")
```

`parse` takes bytes or text and returns a `gosu.osu.format.Format` with
`general`, `editor`, `metadata`, `difficulty`, `events`, `timing_points`,
`colours` and `hit_objects`. A malformed timing point, hit object or
key/value entry raises `OsuParseError`; unreadable events are skipped.

`detect_mode` reads only the `Mode:` and `CircleSize:` lines and returns
`(mode, key_count)`; the mode is `MODE_ERROR` (-1) when the file cannot be
read or its mode is not a number. The single-line readers
`parse_event`, `parse_timing_point`, `parse_hit_object`,
`parse_slider_params` and `parse_hit_sample` are available in their
modules under `gosu.osu`, along with `TimingPoint.bpm()`,
`HitObject.slider_length()` and the taiko helpers `is_don`, `is_kat`,
`is_big`.

## Reading a replay

```python
from pathlib import Path
from gosu.osr.replay import parse

replay = parse(Path("play.osr").read_bytes())
print(replay.player_name, replay.score)
for action in replay.replay_data:
    print(action.w, action.x, action.y, action.z)
digest = replay.md5()   # 16 bytes, all zero if the hex text is invalid
```

Truncated or corrupt input raises `ReplayError`.

## Chart lists

```python
from gosu.chartdb import (
    ModeProp, load_chart_infos_set, tidy_chart_infos_set,
    save_chart_infos_set, put_chart_info,
)
from gosu.mode import GameMode, chart_file_mode
```

- `chart_file_mode(path)` gives the `GameMode` of a chart file from its
  extension and, for `.osu`, its mode and key count.
- `ModeProp(name, mode, new_chart_info=...)` holds one mode's
  `ChartInfo` list. `load_new_chart_infos(music_root)` looks at files one
  folder below `music_root` changed since `last_update_time`, reads those of
  its mode with `new_chart_info` and returns them sorted by path; charts
  that fail to read are logged and skipped.
- `put_chart_info(infos, info)` inserts keeping the list sorted by path,
  replacing an entry with the same path.
- `save_chart_infos_set` writes all lists to `chart.json` (JSON) or
  `chart.db` (msgpack); `load_chart_infos_set` reads them back and
  `tidy_chart_infos_set` drops entries whose files are gone.

`gosu.db.storage` does the encoding: `marshal`, `unmarshal`, `load_data`
and `save_data`, with `MarshalType.JSON` as the default. `load_data`
renames a file it cannot read or decode with a `.crashed` suffix and
re-raises the error.

`gosu.chartheader.new_chart_header(chart)` builds a `ChartHeader` from a
parsed `Format`; `ChartInfo` adds the level, duration, note counts and BPMs
with `text()`, `time_string()`, `bpm_string()` and `note_count_string()`.

## Other modules

- `gosu.input.keys`: `Key`, `name_to_key`, `names_to_keys`,
  `is_keys_valid`, `to_virtual_key`.
- `gosu.input.keyaction`: `KeyAction` and `current_key_action(last, now)`.
- `gosu.ctrl.handler`: `IntHandler`, `FloatHandler` and `BoolHandler` step a
  shared `Cell`; `KeyHandler` drives one from a pair of keys, with a longer
  delay before repeating, given an `is_pressed` callable and an optional
  `play` callback for sounds.
- `gosu.ctrl.delayed`: `Delayed`, a value that eases towards its source.
- `gosu.ctrl.settings`: `set_tps` and `countdowns()` for the tick counts
  the controls use.
- `gosu.draws.point`, `gosu.draws.origin`, `gosu.draws.drawer`
  (`BaseDrawer`, `AnimationDrawer`) and `gosu.draws.layout` (`Box`,
  `Grid`, `Rectangle`, `new_grid`): positions, sizes and timing only.
- `gosu.level`: `level(difficulties)` returns the level and three
  variation factors.

## What this package does not do

There is no game to run and no command: it opens no window, draws nothing,
plays no audio and reads no keyboard by itself. Layout and drawer classes
compute geometry and timing for a renderer supplied elsewhere. It has no
chart readers that turn a file into a `ChartInfo` for a game mode; pass one
to `ModeProp` as `new_chart_info`.