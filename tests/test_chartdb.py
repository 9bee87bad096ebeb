import time

import pytest

from gosu.chartdb import (
    ModeProp,
    load_chart_infos_set,
    put_chart_info,
    save_chart_infos_set,
    tidy_chart_infos_set,
)
from gosu.chartheader import ChartHeader
from gosu.chartinfo import ChartInfo
from gosu.mode import GameMode


def test_put_keeps_paths_sorted():
    infos = []
    for path in ["b", "a", "d", "c"]:
        put_chart_info(infos, ChartInfo(path=path))
    paths = [info.path for info in infos]
    assert paths == sorted(paths)
    assert len(paths) == 4


def test_put_replaces_same_path():
    infos = [ChartInfo(path="a"), ChartInfo(path="b")]
    result = put_chart_info(infos, ChartInfo(path="b", level=9.0))
    assert result is infos
    assert len(infos) == 2
    assert infos[1].level == 9.0


def test_tidy_drops_missing_charts(tmp_path):
    present = tmp_path / "here.osu"
    present.write_text("")
    prop = ModeProp("piano", GameMode.PIANO4)
    prop.chart_infos = [ChartInfo(path=str(present)), ChartInfo(path=str(tmp_path / "gone.osu"))]
    tidy_chart_infos_set([prop])
    assert [info.path for info in prop.chart_infos] == [str(present)]


@pytest.mark.parametrize("kind", ["json", "msgpack"])
def test_save_and_load_round_trip(tmp_path, kind):
    info = ChartInfo(
        path="songs/a.osu",
        header=ChartHeader(music_name="Song", artist="Someone"),
        mode=GameMode.PIANO7,
        sub_mode=7,
        level=4.5,
        duration=120000,
        note_counts=[500, 20],
        main_bpm=150.0,
    )
    props = [ModeProp("p4", GameMode.PIANO4), ModeProp("p7", GameMode.PIANO7, chart_infos=[info])]
    assert save_chart_infos_set(props, tmp_path, kind)
    stored = next(tmp_path.iterdir())

    fresh = [ModeProp("p4", GameMode.PIANO4), ModeProp("p7", GameMode.PIANO7)]
    load_chart_infos_set(fresh, stored, kind)
    assert fresh[0].chart_infos == []
    assert fresh[1].chart_infos == [info]


def test_load_rejects_mode_count_mismatch(tmp_path):
    props = [ModeProp("p4", GameMode.PIANO4)]
    save_chart_infos_set(props, tmp_path, "json")
    stored = next(tmp_path.iterdir())
    with pytest.raises(ValueError):
        load_chart_infos_set(props + [ModeProp("p7", GameMode.PIANO7)], stored, "json")


def test_load_corrupt_file_is_renamed(tmp_path):
    stored = tmp_path / "chart.json"
    stored.write_text("{not json")
    with pytest.raises(ValueError):
        load_chart_infos_set([ModeProp("p4", GameMode.PIANO4)], stored, "json")
    assert not stored.exists()
    assert (tmp_path / "chart.json.crashed").exists()


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_chart_infos_set([ModeProp("p4", GameMode.PIANO4)], tmp_path / "none.json", "json")


def _music_root(tmp_path):
    root = tmp_path / "music"
    folder = root / "set"
    folder.mkdir(parents=True)
    (folder / "b.osu").write_text("Mode: 3\nCircleSize:7\n")
    (folder / "a.bms").write_text("")
    (folder / "broken.osu").write_text("Mode: 3\nCircleSize:8\n")
    (folder / "four.osu").write_text("Mode: 3\nCircleSize:4\n")
    (folder / "sb").mkdir()
    (root / "loose.bms").write_text("")
    return root


def _reader(path):
    if path.endswith("broken.osu"):
        raise ValueError("broken chart")
    return ChartInfo(path=path, mode=GameMode.PIANO7)


def test_load_new_chart_infos(tmp_path):
    root = _music_root(tmp_path)
    prop = ModeProp("p7", GameMode.PIANO7, new_chart_info=_reader)
    infos = prop.load_new_chart_infos(root)
    names = [info.path.replace("\\", "/").split("/")[-1] for info in infos]
    assert names == ["a.bms", "b.osu"]
    assert prop.last_update_time > 0


def test_load_new_chart_infos_skips_old_files(tmp_path):
    root = _music_root(tmp_path)
    prop = ModeProp("p7", GameMode.PIANO7, new_chart_info=_reader, last_update_time=time.time() + 3600)
    assert prop.load_new_chart_infos(root) == []


def test_load_new_chart_infos_needs_reader(tmp_path):
    with pytest.raises(ValueError):
        ModeProp("p7", GameMode.PIANO7).load_new_chart_infos(tmp_path)


def test_load_new_chart_infos_missing_root(tmp_path):
    prop = ModeProp("p7", GameMode.PIANO7, new_chart_info=_reader)
    with pytest.raises(OSError):
        prop.load_new_chart_infos(tmp_path / "absent")