import pytest

from gosu.osu.hitobject import (
    HIT_TYPE_HOLD_NOTE,
    HIT_TYPE_SLIDER,
    HitObject,
    HitSample,
    SliderParams,
    is_big,
    is_don,
    is_kat,
    parse_hit_object,
    parse_hit_sample,
    parse_slider_params,
)


def test_normal_note():
    ho = parse_hit_object("256,192,1000,1,0,0:0:0:0:")
    assert (ho.x, ho.y, ho.time, ho.note_type, ho.hit_sound) == (256, 192, 1000, 1, 0)
    assert ho.hit_sample == HitSample(0, 0, 0, 0, "")


def test_normal_note_without_sample():
    ho = parse_hit_object("256,192,1000,1,0")
    assert ho == HitObject(x=256, y=192, time=1000, note_type=1, hit_sound=0)


def test_non_note_without_params_raises():
    with pytest.raises(ValueError):
        parse_hit_object("256,192,1000,2,0")


def test_slider_full():
    ho = parse_hit_object("100,100,1000,2,0,B|200:200|250:200,2,140,2|1|2,0:0|0:0|0:2,0:0:0:0:")
    assert ho.slider_params == SliderParams(
        curve_type="B",
        curve_points=[(200, 200), (250, 200)],
        slides=2,
        length=140.0,
        edge_sounds=[2, 1, 2],
        edge_sets=[(0, 0), (0, 0), (0, 2)],
    )
    assert ho.hit_sample == HitSample()


def test_slider_without_hit_sample():
    ho = parse_hit_object("100,100,1000,6,0,L|200:100,1,140")
    assert ho.slider_params.curve_points == [(200, 100)]
    assert ho.hit_sample == HitSample()
    assert ho.slider_length() == 140.0
    assert ho.slider_duration(1.0) == 140


def test_non_slider_has_no_length():
    ho = parse_hit_object("256,192,1000,1,0,0:0:0:0:")
    assert ho.slider_length() == 0
    assert ho.slider_duration(1.0) == 0


def test_spinner_with_new_combo():
    ho = parse_hit_object("256,192,1000,12,0,3000,0:0:0:0:")
    assert ho.note_type == 12
    assert ho.end_time == 3000


@pytest.mark.parametrize(
    "line", ["64,192,1000,128,0,1500:0:0:0:0:", "64,192,1000,128,0,1500,0:0:0:0:"]
)
def test_hold_note_both_layouts(line):
    ho = parse_hit_object(line)
    assert ho.note_type == HIT_TYPE_HOLD_NOTE
    assert ho.end_time == 1500
    assert ho.hit_sample == HitSample(0, 0, 0, 0, "")


@pytest.mark.parametrize(
    "line",
    [
        "256,192,1000,3,0,0:0:0:0:",
        "256,192",
        "256,192,1000,1.0,0,0:0:0:0:",
        "100,100,1000,2,0,B|1:2:3,1,100",
        "100,100,1000,2,0,B|1:2,1,100,2|1,0:0:0:0:",
    ],
)
def test_invalid_hit_objects_raise(line):
    with pytest.raises(ValueError):
        parse_hit_object(line)


def test_hit_sample_full_and_partial():
    assert parse_hit_sample("1:2:3:70:hit.wav") == HitSample(1, 2, 3, 70, "hit.wav")
    assert parse_hit_sample("1:2") == HitSample(normal_set=1, addition_set=2)
    with pytest.raises(ValueError):
        parse_hit_sample("a:0")


def test_slider_params_errors():
    with pytest.raises(ValueError):
        parse_slider_params("B|1:1,1")
    with pytest.raises(ValueError):
        parse_slider_params("B|1:1,1,100,2")


def test_column_stays_in_range_and_is_monotonic():
    for count in (4, 7):
        columns = [HitObject(x=x).column(count) for x in range(0, 512, 7)]
        assert all(0 <= c < count for c in columns)
        assert columns == sorted(columns)
        assert columns[0] == 0


def test_taiko_flags():
    don = HitObject(hit_sound=0)
    whistle = HitObject(hit_sound=2)
    clap = HitObject(hit_sound=8)
    big_don = HitObject(hit_sound=4)
    assert is_don(don) and not is_kat(don)
    assert is_kat(whistle) and is_kat(clap)
    assert is_big(big_don) and is_don(big_don)
    for ho in (don, whistle, clap, big_don):
        assert is_kat(ho) != is_don(ho)


def test_slider_flag_constant():
    ho = parse_hit_object("100,100,1000,2,0,L|200:100,1,50")
    assert ho.note_type == 2
    assert ho.note_type & HIT_TYPE_SLIDER == HIT_TYPE_SLIDER
    assert ho.slider_length() == 50.0