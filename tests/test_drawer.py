import pytest

from gosu.draws.drawer import AnimationDrawer, BaseDrawer


def test_reload_restarts_countdown():
    d = BaseDrawer(countdown=0, max_countdown=10)
    d.update(True)
    assert d.countdown == d.max_countdown
    assert d.age() == 0.0


def test_countdown_decreases_and_stops_at_zero():
    d = BaseDrawer(countdown=2, max_countdown=10)
    d.update(False)
    d.update(False)
    d.update(False)
    assert d.countdown == 0
    assert d.age() == 1.0


def test_age_grows_as_countdown_runs():
    d = BaseDrawer(countdown=10, max_countdown=10)
    ages = []
    for _ in range(10):
        d.update(False)
        ages.append(d.age())
    assert ages == sorted(ages)
    assert all(0.0 <= a <= 1.0 for a in ages)


def test_age_without_max_countdown_is_nan():
    age = BaseDrawer(countdown=0, max_countdown=0).age()
    assert str(age) == "nan"


def test_animation_starts_at_first_frame_after_reset():
    d = AnimationDrawer(frames=["a", "b", "c", "d"])
    d.update(1234, 100, True)
    assert d.start_time == 1234
    assert d.frame() == 0
    assert d.current() == "a"


def test_update_without_reset_keeps_start_time():
    d = AnimationDrawer(frames=["a", "b"])
    d.update(50, 100, True)
    d.update(80, 100, False)
    assert d.start_time == 50
    assert d.time == 80


@pytest.mark.parametrize("time", range(-300, 300, 7))
def test_frame_is_in_range_and_periodic(time):
    frames = list(range(5))
    d = AnimationDrawer(frames=frames)
    d.update(time, 120, False)
    first = d.frame()
    d.update(time + 120, 120, False)
    assert 0 <= first < len(frames)
    assert d.frame() == first


def test_frames_cover_whole_loop():
    d = AnimationDrawer(frames=list(range(4)))
    seen = set()
    for time in range(400):
        d.update(time, 400, False)
        seen.add(d.frame())
    assert seen == {0, 1, 2, 3}


def test_zero_duration_is_an_error():
    d = AnimationDrawer(frames=["a"])
    d.update(10, 0, False)
    with pytest.raises(ValueError):
        d.frame()