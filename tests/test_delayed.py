import pytest

from gosu.ctrl.delayed import Delayed, DelayedMode
from gosu.ctrl.settings import DEFAULT_TPS, countdowns, set_tps


@pytest.fixture(autouse=True)
def _restore_tps():
    yield
    set_tps(DEFAULT_TPS)


def test_unchanged_source_keeps_value():
    d = Delayed()
    d.update(0)
    assert d.value == 0
    assert d.countdown == 0


def test_exp_mode_rises_monotonically_and_settles():
    d = Delayed(mode=DelayedMode.EXP)
    ticks = countdowns().trans
    previous = d.value
    for _ in range(ticks):
        d.update(100)
        assert previous <= d.value <= 100
        previous = d.value
    assert d.countdown == 0
    d.update(100)
    assert d.value == 100


def test_exp_mode_leaves_one_unit_after_transition():
    d = Delayed(mode=DelayedMode.EXP)
    for _ in range(countdowns().trans):
        d.update(100)
    assert d.value == pytest.approx(99)


def test_linear_mode_reaches_source_after_transition():
    d = Delayed(mode=DelayedMode.LINEAR)
    ticks = countdowns().trans
    d.update(100)
    assert d.countdown == ticks - 1
    for _ in range(ticks - 1):
        d.update(100)
    assert d.value == pytest.approx(100)


def test_decrease_waits_then_snaps():
    d = Delayed(mode=DelayedMode.LINEAR)
    d.update(-50)
    assert d.value == 0
    while d.countdown:
        d.update(-50)
    d.update(-50)
    assert d.value == -50


def test_zero_tick_transition_jumps():
    set_tps(0)
    d = Delayed()
    d.update(42)
    assert d.value == 42