import pytest

from gosu.input.keyaction import KeyAction, current_key_action


@pytest.mark.parametrize(
    "last, now, expected",
    [
        (False, False, KeyAction.IDLE),
        (False, True, KeyAction.HIT),
        (True, False, KeyAction.RELEASE),
        (True, True, KeyAction.HOLD),
    ],
)
def test_current_key_action(last, now, expected):
    assert current_key_action(last, now) is expected


def test_actions_are_distinct():
    actions = {current_key_action(a, b) for a in (False, True) for b in (False, True)}
    assert actions == set(KeyAction)