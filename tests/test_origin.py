import pytest

from gosu.draws.origin import BOTTOM, CENTER, LEFT, MIDDLE, RIGHT, TOP, Origin


@pytest.mark.parametrize(
    "origin, x, y",
    [
        (Origin.LEFT_TOP, LEFT, TOP),
        (Origin.LEFT_MIDDLE, LEFT, MIDDLE),
        (Origin.LEFT_BOTTOM, LEFT, BOTTOM),
        (Origin.CENTER_TOP, CENTER, TOP),
        (Origin.CENTER_MIDDLE, CENTER, MIDDLE),
        (Origin.CENTER_BOTTOM, CENTER, BOTTOM),
        (Origin.RIGHT_TOP, RIGHT, TOP),
        (Origin.RIGHT_MIDDLE, RIGHT, MIDDLE),
        (Origin.RIGHT_BOTTOM, RIGHT, BOTTOM),
    ],
)
def test_positions(origin, x, y):
    assert origin.position_x() == x
    assert origin.position_y() == y


def test_positions_identify_origin_uniquely():
    origins = [Origin(value) for value in range(9)]
    pairs = [(o.position_x(), o.position_y()) for o in origins]
    expected = [(x, y) for x in (LEFT, CENTER, RIGHT) for y in (TOP, MIDDLE, BOTTOM)]
    assert pairs == expected


def test_default_origin_is_left_top():
    assert Origin(0) is Origin.LEFT_TOP