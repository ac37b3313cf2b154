import pytest

from mazechase.engine import Direction
from mazechase.input import KeyMapper, swipe_to_direction


@pytest.mark.parametrize(
    "tx,ty,expected",
    [
        (40, 5, Direction.RIGHT),
        (-40, 5, Direction.LEFT),
        (5, 40, Direction.DOWN),
        (5, -40, Direction.UP),
        (25, 3, None),
        (-3, 29, None),
        (0, 0, None),
        # ties go to the vertical axis
        (40, 40, Direction.DOWN),
    ],
)
def test_swipe_threshold_and_dominant_axis(tx, ty, expected):
    assert swipe_to_direction(tx, ty) is expected


def test_custom_swipe_threshold():
    assert swipe_to_direction(12, 0, threshold=10) is Direction.RIGHT
    assert swipe_to_direction(12, 0, threshold=15) is None


def test_default_key_bindings():
    keys = KeyMapper.default()
    assert keys.direction_for_key("UP") is Direction.UP
    assert keys.direction_for_key("w") is Direction.UP
    assert keys.direction_for_key(" a ") is Direction.LEFT
    assert keys.direction_for_key("RIGHT") is Direction.RIGHT
    assert keys.direction_for_key("S") is Direction.DOWN
    assert keys.direction_for_key("Q") is None
    assert keys.direction_for_key(None) is None


def test_rebinding():
    keys = KeyMapper.default()
    keys.unbind("W")
    keys.bind("k", Direction.UP)
    keys.bind("", Direction.DOWN)
    assert keys.direction_for_key("W") is None
    assert keys.direction_for_key("K") is Direction.UP
