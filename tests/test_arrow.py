import math

import pytest

from archer.arrow import Arrow
from archer.config import ARROW_SPEED, ARROW_LENGTH


def test_arrow_initialization_and_position():
    angle = math.pi / 2
    a = Arrow(1.0, 2.0, angle)
    assert a.x == 1.0 and a.y == 2.0
    # dx should be effectively zero when angle is pi/2
    assert math.isclose(a.dx, 0.0, abs_tol=1e-9)
    assert math.isclose(a.dy, ARROW_SPEED, rel_tol=1e-9)
    assert a.length == ARROW_LENGTH
    assert a.alive
    assert a.position() == (a.x, a.y)


def test_arrow_update_moves_along_heading():
    a = Arrow(0, 0, 0.0)
    a.update(0.5)
    assert math.isclose(a.x, ARROW_SPEED * 0.5, rel_tol=1e-9)
    assert a.y == 0


def test_arrow_tip_is_length_ahead_of_base():
    a = Arrow(10.0, 20.0, math.pi / 2, length=34.0)
    tx, ty = a.tip()
    assert tx == pytest.approx(10.0)
    assert ty == pytest.approx(54.0)


@pytest.mark.parametrize(
    "x,y,out",
    [
        (0, 0, False),
        (-50, 0, False),
        (-50.1, 0, True),
        (850, 300, False),
        (851, 300, True),
        (100, -60, True),
        (100, 660, True),
    ],
)
def test_arrow_out_of_bounds_uses_margin(x, y, out):
    a = Arrow(x, y, 0.0)
    assert a.out_of_bounds(800, 600, 50) is out
