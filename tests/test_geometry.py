import pytest

from curvelab.curve import geometry


def test_closest_point():
    points = [(20, 20), (50, 80), (80, 30)]
    index, distance = geometry.closest_point((23, 24), points)
    assert index == 0
    assert distance == pytest.approx(5)
    assert geometry.closest_point((79, 80), points)[0] == 1


def test_closest_point_of_nothing():
    assert geometry.closest_point((1, 1), []) is None


def test_clamp():
    assert geometry.clamp(5, 10, 90) == 10
    assert geometry.clamp(95, 10, 90) == 90
    assert geometry.clamp(50, 10, 90) == 50
    # an empty range collapses to its midpoint
    assert geometry.clamp(3, 20, 10) == 15


def test_is_separated():
    assert geometry.is_separated(60, [50, 80], 10)
    assert not geometry.is_separated(59, [50, 80], 10)
    assert geometry.is_separated(5, [], 10)
    assert not geometry.is_separated(50, [50], 0)
    assert geometry.is_separated(50.5, [50], 0)


def test_nearest_separated_position():
    assert geometry.nearest_separated_position(55, [50], 10, 10, 90) == 60
    assert geometry.nearest_separated_position(44, [50], 10, 10, 90) == 40
    # equidistant candidates: prefer the larger
    assert geometry.nearest_separated_position(50, [50], 10, 10, 90) == 60
    assert geometry.nearest_separated_position(50, [50], 10, 10, 55) == 40
    # the gap between two points is too small, so go around them
    assert geometry.nearest_separated_position(50, [42, 58], 10, 10, 90) == 68


def test_no_separated_position_in_range():
    assert geometry.nearest_separated_position(50, [50], 10, 45, 55) is None


def test_zero_separation_steps_off_the_existing_position():
    position = geometry.nearest_separated_position(50, [50], 0, 0, 100)
    assert position > 50
    assert position - 50 < 1e-10
