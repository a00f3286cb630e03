import math

import pytest

from forgecore import mathutil


@pytest.mark.parametrize("value", [1, 2, 4, 1024, 1 << 40])
def test_powers_of_two(value):
    assert mathutil.is_power_of_2(value) is True


@pytest.mark.parametrize("value", [0, 3, 6, 1023, (1 << 40) + 1])
def test_not_powers_of_two(value):
    assert mathutil.is_power_of_2(value) is False


def test_random_int_within_bounds():
    for _ in range(200):
        value = mathutil.random_int()
        assert 0 <= value <= mathutil.RAND_MAX


def test_random_int_in_range_bounds():
    seen = set()
    for _ in range(500):
        value = mathutil.random_int_in_range(-3, 3)
        assert -3 <= value <= 3
        seen.add(value)
    assert seen <= set(range(-3, 4))
    assert len(seen) > 1


def test_random_int_in_degenerate_range():
    assert mathutil.random_int_in_range(5, 5) == 5


def test_random_int_in_inverted_range_raises():
    with pytest.raises(ValueError):
        mathutil.random_int_in_range(10, 1)


def test_random_float_unit_interval():
    for _ in range(200):
        value = mathutil.random_float()
        assert 0.0 <= value <= 1.0


def test_random_float_in_range_bounds():
    for _ in range(200):
        value = mathutil.random_float_in_range(-2.5, 7.5)
        assert -2.5 <= value <= 7.5


def test_random_float_in_degenerate_range():
    assert mathutil.random_float_in_range(4.0, 4.0) == 4.0


def test_deg_to_rad_half_turn():
    assert mathutil.deg_to_rad(180.0) == pytest.approx(math.pi)


def test_rad_to_deg_of_pi():
    assert mathutil.rad_to_deg(math.pi) == pytest.approx(180.0)


@pytest.mark.parametrize("degrees", [-720.0, -45.0, 0.0, 30.0, 90.0, 359.0])
def test_degree_radian_round_trip(degrees):
    assert mathutil.rad_to_deg(mathutil.deg_to_rad(degrees)) == pytest.approx(degrees)


def test_constants_consistent_with_conversions():
    assert mathutil.deg_to_rad(360.0) == pytest.approx(mathutil.PI_2)
    assert mathutil.deg_to_rad(1.0) == pytest.approx(mathutil.DEG2RAD_MULTIPLIER)
    assert mathutil.rad_to_deg(1.0) == pytest.approx(mathutil.RAD2DEG_MULTIPLIER)
    assert mathutil.rad_to_deg(mathutil.PI) == pytest.approx(180.0)