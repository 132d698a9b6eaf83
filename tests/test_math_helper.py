"""Tests for angle helpers."""

# Standard Library
import math

# Third Party
import pytest

# Local repo modules
import conftest

# local repo modules
from molvertex import math_helper


#============================================
def test_degree_radian_conversion():
	assert math_helper.to_deg(math.pi) == pytest.approx(180.0)
	assert math_helper.to_rad(90.0) == pytest.approx(math.pi / 2.0)
	assert math_helper.to_deg(math_helper.to_rad(33.0)) == pytest.approx(33.0)


#============================================
def test_round_to_halves_go_up():
	assert math_helper.round_to(0.5) == 1.0
	assert math_helper.round_to(-0.5) == 0.0
	assert math_helper.round_to(-1.5) == -1.0
	assert math_helper.round_to(-1.6) == -2.0
	assert math_helper.round_to(2.5) == 3.0
	assert math_helper.round_to(1.5707963) == 2.0
	assert math_helper.round_to(3.14159, 2) == pytest.approx(3.14)


#============================================
def test_mean_angle_wraps_around():
	# 350 and 10 degrees average to 0, not 180
	angles = [math.radians(350.0), math.radians(10.0)]
	assert math_helper.mean_angle(angles) == pytest.approx(0.0, abs=1e-9)


#============================================
def test_mean_angle_single_value():
	assert math_helper.mean_angle([1.0]) == pytest.approx(1.0)
	assert math_helper.mean_angle(iter([0.0, math.pi / 2.0])) == pytest.approx(math.pi / 4.0)


#============================================
def test_mean_angle_empty_raises():
	with pytest.raises(ValueError):
		math_helper.mean_angle([])
