"""Tests for the mutable 2D vector."""

# Standard Library
import math

# Third Party
import pytest

# Local repo modules
import conftest

# local repo modules
from molvertex import vector2
from molvertex.vector2 import Vector2


#============================================
def test_module_subtract_returns_new_vector():
	a = Vector2(3.0, 4.0)
	b = Vector2(1.0, 1.0)
	result = vector2.subtract(a, b)
	assert result == Vector2(2.0, 3.0)
	assert a == Vector2(3.0, 4.0)
	assert b == Vector2(1.0, 1.0)


#============================================
def test_in_place_arithmetic():
	vec = Vector2(1.0, 2.0)
	assert vec.add(Vector2(1.0, 1.0)) is vec
	assert vec.to_tuple() == (2.0, 3.0)
	vec.subtract(Vector2(2.0, 3.0))
	assert tuple(vec) == (0.0, 0.0)


#============================================
def test_angle_length_and_distance():
	assert Vector2(0.0, 1.0).angle() == pytest.approx(math.pi / 2.0)
	assert Vector2(-1.0, 0.0).angle() == pytest.approx(math.pi)
	assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)
	assert Vector2(1.0, 1.0).distance(Vector2(4.0, 5.0)) == pytest.approx(5.0)


#============================================
def test_clone_is_independent():
	vec = Vector2(1.0, 2.0)
	copied = vec.clone()
	copied.x = 9.0
	assert vec.x == 1.0
	assert vec != copied
