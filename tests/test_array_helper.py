"""Tests for sequence helpers."""

# Third Party
import pytest

# Local repo modules
import conftest

# local repo modules
from molvertex import array_helper
from molvertex.vector2 import Vector2


#============================================
def test_clone_nested_lists_are_independent():
	original = [1, [2, 3], {"ring": [4]}]
	copied = array_helper.clone(original)
	assert copied == original
	copied[1].append(9)
	copied[2]["ring"].append(9)
	assert original == [1, [2, 3], {"ring": [4]}]


#============================================
def test_clone_uses_clone_method():
	points = [Vector2(1.0, 2.0)]
	copied = array_helper.clone(points)
	assert copied[0] == points[0]
	assert copied[0] is not points[0]


#============================================
def test_contains_by_value():
	assert array_helper.contains([1, 2, 3], value=2)
	assert not array_helper.contains([1, 2, 3], value=4)
	assert not array_helper.contains([], value=0)


#============================================
def test_contains_by_property():
	rings = [{"id": 1}, {"id": 5}]
	assert array_helper.contains(rings, value=5, property="id")
	assert not array_helper.contains(rings, value=2, property="id")
	points = [Vector2(0.0, 1.0)]
	assert array_helper.contains(points, value=1.0, property="y")


#============================================
def test_contains_by_predicate():
	assert array_helper.contains([1, 4, 6], func=lambda item: item > 5)
	assert not array_helper.contains([1, 4], func=lambda item: item > 5)


#============================================
def test_contains_requires_value_or_func():
	with pytest.raises(ValueError):
		array_helper.contains([1])
