#--------------------------------------------------------------------------
#     This file is part of molvertex - a vertex model for 2D molecule layout
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Mutable 2D vector used for vertex positions."""

# Standard Library
import math


class Vector2(object):
	"""A point or direction in the drawing plane.

	The y axis points down, as on a canvas, so positive angles turn clockwise
	on screen.
	"""

	__slots__ = ("x", "y")

	def __init__(self, x=0.0, y=0.0):
		self.x = x
		self.y = y

	def __repr__(self):
		return f"Vector2({self.x!r}, {self.y!r})"

	def __eq__(self, other):
		if not isinstance(other, Vector2):
			return NotImplemented
		return self.x == other.x and self.y == other.y

	def __iter__(self):
		yield self.x
		yield self.y

	def clone(self):
		return Vector2(self.x, self.y)

	def add(self, vec):
		"""Add vec in place and return self."""
		self.x += vec.x
		self.y += vec.y
		return self

	def subtract(self, vec):
		"""Subtract vec in place and return self."""
		self.x -= vec.x
		self.y -= vec.y
		return self

	def length(self):
		return math.hypot(self.x, self.y)

	def distance(self, vec):
		return math.hypot(vec.x - self.x, vec.y - self.y)

	def angle(self):
		"""Return the angle of this vector against the x axis in radians."""
		return math.atan2(self.y, self.x)

	def to_tuple(self):
		return (self.x, self.y)


#============================================
def subtract(vec_a, vec_b):
	"""Return a new vector vec_a - vec_b without touching either operand."""
	return Vector2(vec_a.x - vec_b.x, vec_a.y - vec_b.y)
