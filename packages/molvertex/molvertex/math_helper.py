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

"""Angle helpers shared by the vertex geometry queries."""

# Standard Library
import math


#============================================
def to_deg(rad: float) -> float:
	"""Convert radians to degrees."""
	return rad * 180.0 / math.pi


#============================================
def to_rad(deg: float) -> float:
	"""Convert degrees to radians."""
	return deg * math.pi / 180.0


#============================================
def round_to(value: float, decimals: int = 0) -> float:
	"""Round halves toward positive infinity, so -0.5 gives 0 and 0.5 gives 1.

	The builtin round() rounds halves to even instead.
	"""
	factor = 10 ** int(decimals)
	return math.floor(value * factor + 0.5) / factor


#============================================
def mean_angle(angles) -> float:
	"""Return the circular mean of a sequence of angles.

	Args:
		angles: Iterable of angles in radians.

	Returns:
		float: Mean angle in radians, in the range (-pi, pi].

	Raises:
		ValueError: If angles is empty.
	"""
	angles = list(angles)
	if not angles:
		raise ValueError("mean_angle requires at least one angle")
	count = float(len(angles))
	sin_sum = sum(math.sin(angle) for angle in angles)
	cos_sum = sum(math.cos(angle) for angle in angles)
	return math.atan2(sin_sum / count, cos_sum / count)
