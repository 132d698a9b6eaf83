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

"""Sequence helpers for id lists and ring membership checks."""

_MISSING = object()


#============================================
def clone(items):
	"""Return a deep copy of a nested list, tuple or dict of plain values.

	Objects that provide a clone() method are copied through it; any other
	value is shared.
	"""
	if isinstance(items, list):
		return [clone(item) for item in items]
	if isinstance(items, tuple):
		return tuple(clone(item) for item in items)
	if isinstance(items, dict):
		return {key: clone(value) for key, value in items.items()}
	if hasattr(items, "clone"):
		return items.clone()
	return items


#============================================
def contains(items, value=_MISSING, property=None, func=None):
	"""Check whether a sequence holds a matching element.

	Args:
		items: Iterable to search.
		value: Value to compare against, either the element itself or its
			property when property is given.
		property: Optional attribute or key name read from each element.
		func: Optional predicate; when given, value and property are ignored.

	Returns:
		bool: True when at least one element matches.
	"""
	if func is not None:
		return any(func(item) for item in items)
	if value is _MISSING:
		raise ValueError("contains requires a value or a func")
	if property is None:
		return any(item == value for item in items)
	for item in items:
		if isinstance(item, dict):
			if property in item and item[property] == value:
				return True
		elif getattr(item, property, _MISSING) == value:
			return True
	return False
