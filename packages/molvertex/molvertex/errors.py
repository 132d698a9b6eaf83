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

"""Exception types raised by vertex relation building and lookups."""


class VertexError(Exception):
	"""Base class for vertex graph errors."""
	pass


class DuplicateNeighbourError(VertexError, ValueError):
	"""Raised when the same neighbour id is registered twice on one vertex."""

	def __init__(self, vertex_id, neighbour_id):
		self.vertex_id = vertex_id
		self.neighbour_id = neighbour_id
		super().__init__(f"vertex {vertex_id!r} already has neighbour {neighbour_id!r}")


class UnknownVertexIdError(VertexError, LookupError):
	"""Raised when a vertex id is not present in a vertex collection."""

	def __init__(self, vertex_id):
		self.vertex_id = vertex_id
		super().__init__(f"unknown vertex id: {vertex_id!r}")
