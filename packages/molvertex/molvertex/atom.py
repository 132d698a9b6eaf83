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

"""Minimal atom payload carried by a vertex."""

# Standard Library
import dataclasses


#============================================
@dataclasses.dataclass(eq=False)
class Atom:
	"""Chemical payload of a vertex.

	Only the fields read or written by the vertex queries are modelled here;
	ring detection fills rings, the renderer sets is_drawn.
	"""
	element: str = "C"
	bond_count: int = 0
	has_attached_pseudo_elements: bool = False
	is_drawn: bool = True
	rings: list = dataclasses.field(default_factory=list)

	def is_in_ring(self, ring_id) -> bool:
		return ring_id in self.rings
