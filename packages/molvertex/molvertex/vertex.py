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

"""Vertex of the molecule graph used by the 2D layout.

A vertex sits in two views of the same molecule at once: the spanning tree
built while parsing (parent_vertex_id and spanning_tree_children) and the
full adjacency graph including ring closures (neighbours). Ids refer to
positions in a vertex collection owned by the caller.
"""

# Standard Library
import logging
import math

# local repo modules
from . import array_helper
from . import math_helper
from . import vector2
from .errors import DuplicateNeighbourError
from .errors import UnknownVertexIdError

logger = logging.getLogger(__name__)

TEXT_DIRECTIONS = ("down", "up", "right", "left")
DEFAULT_TEXT_DIRECTION = "down"

# snapped text angle (rounded to whole radians) -> label direction
_SNAPPED_TEXT_DIRECTIONS = {
	2: "down",
	-2: "up",
	0: "right",
	3: "left",
	-3: "left",
}


#============================================
def get_vertex(vertices, vertex_id):
	"""Look up a vertex by id in a list or a mapping.

	Raises:
		UnknownVertexIdError: If the id is not part of the collection.
	"""
	if vertex_id is None:
		raise UnknownVertexIdError(vertex_id)
	if isinstance(vertices, (list, tuple)):
		if not isinstance(vertex_id, int) or not 0 <= vertex_id < len(vertices):
			raise UnknownVertexIdError(vertex_id)
		return vertices[vertex_id]
	try:
		return vertices[vertex_id]
	except (KeyError, IndexError) as exc:
		raise UnknownVertexIdError(vertex_id) from exc


class Vertex(object):
	"""A graph node wrapping one atom.

	Attributes:
		id: Index of this vertex in its collection, None until assigned.
		value: The atom, shared with the caller.
		position: Current Vector2 position.
		previous_position: Position of the previous vertex in the layout.
		parent_vertex_id: Spanning-tree parent id, None for the root.
		children: Ids added through add_child, ring closures included.
		spanning_tree_children: Children that are spanning-tree edges.
		edges: Ids of edges incident to this vertex.
		positioned: True once the layout has placed this vertex.
		angle: Local angle set by the layout.
		global_angle: Global angle set by the layout.
		dir: Drawing direction multiplier, 1.0 or -1.0.
		neighbour_count: Cached len(neighbours).
		neighbours: Parent and children ids in registration order.
		neighbouring_elements: Element symbols of neighbours, filled elsewhere.
	"""

	def __init__(self, value, x=0, y=0):
		self.id = None
		self.value = value
		self.position = vector2.Vector2(x if x else 0, y if y else 0)
		self.previous_position = vector2.Vector2(0, 0)
		self.parent_vertex_id = None
		self.children = []
		self.spanning_tree_children = []
		self.edges = []
		self.positioned = False
		self.angle = 0.0
		self.global_angle = 0.0
		self.dir = 1.0
		self.neighbour_count = 0
		self.neighbours = []
		self.neighbouring_elements = []

	def __repr__(self):
		return (
			f"Vertex(id={self.id!r}, parent={self.parent_vertex_id!r}, "
			f"neighbours={self.neighbours!r})"
		)

	#============================================
	def set_position(self, x, y):
		self.position.x = x
		self.position.y = y

	#============================================
	def set_position_from_vector(self, vec):
		self.position.x = vec.x
		self.position.y = vec.y

	#============================================
	def _register_neighbour(self, vertex_id):
		if vertex_id is None:
			raise ValueError(f"vertex {self.id!r}: neighbour id must not be None")
		if self.id is not None and vertex_id == self.id:
			raise ValueError(f"vertex {self.id!r} cannot be its own neighbour")
		if vertex_id in self.neighbours:
			raise DuplicateNeighbourError(self.id, vertex_id)
		self.neighbours.append(vertex_id)
		self.neighbour_count += 1
		self.value.bond_count += 1

	#============================================
	def add_child(self, vertex_id):
		"""Add a child vertex id, ring-closure partners included.

		Raises:
			DuplicateNeighbourError: If vertex_id is already a neighbour.
		"""
		self._register_neighbour(vertex_id)
		self.children.append(vertex_id)
		logger.debug("vertex %s: added child %s", self.id, vertex_id)

	#============================================
	def set_parent_vertex_id(self, parent_vertex_id):
		"""Set the spanning-tree parent.

		Setting a new parent replaces parent_vertex_id but the earlier parent
		stays in neighbours, since its bond still exists.

		Raises:
			DuplicateNeighbourError: If the id is already a neighbour.
		"""
		self._register_neighbour(parent_vertex_id)
		if self.parent_vertex_id is not None:
			logger.debug(
				"vertex %s: re-parented from %s to %s",
				self.id, self.parent_vertex_id, parent_vertex_id,
			)
		self.parent_vertex_id = parent_vertex_id

	#============================================
	def is_terminal(self):
		"""Return True if the vertex counts as a leaf for layout and labels.

		This is not a degree-1 test: a root with a single child is terminal,
		and an atom with attached pseudo elements is always terminal.
		"""
		if self.value.has_attached_pseudo_elements:
			return True
		if self.parent_vertex_id is None and len(self.children) < 2:
			return True
		return len(self.children) == 0

	#============================================
	def clone(self):
		"""Return a copy that shares value but owns its lists and positions.

		Adjacency (neighbours, neighbour_count, neighbouring_elements) is not
		copied; rebuild it through add_child and set_parent_vertex_id when a
		connected copy is needed.
		"""
		copied = Vertex(self.value, self.position.x, self.position.y)
		copied.id = self.id
		copied.previous_position = self.previous_position.clone()
		copied.parent_vertex_id = self.parent_vertex_id
		copied.children = array_helper.clone(self.children)
		copied.spanning_tree_children = array_helper.clone(self.spanning_tree_children)
		copied.edges = array_helper.clone(self.edges)
		copied.positioned = self.positioned
		copied.angle = self.angle
		return copied

	#============================================
	def equals(self, vertex):
		"""Compare by id only."""
		return self.id == vertex.id

	#============================================
	def get_angle(self, reference_vector=None, as_degrees=False):
		"""Angle of the vector from reference_vector to this position.

		Args:
			reference_vector: Vector2 to measure from; previous_position when
				None.
			as_degrees: Return degrees instead of radians.

		Returns:
			float: The angle.
		"""
		if reference_vector is None:
			reference_vector = self.previous_position
		direction = vector2.subtract(self.position, reference_vector)
		if as_degrees:
			return math_helper.to_deg(direction.angle())
		return direction.angle()

	#============================================
	def get_text_direction(self, vertices):
		"""Pick the side a label at this vertex should extend to.

		The mean direction pointing away from all drawn neighbours is snapped
		to a multiple of 90 degrees.

		Args:
			vertices: Vertex collection of the molecule.

		Returns:
			str: One of TEXT_DIRECTIONS.
		"""
		neighbours = self.get_drawn_neighbours(vertices)
		if not neighbours:
			return DEFAULT_TEXT_DIRECTION
		angles = []
		for neighbour_id in neighbours:
			neighbour = get_vertex(vertices, neighbour_id)
			angles.append(self.get_angle(neighbour.position))
		text_angle = math_helper.mean_angle(angles)
		half_pi = math.pi / 2.0
		snapped = math_helper.round_to(math_helper.round_to(text_angle / half_pi) * half_pi)
		return _SNAPPED_TEXT_DIRECTIONS.get(snapped, DEFAULT_TEXT_DIRECTION)

	#============================================
	def get_neighbours(self, exclude_id=None):
		"""Return a new list of neighbour ids, optionally without exclude_id."""
		if exclude_id is None:
			return list(self.neighbours)
		return [vertex_id for vertex_id in self.neighbours if vertex_id != exclude_id]

	#============================================
	def get_drawn_neighbours(self, vertices):
		"""Return ids of neighbours whose atoms are drawn."""
		drawn = []
		for vertex_id in self.neighbours:
			if get_vertex(vertices, vertex_id).value.is_drawn:
				drawn.append(vertex_id)
		return drawn

	#============================================
	def get_neighbour_count(self):
		return self.neighbour_count

	#============================================
	def get_common_neighbours(self, vertex):
		"""Return neighbour ids shared with vertex, in this vertex's order."""
		# outside of rings two vertices share at most one neighbour
		common = []
		other_neighbours = vertex.get_neighbours()
		for neighbour_a in self.neighbours:
			for neighbour_b in other_neighbours:
				if neighbour_a == neighbour_b:
					common.append(neighbour_a)
		return common

	#============================================
	def is_neighbour(self, vertex_id):
		"""Return True if vertex_id is the parent or one of the children."""
		if vertex_id is None:
			return False
		if self.parent_vertex_id == vertex_id:
			return True
		return vertex_id in self.children

	#============================================
	def get_spanning_tree_neighbours(self, exclude_id=None):
		"""Return spanning-tree children and parent, ring closures left out."""
		neighbours = [
			vertex_id for vertex_id in self.spanning_tree_children
			if vertex_id != exclude_id
		]
		if self.parent_vertex_id is not None and self.parent_vertex_id != exclude_id:
			neighbours.append(self.parent_vertex_id)
		return neighbours

	#============================================
	def get_next_in_ring(self, vertices, ring_id, previous_vertex_id):
		"""Walk one step along a ring.

		Args:
			vertices: Vertex collection of the molecule.
			ring_id: Ring to stay in.
			previous_vertex_id: Vertex just visited; it is never returned.

		Returns:
			int | None: First neighbour in the ring other than
			previous_vertex_id, or None if there is none.
		"""
		for vertex_id in self.neighbours:
			if vertex_id == previous_vertex_id:
				continue
			rings = get_vertex(vertices, vertex_id).value.rings
			if array_helper.contains(rings, value=ring_id):
				return vertex_id
		return None
