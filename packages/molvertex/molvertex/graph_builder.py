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

"""Wire vertices into a molecule graph and check the result.

These are the calls a structure parser makes while walking its parse tree:
tree bonds set both the parent and the child side, ring closures add each
partner as a child of the other.
"""

# Standard Library
import logging

# local repo modules
from .errors import DuplicateNeighbourError
from .errors import UnknownVertexIdError
from .vertex import get_vertex

logger = logging.getLogger(__name__)


#============================================
def add_vertex(vertices: list, vertex) -> int:
	"""Append vertex to the collection and assign its id.

	Raises:
		ValueError: If the vertex already has an id.
	"""
	if vertex.id is not None:
		raise ValueError(f"vertex already has id {vertex.id!r}")
	vertex.id = len(vertices)
	vertices.append(vertex)
	return vertex.id


#============================================
def _check_bond(first, first_id, second, second_id):
	# both sides are checked before either one is touched
	if first_id == second_id:
		raise ValueError(f"vertex {first_id!r} cannot bond to itself")
	if second_id in first.neighbours:
		raise DuplicateNeighbourError(first_id, second_id)
	if first_id in second.neighbours:
		raise DuplicateNeighbourError(second_id, first_id)


#============================================
def add_tree_bond(vertices, parent_id: int, child_id: int) -> None:
	"""Connect child_id below parent_id in the spanning tree."""
	parent = get_vertex(vertices, parent_id)
	child = get_vertex(vertices, child_id)
	_check_bond(parent, parent_id, child, child_id)
	parent.add_child(child_id)
	child.set_parent_vertex_id(parent_id)
	parent.spanning_tree_children.append(child_id)


#============================================
def add_ring_closure(vertices, source_id: int, target_id: int) -> None:
	"""Connect two vertices with a bond outside the spanning tree."""
	source = get_vertex(vertices, source_id)
	target = get_vertex(vertices, target_id)
	_check_bond(source, source_id, target, target_id)
	source.add_child(target_id)
	target.add_child(source_id)
	logger.debug("ring closure %s-%s", source_id, target_id)


#============================================
def verify_adjacency(vertices) -> list:
	"""Check the adjacency invariants of a vertex collection.

	Args:
		vertices: List or mapping of vertices keyed by id.

	Returns:
		list[str]: One message per problem found, empty when consistent.
	"""
	if isinstance(vertices, dict):
		items = list(vertices.items())
	else:
		items = list(enumerate(vertices))
	problems = []
	for key, vertex in items:
		if vertex.id != key:
			problems.append(f"vertex at {key!r} has id {vertex.id!r}")
		if vertex.neighbour_count != len(vertex.neighbours):
			problems.append(
				f"vertex {key!r}: neighbour_count {vertex.neighbour_count} "
				f"!= {len(vertex.neighbours)} neighbours"
			)
		if len(set(vertex.neighbours)) != len(vertex.neighbours):
			problems.append(f"vertex {key!r}: repeated neighbour ids {vertex.neighbours!r}")
		for child_id in vertex.spanning_tree_children:
			if child_id not in vertex.children:
				problems.append(f"vertex {key!r}: spanning-tree child {child_id!r} is not a child")
		if vertex.parent_vertex_id is not None and vertex.parent_vertex_id not in vertex.neighbours:
			problems.append(f"vertex {key!r}: parent {vertex.parent_vertex_id!r} is not a neighbour")
		for neighbour_id in vertex.neighbours:
			try:
				neighbour = get_vertex(vertices, neighbour_id)
			except UnknownVertexIdError:
				problems.append(f"vertex {key!r}: unknown neighbour id {neighbour_id!r}")
				continue
			if key not in neighbour.neighbours:
				problems.append(f"vertex {key!r}: neighbour {neighbour_id!r} does not list it back")
	for problem in problems:
		logger.warning("adjacency check: %s", problem)
	return problems
