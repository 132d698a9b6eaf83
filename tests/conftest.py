# Standard Library
import os
import sys

# Third Party
import pytest


#============================================
def repo_root():
	root = _find_repo_root(os.path.dirname(os.path.abspath(__file__)))
	if not root:
		raise RuntimeError("repo root could not be resolved from the tests directory")
	return root


#============================================
def _find_repo_root(start_dir):
	current = os.path.abspath(start_dir)
	while True:
		if _looks_like_repo_root(current):
			return current
		parent = os.path.dirname(current)
		if parent == current:
			return ""
		current = parent


#============================================
def _looks_like_repo_root(path):
	if not path or not os.path.isdir(path):
		return False
	if not os.path.isfile(os.path.join(path, "pyproject.toml")):
		return False
	return os.path.isdir(os.path.join(path, "packages", "molvertex", "molvertex"))


#============================================
def add_molvertex_to_sys_path():
	package_dir = os.path.join(repo_root(), "packages", "molvertex")
	if package_dir not in sys.path:
		sys.path.insert(0, package_dir)
	return package_dir


add_molvertex_to_sys_path()

# local repo modules
from molvertex import Atom
from molvertex import Vertex
from molvertex import graph_builder


#============================================
def build_molecule(elements, tree_bonds, ring_closures=()):
	"""Build a vertex list from element symbols and bond index pairs."""
	vertices = []
	for element in elements:
		graph_builder.add_vertex(vertices, Vertex(Atom(element=element)))
	for parent_id, child_id in tree_bonds:
		graph_builder.add_tree_bond(vertices, parent_id, child_id)
	for source_id, target_id in ring_closures:
		graph_builder.add_ring_closure(vertices, source_id, target_id)
	return vertices


#============================================
@pytest.fixture
def cyclopropane():
	# 0-1-2 chain in the spanning tree, 2-0 closes the ring
	vertices = build_molecule("CCC", [(0, 1), (1, 2)], [(2, 0)])
	for vertex in vertices:
		vertex.value.rings.append(0)
	return vertices
