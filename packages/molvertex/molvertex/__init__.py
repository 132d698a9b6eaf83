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

"""Vertex model for 2D molecule layout."""

# local repo modules
from . import array_helper
from . import graph_builder
from . import math_helper
from . import vector2
from .atom import Atom
from .errors import DuplicateNeighbourError
from .errors import UnknownVertexIdError
from .errors import VertexError
from .vector2 import Vector2
from .vertex import Vertex
from .vertex import get_vertex

__version__ = "0.1.0"

__all__ = [
	"Atom",
	"DuplicateNeighbourError",
	"UnknownVertexIdError",
	"Vector2",
	"Vertex",
	"VertexError",
	"array_helper",
	"get_vertex",
	"graph_builder",
	"math_helper",
	"vector2",
]
