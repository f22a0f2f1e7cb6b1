from .core.mesh import Mesh
from .core.sphere import IcosphereBuilder, DepthTooLarge, make_icosphere, vertex_count, triangle_count
from .core.subdivide import EdgeMidpointCache, subdivide
from .core.icosahedron import make_icosahedron
from .io.obj import load_obj, save_obj
from .viewer.controller import DepthController

__all__ = [
    "Mesh",
    "IcosphereBuilder",
    "DepthTooLarge",
    "make_icosphere",
    "vertex_count",
    "triangle_count",
    "EdgeMidpointCache",
    "subdivide",
    "make_icosahedron",
    "load_obj",
    "save_obj",
    "DepthController",
]
