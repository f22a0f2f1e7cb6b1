from .mesh import Mesh
from .icosahedron import make_icosahedron
from .subdivide import EdgeMidpointCache, subdivide
from .sphere import IcosphereBuilder, DepthTooLarge, make_icosphere

__all__ = [
    "Mesh", "make_icosahedron", "EdgeMidpointCache", "subdivide",
    "IcosphereBuilder", "DepthTooLarge", "make_icosphere",
]
