import logging
from typing import Optional
import numpy as np
from .mesh import Mesh
from .icosahedron import base_vertices, base_triangles
from .subdivide import subdivide


logger = logging.getLogger(__name__)

INDEX_DTYPES = (np.uint16, np.uint32, np.uint64)


class DepthTooLarge(ValueError):
    """Raised when a depth needs more vertices than the index type can address."""

    def __init__(self, depth: int, vertex_count: int, index_dtype):
        self.depth = depth
        self.vertex_count = vertex_count
        self.index_dtype = np.dtype(index_dtype)
        super().__init__(
            f"depth {depth} needs {vertex_count} vertices, "
            f"more than {self.index_dtype.name} indices can address "
            f"(max index {np.iinfo(self.index_dtype).max})"
        )


def vertex_count(depth: int) -> int:
    return 10 * 4 ** depth + 2


def triangle_count(depth: int) -> int:
    return 20 * 4 ** depth


def max_depth_for_dtype(index_dtype) -> int:
    """Deepest subdivision whose vertex indices all fit in ``index_dtype``."""
    limit = int(np.iinfo(index_dtype).max)
    depth = 0
    while vertex_count(depth + 1) - 1 <= limit:
        depth += 1
    return depth


def index_dtype_for_depth(max_depth: int) -> np.dtype:
    """Narrowest unsigned index type that addresses every vertex at ``max_depth``."""
    need = vertex_count(max_depth) - 1
    for dt in INDEX_DTYPES:
        if need <= np.iinfo(dt).max:
            return np.dtype(dt)
    raise DepthTooLarge(max_depth, vertex_count(max_depth), INDEX_DTYPES[-1])


class IcosphereBuilder:
    """Builds icospheres by repeated subdivision of the icosahedron.

    The index type is either given explicitly or chosen from the deepest
    level the caller intends to request. Every call to ``build`` starts
    over from the base solid, so results never depend on earlier calls.
    """

    def __init__(self, max_depth: Optional[int] = None, index_dtype=None):
        if index_dtype is not None:
            self.index_dtype = np.dtype(index_dtype)
            if self.index_dtype.kind != "u":
                raise ValueError(f"index dtype must be unsigned, got {self.index_dtype.name}")
        elif max_depth is not None:
            self.index_dtype = index_dtype_for_depth(max_depth)
        else:
            self.index_dtype = np.dtype(np.uint32)
        self.max_depth = max_depth

    def check_depth(self, depth: int) -> None:
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        n = vertex_count(depth)
        if n - 1 > np.iinfo(self.index_dtype).max:
            raise DepthTooLarge(depth, n, self.index_dtype)

    def build(self, depth: int) -> Mesh:
        depth = int(depth)
        self.check_depth(depth)
        V = base_vertices()
        F = base_triangles()
        for _ in range(depth):
            F = subdivide(V, F)
        logger.debug("built icosphere depth=%d vertices=%d triangles=%d", depth, len(V), len(F))
        return Mesh(V=np.array(V, float), F=np.array(F, dtype=self.index_dtype))


def make_icosphere(subdivisions=3, R=1.0, center=(0, 0, 0), index_dtype=None) -> Mesh:
    mesh = IcosphereBuilder(max_depth=subdivisions, index_dtype=index_dtype).build(subdivisions)
    if R == 1.0 and not np.any(center):
        return mesh
    V = R * mesh.V + np.asarray(center, float)
    return Mesh(V=V, F=mesh.F)
