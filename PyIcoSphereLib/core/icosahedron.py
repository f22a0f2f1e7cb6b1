import numpy as np
from .mesh import Mesh


X = 0.525731112119133606
Z = 0.850650808352039932
N = 0.0

# 12 vertices on the unit sphere, no normalization needed
VERTICES = (
    (-X, N, Z), (X, N, Z), (-X, N, -Z), (X, N, -Z),
    (N, Z, X), (N, Z, -X), (N, -Z, X), (N, -Z, -X),
    (Z, X, N), (-Z, X, N), (Z, -X, N), (-Z, -X, N),
)

# clockwise when seen from outside
TRIANGLES = (
    (0, 4, 1), (0, 9, 4), (9, 5, 4), (4, 5, 8), (4, 8, 1),
    (8, 10, 1), (8, 3, 10), (5, 3, 8), (5, 2, 3), (2, 7, 3),
    (7, 10, 3), (7, 6, 10), (7, 11, 6), (11, 0, 6), (0, 1, 6),
    (6, 1, 10), (9, 0, 11), (9, 11, 2), (9, 2, 5), (7, 2, 11),
)


def base_vertices():
    return [np.array(v, float) for v in VERTICES]


def base_triangles():
    return list(TRIANGLES)


def make_icosahedron(index_dtype=np.uint32) -> Mesh:
    return Mesh(V=np.array(VERTICES, float), F=np.array(TRIANGLES, dtype=index_dtype))
