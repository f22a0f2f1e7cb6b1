import logging
from typing import Dict, List, Tuple
import numpy as np


logger = logging.getLogger(__name__)

Triangle = Tuple[int, int, int]


def normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


class EdgeMidpointCache:
    """Maps an undirected edge to the index of its midpoint vertex.

    A cache is meant to live for a single subdivision pass, so that the two
    triangles sharing an edge get the same midpoint instead of two copies.
    """

    def __init__(self):
        self._lookup: Dict[Tuple[int, int], int] = {}

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, key) -> bool:
        a, b = key
        return (min(a, b), max(a, b)) in self._lookup

    def lookup(self, vertices: List[np.ndarray], a: int, b: int) -> int:
        key = (a, b) if a < b else (b, a)
        idx = self._lookup.get(key)
        if idx is None:
            idx = len(vertices)
            vertices.append(normalize(vertices[a] + vertices[b]))
            self._lookup[key] = idx
        return idx


def subdivide(vertices: List[np.ndarray], triangles: List[Triangle]) -> List[Triangle]:
    """Split every triangle into four, appending midpoints to ``vertices``."""
    cache = EdgeMidpointCache()
    result: List[Triangle] = []
    for (v0, v1, v2) in triangles:
        m01 = cache.lookup(vertices, v0, v1)
        m12 = cache.lookup(vertices, v1, v2)
        m20 = cache.lookup(vertices, v2, v0)
        result.append((v0, m01, m20))
        result.append((v1, m12, m01))
        result.append((v2, m20, m12))
        result.append((m01, m12, m20))
    logger.debug("subdivided %d triangles, %d new vertices", len(triangles), len(cache))
    return result
