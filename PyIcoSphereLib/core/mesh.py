from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True, eq=False)
class Mesh:
    """Indexed triangle mesh.

    V is an (n, 3) float array of vertex positions, F an (m, 3) array of
    vertex indices whose row order encodes the winding of each triangle.
    Both arrays are read-only once the mesh is constructed.
    """
    V: np.ndarray
    F: np.ndarray

    def __post_init__(self):
        V = np.array(self.V, dtype=float).reshape(-1, 3)
        F = np.array(self.F)
        if F.dtype.kind not in "iu":
            F = F.astype(np.int64)
        F = F.reshape(-1, 3)
        V.flags.writeable = False
        F.flags.writeable = False
        object.__setattr__(self, "V", V)
        object.__setattr__(self, "F", F)

    @property
    def n_vertices(self) -> int:
        return int(self.V.shape[0])

    @property
    def n_triangles(self) -> int:
        return int(self.F.shape[0])

    def edges(self) -> np.ndarray:
        """Unique undirected edges as (min, max) rows, sorted."""
        F = np.asarray(self.F, np.int64)
        E = np.concatenate([F[:, [0, 1]], F[:, [1, 2]], F[:, [2, 0]]], axis=0)
        E.sort(axis=1)
        return np.unique(E, axis=0)

    def center_of_mass(self) -> np.ndarray:
        return np.asarray(self.V, float).mean(axis=0)

    def to_buffers(self) -> Tuple[np.ndarray, np.ndarray]:
        # layout expected by a vertex/element buffer upload
        vbo = np.ascontiguousarray(self.V, dtype=np.float32)
        ebo = np.ascontiguousarray(self.F).ravel()
        return vbo, ebo
