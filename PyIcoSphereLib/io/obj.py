import logging
import os
import numpy as np
from ..core.mesh import Mesh
from ..utils.validation import validate_mesh


logger = logging.getLogger(__name__)


def save_obj(mesh: Mesh, path: str) -> None:
    V = np.asarray(mesh.V, float)
    F = np.asarray(mesh.F, np.int64)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"# icosphere {V.shape[0]} vertices {F.shape[0]} faces\n")
        for x, y, z in V:
            f.write(f"v {x:.9f} {y:.9f} {z:.9f}\n")
        for i, j, k in F + 1:
            f.write(f"f {i} {j} {k}\n")
    logger.info("wrote %s (%d vertices, %d faces)", path, V.shape[0], F.shape[0])


def parse_index(tok: str, n_vertices: int) -> int:
    # negative indices count back from the last vertex read so far
    i = int(tok.split("/")[0])
    return n_vertices + i if i < 0 else i - 1


def load_obj(path: str) -> Mesh:
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    vertices = []
    faces = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("v "):
                parts = line.split()
                if len(parts) < 4:
                    continue
                vertices.append(tuple(map(float, parts[1:4])))
            elif line.startswith("f "):
                parts = line.split()[1:]
                if len(parts) < 3:
                    continue
                idx = [parse_index(tok, len(vertices)) for tok in parts]
                for i in range(1, len(idx) - 1):
                    faces.append((idx[0], idx[i], idx[i + 1]))
    if not vertices or not faces:
        raise ValueError(f"OBJ '{path}' has no usable vertices or faces")
    mesh = Mesh(V=np.asarray(vertices, dtype=float), F=np.asarray(faces, dtype=np.int64))
    validate_mesh(mesh, unit=False)
    return mesh
