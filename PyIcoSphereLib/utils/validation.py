import numpy as np


def ensure_mesh(mesh):
    if not hasattr(mesh, "V") or not hasattr(mesh, "F"):
        raise TypeError("mesh must have V and F")


def validate_mesh(mesh, tol=1e-5, unit=True):
    """Check index range and, when ``unit`` is set, that vertices lie on the unit sphere."""
    ensure_mesh(mesh)
    V = np.asarray(mesh.V, float)
    F = np.asarray(mesh.F)
    if V.ndim != 2 or V.shape[1] != 3:
        raise ValueError(f"V must have shape (n, 3), got {V.shape}")
    if F.ndim != 2 or F.shape[1] != 3:
        raise ValueError(f"F must have shape (m, 3), got {F.shape}")
    if F.size and (F.min() < 0 or F.max() >= V.shape[0]):
        raise ValueError(f"triangle index out of range for {V.shape[0]} vertices")
    if unit and V.size:
        err = float(np.max(np.abs(np.linalg.norm(V, axis=1) - 1.0)))
        if err > tol:
            raise ValueError(f"vertex off the unit sphere by {err:.3e}")
