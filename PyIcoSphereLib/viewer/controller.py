import logging
from typing import Callable, Optional

from ..core.mesh import Mesh
from ..core.sphere import IcosphereBuilder, DepthTooLarge, max_depth_for_dtype


logger = logging.getLogger(__name__)


class DepthController:
    """Holds the current subdivision depth and the mesh built for it.

    Every change rebuilds from scratch; the stored mesh is only replaced once
    the new build has succeeded, so a refused change leaves the previous
    depth and mesh in place.
    """

    def __init__(self, builder: Optional[IcosphereBuilder] = None, max_depth: int = 6,
                 depth: int = 0, on_change: Optional[Callable[[Mesh, int], None]] = None):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.builder = builder or IcosphereBuilder(max_depth=max_depth)
        addressable = max_depth_for_dtype(self.builder.index_dtype)
        if max_depth > addressable:
            logger.warning("max_depth %d exceeds %s indices, clamping to %d",
                           max_depth, self.builder.index_dtype.name, addressable)
        self.max_depth = min(int(max_depth), addressable)
        self.on_change = on_change
        self.depth = min(max(int(depth), 0), self.max_depth)
        self.mesh = self.builder.build(self.depth)

    def increment(self) -> bool:
        if self.depth + 1 > self.max_depth:
            logger.info("depth %d is the maximum, ignoring increment", self.depth)
            return False
        return self._rebuild(self.depth + 1)

    def decrement(self) -> bool:
        if self.depth == 0:
            return False
        return self._rebuild(self.depth - 1)

    def set_depth(self, depth: int) -> bool:
        depth = min(max(int(depth), 0), self.max_depth)
        if depth == self.depth:
            return False
        return self._rebuild(depth)

    def _rebuild(self, depth: int) -> bool:
        try:
            mesh = self.builder.build(depth)
        except DepthTooLarge as e:
            logger.warning("refusing depth change: %s", e)
            return False
        self.depth = depth
        self.mesh = mesh
        logger.info("depth=%d vertices=%d triangles=%d", depth, mesh.n_vertices, mesh.n_triangles)
        if self.on_change is not None:
            self.on_change(mesh, depth)
        return True
