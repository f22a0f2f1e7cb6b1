import logging
import math
import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pyvista as pv

from ..core.mesh import Mesh
from ..core.sphere import IcosphereBuilder
from ..viewer.controller import DepthController


logger = logging.getLogger(__name__)

MESH_ACTOR = "icosphere"
INFO_ACTOR = "info"


def mesh_to_pyvista(mesh: Mesh) -> pv.PolyData:
    V = np.asarray(mesh.V, float)
    F = np.asarray(mesh.F, np.int64)
    n_faces = F.shape[0]
    faces = np.hstack([np.full((n_faces, 1), 3, dtype=np.int64), F]).ravel()
    return pv.PolyData(V, faces)


@dataclass
class ViewerConfig:
    window_size: Tuple[int, int] = (600, 400)
    title: str = "Icosphere"
    initial_depth: int = 0
    max_depth: int = 6
    angular_velocity: float = 0.1 * math.pi
    camera_position: Tuple[float, float, float] = (3.0, 2.0, 2.0)
    edge_color: str = "white"
    background: str = "black"
    line_width: float = 1.0
    off_screen: bool = False


class IcosphereViewer:
    """Wireframe icosphere spinning about +Y; Up/Down change the depth."""

    def __init__(self, config: Optional[ViewerConfig] = None, builder: Optional[IcosphereBuilder] = None):
        self.config = config or ViewerConfig()
        cfg = self.config
        self.plotter = pv.Plotter(window_size=list(cfg.window_size), title=cfg.title, off_screen=cfg.off_screen)
        self.plotter.set_background(cfg.background)
        self.angle = 0.0
        self._t0 = None
        self.controller = DepthController(
            builder=builder or IcosphereBuilder(max_depth=cfg.max_depth),
            max_depth=cfg.max_depth,
            depth=cfg.initial_depth,
            on_change=self.upload,
        )
        self.upload(self.controller.mesh, self.controller.depth)
        self.plotter.camera_position = [cfg.camera_position, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
        self.plotter.add_key_event("Up", self.controller.increment)
        self.plotter.add_key_event("Down", self.controller.decrement)

    def upload(self, mesh: Mesh, depth: int) -> None:
        # same actor name, so the previous mesh is replaced as a whole
        actor = self.plotter.add_mesh(
            mesh_to_pyvista(mesh),
            name=MESH_ACTOR,
            style="wireframe",
            color=self.config.edge_color,
            line_width=self.config.line_width,
            reset_camera=False,
        )
        actor.orientation = (0.0, math.degrees(self.angle), 0.0)
        self.plotter.add_text(
            f"depth={depth}  vertices={mesh.n_vertices}  triangles={mesh.n_triangles}",
            position="upper_left", font_size=10, color=self.config.edge_color, name=INFO_ACTOR,
        )

    def spin(self, step=None) -> None:
        now = time.perf_counter()
        if self._t0 is None:
            self._t0 = now
        self.angle = self.config.angular_velocity * (now - self._t0)
        actor = self.plotter.actors.get(MESH_ACTOR)
        if actor is not None:
            actor.orientation = (0.0, math.degrees(self.angle), 0.0)
        self.plotter.render()

    def show(self, screenshot: Optional[str] = None):
        if self.plotter.iren is not None:
            self.plotter.add_timer_event(max_steps=10 ** 9, duration=16, callback=self.spin)
        logger.info("viewer started at depth %d (max %d)", self.controller.depth, self.controller.max_depth)
        return self.plotter.show(screenshot=screenshot)
