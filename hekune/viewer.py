#
# PROJECT: hekune
# MODULE: hekune/viewer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .camera import Camera
from .config import (ViewerConfig, FISHEYE_SLIDER_MIN, FISHEYE_SLIDER_MAX,
                     TICK_SLIDER_MIN, TICK_SLIDER_MAX, clamp_slider)
from .controller import InputState, MovementController
from .projection import Viewport
from .scene import Scene

logger = logging.getLogger(__name__)


class Viewer:
    """
    Everything one running viewer owns: camera, viewport, movement controller
    and scene.

    The shell drives it through three calls, all on one thread:

      on_tick(state, elapsed) -> bool   timer fired; True means repaint
      on_resize(width, height)          canvas size changed
      paint(draw_line)                  project every scene segment

    A tick that arrives while a paint pass is running is dropped.
    """

    def __init__(self, config: ViewerConfig = None, scene: Scene = None,
                 camera: Camera = None):
        self.config = config if config is not None else ViewerConfig()
        self.camera = camera if camera is not None else Camera()
        if camera is None:
            self.camera.set_fisheye(self.config.fisheye_slider)
        self.scene = scene if scene is not None else Scene()
        self.viewport = Viewport(self.camera, behind_scale=self.config.behind_camera_scale)
        self.controller = MovementController(self.camera, self.config)
        self._painting = False

    def on_tick(self, state: InputState, elapsed: float = None) -> bool:
        if self._painting:
            logger.warning("Tick skipped: paint pass in progress")
            return False
        return self.controller.on_tick(state, elapsed)

    def on_resize(self, width: int, height: int):
        self.viewport.on_resize(width, height)

    def project_to_screen(self, point):
        return self.viewport.project_to_screen(point)

    def paint(self, draw_line) -> int:
        """Call ``draw_line(p0, p1)`` for each projected segment; returns the count."""
        self._painting = True
        count = 0
        try:
            project = self.viewport.project_to_screen
            for a, b in self.scene.segments():
                draw_line(project(a), project(b))
                count += 1
        finally:
            self._painting = False
        return count

    def set_fisheye(self, slider_value: int) -> float:
        self.config.fisheye_slider = clamp_slider(slider_value,
                                                   FISHEYE_SLIDER_MIN, FISHEYE_SLIDER_MAX)
        return self.camera.set_fisheye(self.config.fisheye_slider)

    def set_tick_rate(self, slider_value: int) -> float:
        """Move the tick-rate slider; returns the new tick interval in seconds."""
        self.config.tick_slider = clamp_slider(slider_value, TICK_SLIDER_MIN, TICK_SLIDER_MAX)
        interval = self.config.tick_interval()
        logger.debug("Tick slider %d -> interval %.4fs", self.config.tick_slider, interval)
        return interval
