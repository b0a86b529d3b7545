#
# PROJECT: hekune
# MODULE: hekune/controller.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
from dataclasses import dataclass

from .camera import Camera
from .config import ViewerConfig
from .math_utils import Vec3

logger = logging.getLogger(__name__)

# Screen Y grows downward, so "up" in the view is world -Y
WORLD_UP = Vec3(0.0, -1.0, 0.0)


@dataclass(frozen=True)
class InputState:
    """Read-only snapshot of the input layer, sampled once per tick."""
    camera_mode: bool = False
    forward: bool = False
    left: bool = False
    back: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fast: bool = False
    slow: bool = False
    mouse_dx: float = 0.0
    mouse_dy: float = 0.0


class MovementController:
    """
    Per-tick camera navigation.

    Idle while ``camera_mode`` is off; while it is on, each tick moves the
    camera along its own forward/right axes (plus world up/down) and applies
    mouse-look.  ``on_tick`` reports whether anything changed, i.e. whether
    the caller should repaint.
    """

    def __init__(self, camera: Camera, config: ViewerConfig = None):
        self.camera = camera
        self.config = config if config is not None else ViewerConfig()
        self.navigating = False

    def speed_for(self, state: InputState, elapsed: float = None) -> float:
        """
        Step length for this tick.

        Fast beats slow when both modifiers are held.  Without ``elapsed`` the
        step is fixed per tick; with it, the step scales by
        elapsed / reference_interval.
        """
        cfg = self.config
        if state.fast:
            speed = cfg.fast_speed
        elif state.slow:
            speed = cfg.slow_speed
        else:
            speed = cfg.base_speed
        if elapsed is not None and math.isfinite(elapsed) and elapsed >= 0:
            speed *= elapsed / cfg.reference_interval
        return speed

    def _set_mode(self, navigating: bool):
        if navigating != self.navigating:
            self.navigating = navigating
            logger.info("Camera mode %s", "on" if navigating else "off")

    def on_tick(self, state: InputState, elapsed: float = None) -> bool:
        self._set_mode(state.camera_mode)
        if not self.navigating:
            return False

        t = self.camera.pos_n_rot
        before = (t.position, t.yaw, t.pitch, t.roll)
        speed = self.speed_for(state, elapsed)

        position = t.position
        if state.forward:
            position = position + t.forward() * speed
        if state.back:
            position = position - t.forward() * speed
        if state.right:
            position = position + t.right() * speed
        if state.left:
            position = position - t.right() * speed
        if state.up:
            position = position + WORLD_UP * speed
        if state.down:
            position = position - WORLD_UP * speed
        t.position = position

        self.look(state.mouse_dx, state.mouse_dy)

        return before != (t.position, t.yaw, t.pitch, t.roll)

    def look(self, dx: float, dy: float):
        """
        Mouse-look: moving right turns right, moving down looks down.

        Pitch is clamped to +/- pitch_limit (just inside +/- pi/2).
        Non-finite deltas are ignored.
        """
        t = self.camera.pos_n_rot
        sens = self.config.mouse_sensitivity
        if math.isfinite(dx) and dx:
            t.yaw += dx * sens
        if math.isfinite(dy) and dy:
            limit = self.config.pitch_limit
            t.pitch = max(-limit, min(limit, t.pitch - dy * sens))
