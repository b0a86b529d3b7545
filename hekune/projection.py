#
# PROJECT: hekune
# MODULE: hekune/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math

from .camera import Camera
from .math_utils import Vec3

logger = logging.getLogger(__name__)

INT16_MIN = -32768
INT16_MAX = 32767
BEHIND_CAMERA_SCALE = 20000.0


def clamp_int16(value: float) -> int:
    """Clamp to the int16 range, then truncate.  NaN lands on INT16_MIN."""
    if value != value:
        return INT16_MIN
    if value < INT16_MIN:
        return INT16_MIN
    if value > INT16_MAX:
        return INT16_MAX
    return int(value)


def _divide(a: float, d: float) -> float:
    if d != 0:
        return a / d
    if a != a or a == 0:
        return a
    return math.copysign(math.inf, a)


def to_camera_space(point: Vec3, camera: Camera) -> Vec3:
    return point - camera.pos_n_rot


def perspective_divide(cam_point: Vec3, depth_stretch: float,
                       behind_scale: float = BEHIND_CAMERA_SCALE):
    """
    Normalised (x, y) of a camera-space point.

    Points in front (z > 0) are divided by z ** depth_stretch.  Points at or
    behind the eye are instead multiplied by ``behind_scale`` so they land far
    off-canvas.
    """
    z = cam_point.z
    if z > 0:
        try:
            d = z ** depth_stretch
        except OverflowError:
            d = math.inf
        return _divide(cam_point.x, d), _divide(cam_point.y, d)
    return cam_point.x * behind_scale, cam_point.y * behind_scale


def project_to_screen(point: Vec3, camera: Camera, half_width: float, half_height: float,
                      behind_scale: float = BEHIND_CAMERA_SCALE):
    """
    World point -> integer (x, y) screen coordinate in the int16 range.

    Never raises: NaN and infinite inputs resolve to clamped coordinates.
    """
    x, y = perspective_divide(to_camera_space(point, camera),
                              camera.depth_stretch, behind_scale)
    return (clamp_int16(x * half_width + half_width),
            clamp_int16(y * half_height + half_height))


class Viewport:
    """
    Projection context: the camera plus the current half-canvas size.

    One instance per viewer, so several viewers (or tests) never share state.
    """
    __slots__ = ('camera', 'half_width', 'half_height', 'behind_scale')

    def __init__(self, camera: Camera, width: int = 0, height: int = 0,
                 behind_scale: float = BEHIND_CAMERA_SCALE):
        self.camera = camera
        self.behind_scale = behind_scale
        self.half_width = 0
        self.half_height = 0
        self.on_resize(width, height)

    def on_resize(self, width: int, height: int):
        # round() is half-to-even, so odd sizes split like the WinForms original
        self.half_width = max(0, round(width * 0.5))
        self.half_height = max(0, round(height * 0.5))
        logger.debug("Viewport resized to %dx%d (half %d, %d)",
                     width, height, self.half_width, self.half_height)

    def project_to_screen(self, point: Vec3):
        return project_to_screen(point, self.camera, self.half_width, self.half_height,
                                 self.behind_scale)

    def project_segment(self, a: Vec3, b: Vec3):
        return self.project_to_screen(a), self.project_to_screen(b)
