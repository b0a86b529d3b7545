#
# PROJECT: hekune
# MODULE: hekune/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .config import FISHEYE_SLIDER_MIN, FISHEYE_SLIDER_MAX, clamp_slider
from .math_utils import OutOfRangeError
from .transform import Transform

logger = logging.getLogger(__name__)


class Camera:
    """
    The viewer's eye: one Transform (``pos_n_rot``) and a depth-stretch
    exponent.

    ``depth_stretch`` is the power camera-space depth is raised to before the
    perspective divide.  1 is a plain perspective projection; larger values
    squash distant geometry towards the centre (fisheye-like).  It can never
    drop below 1.
    """
    __slots__ = ('pos_n_rot', '_depth_stretch')

    def __init__(self, pos_n_rot: Transform = None, depth_stretch: float = 1.0):
        self.pos_n_rot = pos_n_rot if pos_n_rot is not None else Transform()
        self._depth_stretch = 1.0
        self.depth_stretch = depth_stretch

    @property
    def depth_stretch(self) -> float:
        return self._depth_stretch

    @depth_stretch.setter
    def depth_stretch(self, value: float):
        if not value >= 1:
            raise OutOfRangeError(f"depth_stretch must be >= 1, got {value}")
        self._depth_stretch = float(value)

    def set_fisheye(self, slider_value: int) -> float:
        """Map a fisheye slider position in [0, 200] onto depth_stretch."""
        slider_value = clamp_slider(slider_value, FISHEYE_SLIDER_MIN, FISHEYE_SLIDER_MAX)
        self.depth_stretch = slider_value * 0.005 + 1
        logger.debug("Fisheye slider %d -> depth_stretch %.3f",
                     slider_value, self._depth_stretch)
        return self._depth_stretch

    def __repr__(self):
        return f"Camera(pos_n_rot={self.pos_n_rot!r}, depth_stretch={self._depth_stretch!r})"
