#
# PROJECT: hekune
# MODULE: hekune/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import (Vec3, InvalidArgumentError, OutOfRangeError, NormalizeError,
                         ORIGIN, ZERO, X_AXIS, Y_AXIS, Z_AXIS, NAN)
from .transform import Transform
from .camera import Camera
from .config import ViewerConfig
from .projection import Viewport, project_to_screen
from .controller import InputState, MovementController
from .scene import Scene, Grid
from .mesh import Mesh
from .viewer import Viewer
