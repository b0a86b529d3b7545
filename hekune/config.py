#
# PROJECT: hekune
# MODULE: hekune/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
import os
from dataclasses import dataclass

TICK_SLIDER_MIN = 10
TICK_SLIDER_MAX = 600
FISHEYE_SLIDER_MIN = 0
FISHEYE_SLIDER_MAX = 200


def clamp_slider(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, int(value)))


@dataclass
class ViewerConfig:
    """Tunables for navigation, projection and the terminal shell."""
    base_speed: float = 0.4
    fast_speed: float = 1.1
    slow_speed: float = 0.05
    mouse_sensitivity: float = 0.02
    pitch_limit: float = math.pi / 2 - 1e-3
    reference_interval: float = 0.05    # seconds; speeds are per reference tick
    behind_camera_scale: float = 20000.0
    tick_slider: int = 200
    fisheye_slider: int = FISHEYE_SLIDER_MIN
    use_braille: bool = True
    show_hud: bool = True

    def __post_init__(self):
        self.tick_slider = clamp_slider(self.tick_slider, TICK_SLIDER_MIN, TICK_SLIDER_MAX)
        self.fisheye_slider = clamp_slider(self.fisheye_slider,
                                           FISHEYE_SLIDER_MIN, FISHEYE_SLIDER_MAX)

    def tick_interval(self) -> float:
        """Seconds between movement ticks for the current tick slider."""
        return 1.0 / (self.tick_slider * 0.1)

    @classmethod
    def detect_terminal(cls) -> 'ViewerConfig':
        """
        Default config with display flags guessed from TERM and LANG.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille, so default off there
        return cls(use_braille=supports_utf8 and not is_linux_console)
