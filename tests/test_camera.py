import math

import pytest

from hekune.camera import Camera
from hekune.config import ViewerConfig
from hekune.math_utils import OutOfRangeError, Vec3
from hekune.transform import Transform


class TestCamera:
    def test_defaults(self):
        cam = Camera()
        assert cam.depth_stretch == 1.0
        assert cam.pos_n_rot.forward() == Vec3(0, 0, 1)

    def test_owns_the_given_transform(self):
        t = Transform(Vec3(1, 2, 3))
        cam = Camera(t, 1.5)
        assert cam.pos_n_rot is t
        assert cam.depth_stretch == 1.5

    def test_depth_stretch_below_one_is_rejected(self):
        cam = Camera()
        with pytest.raises(OutOfRangeError):
            cam.depth_stretch = 0.99
        with pytest.raises(OutOfRangeError):
            cam.depth_stretch = math.nan
        with pytest.raises(OutOfRangeError):
            Camera(depth_stretch=0.5)
        assert cam.depth_stretch == 1.0

    @pytest.mark.parametrize("slider,expected", [
        (0, 1.0), (100, 1.5), (200, 2.0), (500, 2.0), (-20, 1.0),
    ])
    def test_fisheye_slider(self, slider, expected):
        cam = Camera()
        assert cam.set_fisheye(slider) == pytest.approx(expected)
        assert cam.depth_stretch == pytest.approx(expected)


class TestViewerConfig:
    def test_defaults_match_reference_viewer(self):
        cfg = ViewerConfig()
        assert (cfg.base_speed, cfg.fast_speed, cfg.slow_speed) == (0.4, 1.1, 0.05)
        assert cfg.mouse_sensitivity == 0.02
        assert cfg.pitch_limit < math.pi / 2
        assert cfg.tick_interval() == pytest.approx(0.05)

    def test_sliders_are_clamped(self):
        cfg = ViewerConfig(tick_slider=1, fisheye_slider=999)
        assert cfg.tick_slider == 10
        assert cfg.fisheye_slider == 200
        assert cfg.tick_interval() == pytest.approx(1.0)

    def test_detect_terminal(self, monkeypatch):
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        assert ViewerConfig.detect_terminal().use_braille is True
        monkeypatch.setenv("TERM", "linux")
        assert ViewerConfig.detect_terminal().use_braille is False
        monkeypatch.setenv("TERM", "xterm")
        monkeypatch.setenv("LANG", "C")
        assert ViewerConfig.detect_terminal().use_braille is False
