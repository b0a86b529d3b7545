import curses
import logging

import pytest

from client_demo import parse_args
from hekune.demo import LOOK_STEP, input_from_keys
from hekune.logging_config import setup_logging
from hekune.math_utils import Vec3
from hekune.mesh import Mesh
from hekune.renderer import Renderer, canvas_size
from hekune.scene import Scene
from hekune.viewer import Viewer


class FakeScreen:
    def __init__(self, rows, cols):
        self.size = (rows, cols)
        self.lines = {}

    def getmaxyx(self):
        return self.size

    def erase(self):
        self.lines.clear()

    def addstr(self, y, x, text, *attrs):
        if y >= self.size[0]:
            raise curses.error("off screen")
        self.lines[y] = text


class TestInputFromKeys:
    def test_movement_keys(self):
        state = input_from_keys([ord('w'), ord('d'), ord(' ')], True, False)
        assert state.camera_mode
        assert (state.forward, state.right, state.up) == (True, True, True)
        assert not (state.back or state.left or state.down or state.fast)

    def test_shift_means_fast(self):
        state = input_from_keys([ord('S')], True, True)
        assert state.back and state.fast and state.slow

    def test_arrows_act_as_mouse(self):
        keys = [curses.KEY_RIGHT, curses.KEY_RIGHT, curses.KEY_UP]
        state = input_from_keys(keys, True, False)
        assert state.mouse_dx == 2 * LOOK_STEP
        assert state.mouse_dy == -LOOK_STEP

    def test_unknown_keys_are_ignored(self):
        state = input_from_keys([ord('z'), 1000], False, False)
        assert state == input_from_keys([], False, False)


class TestRenderer:
    def test_canvas_size(self):
        assert canvas_size(24, 80) == (158, 88)

    def test_render_resizes_viewer_and_fills_screen(self):
        scene = Scene()
        scene.add(Mesh(), (0, 0, 6))
        viewer = Viewer(scene=scene)
        screen = FakeScreen(10, 20)
        renderer = Renderer()
        renderer.render(screen, viewer)
        assert renderer.size == (38, 32)
        assert renderer.segments == 12
        assert (viewer.viewport.half_width, viewer.viewport.half_height) == (19, 16)
        assert sorted(screen.lines) == list(range(1, 9))
        assert all(len(line) <= 19 for line in screen.lines.values())
        assert any(line.strip() for line in screen.lines.values())

    def test_tiny_terminal_draws_nothing(self):
        screen = FakeScreen(1, 1)
        renderer = Renderer()
        renderer.render(screen, Viewer())
        assert renderer.size == (0, 0)
        assert screen.lines == {}


class TestCommandLine:
    def test_defaults(self):
        args = parse_args([])
        assert args.model is None
        assert (args.fisheye, args.tick_rate) == (0, 200)
        assert args.speed == 0.4
        assert not args.ascii

    def test_options(self):
        args = parse_args(["ship.obj", "--ascii", "--fisheye", "120", "-v"])
        assert args.model == "ship.obj"
        assert args.ascii and args.verbose
        assert args.fisheye == 120


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("hekune")
        yield
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_file_handler(self, tmp_path):
        path = tmp_path / "viewer.log"
        logger = setup_logging(logging.DEBUG, log_file=str(path), console=False)
        logging.getLogger("hekune.viewer").info("Viewport ready")
        for handler in logger.handlers:
            handler.flush()
        text = path.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "hekune.viewer - INFO - Viewport ready" in text

    def test_silent_without_outputs(self):
        logger = setup_logging(console=False)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)
        assert logger.propagate is False

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(console=True)
        logger = setup_logging(console=True)
        assert len(logger.handlers) == 1
