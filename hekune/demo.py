#
# PROJECT: hekune
# MODULE: hekune/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import math
import time

from .config import ViewerConfig
from .controller import InputState
from .mesh import Mesh
from .renderer import Renderer
from .scene import Grid, Scene
from .viewer import Viewer

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    'w': 'forward',
    'a': 'left',
    's': 'back',
    'd': 'right',
    ' ': 'up',
    'c': 'down',
}
LOOK_STEP = 10       # simulated mouse pixels per arrow-key press
SLIDER_STEP = 10


def input_from_keys(keys, camera_mode: bool, slow_mode: bool) -> InputState:
    """
    Fold the key codes read since the last tick into one InputState.

    Terminals report no key-up events, so a key counts as held for the tick
    in which it (or its auto-repeat) arrived.  Upper-case movement keys
    (Shift held) select fast speed; arrow keys stand in for mouse movement.
    """
    flags = {}
    fast = False
    dx = dy = 0
    for key in keys:
        if key == curses.KEY_LEFT:
            dx -= LOOK_STEP
        elif key == curses.KEY_RIGHT:
            dx += LOOK_STEP
        elif key == curses.KEY_UP:
            dy -= LOOK_STEP
        elif key == curses.KEY_DOWN:
            dy += LOOK_STEP
        elif 0 <= key < 256:
            ch = chr(key)
            name = KEY_BINDINGS.get(ch.lower())
            if name:
                flags[name] = True
                if ch.isupper():
                    fast = True
    return InputState(camera_mode=camera_mode, fast=fast, slow=slow_mode,
                      mouse_dx=dx, mouse_dy=dy, **flags)


class DemoApp:
    """
    Interactive terminal shell around a Viewer.

    Keys are collected continuously; every tick interval they are folded into
    an InputState and handed to the viewer.  The frame is repainted only when
    the viewer asks for it (or the terminal changes size).
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.keypad(True)

        # ── Config from terminal detection + CLI overrides ──────────────
        config = ViewerConfig.detect_terminal()
        if args.ascii:
            config.use_braille = False
        if args.no_hud:
            config.show_hud = False
        config.base_speed = args.speed
        config.mouse_sensitivity = args.look_sensitivity
        self.config = config

        # ── Scene: reference grid plus one mesh in front of the camera ──
        scene = Scene()
        scene.add(Grid())
        self.mesh = Mesh(args.model if args.model else "")
        scene.add(self.mesh, (0.0, 0.0, 6.0))

        self.viewer = Viewer(config, scene)
        self.viewer.set_fisheye(args.fisheye)
        self.tick_interval = self.viewer.set_tick_rate(args.tick_rate)
        self.renderer = Renderer()

        self.camera_mode = False
        self.slow_mode = False
        self.pending_keys = []
        self.needs_redraw = True

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_key(self, key):
        viewer = self.viewer
        if key == ord('q'):
            self.running = False
        elif key in (ord('\t'), ord('m')):
            self.camera_mode = not self.camera_mode
        elif key == ord('x'):
            self.slow_mode = not self.slow_mode
        elif key == ord('['):
            viewer.set_fisheye(self.config.fisheye_slider - SLIDER_STEP)
            self.needs_redraw = True
        elif key == ord(']'):
            viewer.set_fisheye(self.config.fisheye_slider + SLIDER_STEP)
            self.needs_redraw = True
        elif key == ord('-'):
            self.tick_interval = viewer.set_tick_rate(self.config.tick_slider - SLIDER_STEP)
        elif key in (ord('='), ord('+')):
            self.tick_interval = viewer.set_tick_rate(self.config.tick_slider + SLIDER_STEP)
        elif key == curses.KEY_RESIZE:
            self.needs_redraw = True
        else:
            self.pending_keys.append(key)

    def poll_keys(self):
        while True:
            key = self.stdscr.getch()
            if key == -1:
                return
            self.handle_key(key)

    def tick(self):
        state = input_from_keys(self.pending_keys, self.camera_mode, self.slow_mode)
        self.pending_keys = []
        if self.viewer.on_tick(state):
            self.needs_redraw = True

    # ────────────────────────────────────────────────────────────────────
    # HUD
    # ────────────────────────────────────────────────────────────────────
    def hud_text(self) -> str:
        t = self.viewer.camera.pos_n_rot
        mode = "CAM" if self.camera_mode else "---"
        speed = "SLOW" if self.slow_mode else "NORM"
        return (f" {mode} {speed}"
                f" | POS:{t.position:.1f}"
                f" | YAW:{math.degrees(t.yaw):.0f} PITCH:{math.degrees(t.pitch):.0f}"
                f" | STRETCH:{self.viewer.camera.depth_stretch:.3f}"
                f" | TICK:{self.tick_interval * 1000:.0f}ms"
                f" | SEG:{self.renderer.segments} ")

    def draw(self):
        self.renderer.render(self.stdscr, self.viewer, self.config.use_braille)
        if self.config.show_hud:
            th, tw = self.stdscr.getmaxyx()
            try:
                self.stdscr.addstr(0, 0, self.hud_text().center(tw - 1, '=')[:tw - 1],
                                   curses.A_BOLD)
            except curses.error:
                pass
        self.stdscr.refresh()
        self.needs_redraw = False

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        logger.info("Viewer started (tick %.0f ms)", self.tick_interval * 1000)
        next_tick = time.monotonic()
        while self.running:
            self.poll_keys()
            now = time.monotonic()
            if now >= next_tick:
                self.tick()
                next_tick = now + self.tick_interval
            if self.needs_redraw:
                self.draw()
            time.sleep(min(0.005, max(0.0, next_tick - time.monotonic())))
        logger.info("Viewer stopped")


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
