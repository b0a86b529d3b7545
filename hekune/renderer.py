#
# PROJECT: hekune
# MODULE: hekune/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses

from .canvas import Canvas
from .rasterizer import draw_line_dda
from .viewer import Viewer


def canvas_size(th: int, tw: int):
    """Pixel size of the drawable area for a terminal of th rows, tw columns.

    Row 0 is the HUD and the last column/row are left free (curses cannot
    write the bottom-right cell).
    """
    return (tw - 1) * 2, (th - 2) * 4


class Renderer:
    """
    Draws one frame of a Viewer onto a curses screen.

    render(stdscr, viewer, braille) rasterizes the viewer's projected line
    segments into a braille canvas and copies it to the screen.  It keeps the
    viewer's viewport in step with the terminal size.
    """

    def __init__(self):
        self.size = (0, 0)
        self.segments = 0

    def render(self, stdscr, viewer: Viewer, braille: bool = True):
        """
        Render one frame.

        Does NOT call stdscr.refresh(); the caller does that after the HUD.
        """
        th, tw = stdscr.getmaxyx()
        W, H = canvas_size(th, tw)
        if W <= 0 or H <= 0:
            return
        if (W, H) != self.size:
            self.size = (W, H)
            viewer.on_resize(W, H)

        canv = Canvas(W, H)
        self.segments = viewer.paint(lambda p0, p1: draw_line_dda(canv, p0, p1))

        stdscr.erase()
        for y, line in enumerate(canv.rows(braille)):
            if y >= th - 2:
                break
            try:
                stdscr.addstr(y + 1, 0, line[:tw - 1])
            except curses.error:
                pass
