#
# PROJECT: hekune
# MODULE: hekune/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas

_INSIDE, _LEFT, _RIGHT, _TOP, _BOTTOM = 0, 1, 2, 4, 8


def _outcode(x, y, x_max, y_max):
    code = _INSIDE
    if x < 0: code |= _LEFT
    elif x > x_max: code |= _RIGHT
    if y < 0: code |= _TOP
    elif y > y_max: code |= _BOTTOM
    return code


def clip_line(p1, p2, w, h):
    """
    Cohen-Sutherland clip of a segment to [0, w-1] x [0, h-1].

    Projected endpoints may sit anywhere in the int16 range; clipping first
    keeps the DDA loop proportional to the visible length.  Returns the
    clipped (p1, p2) as float pairs, or None when nothing is visible.
    """
    x_max, y_max = w - 1, h - 1
    if x_max < 0 or y_max < 0:
        return None
    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])
    c1 = _outcode(x1, y1, x_max, y_max)
    c2 = _outcode(x2, y2, x_max, y_max)

    while True:
        if not (c1 | c2):
            return (x1, y1), (x2, y2)
        if c1 & c2:
            return None
        out = c1 or c2
        if out & _BOTTOM:
            x = x1 + (x2 - x1) * (y_max - y1) / (y2 - y1)
            y = y_max
        elif out & _TOP:
            x = x1 + (x2 - x1) * (0 - y1) / (y2 - y1)
            y = 0
        elif out & _RIGHT:
            y = y1 + (y2 - y1) * (x_max - x1) / (x2 - x1)
            x = x_max
        else:
            y = y1 + (y2 - y1) * (0 - x1) / (x2 - x1)
            x = 0
        if out == c1:
            x1, y1 = x, y
            c1 = _outcode(x1, y1, x_max, y_max)
        else:
            x2, y2 = x, y
            c2 = _outcode(x2, y2, x_max, y_max)


def draw_line_dda(canvas: Canvas, p1, p2):
    """Draw a segment between two screen points with the DDA algorithm."""
    clipped = clip_line(p1, p2, canvas.w, canvas.h)
    if clipped is None:
        return
    (x1, y1), (x2, y2) = clipped
    x1, y1, x2, y2 = int(round(x1)), int(round(y1)), int(round(x2)), int(round(y2))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc
