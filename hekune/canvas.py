#
# PROJECT: hekune
# MODULE: hekune/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

# Pixel bit (row + col * 4) of a 2x4 cell -> Unicode braille dot bit
#  1 4
#  2 5
#  3 6
#  7 8
BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]
DENSITY_CHARS = " .:-=+*#%@"


class Canvas:
    """
    Monochrome pixel canvas packed into terminal cells of 2x4 pixels.

    Each cell stores an 8-bit mask; ``rows()`` turns masks into braille or
    ASCII-density characters.
    """
    __slots__ = ['w', 'h', 'grid']

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return
        self.grid[y >> 2][x >> 1] |= 1 << ((y & 3) + (x & 1) * 4)

    def is_set(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))

    def rows(self, braille=True):
        render = render_cell_braille if braille else render_cell_ascii
        for row in self.grid:
            yield ''.join(render(mask) for mask in row)


def render_cell_ascii(mask: int) -> str:
    """Character whose visual weight matches the number of lit pixels."""
    if not mask:
        return ' '
    return DENSITY_CHARS[min(bin(mask).count('1'), len(DENSITY_CHARS) - 1)]


def render_cell_braille(mask: int) -> str:
    if not mask:
        return ' '
    return chr(0x2800 + sum(BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i)))
