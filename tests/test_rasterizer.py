from hekune.canvas import Canvas, render_cell_ascii, render_cell_braille
from hekune.rasterizer import clip_line, draw_line_dda


class TestCanvas:
    def test_pixel_bits(self):
        canv = Canvas(4, 8)
        canv.set_pixel(0, 0)
        canv.set_pixel(1, 2)
        canv.set_pixel(3, 5)
        assert canv.grid[0][0] == 0b0100_0001
        assert canv.grid[1][1] == 0b0010_0000
        assert canv.is_set(1, 2)
        assert not canv.is_set(0, 1)

    def test_out_of_bounds_pixels_are_ignored(self):
        canv = Canvas(4, 4)
        for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4)]:
            canv.set_pixel(x, y)
        assert all(mask == 0 for row in canv.grid for mask in row)
        assert not canv.is_set(-1, 0)

    def test_braille_cells(self):
        assert render_cell_braille(0) == ' '
        assert render_cell_braille(0b1) == '⠁'
        assert render_cell_braille(0b1000) == '⡀'
        assert render_cell_braille(0xFF) == '⣿'

    def test_ascii_density(self):
        assert render_cell_ascii(0) == ' '
        assert render_cell_ascii(0b11) == ':'
        assert render_cell_ascii(0xFF) == '%'

    def test_rows(self):
        canv = Canvas(4, 4)
        canv.set_pixel(0, 0)
        assert list(canv.rows(braille=False)) == ['.  ', '   ']
        assert next(canv.rows()) == '⠁  '


class TestClipLine:
    def test_inside_is_unchanged(self):
        assert clip_line((1, 2), (3, 4), 10, 10) == ((1.0, 2.0), (3.0, 4.0))

    def test_clips_both_ends(self):
        assert clip_line((-100, 5), (100, 5), 10, 10) == ((0.0, 5.0), (9.0, 5.0))

    def test_clips_diagonal(self):
        (x1, y1), (x2, y2) = clip_line((-10, -10), (20, 20), 10, 10)
        assert (x1, y1) == (0.0, 0.0)
        assert (x2, y2) == (9.0, 9.0)

    def test_fully_outside(self):
        assert clip_line((-5, -5), (-1, -1), 10, 10) is None
        assert clip_line((20, 0), (30, 9), 10, 10) is None

    def test_empty_canvas(self):
        assert clip_line((0, 0), (1, 1), 0, 10) is None


class TestDrawLine:
    def test_horizontal(self):
        canv = Canvas(10, 8)
        draw_line_dda(canv, (0, 0), (5, 0))
        assert all(canv.is_set(x, 0) for x in range(6))
        assert not canv.is_set(6, 0)
        assert not canv.is_set(0, 1)

    def test_vertical_reversed(self):
        canv = Canvas(10, 8)
        draw_line_dda(canv, (2, 7), (2, 0))
        assert all(canv.is_set(2, y) for y in range(8))

    def test_single_point(self):
        canv = Canvas(10, 8)
        draw_line_dda(canv, (3, 3), (3, 3))
        assert canv.is_set(3, 3)
        assert sum(canv.is_set(x, y) for x in range(10) for y in range(8)) == 1

    def test_extreme_endpoints_are_clipped(self):
        canv = Canvas(20, 8)
        draw_line_dda(canv, (-32768, 0), (32767, 0))
        assert all(canv.is_set(x, 0) for x in range(20))

    def test_offscreen_line_draws_nothing(self):
        canv = Canvas(20, 8)
        draw_line_dda(canv, (-32768, -32768), (-100, -32768))
        assert all(mask == 0 for row in canv.grid for mask in row)
