import pygame
import pytest

from gfcgame.graphics import Graphics
from gfcgame.text import Align

RED = pygame.Color(255, 0, 0)
WHITE = pygame.Color(255, 255, 255)
BLACK = pygame.Color(0, 0, 0)


def _count(g, color):
    target = tuple(pygame.Color(color))[:3]
    return sum(
        1
        for x in range(g.width)
        for y in range(g.height)
        if tuple(g.surface.get_at((x, y)))[:3] == target
    )


def _white(width=200, height=100):
    g = Graphics.from_size(width, height)
    g.clear(WHITE)
    return g


def test_pixel_round_trip_uses_bottom_origin():
    g = Graphics.from_size(10, 10)
    g.set_pixel(0, 0, RED)
    assert g.get_pixel(0, 0) == RED
    assert g.surface.get_at((0, 9)) == RED


def test_scroll_offsets_pixels():
    g = Graphics.from_size(10, 10)
    g.set_scroll_pos(2, 3)
    g.set_pixel(0, 0, RED)
    assert g.surface.get_at((2, 6)) == RED
    g.reset_scroll_pos()
    assert g.get_pixel(2, 3) == RED


def test_get_pixel_out_of_range():
    g = Graphics.from_size(4, 4)
    with pytest.raises(IndexError):
        g.get_pixel(10, 0)


def test_fill_rect():
    g = Graphics.from_size(10, 10)
    g.fill_rect((1, 1, 2, 2), RED)
    assert g.get_pixel(1, 1) == RED
    assert g.get_pixel(2, 2) == RED
    assert g.get_pixel(3, 3) != RED
    assert _count(g, RED) == 4


def test_fill_rect_rounded_leaves_corner():
    g = Graphics.from_size(20, 20)
    g.fill_rect((2, 2, 10, 10), RED, 3)
    assert g.get_pixel(6, 6) == RED
    assert g.get_pixel(2, 2) != RED


def test_clear_fills_and_resets_scroll():
    g = Graphics.from_size(8, 8)
    g.set_scroll_pos(1, 1)
    g.clear(RED)
    assert g.scroll_pos == (0, 0)
    assert _count(g, RED) == 64


def test_color_key_lifecycle():
    g = Graphics.from_size(4, 4)
    assert not g.is_color_key_set()
    assert g.get_color_key() is None
    g.set_color_key((255, 0, 255))
    assert g.is_color_key_set()
    assert tuple(g.get_color_key())[:3] == (255, 0, 255)
    g.clear_color_key()
    assert not g.is_color_key_set()


def test_from_size_with_color_key():
    g = Graphics.from_size(4, 4, (0, 255, 0))
    assert tuple(g.get_color_key())[:3] == (0, 255, 0)


def test_match_color_on_32_bit_surface():
    g = Graphics.from_size(2, 2)
    assert g.match_color((12, 34, 56)) == pygame.Color(12, 34, 56)


def test_blit_point():
    src = Graphics.from_size(2, 2)
    src.surface.fill(RED)
    g = Graphics.from_size(10, 10)
    g.blit((3, 4), src)
    assert g.get_pixel(3, 4) == RED
    assert g.get_pixel(4, 5) == RED
    assert g.get_pixel(5, 6) != RED


def test_blit_source_rect():
    src = Graphics.from_size(4, 4)
    src.fill_rect((0, 0, 2, 2), RED)
    g = Graphics.from_size(10, 10)
    g.blit((5, 5), src, (0, 0, 2, 2))
    assert _count(g, RED) == 4
    assert g.get_pixel(5, 5) == RED


def test_copy_is_independent():
    g = Graphics.from_size(4, 4)
    g.clear(WHITE)
    dup = g.copy()
    dup.set_pixel(0, 0, RED)
    assert g.get_pixel(0, 0) == WHITE
    assert dup.get_pixel(0, 0) == RED


def test_missing_file_gives_placeholder():
    g = Graphics.from_file("no_such_picture_here.png")
    assert (g.width, g.height) == (16, 16)


def test_from_file_searches_images_dir(tmp_path, monkeypatch):
    (tmp_path / "images").mkdir()
    surface = pygame.Surface((3, 2), 0, 32)
    surface.fill(RED)
    pygame.image.save(surface, str(tmp_path / "images" / "pic.png"))
    monkeypatch.chdir(tmp_path)
    g = Graphics.from_file("pic.png")
    assert (g.width, g.height) == (3, 2)
    assert g.get_pixel(0, 0) == RED
    other = Graphics.from_file("pic.png")
    g.set_pixel(0, 0, WHITE)
    assert other.get_pixel(0, 0) == RED


def test_from_region():
    src = Graphics.from_size(10, 10)
    src.fill_rect((4, 4, 2, 2), RED)
    part = Graphics.from_region(src, (4, 4, 2, 2))
    assert (part.width, part.height) == (2, 2)
    assert _count(part, RED) == 4


def test_from_tile_bottom_left():
    src = Graphics.from_size(4, 4)
    src.fill_rect((0, 0, 2, 2), RED)
    tile = Graphics.from_tile(src, 2, 2, 0, 0)
    assert tile.width == 2
    assert _count(tile, RED) == 4
    other = Graphics.from_tile(src, 2, 2, 1, 1)
    assert _count(other, RED) == 0


def test_from_tile_rejects_empty_grid():
    with pytest.raises(ValueError):
        Graphics.from_tile(Graphics.from_size(4, 4), 0, 1, 0, 0)


def test_hline_and_vline():
    g = Graphics.from_size(10, 10)
    g.draw_hline((1, 2), 5, RED)
    assert all(g.get_pixel(x, 2) == RED for x in range(1, 6))
    h = Graphics.from_size(10, 10)
    h.draw_vline((3, 1), 4, RED)
    assert all(h.get_pixel(3, y) == RED for y in range(1, 5))


def test_draw_line_endpoints():
    g = Graphics.from_size(10, 10)
    g.draw_line((1, 1), (6, 6), RED)
    assert g.get_pixel(1, 1) == RED
    assert g.get_pixel(6, 6) == RED


def test_draw_rect_outline():
    g = Graphics.from_size(20, 20)
    g.draw_rect((2, 2, 10, 10), RED)
    assert g.get_pixel(2, 2) == RED
    assert g.get_pixel(6, 6) != RED


def test_fill_circle_and_oval():
    g = Graphics.from_size(20, 20)
    g.fill_circle((10, 10), 3, RED)
    assert g.get_pixel(10, 9) == RED
    assert g.get_pixel(0, 0) != RED
    h = Graphics.from_size(20, 20)
    h.fill_oval((2, 2, 10, 6), RED)
    assert h.get_pixel(7, 5) == RED


def test_fill_triangle_and_polygon():
    g = Graphics.from_size(20, 20)
    g.fill_triangle((0, 0), (10, 0), (0, 10), RED)
    assert g.get_pixel(2, 2) == RED
    assert g.get_pixel(15, 15) != RED
    h = Graphics.from_size(20, 20)
    h.fill_polygon([(2, 2), (8, 2), (8, 8), (2, 8)], RED)
    assert h.get_pixel(5, 5) == RED


def test_fill_pie_covers_upper_right_quadrant():
    g = Graphics.from_size(40, 40)
    g.fill_pie((20, 20), 10, 0, 90, RED)
    assert g.get_pixel(24, 24) == RED
    assert g.get_pixel(16, 16) != RED
    assert g.get_pixel(24, 16) != RED


def test_polyline_needs_two_points():
    g = Graphics.from_size(10, 10)
    g.draw_polyline([(1, 1)], RED)
    assert _count(g, RED) == 0
    g.draw_polyline([(1, 1), (5, 1), (5, 5)], RED)
    assert g.get_pixel(5, 3) == RED


def test_bezier():
    g = Graphics.from_size(20, 20)
    g.draw_bezier([(1, 1), (5, 15), (15, 1)], 10, RED)
    assert _count(g, RED) > 0
    with pytest.raises(ValueError):
        g.draw_bezier([(1, 1), (5, 5)], 10, RED)
    with pytest.raises(ValueError):
        g.draw_bezier([(1, 1), (5, 5), (9, 1)], 1, RED)


def test_text_graphics_grows_with_text():
    g = _white()
    short = g.text_graphics("H")
    long = g.text_graphics("Hello world")
    assert long.width > short.width
    assert long.height > 0


def test_draw_text_advance_by_alignment():
    g = _white()
    width = g.text_graphics("abc").width
    assert g.draw_text((10, 50), "abc") == width
    assert g.draw_text((10, 50), "") == 0
    g.set_align(Align.CENTER)
    assert g.draw_text((100, 50), "abc") == width // 2
    g.set_align(Align.RIGHT)
    assert g.draw_text((150, 50), "abc") == 0


def test_left_write_draws_immediately_and_moves_down():
    g = _white()
    start_y = g.cursor[1]
    g.write("ab\ncd")
    assert _count(g, WHITE) < g.width * g.height
    assert g.cursor[1] < start_y


def test_centered_text_waits_for_newline_or_flush():
    g = _white()
    g.set_align(Align.CENTER)
    g.write("abc")
    assert _count(g, WHITE) == g.width * g.height
    g.flush()
    assert _count(g, WHITE) < g.width * g.height


def test_set_align_draws_pending_and_moves_column():
    g = _white()
    g.set_align(Align.CENTER)
    g.write("abc")
    g.set_align(Align.LEFT)
    assert _count(g, WHITE) < g.width * g.height
    assert g.cursor[0] == 5
    g.set_align(Align.RIGHT)
    assert g.cursor[0] == g.width - 5
    assert g.align is Align.RIGHT