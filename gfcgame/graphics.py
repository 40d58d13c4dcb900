"""Drawing surfaces with a bottom-left origin: shapes, images and text."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from gfcgame.text import Align, TextStream  # noqa: E402

_SEARCH_DIRS = (Path("."), Path("images"))
_DEFAULT_FONT = "arial.ttf"
_DEFAULT_FONT_SIZE = 18
_DEFAULT_MARGINS = (5, 5, 2, 2)  # left, right, top, bottom

_image_cache: dict[Path, pygame.Surface] = {}


def _find_file(name: str | os.PathLike[str]) -> Path | None:
    path = Path(name)
    if path.is_file():
        return path.resolve()
    if not path.is_absolute():
        for directory in _SEARCH_DIRS:
            candidate = directory / path
            if candidate.is_file():
                return candidate.resolve()
    return None


def _load_image(name: str | os.PathLike[str]) -> pygame.Surface | None:
    path = _find_file(name)
    if path is None:
        return None
    surface = _image_cache.get(path)
    if surface is None:
        surface = pygame.image.load(str(path))
        _image_cache[path] = surface
    return surface


def _placeholder() -> pygame.Surface:
    """A 16x16 image marking a picture that could not be loaded."""
    surface = pygame.Surface((16, 16), 0, 32)
    surface.fill((0, 0, 0))
    surface.fill((255, 0, 0), pygame.Rect(0, 1, 12, 14))
    pygame.draw.line(surface, (255, 255, 255), (1, 2), (10, 13), 2)
    pygame.draw.line(surface, (255, 255, 255), (1, 13), (10, 2), 2)
    return surface


def _xy(pt: Sequence[float]) -> tuple[int, int]:
    x, y = pt
    return int(x), int(y)


def _rect(rect: Any) -> tuple[int, int, int, int]:
    x, y, w, h = rect
    return int(x), int(y), int(w), int(h)


def _ensure_font_module() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


@dataclass(frozen=True)
class _Font:
    font: pygame.font.Font
    size: int
    height: int
    ascent: int
    descent: int
    leading: int
    baseline: int


class Graphics:
    """A drawing surface whose origin is the bottom-left corner, y upwards.

    Rectangles are ``(x, y, w, h)`` with ``(x, y)`` the bottom-left corner.
    Text written with :meth:`write` is laid out from the top-left margin.
    """

    def __init__(self, surface: pygame.Surface | None = None) -> None:
        self.surface = surface if surface is not None else _placeholder()
        self._scroll = (0, 0)
        self._margins = _DEFAULT_MARGINS
        self._stream = TextStream()
        self._fonts: dict[tuple[str, int], _Font] = {}
        self._font: _Font | None = None
        self._font_face = ""
        self._text_color = pygame.Color(0, 0, 0)
        self._x = self._margins[0]
        self._y: int | None = None

    # ------------------------------------------------------------------
    # Construction

    @staticmethod
    def _apply_key(graphics: Graphics, color_key: Any) -> Graphics:
        if color_key is not None:
            graphics.set_color_key(color_key)
        return graphics

    @classmethod
    def from_size(cls, width: int, height: int, color_key: Any = None) -> Graphics:
        """Create a blank 32-bit surface of the given size."""
        return cls._apply_key(cls(pygame.Surface((width, height), 0, 32)), color_key)

    @classmethod
    def from_file(cls, filename: str | os.PathLike[str], color_key: Any = None) -> Graphics:
        """Load an image, also searching ``images/``; a placeholder if missing."""
        loaded = _load_image(filename)
        if loaded is None:
            return cls._apply_key(cls(), color_key)
        if color_key is not None and loaded.get_bitsize() == 24:
            surface = pygame.Surface(loaded.get_size(), 0, 32)
            surface.blit(loaded, (0, 0))
        else:
            surface = loaded.copy()
        return cls._apply_key(cls(surface), color_key)

    @classmethod
    def from_region(cls, source: Graphics | str | os.PathLike[str], rect: Any,
                    color_key: Any = None) -> Graphics:
        """Copy a rectangle of another graphics or of an image file."""
        if isinstance(source, Graphics):
            src = source.surface
        else:
            src = _load_image(source)
            if src is None:
                return cls._apply_key(cls(), color_key)
        x, y, w, h = _rect(rect)
        surface = pygame.Surface((w, h), 0, 32)
        surface.blit(src, (0, 0), pygame.Rect(x, src.get_height() - y - h, w, h))
        return cls._apply_key(cls(surface), color_key)

    @classmethod
    def from_tile(cls, source: Graphics | str | os.PathLike[str], cols: int, rows: int,
                  col: int, row: int, color_key: Any = None) -> Graphics:
        """Copy one tile of a grid of ``cols`` by ``rows`` equal tiles."""
        if cols <= 0 or rows <= 0:
            raise ValueError("a tile grid needs at least one column and one row")
        if isinstance(source, Graphics):
            src_w, src_h = source.width, source.height
        else:
            loaded = _load_image(source)
            if loaded is None:
                return cls._apply_key(cls(), color_key)
            src_w, src_h = loaded.get_size()
        w, h = src_w // cols, src_h // rows
        return cls.from_region(source, (col * w, row * h, w, h), color_key)

    def copy(self) -> Graphics:
        """Return an independent copy of the surface."""
        return Graphics(self.surface.copy())

    # ------------------------------------------------------------------
    # Attributes

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def scroll_pos(self) -> tuple[int, int]:
        return self._scroll

    @property
    def cursor(self) -> tuple[int, int]:
        """The current text position (baseline)."""
        return (self._x, self._cursor_y())

    @property
    def align(self) -> Align:
        return self._stream.align

    def set_margins(self, left: int, right: int, top: int, bottom: int) -> None:
        self._margins = (left, right, top, bottom)

    # ------------------------------------------------------------------
    # Colours

    def match_color(self, color: Any) -> pygame.Color:
        """Return the closest colour the surface can represent."""
        return self.surface.unmap_rgb(self.surface.map_rgb(color))

    def set_color_key(self, color: Any) -> None:
        """Make pixels of this colour transparent when blitted."""
        self.surface.set_colorkey(color)

    def is_color_key_set(self) -> bool:
        return self.surface.get_colorkey() is not None

    def get_color_key(self) -> pygame.Color | None:
        key = self.surface.get_colorkey()
        return pygame.Color(key) if key is not None else None

    def clear_color_key(self) -> None:
        self.surface.set_colorkey(None)

    # ------------------------------------------------------------------
    # Scrolling and coordinates

    def set_scroll_pos(self, x: int, y: int) -> None:
        """Offset every later drawing operation by ``(x, y)``."""
        self._scroll = (int(x), int(y))

    def reset_scroll_pos(self) -> None:
        self._scroll = (0, 0)

    def _scrolled(self, pt: Sequence[float]) -> tuple[int, int]:
        x, y = _xy(pt)
        return x + self._scroll[0], y + self._scroll[1]

    def _screen_rect(self, rect: Any) -> pygame.Rect:
        x, y, w, h = _rect(rect)
        x += self._scroll[0]
        y += self._scroll[1]
        return pygame.Rect(x, self.height - y - h, w, h)

    def _screen_point(self, pt: Sequence[float]) -> tuple[int, int]:
        x, y = self._scrolled(pt)
        return x, self.height - y

    # ------------------------------------------------------------------
    # Pixels, fills and blits

    def get_pixel(self, x: int, y: int) -> pygame.Color:
        sx, sy = self._scrolled((x, y))
        return self.surface.get_at((sx, self.height - sy - 1))

    def set_pixel(self, x: int, y: int, color: Any) -> None:
        sx, sy = self._scrolled((x, y))
        self.surface.set_at((sx, self.height - sy - 1), color)

    def fill_rect(self, rect: Any, color: Any, radius: int = 0) -> None:
        """Fill a rectangle, with rounded corners if ``radius`` is positive."""
        screen = self._screen_rect(rect)
        if radius > 0:
            pygame.draw.rect(self.surface, color, screen, 0, border_radius=radius)
        else:
            self.surface.fill(color, screen)

    def clear(self, color: Any = (0, 0, 0)) -> None:
        """Fill the surface and reset scrolling and the text state."""
        self.reset_scroll_pos()
        self._stream.reset()
        self._margins = _DEFAULT_MARGINS
        self.set_font(_DEFAULT_FONT, _DEFAULT_FONT_SIZE)
        self._text_color = pygame.Color(0, 0, 0)
        self._x = self._margins[0]
        self._y = None
        self.surface.fill(color)

    def blit(self, dest: Any, source: Graphics, source_rect: Any = None) -> None:
        """Copy ``source`` (or a rectangle of it) to a point or rectangle."""
        if source_rect is None:
            sx, sy, sw, sh = 0, 0, source.width, source.height
        else:
            sx, sy, sw, sh = _rect(source_rect)
        if len(dest) == 2:
            dx, dy = _xy(dest)
            dh = sh
        else:
            dx, dy, _, dh = _rect(dest)
        dx += self._scroll[0]
        dy += self._scroll[1]
        area = pygame.Rect(sx, source.height - sy - sh, sw, sh)
        self.surface.blit(source.surface, (dx, self.height - dy - dh), area)

    # ------------------------------------------------------------------
    # Lines and shapes

    def draw_hline(self, pt: Sequence[float], x2: int, color: Any) -> None:
        x, y = self._scrolled(pt)
        x2 = int(x2) + self._scroll[0]
        row = self.height - y - 1
        pygame.draw.line(self.surface, color, (x, row), (x2, row))

    def draw_vline(self, pt: Sequence[float], y2: int, color: Any) -> None:
        x, y = self._scrolled(pt)
        y2 = int(y2) + self._scroll[1]
        pygame.draw.line(
            self.surface, color, (x, self.height - y - 1), (x, self.height - y2 - 1)
        )

    def draw_line(self, pt1: Sequence[float], pt2: Sequence[float], color: Any,
                  width: int = 1) -> None:
        x1, y1 = self._scrolled(pt1)
        x2, y2 = self._scrolled(pt2)
        pygame.draw.line(
            self.surface, color,
            (x1, self.height - y1 - 1), (x2, self.height - y2 - 1), max(1, width),
        )

    def draw_rect(self, rect: Any, color: Any, radius: int = 0) -> None:
        pygame.draw.rect(self.surface, color, self._screen_rect(rect), 1,
                         border_radius=max(0, radius))

    def draw_oval(self, rect: Any, color: Any) -> None:
        pygame.draw.ellipse(self.surface, color, self._screen_rect(rect), 1)

    def fill_oval(self, rect: Any, color: Any) -> None:
        pygame.draw.ellipse(self.surface, color, self._screen_rect(rect), 0)

    def draw_circle(self, pt: Sequence[float], radius: int, color: Any) -> None:
        pygame.draw.circle(self.surface, color, self._screen_point(pt), radius, 1)

    def fill_circle(self, pt: Sequence[float], radius: int, color: Any) -> None:
        pygame.draw.circle(self.surface, color, self._screen_point(pt), radius, 0)

    def _pie_points(self, pt: Sequence[float], radius: int, start: int,
                    end: int) -> list[tuple[float, float]]:
        cx, cy = self._screen_point(pt)
        span = (end - start) % 360
        if span == 0 and end != start:
            span = 360
        steps = max(2, int(span / 2) + 1)
        points: list[tuple[float, float]] = [(cx, cy)]
        for i in range(steps + 1):
            angle = math.radians(start + span * i / steps)
            points.append((cx + radius * math.sin(angle), cy - radius * math.cos(angle)))
        return points

    def draw_pie(self, pt: Sequence[float], radius: int, start: int, end: int,
                 color: Any) -> None:
        """Outline a pie slice; angles in degrees, 0 up, clockwise."""
        pygame.draw.polygon(self.surface, color, self._pie_points(pt, radius, start, end), 1)

    def fill_pie(self, pt: Sequence[float], radius: int, start: int, end: int,
                 color: Any) -> None:
        """Fill a pie slice; angles in degrees, 0 up, clockwise."""
        pygame.draw.polygon(self.surface, color, self._pie_points(pt, radius, start, end), 0)

    def draw_triangle(self, pt1: Sequence[float], pt2: Sequence[float],
                      pt3: Sequence[float], color: Any) -> None:
        self.draw_polygon((pt1, pt2, pt3), color)

    def fill_triangle(self, pt1: Sequence[float], pt2: Sequence[float],
                      pt3: Sequence[float], color: Any) -> None:
        self.fill_polygon((pt1, pt2, pt3), color)

    def draw_polyline(self, points: Iterable[Sequence[float]], color: Any) -> None:
        pts = list(points)
        for a, b in zip(pts, pts[1:]):
            self.draw_line(a, b, color)

    def draw_polygon(self, points: Iterable[Sequence[float]], color: Any) -> None:
        pts = [self._screen_point(p) for p in points]
        pygame.draw.polygon(self.surface, color, pts, 1)

    def fill_polygon(self, points: Iterable[Sequence[float]], color: Any) -> None:
        pts = [self._screen_point(p) for p in points]
        pygame.draw.polygon(self.surface, color, pts, 0)

    def draw_bezier(self, points: Iterable[Sequence[float]], steps: int, color: Any) -> None:
        """Draw a Bezier curve through ``steps`` points, from 3 or more controls."""
        controls = [self._screen_point(p) for p in points]
        if len(controls) < 3:
            raise ValueError("a Bezier curve needs at least 3 control points")
        if steps < 2:
            raise ValueError("a Bezier curve needs at least 2 steps")
        curve = []
        for i in range(steps):
            t = i / (steps - 1)
            layer = [(float(x), float(y)) for x, y in controls]
            while len(layer) > 1:
                layer = [
                    (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)
                    for a, b in zip(layer, layer[1:])
                ]
            curve.append(layer[0])
        pygame.draw.lines(self.surface, color, False, curve)

    # ------------------------------------------------------------------
    # Fonts and text

    def _find_font(self, face: str, size: int) -> _Font:
        if size == 0 and self._font is not None:
            size = self._font.size
        if size == 0:
            size = _DEFAULT_FONT_SIZE
        key = (face, size)
        found = self._fonts.get(key)
        if found is not None:
            return found
        _ensure_font_module()
        path = _find_file(face) if face else None
        font = pygame.font.Font(str(path) if path is not None else None, size)
        height = font.get_height()
        descent = font.get_descent()
        leading = max(font.get_linesize(), height)
        found = _Font(
            font=font,
            size=size,
            height=height,
            ascent=font.get_ascent(),
            descent=descent,
            leading=leading,
            baseline=leading - height - descent,
        )
        self._fonts[key] = found
        return found

    def set_font(self, face: str | None = None, size: int = 0) -> None:
        """Select a font file and size; 0 keeps the current size.

        A font file that cannot be found is replaced by the built-in font.
        """
        face = face or self._font_face or _DEFAULT_FONT
        self._font = self._find_font(face, size)
        self._font_face = face

    def _current_font(self) -> _Font:
        if self._font is None:
            self.set_font()
        assert self._font is not None
        return self._font

    def set_text_color(self, color: Any) -> None:
        self._text_color = pygame.Color(color)

    def text_graphics(self, text: str) -> Graphics:
        """Render text in the current font and colour to a new graphics."""
        font = self._current_font()
        return Graphics(font.font.render(str(text), True, self._text_color))

    def _draw_aligned(self, pt: Sequence[float], text: str, align: Align) -> int:
        if not text:
            return 0
        rendered = self.text_graphics(text)
        x, y = _xy(pt)
        if align is Align.LEFT:
            self.blit((x, y + self._current_font().descent), rendered)
            return rendered.width
        if align is Align.CENTER:
            half = rendered.width // 2
            self.blit((x - half, y), rendered)
            return half
        self.blit((x - rendered.width, y), rendered)
        return 0

    def draw_text(self, pt: Sequence[float], text: str) -> int:
        """Draw text at a baseline point; return how far the cursor advances."""
        return self._draw_aligned(pt, text, self._stream.align)

    def _cursor_y(self) -> int:
        if self._y is None:
            self._y = self.height - self._margins[2] - self._current_font().ascent
        return self._y

    def _goto_col(self) -> None:
        left, right = self._margins[0], self._margins[1]
        align = self._stream.align
        if align is Align.LEFT:
            self._x = left
        elif align is Align.RIGHT:
            self._x = self.width - right
        else:
            self._x = self.width // 2

    def _goto_line(self) -> None:
        self._y = self._cursor_y() - self._current_font().leading
        self._goto_col()

    def _draw_at_cursor(self, text: str, align: Align) -> None:
        self._x += self._draw_aligned((self._x, self._cursor_y()), text, align)

    def _draw_lines(self, lines: list[str], align: Align) -> None:
        for index, line in enumerate(lines):
            if index:
                self._goto_line()
            self._draw_at_cursor(line, align)

    def write(self, text: Any) -> Graphics:
        """Write text at the cursor; newlines move to the next line."""
        self._stream.write(text)
        align = self._stream.align
        if align is Align.LEFT:
            self.flush()
        else:
            for line in self._stream.take_complete_lines():
                self._draw_at_cursor(line, align)
                self._goto_line()
        return self

    def set_align(self, align: Align) -> Graphics:
        """Change text alignment, drawing pending text with the old one."""
        previous = self._stream.align
        lines = self._stream.set_align(align)
        if lines is not None:
            self._draw_lines(lines, previous)
            self._goto_col()
        return self

    def flush(self) -> None:
        """Draw any text still pending."""
        self._draw_lines(self._stream.take_lines(), self._stream.align)

    def flip(self) -> None:
        """Show the surface if it is the display window's."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()