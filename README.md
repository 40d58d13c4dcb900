# gfcgame

Building blocks for 2D games written with pygame:

- `gfcgame.graphics`: a drawing surface whose origin is the bottom-left corner.
- `gfcgame.text`: buffered text output with alignment.
- `gfcgame.clock`: a millisecond game clock that can be paused.
- `gfcgame.sound`: sound effects and players built on the pygame mixer.
- `gfcgame.keys`: key codes, modifier flags and joystick hat positions.
- `gfcgame.byteorder`: byte-swapping helpers.

## Installation

```
pip install gfcgame
```

To run the tests as well:

```
pip install "gfcgame[test]"
pytest
```

## Drawing

`Graphics` wraps a `pygame.Surface`. Coordinates put `(0, 0)` at the
bottom-left corner, and y grows upwards. A rectangle is `(x, y, w, h)`,
where `(x, y)` is its bottom-left corner.

```python
from gfcgame.graphics import Graphics

g = Graphics.from_size(200, 100)
g.clear((255, 255, 255))
g.fill_rect((10, 10, 50, 20), (255, 0, 0))
g.fill_circle((150, 50), 20, (0, 0, 255))
g.draw_line((0, 0), (199, 99), (0, 0, 0), width=2)
print(g.get_pixel(10, 10))   # Color(255, 0, 0, 255)
```

Ways to create a `Graphics`:

- `Graphics(surface)` wraps an existing surface. Called with no surface, it
  gives a 16×16 placeholder image.
- `Graphics.from_size(width, height, color_key=None)` makes a blank 32-bit surface.
- `Graphics.from_file(filename, color_key=None)` loads an image. It looks in
  the current directory and in `images/`. Loaded files are cached. A file
  that cannot be found gives the placeholder image.
- `Graphics.from_region(source, rect, color_key=None)` copies a rectangle of
  another `Graphics` or of an image file.
- `Graphics.from_tile(source, cols, rows, col, row, color_key=None)` copies
  one tile out of a grid of equal tiles, such as a sprite sheet.
- `copy()` makes an independent copy.

Drawing methods:

- Lines: `draw_hline`, `draw_vline`, `draw_line`, `draw_polyline`.
- Rectangles: `draw_rect` and `fill_rect`. Both take an optional corner `radius`.
- Ovals and circles: `draw_oval`, `fill_oval`, `draw_circle`, `fill_circle`.
- Pie slices: `draw_pie` and `fill_pie`. Angles are in degrees, with 0 pointing up and increasing clockwise.
- Triangles and polygons: `draw_triangle`, `fill_triangle`, `draw_polygon`, `fill_polygon`.
- Bézier curves: `draw_bezier(points, steps, color)` needs at least 3 control points and 2 steps.
- Pixels: `get_pixel` and `set_pixel`.
- Copying: `blit(dest, source, source_rect=None)`, where `dest` is a point or a rectangle.

Other methods:

- Colour keys: `set_color_key`, `get_color_key`, `is_color_key_set`, `clear_color_key`.
- `match_color` returns the closest colour the surface can represent.
- `set_scroll_pos(x, y)` shifts all later drawing. `reset_scroll_pos()` removes the shift.
- `clear(color)` fills the surface. It also resets scrolling, the margins, the
  font (`arial.ttf`, size 18, or pygame's built-in font if that file cannot be
  found), the text colour (black) and the text cursor.

To draw on the window, wrap the display surface and call `flip()`:

```python
import pygame
from gfcgame.graphics import Graphics

pygame.init()
screen = Graphics(pygame.display.set_mode((640, 480)))
screen.clear((0, 0, 0))
screen.fill_circle((320, 240), 50, (255, 200, 0))
screen.flip()
```

## Text

`Graphics.write(text)` writes at a text cursor. The cursor starts at the
top-left margin, and each newline moves it down one line. `write` returns the
graphics, so calls can be chained.

- `set_font(face, size)` chooses the font.
- `set_text_color(color)` chooses the text colour.
- `set_align(Align.LEFT | Align.RIGHT | Align.CENTER)` changes the alignment.
  Text still pending is drawn with the old alignment first.
- `flush()` draws anything still buffered.
- `draw_text(pt, text)` draws one string at a baseline point.
- `text_graphics(text)` renders a string into a new `Graphics`.

Left-aligned text is drawn at once. Right-aligned and centred text is drawn
only when its line ends with a newline, or on `flush()`.

```python
from gfcgame.text import Align

g.set_text_color((0, 0, 0))
g.write("Score: ").write(120).write("\n")
g.set_align(Align.RIGHT)
g.write("Level 3\n")
```

The line handling is available without any drawing, in `TextStream`:

- `write(text)` adds text to the buffer.
- `take_lines()` returns all buffered text, split at newlines.
- `take_complete_lines()` returns only finished lines and keeps the unfinished rest.
- `set_align(align)` changes the alignment.
- `reset()` empties the buffer.

## Game clock

```python
from gfcgame.clock import GameClock

clock = GameClock()      # or GameClock(ticks=some_callable_returning_ms)
clock.reset()            # start counting from 0
clock.suspend()          # freeze game time
clock.resume()           # continue counting
clock.game_time()        # milliseconds of game time, suspensions excluded
```

The clock does not run until `reset()` is called. Times wrap around at 32 bits.

## Sound

```python
from gfcgame.sound import PlayMode, Sound, SoundPlayer

player = SoundPlayer()
player.set_mode(PlayMode.PLAY_IF_NEW)
player.play(Sound("explosion.wav"), repeat=0, fade_in=0)
```

`Sound(filename)` loads a sound file. It looks in the current directory and
in `sounds/`, and raises `FileNotFoundError` if the file is missing. Loaded
files are cached.

A `SoundPlayer` plays one sound at a time. To hear several sounds at once,
use several players. `play` also accepts a file name in place of a `Sound`.

- `repeat` is how many extra times the sound plays. Use `-1` to loop it.
- `fade_in` is in milliseconds. It fades the new sound in and fades out any
  sound still playing.

The play modes decide what happens when a sound is already playing:

- `TERMINATE_AND_PLAY` (the default) stops the current sound and plays the new one.
- `PLAY_IF_IDLE` plays only when nothing is playing.
- `PLAY_IF_NEW` plays unless the same sound is already playing.
- `PLAY_ONCE` does not play the sound that was played last.

Other `SoundPlayer` methods:

- Playback state: `is_playing`, `last_playing`.
- Pausing: `pause`, `resume`, `is_paused`.
- Level: `volume(0..1)`.
- Ending: `stop`, `fade_out(ms)`, and `expire(ms)`, which keeps playing for `ms` and then stops.
- Position: `set_position(angle, distance)`. The angle is in degrees, 0 is
  straight ahead and 90 is to the right. The distance runs from 0 (closest)
  to 255 (furthest).

## Keys and byte order

`gfcgame.keys` provides:

- `Key`: key codes. Printable keys match their ASCII codes (`Key.A`, `Key.K_1`,
  `Key.SPACE`). There are also `Key.UP`, `Key.F1`, `Key.KP0` and similar.
- `KeyMod`: modifier flags such as `KeyMod.LSHIFT | KeyMod.LCTRL`.
- `Hat`: joystick hat positions.
- `level_shortcut(key, mod)`: returns the level 1–9 chosen by Left-Shift +
  Left-Ctrl + a digit key, or `None`.

`gfcgame.byteorder` provides:

- `swap16`, `swap32`, `swap64`: reverse the bytes of unsigned values.
- `swap_le(value, bits)`, `swap_be(value, bits)`: convert little- or
  big-endian values to the native order.

Values that are out of range raise `ValueError`.

## What this package does not do

The package has no main loop and no game class. It does not:

- open windows;
- poll or dispatch pygame events;
- run a fixed frame rate;
- manage game modes or levels.

Your program creates the display, reads events and drives the frame timing
itself, using `Graphics`, `GameClock` and `SoundPlayer` as parts.