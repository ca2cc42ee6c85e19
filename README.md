# fdfview

A pure-Python library for reading `.fdf` height maps and drawing them as
wireframes into an in-memory pixel canvas. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Map files

Each line of an `.fdf` file is one row of the map. The values on a line are
separated by single spaces. Each value is read as a leading integer, so
`10,0xFF` is read as 10. The first line fixes the width. Shorter lines are
padded with zeros. A longer line raises `MapError`.

```python
from fdfview.mapfile import read_map, parse_map, MapError

heightmap = read_map("maps/42.fdf")   # MapError if unreadable or empty
heightmap.width, heightmap.height
heightmap.z(3, 1)                     # height at column 3, row 1
heightmap.height_range()              # highest minus lowest point

small = parse_map(["0 0 0\n", "0 5 0\n", "0 0 0\n"])
```

## Drawing

`fdfview.render.Scene` holds a `HeightMap`, a `Canvas` and the view state.
The view state is `zoom`, `factor` (the height scale), `projection` and the
offsets. The canvas is 1280×768 by default.

```python
from fdfview.render import Scene, Projection

scene = Scene(heightmap, projection=Projection.ISOMETRIC)
scene.auto_factor()   # height scale of 0.1, 1 or 0.3, chosen by height range
scene.render()        # clear, fit to 90% of the screen, centre, draw
scene.canvas.pixel(640, 384)
pixels = scene.canvas.pixels   # row-major 0xRRGGBB values
```

A segment is drawn in white (`0xFFFFFF`) when both ends are flat. It is drawn
in red (`0xE80C0C`) when either end has a height. The lower-level steps are
also available: `draw(do_draw)`, `rescale()`, `recenter()` and
`reset_bounds()`. So are the helpers `isometric(x, y, z)`,
`deg_to_rad(angle)` and `height_factor(height_range)`.

## XPM images and colour names

- `fdfview.xpm.load_xpm(path)` and `parse_xpm_text(text)` decode XPM source.
  `parse_xpm(lines)` decodes XPM that is already split into its strings. Each
  returns an `Image` with `width`, `height`, `pixels` and `pixel(x, y)`. The
  colour `None` becomes the transparent value `0xFF000000`. Malformed data
  raises `XpmError`.
- `fdfview.colornames.lookup_color(name)` gives the `0xRRGGBB` value of an
  X11 colour name. The match ignores ASCII case. It returns -1 for `none` and
  `None` for an unknown name. `parse_color(name, suffix)` also accepts
  `#RRGGBB`.

## Smaller helpers

- `fdfview.linereader.LineReader` and `read_lines(stream)` yield the lines of
  a text stream, newlines included. The stream is read in fixed-size chunks.
- `fdfview.text` has string helpers: `parse_int`, `split_words`,
  `word_count`, `trim`, `substring`, `bounded_copy`, `bounded_concat` and
  others.
- `fdfview.chars` has ASCII classification and case conversion.
- `fdfview.memory` has byte-buffer fill, copy, move, search and compare.
- `fdfview.output` writes characters, strings and numbers to a stream.
- `fdfview.intlist.IntList` is a singly linked list of integers.

## What this package does not do

It opens no window and installs no command. It also has no keyboard controls
for zooming, switching projection or changing the height scale. A scene can
be adjusted in code by setting `zoom`, `factor` or `projection` and calling
`render()` again. To see the result, take `scene.canvas.pixels` and display
or save it with a tool of your choice.