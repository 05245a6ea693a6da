# wirefdf

A small wireframe viewer for height maps. A map is a plain text file in
which each line is a row of space-separated integer heights:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Each point is joined to its right and lower neighbours, and the grid is
drawn as lines in a 1200×800 window titled `fdf_test`.

## Installation

```
pip install .
```

The window uses Tkinter from the standard library; there are no other
dependencies.

## Usage

```
wirefdf path/to/map.fdf
```

The map argument is optional; without it an empty window opens. If the map
cannot be read, or a line has fewer values than the first line, the command
prints an error and exits with status 1.

The grid is drawn the first time a key below or the mouse wheel is used.

| Input        | Action                                   |
|--------------|------------------------------------------|
| Arrow keys   | Move the map by 2 units                  |
| W / S        | Rotate about the x axis                  |
| A / D        | Rotate about the y axis                  |
| Q / E        | Rotate about the z axis                  |
| Mouse wheel  | Zoom in / out (scale changes by 2)       |
| C            | Clear the window                         |
| Escape       | Close the window                         |

A rotation key sets the direction of turn; each following redraw turns the
grid a further 0.05 radians about that axis until the map is moved or zoomed.

### Map format

- The number of columns comes from the first line; extra values on later
  lines are ignored, too few raise `MapError`.
- Each value is read as a leading integer (`10,0xFF` reads as 10; a value
  with no leading digits reads as 0) and becomes the point's negated height.
- Points are centred on the origin, one unit apart.

## Library use

The pieces work without a window:

```python
from wirefdf.mapfile import parse_map
from wirefdf.raster import View, grid_pixels

grid = parse_map("0 1\n1 0\n")
pixels = list(grid_pixels(View(), grid))
```

- `wirefdf.mapfile`: `parse_map(text)`, `read_map(path)` and `MapError`.
- `wirefdf.geometry`: the frozen `Point` dataclass, the `Axis` enum,
  `rotate_pair(a, b, angle)` and `rotate_grid(grid, axis, angle)`, which
  returns a new grid.
- `wirefdf.raster`: `View` (scale, right, up, width, height) with
  `View.project(point)`; `line_pixels(view, start, end)` and
  `grid_pixels(view, grid)` yield integer pixel coordinates.
- `wirefdf.viewer`: `Viewer` reacts to key codes (`on_key`) and mouse
  buttons (`on_mouse`) and draws onto a `Surface`, an in-memory pixel store
  that clips to its size; `TkSurface` also draws on a Tk canvas; `main` is
  the command.
- `wirefdf.colors.lookup_color(name)`: X11 colour names to `0xRRGGBB`,
  ignoring case; `none` gives `-1`, unknown names raise `KeyError`.
- `wirefdf.pixel`: `rgb_shifts(red_mask, green_mask, blue_mask)` and
  `convert_color(color, depth, shifts)` turn a 24-bit colour into a pixel
  value for a shallower visual; depths of 24 or more pass it through.
- `wirefdf.xpm`: `parse_xpm(lines)`, `parse_xpm_text(text)` and
  `read_xpm(path)` decode XPM images into an `XpmImage` whose pixels are
  `0xRRGGBB` values, or `None` where transparent; malformed data raises
  `XpmError`. Helpers `split_words`, `find_unquoted`, `strip_comments` and
  `text_to_rgb` are available too.

## What it does not do

- Colour values in map files are not read; every line is drawn in one
  fixed colour.
- XPM images are decoded but the viewer does not display them.

## Running the tests

```
pip install .[test]
pytest
```