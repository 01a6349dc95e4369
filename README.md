# stitchpaint

stitchpaint is a small interactive editor for stitch patterns. You place
stitches on a zoomable, pannable grid. The pattern is stored as a plain text
file in which each stitch is written relative to the one before it.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
stitchpaint
stitchpaint --width 1600 --height 900
```

`--width` and `--height` set the initial window size. The defaults are 1280
and 720.

At startup the editor reads its settings from `config.bin` in the working
directory. These settings are the last file used, the zoom scale and the
camera position. If the file is missing or malformed, the defaults are used:
`Untitled.txt`, scale 20, and the camera at the origin. The editor then loads
the stitches of the last file used. If that file cannot be read, the current
file name falls back to `Untitled.txt`.

When the window is closed, the settings are written back to `config.bin`. Each
stitch is then printed to the terminal as `(x; y)`, using the same relative
offsets that are stored in the pattern file.

### Controls

- **Left click** or **Enter** places a stitch at the cursor. Once the pattern
  has a stitch, the next one can only be placed within 10 grid units of the
  last one. A green guide line from the last stitch to the cursor appears
  while placement is possible.
- **Right button drag** pans the view.
- **Mouse wheel** zooms in and out by a factor of 1.1 per step. The scale
  never drops below 1.
- **Escape** quits, unless the file path field is being edited.

The menu panel in the top left corner shows:

- the current file name
- the overall drawing size, as the width and height of the bounding box
- the number of stitches
- the current scale
- the cursor position relative to the last stitch, once there is one

The panel also has these controls:

- **Undo** removes the last stitch.
- **File path** is a text field. Click it to type a path. Backspace deletes
  the last character, and Enter or Escape stops editing. Paths are limited to
  99 bytes of UTF-8.
- **Save** writes the pattern to the typed path and makes that path the
  current file.
- **Load** reads the pattern from the typed path. If the file cannot be read
  or parsed, the pattern is left unchanged.

Clicks, wheel steps and key presses over the panel do not place stitches or
zoom.

## File formats

### Pattern file

A pattern file holds one stitch per line as `x y`. The first line is the
absolute position of the first stitch. Every later line is the offset from the
stitch before it. Numbers are written with up to six significant digits.

```
3 4
1 -2
0.5 0
```

### Settings file

`config.bin` is a fixed 128-byte record in little-endian order. It contains:

1. a NUL-padded 100-byte UTF-8 file path
2. 4 bytes of padding
3. three doubles: the scale, then the camera's x and y

## Using it as a library

The parts that do not draw anything can be used on their own.

- `stitchpaint.geometry` converts coordinates.
  - `Vec2` is a point in base (drawing) coordinates and supports `+` and `-`.
  - `Vec2i` is a point in screen pixels.
  - `screen_to_base` and `base_to_screen` convert between the two. The screen
    y axis points down and the base y axis points up.
  - `to_absolute` turns a list of relative offsets into absolute points.
- `stitchpaint.stitches` edits patterns and reads or writes them.
  - `StitchPattern` keeps both relative and absolute positions. It has
    `add_stitch`, `undo`, `can_place`, `drawing_size`, `relative_to_last`,
    `load` and `save`.
  - `read_stitches` and `write_stitches` handle the text format.
- `stitchpaint.config` handles the settings file.
  - `PaintConfig` holds the settings.
  - `pack_config` and `unpack_config` convert to and from the binary record.
  - `load_config` and `save_config` read and write the file.
- `stitchpaint.view` provides `Viewport`, which has `zoom`, `pan`, `resize`,
  `to_base`, `to_screen` and `grid_lines` (the screen segments of the unit
  grid).
- `stitchpaint.app` provides `PaintApp`, the editor window, and `main`, the
  command entry point.

```python
from stitchpaint.geometry import Vec2
from stitchpaint.stitches import StitchPattern

pattern = StitchPattern()
pattern.add_stitch(Vec2(0.0, 0.0))
pattern.add_stitch(Vec2(3.0, 4.0))
print(pattern.relative)        # (Vec2(x=0.0, y=0.0), Vec2(x=3.0, y=4.0))
print(pattern.drawing_size())  # Vec2(x=3.0, y=4.0)
pattern.save("pattern.txt")
```

`StitchPattern.add_stitch` does not enforce the maximum stitch length. Call
`can_place` first if you need that check.

## Limitations

- There is one level of editing: stitches can be appended and removed from
  the end, but not moved, inserted or redone after an undo.
- Patterns are saved only in the plain text format above. No embroidery
  machine formats are written.