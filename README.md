# solong

Building blocks for a small top-down puzzle game in which a player walks
across a rectangular map, picks up every collectible and then steps onto the
exit. The package reads and validates map files, reads XPM textures into
in-memory images and looks up X11 colour names. It has no dependencies
beyond the standard library.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Map files

A map is a plain text file whose name ends in `.ber`, built from these
characters:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | floor       |
| `P`  | player      |
| `C`  | collectible |
| `E`  | exit        |

Example:

```
1111111111
1P0C00C0E1
1111111111
```

Empty lines are ignored. `solong.gamemap.load_map(filename)` accepts a map
only if:

- the name ends in `.ber` and is at least five characters long;
- the file can be read and holds at least one non-empty line;
- every row has the length of the first;
- the first and last rows, and the first and last column, are all walls;
- it holds exactly one `P`, exactly one `E`, at least one `C`, and no other
  characters besides `0` and `1`;
- every collectible can be reached from the player without stepping on the
  exit, and the exit can be reached as well.

Otherwise it raises `solong.gamemap.MapError` (a `ValueError`) whose message
gives the reason, for example `Map is not rectangular` or `No Valid Path`.

On success it returns a `GameMap` dataclass with `grid` (a list of rows, each
a list of one-character strings), `collectibles` (their count), `player` (its
`(x, y)` position), `moves` (starting at 0) and `finished` (starting
`False`). `width` and `height` give the grid's size and `str()` gives the map
back as text.

Each check is also available on its own: `check_filename`, `parse_rows`,
`read_map`, `check_size`, `check_walls`, `count_elements` (returns
`(collectibles, exits, players)`), `find_player` and `check_valid_path`.

```python
from solong.gamemap import MapError, load_map

try:
    game_map = load_map("maps/level.ber")
except MapError as exc:
    print("Error", exc, sep="\n")
else:
    print(game_map.width, game_map.height, game_map.player)
```

## Textures

`solong.xpm.xpm_file_to_image(path)` reads an XPM file and
`solong.xpm.xpm_to_image(lines)` takes the XPM strings directly. Both return
a `solong.image.Image` of 32 bits per pixel, little-endian, or raise
`solong.xpm.XpmError` (a `ValueError`). C comments outside strings are
ignored. Colours may be given as `#RRGGBB` or by name; unknown names give
black, and `None` gives the pixel value `0xFF000000`
(`solong.xpm.TRANSPARENT`). Helpers used by the reader are public as well:
`split_words`, `find`, `find_unquoted`, `strip_comments`, `quoted_lines` and
`text_to_rgb`.

## Images

`solong.image.Image(width, height, bits_per_pixel=32, big_endian=False)` is a
zeroed pixel buffer whose rows are padded to a multiple of 32 bits;
`size_line` gives the bytes per row and `data` the raw `bytearray`.
`put_pixel(x, y, color)` and `get_pixel(x, y)` store and read pixel values in
the image's byte order, and `row(y)` returns one row's bytes. Positions
outside the image raise `IndexError`.

## Colours

`solong.colors.color_by_name(name)` returns the `0xRRGGBB` value of a named
X11 colour, ignoring case (`"none"` gives `-1`; unknown names raise
`KeyError`). `solong.visual.rgb_shifts(red_mask, green_mask, blue_mask)`
describes a pixel format's channel layout and
`solong.visual.good_color(color, depth, shifts)` converts a colour to a pixel
value for it, unchanged at depth 24 or more.

## What it does not do

The package contains no playable game: there is no command to run, no
window or drawing on screen, no keyboard handling and no logic for moving the
player, collecting items or winning. It provides the map loading and
validation, texture reading and pixel buffers such a game would be built on.