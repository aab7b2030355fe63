# chibitools

Asset tools for a small game engine whose screen uses 16-bit RGB565 colour.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

The `chibitools` command has two subcommands:

```
chibitools images SOURCE_DIR IMAGE_DIR
chibitools hanzi GAME_DIR OUTPUT
```

- `images` deletes everything inside `IMAGE_DIR`. It then converts every
  `.png` file in `SOURCE_DIR` into a binary image file in `IMAGE_DIR`. The
  output file has the PNG's name without the `.png` extension. The path of
  each file written is printed. `IMAGE_DIR` must already exist.
- `hanzi` collects the distinct CJK ideographs (U+4E00 to U+9FA5) used in
  the game's text files. It writes them to `OUTPUT` as UTF-8 and prints them.

Run `chibitools --help` for the full usage.

## Modules

### `chibitools.imageconverter`

This module converts PNG artwork into the engine's binary image format.

- `Image` is a dataclass with the fields `x`, `y`, `w`, `h`, `dw`, `dh`,
  `type`, `data` and `alpha`.
  - `x` and `y` place the cropped picture inside a frame of size `w` × `h`.
  - `dw` × `dh` is the size of the stored pixels.
  - `data` holds the RGB565 colours and `alpha` holds the alpha values.
  - Creating an `Image` raises `ValueError` if `data` or `alpha` does not
    hold exactly `dw * dh` entries.
- `rgb888_to_565(r, g, b)` packs 8-bit channels into an RGB565 value.
  `rgb565_to_888(color)` expands an RGB565 value back into an `(r, g, b)`
  tuple.
- `clip_alpha(image)` returns `(left, top, width, height)` of the area that
  holds non-transparent pixels. It returns `(0, 0, 0, 0)` for a fully
  transparent image.
- `clip(image, x, y)` cuts an image into an `x` × `y` grid of equal tiles,
  in row order. It raises `ValueError` for a grid size that is not positive.
- `load_image565(source)` turns a Pillow image into an `Image`. Fully
  transparent pixels are stored as `0x07E0`, which is pure green.
- `save_bin(image, target)` appends one record to a file. `load_bin(path)`
  reads the first record of a file, and raises `ValueError` if the data is
  truncated.
- `convert(source, target)` converts one PNG and appends its records to
  `target`. How the PNG is split depends on its file name:
  - Names starting with `scene_`, `icon_` or `shadow_` are cut into square
    frames along one row.
  - Names starting with `part_` are cut into a 3×3 grid.
  - Any other file is kept whole.

  Each frame is cropped to its visible area before it is saved.

Record layout (little-endian):

| Field         | Type                              |
|---------------|-----------------------------------|
| x, y, w, h    | unsigned 16-bit each              |
| dw, dh        | unsigned 16-bit each              |
| type          | unsigned 8-bit                    |
| colours       | `dw * dh` unsigned 16-bit values  |
| alpha         | `dw * dh` bytes                   |

```python
from chibitools.imageconverter import convert, load_bin

convert("imgs/scene_forest.png", "game/image/scene_forest")
image = load_bin("game/image/scene_forest")
print(image.x, image.y, image.w, image.h, image.dw, image.dh)
```

### `chibitools.gamefile`

`GameFile(root="game")` opens files by name relative to a game directory.
It can be used as a context manager, which closes the file on exit.

- `open(name, mode)` opens the file for reading, or for writing when `mode`
  is `"w"`. Writing truncates the file. Only files that already exist are
  opened; `open` returns `False` if the file is missing.
- `read(size)` returns up to `size` bytes.
- `read_uint16()` reads a little-endian 16-bit value and `read_uint8()`
  reads a single byte. Both raise `EOFError` at the end of the data.
- `read_line()` returns the next line, decoded as UTF-8, with surrounding
  whitespace removed.
- `write(text)` writes UTF-8 text.
- `at_end()` tells whether all data has been read.
- `close()` closes the file.

Any read or write on a file that is not open raises `ValueError`.

### `chibitools.log`

`ChibiLog(name="chibitools").info(content)` writes a message to the named
logger at debug level.

### `chibitools.tools`

This module holds the functions behind the command line:

- `collect_hanzi(game_dir, output)` scans the files directly inside each
  subdirectory of `game_dir`. The `image`, `audio` and `fonts` directories
  are skipped. It keeps the ideographs in first-seen order, writes them to
  `output` and returns them.
- `clear_dir(path)` deletes everything inside a directory. It returns
  `False` if the directory does not exist.
- `convert_images(source_dir, image_dir)` does the work of the `images`
  subcommand and returns the paths it wrote.
- `main(argv=None)` is the command-line entry point.

## What it does not do

The package only prepares and reads assets. It does not:

- run or display the game;
- turn a font into glyph bitmaps;
- play audio.