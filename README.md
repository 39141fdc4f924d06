# charcoder

A small desktop tool for looking at how text is encoded.

Type or paste some text and every character is laid out in a grid, each on
its own coloured tile, above a second grid with its UTF-8 bytes. Hovering
over a tile shows the character with its UTF-8 bytes, its UTF-16 code unit
and its Unicode code point. A second window converts a `.txt` file to UTF-8
or to GBK.

## Installing

```
pip install .
```

The windows are built with Tkinter, which ships with most Python
installations. No other packages are needed. The encoding and conversion
helpers work without Tkinter; only the windows need it, and creating one
without Tkinter raises `RuntimeError`.

## Running

```
charcoder
```

In the main window:

- **转换编码** fills both grids from the text box. Text is split into UTF-16
  code units, so a character outside the Basic Multilingual Plane takes two
  tiles, one per surrogate, shown as `�`.
- **清空** empties the text box and both grids.
- The underlined **文件编码转换** link opens the file converter.

In the converter window, press **选择文件** to pick a text file, choose UTF-8
or GBK as the target and press **转换**. **返回** hides the converter and
brings back the main window. The result is written next to the input file as
`<name>-<encoding>.txt`, where `<name>` is the file name up to its first dot,
for example `notes-GBK.txt`.

When the target is GBK, the input is read as UTF-8 and written in the
system's preferred encoding, which is usually GBK on a Chinese Windows
machine. When the target is UTF-8, the input is read in the system's
preferred encoding and written as UTF-8. A byte order mark at the start of
the input (UTF-8 or UTF-16) overrides the assumed source encoding. Line
endings `\r\n` become `\n`, and bytes or characters that cannot be decoded or
encoded are replaced rather than reported.

## Using it from Python

The encoding helpers live in `charcoder.encoding`:

```python
from charcoder.encoding import utf8_hex, utf16_hex, unicode_hex

utf8_hex("中")     # 'E4 B8 AD'
utf16_hex("中")    # '4E2D'
unicode_hex("中")  # '4E2D'
```

Each of these takes a single UTF-16 code unit and raises `ValueError` for
anything else. A lone surrogate has no UTF-8 form and `utf8_hex` shows it as
`3F`, the byte of a question mark.

- `code_units(text)` yields the text one UTF-16 code unit at a time, the same
  way the grid splits it.
- `random_color(rng=None)` returns a light colour as `rgb(r, g, b)`, each
  channel between 150 and 255; pass a `random.Random` for repeatable colours.
- `encode_char(ch, rng=None)` gathers all three codes and a random colour
  into a frozen `EncodingInfo` with the fields `utf8_hex`, `utf16_hex`,
  `unicode_hex` and `color`.
- `describe(ch, info)` gives the four-line hover text.

File conversion is in `charcoder.convert`:

- `TargetEncoding` lists the two targets, `UTF8` (`"UTF-8"`) and `GBK`
  (`"GBK"`); the functions below accept either the member or its string.
- `output_path(input_path, encoding)` returns the absolute path of the file
  that will be written.
- `convert_file(input_path, encoding, system_encoding=None)` does the
  conversion and returns the path it wrote. `system_encoding` stands in for
  the system's preferred encoding when given.
- When the input cannot be read or the output cannot be written,
  `convert_file` raises `ConversionError`, a subclass of `OSError`.

`charcoder.gui` holds the windows (`MainWindow`, `ConverterWindow`,
`ClickableLabel`), the `main` function behind the `charcoder` command, and
two layout helpers: `columns_per_row(container_width, item_width, spacing)`
and `grid_position(index, per_row)`.

## Tests

```
pip install .[test]
pytest
```