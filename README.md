# xpmkit

xpmkit reads XPM pixmap images and turns them into plain pixel data. It
needs only the standard library.

## Installing

    pip install xpmkit

## Loading an image

From a file:

```python
from xpmkit.xpm import xpm_file_to_image

image = xpm_file_to_image("sprite.xpm")
print(image.width, image.height)
print(hex(image.pixel(0, 0)))
```

The file is read as Latin-1 text. Comments outside quotes are blanked out,
and the quoted strings are then parsed in order.

XPM data that is already in memory can be passed as a list of strings. These
are the same strings a C `static char *` XPM array would hold:

```python
from xpmkit.xpm import xpm_to_image

data = [
    "2 2 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
    "ba",
]
image = xpm_to_image(data)
hex(image.pixel(0, 0))   # '0xff0000'
hex(image.pixel(1, 0))   # '0xff000000'
```

The result is an `XpmImage` with `width`, `height` and `pixels`. `pixels` is
a tuple of `width * height` values stored row by row. `pixel(x, y)` raises
`IndexError` for a position outside the image.

Each pixel is a 32-bit integer, normally `0xRRGGBB`. A pixel whose colour is
`None` comes back as `0xFF000000`, so the high byte marks it as transparent.
Colour names that are not known give `0`. So do pixels whose characters are
not in the colour table.

Malformed input raises `xpmkit.xpm.XpmError`, which is a `ValueError`. This
covers a header with fewer than four values or a value that is not positive,
a colour line without a `c` key and value, and data that ends before the
colour table or the pixel rows are complete. A file that cannot be opened
raises the usual `OSError`.

## Lower-level helpers

`xpmkit.xpm` also provides the steps the loaders are built from:

- `strip_comments(text)` replaces `/* ... */` and `// ...` comments that lie
  outside double quotes with spaces, so the text keeps its length.
- `quoted_lines(text)` yields the contents of each double-quoted string in
  order.
- `pixel_key(text, chars_per_pixel)` packs the first `chars_per_pixel`
  characters into an integer key, eight bits per character.
- `text_to_rgb(name, end)` resolves a colour specification. `#hex` is read as
  hexadecimal. Any other name is looked up in the colour table. When `end` is
  given, it is first joined to the name with a space, so two-word names such
  as `light sky` work.
- `parse_xpm(lines)` builds an image from any iterable of XPM strings.

## Colour names

`xpmkit.colors` holds the X11 colour name table:

```python
from xpmkit.colors import lookup_color, color_names

lookup_color("Light Sky")   # 0x87cefa, matched without regard to case
lookup_color("none")        # -1
color_names()[:3]           # ('snow', 'ghost white', 'ghostwhite')
```

`lookup_color` raises `KeyError` for an unknown name. When a name appears
more than once in the table, the first entry is used.

## Text scanning

`xpmkit.textscan` provides the search and splitting functions the parser
uses:

- `find(text, needle, limit)` returns the index of the first match, or `-1`.
  It also returns `-1` when the needle is longer than `limit`.
- `find_unquoted(text, needle, limit)` does the same but ignores matches that
  start inside double-quoted strings.
- `split_words(text)` splits on spaces and tabs only.

## What it does not do

xpmkit only decodes XPM images. It does not display images, write XPM files,
or read any other image format, and it has no command-line tool.