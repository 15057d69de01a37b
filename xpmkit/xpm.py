"""Reading XPM pixmaps into 32-bit pixel arrays."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike

from .colors import lookup_color
from .textscan import find_unquoted, split_words

TRANSPARENT = 0xFF000000

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds width*height 32-bit values, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside quoted strings, keeping the length."""
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each successive double-quoted string."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def pixel_key(text: str, chars_per_pixel: int) -> int:
    """Pack the first ``chars_per_pixel`` characters of ``text`` into an integer."""
    key = 0
    for char in text[:chars_per_pixel].ljust(chars_per_pixel, "\0"):
        key = (key << 8) + ord(char)
    return key


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _hex_to_int32(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    value = max(min(value, 2**63 - 1), -(2**63))
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 0x80000000 else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into an RGB value.

    ``#hex`` values are read as hexadecimal; otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table. Unknown
    names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _hex_to_int32(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header values: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[int, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without a colour value: {line!r}")
    extra = words[index + 2] if index + 2 < len(words) else None
    return pixel_key(line, cpp), text_to_rgb(words[index + 1], extra)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM given as its sequence of string lines."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))
    direct = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(_next_line(source, "colour table"), cpp)
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel rows")
        for x in range(width):
            colour = palette.get(pixel_key(row[cpp * x:], cpp), 0)
            if colour == -1:
                colour = TRANSPARENT
            pixels.append(colour & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def xpm_to_image(xpm_data: Sequence[str]) -> XpmImage:
    """Decode XPM data held in memory as a list of strings."""
    return parse_xpm(xpm_data)


def xpm_file_to_image(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))