"""Reading XPM pixmaps, from a file or from in-memory lines, into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from fractol.colornames import color_by_name
from fractol.image import Image
from fractol.textutil import atoi
from fractol.wordtab import find_substring, find_substring_unquoted, str_to_wordtab

TRANSPARENT = 0xFF000000

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >= (1 << 31) else n


def text_rgb(name: str, suffix: str | None = None) -> int:
    """Resolve an XPM colour specification to 0xRRGGBB.

    ``#rrggbb`` is read as hexadecimal; anything else is looked up as a colour
    name, joined with ``suffix`` by a space when one is given. Unknown names
    resolve to 0, and ``none`` to -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        digits = match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        if match.group(1) == "-":
            value = -value
        return _to_int32(value)
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def color_key(text: str, cpp: int) -> int:
    """Pack the first ``cpp`` characters of ``text`` into an integer key."""
    result = 0
    for ch in text[:cpp].ljust(cpp, "\0"):
        result = (result << 8) + ord(ch)
    return result


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces."""
    while (begin := find_substring_unquoted(text, "/*", len(text))) != -1:
        end = find_substring(text[begin + 2:], "*/", len(text) - begin - 2)
        stop = len(text) if end == -1 else begin + end + 4
        text = _blank(text, begin, stop)
    while (begin := find_substring_unquoted(text, "//", len(text))) != -1:
        end = find_substring(text[begin + 2:], "\n", len(text) - begin - 2)
        stop = len(text) if end == -1 else begin + end + 3
        text = _blank(text, begin, stop)
    return text


def extract_quoted_lines(text: str) -> list[str]:
    """Return the contents of every complete double-quoted string, in order."""
    parts = text.split('"')
    pairs = (len(parts) - 1) // 2
    return parts[1:2 * pairs:2]


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_palette(source: Iterator[str], ncolors: int, cpp: int) -> dict[int, int]:
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    direct = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        suffix = words[index + 2] if index + 2 < len(words) else None
        rgb = text_rgb(words[index + 1], suffix)
        key = color_key(line, cpp)
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows."""
    source = iter(lines)
    fields = str_to_wordtab(_next_line(source, "header"))
    if len(fields) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (atoi(value) for value in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")
    palette = _read_palette(source, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "pixel rows")
        for x in range(width):
            key = color_key(line[cpp * x:cpp * (x + 1)], cpp)
            color = palette.get(key, 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return parse_xpm(extract_quoted_lines(text))


def xpm_data_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data already split into its string lines."""
    return parse_xpm(list(lines))