"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from solong.colors import color_by_name
from solong.image import Image

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour "None"."""

_NAME_BUFFER = 63
_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find(text: str, needle: str) -> int:
    """Return the position of the first ``needle`` in ``text``, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double-quoted text, or -1."""
    in_quotes = False
    for pos, char in enumerate(text[:len(text) - len(needle) + 1]):
        if char == '"':
            in_quotes = not in_quotes
        if not in_quotes and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside strings, keeping the text's length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, len(text) if end == -1 else begin + end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, len(text) if end == -1 else begin + end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Return the 0xRRGGBB value of an XPM colour specification.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up by colour name; "None" gives
    -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        digits = match.group(2) if match else ""
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError("unexpected end of XPM data") from None


def _read_palette(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines)
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        if cpp <= 2:
            palette[line[:cpp]] = rgb
        else:
            palette.setdefault(line[:cpp], rgb)
    return palette


def _parse(lines: Iterator[str]) -> Image:
    words = split_words(_next_line(lines))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])}")
    palette = _read_palette(lines, ncolors, cpp)
    image = Image(width, height, 32, False)
    for y in range(height):
        line = _next_line(lines)
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data given as its sequence of strings."""
    return _parse(iter(lines))


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return _parse(quoted_lines(strip_comments(text)))