"""Reader for XPM images as used for the game's tiles."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000

_WORD_SPLIT = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """An image as rows of 32-bit 0xAARRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + count)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        offset = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, offset + 4)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        offset = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, offset + 3)
    return text


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _color_key(chars: str) -> int:
    key = 0
    for ch in chars:
        byte = ord(ch) & 0xFF
        if byte >= 0x80:
            byte -= 0x100
        key = ((key << 8) + byte) & 0xFFFFFFFF
    return key


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> tuple[int, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without colour: {line!r}")
    suffix = words[index + 2] if index + 2 < len(words) else None
    key = _color_key(line[:cpp].ljust(cpp, "\0"))
    return key, lookup_color(words[index + 1], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Build an image from the strings of an XPM: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "XPM header"))

    colors: dict[int, int] = {}
    for _ in range(ncolors):
        key, value = _read_color(_next_line(source, "colour line"), cpp)
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        row = []
        for x in range(width):
            chars = line[cpp * x : cpp * x + cpp].ljust(cpp, "\0")
            color = colors.get(_color_key(chars), 0)
            if color == -1:
                color = TRANSPARENT
            row.append(color & 0xFFFFFFFF)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Build an image from the text of an XPM file."""
    return parse_xpm(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and parse the XPM file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    if not data:
        raise XpmError(f"empty XPM file: {path}")
    return parse_xpm_text(data.decode("latin-1"))