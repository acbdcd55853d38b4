"""A reader for XPM images as used by the game's tiles."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from solong.colors import text_to_rgb

# Transparent pixels ("None") are stored with this value.
TRANSPARENT = 0xFF000000
BITS_PER_PIXEL = 32

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass
class Image:
    """A 32 bits-per-pixel image held as rows of 0xAARRGGBB values."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)
    endian: int = 0

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the image size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.width + x

    def pixel(self, x: int, y: int) -> int:
        """Return the colour stored at column ``x`` of row ``y``."""
        return self.pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low 32 bits of ``color`` at column ``x`` of row ``y``."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    @property
    def bits_per_pixel(self) -> int:
        return BITS_PER_PIXEL

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of :attr:`data`."""
        return self.width * BITS_PER_PIXEL // 8

    @property
    def data(self) -> bytes:
        """The raw pixel bytes, row after row, in the image's byte order."""
        order = "big" if self.endian else "little"
        return b"".join(value.to_bytes(4, order) for value in self.pixels)


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, needle: str) -> int:
    """Index of ``needle`` in ``text`` outside double quotes, or -1."""
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The text keeps its length. A ``//`` comment is blanked together with
    the newline that ends it.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        rel = close - (begin + 2) if close != -1 else -1
        text = _blank(text, begin, rel + 4)
    while (begin := _find_unquoted(text, "//")) != -1:
        close = text.find("\n", begin + 2)
        rel = close - (begin + 2) if close != -1 else -1
        text = _blank(text, begin, rel + 3)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        spec_at = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if spec_at >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix = words[spec_at + 1] if spec_at + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[spec_at], suffix)


def _parse(lines: Iterable[str]) -> Image:
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    # Short keys keep the last definition, longer ones the first.
    keep_last = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color_line(_next_line(rows, "colour table"), cpp)
        if keep_last or key not in palette:
            palette[key] = color

    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel rows")
        for x in range(width):
            key = line[x * cpp:(x + 1) * cpp]
            color = palette.get(key, 0) if len(key) == cpp else 0
            if color == -1:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_from_data(rows: Iterable[str]) -> Image:
    """Build an image from XPM rows: header, colour table, then pixels."""
    return _parse(rows)


def xpm_from_file(path: str | Path) -> Image:
    """Read an XPM file and build its image."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return _parse(quoted_strings(text))