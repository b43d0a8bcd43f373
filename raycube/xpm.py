"""Reader for XPM images as used for wall textures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from raycube.colors import lookup_color

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """The XPM data could not be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xAARRGGBB pixel values."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.rows[y][x]


def split_words(text: str) -> list[str]:
    """Split text on runs of spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find(text: str, needle: str) -> int:
    """Return the position of needle in text, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of needle outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside quoted strings, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
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
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _hex(text: str) -> int:
    match = _HEX_RE.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into 0xRRGGBB; -1 for None, 0 if unknown."""
    if name.startswith("#"):
        return _hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its string lines (header, colours, rows)."""
    source = iter(lines)

    def next_line(what: str) -> str:
        line = next(source, None)
        if line is None:
            raise XpmError(f"missing {what}")
        return line

    words = split_words(next_line("header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError("invalid header values")

    direct = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        spec = split_words(line[cpp:])
        try:
            at = spec.index("c") + 1
        except ValueError:
            raise XpmError("colour definition without 'c' key") from None
        if at >= len(spec):
            raise XpmError("colour definition without value")
        value = text_to_rgb(spec[at], spec[at + 1] if at + 1 < len(spec) else None)
        key = line[:cpp]
        if direct:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        row = []
        for x in range(width):
            color = colors.get(line[cpp * x:cpp * x + cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm_text(text)