"""Reading of XPM images into grids of 32-bit pixel values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .colors import TRANSPARENT, lookup_color

# Pixel value stored for a colour defined as "None".
TRANSPARENT_PIXEL = 0xFF000000

# Longest combined "name suffix" colour name that is looked up.
_MAX_NAME = 63

_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major 0xAARRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _blank_unquoted(text: str, opener: str, closer: str) -> str:
    """Replace every unquoted ``opener ... closer`` span with spaces."""
    out: list[str] = []
    in_quote = False
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = length if end == -1 else end + len(closer)
            out.append(" " * (stop - i))
            i = stop
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double quotes.

    Block comments are removed first, then line comments together with the
    newline that ends them. The length of the text is kept.
    """
    return _blank_unquoted(_blank_unquoted(text, "/*", "*/"), "//", "\n")


def text_to_rgb(name: str, suffix: str | None) -> int:
    """Turn a colour specification into a 0xRRGGBB value.

    ``#hex`` is read as a hexadecimal number; otherwise ``name`` (joined with
    ``suffix`` by a space when given) is looked up by name. Unknown names give 0
    and ``None`` gives ``TRANSPARENT``.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if suffix is not None:
        name = f"{name} {suffix}"[:_MAX_NAME]
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(word: str) -> int:
    match = _DECIMAL.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as the sequence of its quoted strings."""
    source = iter(lines)
    words = split_words(_next_line(source, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive numbers")

    # Short keys are stored in a direct table (later lines overwrite earlier
    # ones); longer keys are searched in a list where the first line wins.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        key = line[:cpp]
        fields = split_words(line[cpp:])
        try:
            pos = fields.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition {line!r} has no 'c' entry") from None
        if pos >= len(fields):
            raise XpmError(f"colour definition {line!r} has no colour after 'c'")
        suffix = fields[pos + 1] if pos + 1 < len(fields) else None
        rgb = text_to_rgb(fields[pos], suffix)
        if first_wins:
            palette.setdefault(key, rgb)
        else:
            palette[key] = rgb

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            pixels.append(TRANSPARENT_PIXEL if color == TRANSPARENT else color)
    return XpmImage(width, height, tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
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


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(_quoted_strings(strip_comments(text)))


def read_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)