"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a character code (taken modulo 256)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        text = c
    else:
        text = chr(int(c) & 0xFF)
    _target(stream).write(text)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` as it is."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``n``."""
    _target(stream).write(str(int(n)))