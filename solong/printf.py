"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _hex(value: Any, upper: bool) -> str:
    return format(int(value) & _UINT32, "X" if upper else "x")


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _UINT64
    else:
        address = id(value)
    return "0x" + format(address, "x")


def _signed(value: Any) -> str:
    number = (int(value) + 2**31) % 2**32 - 2**31
    return str(number)


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT32)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "x": lambda value: _hex(value, upper=False),
    "X": lambda value: _hex(value, upper=True),
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
}


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def render_format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled from ``args``.

    An unknown conversion character produces nothing and uses no argument.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERTERS:
            pieces.append(_CONVERTERS[spec](_next_arg(values)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = render_format(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)