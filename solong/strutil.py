"""String helpers with the bounded-copy and search semantics of classic C string routines."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _code_at(s: str | bytes, index: int) -> int:
    """Return the code at ``index``, or 0 past the end (the string terminator)."""
    if index >= len(s):
        return 0
    value = s[index]
    return value if isinstance(value, int) else ord(value)


def _non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    separator = _char(sep)
    return [word for word in s.split(separator) if word]


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the end of the string, ``len(s)``.
    """
    target = _char(c)
    index = s.find(target)
    if index == -1:
        return len(s) if target == "\0" else None
    return index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for ``"\\0"`` finds the end of the string, ``len(s)``.
    """
    target = _char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index == -1 else index


def striteri(s: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of the mutable sequence ``s`` with ``func(index, char)``."""
    for index, ch in enumerate(list(s)):
        s[index] = func(index, ch)


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have had.
    When ``size`` is not larger than ``dst`` nothing is appended and the length
    reported is ``len(src) + size``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copy (at most ``size - 1`` characters) and ``len(src)``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal character codes, 0 when the
    compared parts are equal. The end of a string counts as code 0.
    """
    _non_negative(n, "n")
    for index in range(n):
        ca = _code_at(a, index)
        cb = _code_at(b, index)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0; a missing one gives None.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]