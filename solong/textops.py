"""String building helpers: splitting, trimming, slicing and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional


def _single_char(c: str, what: str) -> None:
    if len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "separator")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (s1 or "") + (s2 or "")


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for every item of ``s``, in place.

    When ``func`` returns a value other than None, it replaces the item.
    """
    for index, char in enumerate(s):
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the new buffer contents and the full length of ``src``, so a
    result length not below ``size`` signals truncation. A size of zero
    leaves ``dst`` untouched.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the new buffer contents and the length the full result would
    have had. When ``dst`` already fills the buffer nothing is appended and
    the returned length is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)