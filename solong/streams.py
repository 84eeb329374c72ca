"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write a string as is."""
    stream.write(s)


def put_endl(s: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    stream.write(str(int(n)))