"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional, TextIO

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: Any) -> int:
    number = operator.index(value) & _UINT32
    return number - (1 << 32) if number >= 1 << 31 else number


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) & _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _conv_signed(value: Any) -> str:
    return str(_as_int32(value))


def _conv_unsigned(value: Any) -> str:
    return str(operator.index(value) & _UINT32)


def _conv_hex_lower(value: Any) -> str:
    return format(operator.index(value) & _UINT32, "x")


def _conv_hex_upper(value: Any) -> str:
    return format(operator.index(value) & _UINT32, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing '%' is dropped. Extra arguments are ignored.
    """
    arguments = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_argument(arguments, spec)))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered text to ``stream`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)