"""Character classification and C-style string helpers."""

from __future__ import annotations

_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def atoi(text: str) -> int:
    """Parse a leading integer the way the classic atoi helper does.

    Leading whitespace is skipped, then a run of signs where each '-'
    flips the sign; two signs in a row give 0. Parsing stops at the first
    non-digit, and a string with no digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        if pos + 1 < length and text[pos + 1] in "+-":
            return 0
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(c, code)


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(c, code)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders them.

    A string that ends early compares as if followed by a NUL character.
    """
    for pos in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly in ``haystack[:length]``.

    An empty needle matches at 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return None if index < 0 else index


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; NUL matches the end of the string."""
    index = s.find(c)
    if index >= 0:
        return index
    if c == "\0":
        return len(s)
    return None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; NUL matches the end of the string."""
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index