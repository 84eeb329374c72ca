import io

import pytest

from solong.printf import format_printf, print_formatted


def test_plain_text_unchanged():
    assert format_printf("move -> done\n") == "move -> done\n"


def test_decimal_round_trip():
    for n in (0, 7, 42, -42, 2147483647):
        assert int(format_printf("%d", n)) == n
        assert format_printf("%i", n) == format_printf("%d", n)


def test_int_min_pinned():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**32 + 5) == format_printf("%d", 5)


def test_unsigned_of_negative_is_modular():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_round_trip_and_case():
    for n in (0, 1, 255, 0xDEADBEEF):
        lower = format_printf("%x", n)
        upper = format_printf("%X", n)
        assert int(lower, 16) == n
        assert upper == lower.upper()
        assert lower == lower.lower()


def test_null_string_and_nil_pointer():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


def test_pointer_prefix_and_value():
    text = format_printf("%p", 0x7FFF1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFF1234


def test_char_from_int_and_str():
    assert format_printf("%c%c", "a", ord("b")) == "ab"


def test_percent_literal_consumes_no_argument():
    assert format_printf("%%%d", 3) == "%" + format_printf("%d", 3)


def test_unknown_conversion_dropped():
    assert format_printf("a%qb") == "ab"


def test_trailing_percent_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_string_argument_type_checked():
    with pytest.raises(TypeError):
        format_printf("%s", 12)


def test_print_formatted_writes_and_counts():
    stream = io.StringIO()
    count = print_formatted("move -> %d\n", 12, stream=stream)
    assert stream.getvalue() == format_printf("move -> %d\n", 12)
    assert count == len(stream.getvalue())


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("You WIN with %d moves!!\n", 9)
    out = capsys.readouterr().out
    assert out == format_printf("You WIN with %d moves!!\n", 9)
    assert count == len(out)