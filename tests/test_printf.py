import io

import pytest

from solong.printf import printf, render_format


def test_moves_message():
    assert render_format("moves = %d\n", 7) == "moves = 7\n"


def test_int_min():
    assert render_format("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert render_format("%i", 2**31) == "-2147483648"


def test_null_string():
    assert render_format("%s", None) == "(null)"


def test_string_passthrough():
    assert render_format("map path = %s\n", "maps/a.ber") == "map path = maps/a.ber\n"


def test_percent_literal():
    assert render_format("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 9, 16, 255, 4096, 123456789])
def test_hex_round_trip(n):
    lower = render_format("%x", n)
    assert int(lower, 16) == n
    assert render_format("%X", n) == lower.upper()


def test_upper_hex_value():
    assert render_format("%X", 255) == "FF"


def test_unsigned_of_negative():
    assert render_format("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 7, 1000, 2**31 + 5])
def test_unsigned_round_trip(n):
    assert int(render_format("%u", n)) == n


def test_null_pointer():
    assert render_format("%p", None) == "0x0"


def test_pointer_round_trip():
    out = render_format("%p", 0xDEAD)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0xDEAD


def test_char_from_int_and_str():
    assert render_format("%c%c", ord("Z"), "q") == "Zq"


def test_unknown_conversion_consumes_nothing():
    assert render_format("a%qb%d", 3) == "ab3"


def test_missing_argument():
    with pytest.raises(TypeError):
        render_format("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("len = %d\n", 12, stream=stream)
    assert stream.getvalue() == "len = 12\n"
    assert count == len(stream.getvalue())


def test_printf_null_string_count():
    stream = io.StringIO()
    assert printf("%s", None, stream=stream) == 6
    assert stream.getvalue() == "(null)"