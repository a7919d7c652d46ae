import pytest

from fractol.printf import (
    format_base,
    format_int,
    format_pointer,
    format_string,
    printf,
)


@pytest.mark.parametrize("n", [0, 1, 255, 2147484671, 0x7FFE637541F0])
def test_format_base_hex_round_trip(n):
    assert int(format_base(n, 16, "0123456789abcdef"), 16) == n


@pytest.mark.parametrize("n", [0, 7, 10, 123456789])
def test_format_base_decimal_matches_str(n):
    assert format_base(n, 10, "0123456789") == str(n)


def test_format_base_rejects_negative():
    with pytest.raises(ValueError):
        format_base(-1, 10, "0123456789")


def test_format_pointer():
    assert format_pointer(0x7FFE637541F0) == "0x7ffe637541f0"
    assert format_pointer(0) == "0x0"


def test_format_int_extremes():
    assert format_int(-2147483648) == "-2147483648"
    assert format_int(-762534) == "-762534"


def test_format_int_wraps_to_32_bits():
    assert format_int(2**31) == "-2147483648"


def test_format_string_sentence_is_unchanged():
    text = "Let's try to printf a simple sentence.\n"
    assert format_string(text) == text


def test_format_string_signed_conversions():
    assert format_string("Length:[%d, %i]\n", 39, 39) == "Length:[39, 39]\n"
    assert format_string("Negative:[%d]\n", -762534) == "Negative:[-762534]\n"


def test_format_string_unsigned_and_hex():
    ui = 2147483647 + 1024
    assert format_string("%u", ui) == str(ui)
    assert format_string("%x", ui) == format(ui, "x")
    assert format_string("%X", ui) == format(ui, "X")


def test_format_string_unsigned_wraps_negative():
    assert format_string("%u", -1) == str(0xFFFFFFFF)


def test_format_string_char_string_pointer():
    assert format_string("Character:[%c]\n", "H") == "Character:[H]\n"
    assert format_string("Character:[%c]", ord("H")) == "Character:[H]"
    assert format_string("String:[%s]\n", "I am a string !") == "String:[I am a string !]\n"
    assert format_string("Address:[%p]\n", 0x7FFE637541F0) == "Address:[0x7ffe637541f0]\n"


def test_format_string_null_string():
    assert format_string("%s\n", None) == "(null)\n"


def test_format_string_percent_and_unknown():
    assert format_string("Percent:[%%]\n") == "Percent:[%]\n"
    assert format_string("%m\n") == "m\n"


def test_format_string_trailing_percent_is_nul():
    assert format_string("%") == "\0"


def test_format_string_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d")


def test_format_string_rejects_none_format():
    with pytest.raises(TypeError):
        format_string(None)


def test_printf_writes_and_counts(capsys):
    count = printf("Negative:[%d] %s\n", -762534, "ok")
    captured = capsys.readouterr()
    assert captured.out == "Negative:[-762534] ok\n"
    assert count == len(captured.out)