import pytest

from fractol.parse import (
    ParseError,
    is_space,
    parse_float,
    parse_julia,
    validate_julia_params,
)


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "", "  "])
def test_is_space_rejects_others(c):
    assert is_space(c) is False


@pytest.mark.parametrize("text", ["-0.7", "0.27015", "+1", "5.", ".5", "42"])
def test_validate_accepts_numbers(text):
    assert validate_julia_params(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", ".", "1.2.3", "abc", " 1", "1e5", "--1"])
def test_validate_rejects_non_numbers(text):
    assert validate_julia_params(text) is False


@pytest.mark.parametrize("text", ["0.27015", "-0.7", "12", "+3.25", "0.0", "-100.125"])
def test_parse_float_agrees_with_float(text):
    assert parse_float(text) == pytest.approx(float(text))


def test_parse_float_skips_whitespace_and_stops_at_garbage():
    assert parse_float(" \t-12.5xyz") == pytest.approx(-12.5)


def test_parse_float_without_digits_is_zero():
    assert parse_float("abc") == 0.0
    assert parse_float("") == 0.0


def test_parse_julia_returns_complex_constant():
    c = parse_julia("-0.7", "0.27015")
    assert c.real == pytest.approx(float("-0.7"))
    assert c.imag == pytest.approx(float("0.27015"))


@pytest.mark.parametrize("real_text, imag_text", [("abc", "1"), ("1", "1.2.3"), ("", "")])
def test_parse_julia_rejects_invalid(real_text, imag_text):
    with pytest.raises(ParseError, match="Invalid Julia parameters"):
        parse_julia(real_text, imag_text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_julia("x", "y")