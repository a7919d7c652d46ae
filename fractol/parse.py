"""Validation and parsing of the numeric command-line parameters."""

from __future__ import annotations

USAGE_MESSAGE = (
    "Please enter \n\t\"./fractol mandelbrot\" or \n\t\"./fractol julia "
    "<value_1> <value_2>\"\n"
)

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when a command-line parameter is not a valid number."""


def is_space(c: str) -> bool:
    """Return True if ``c`` is a single whitespace character."""
    return len(c) == 1 and c in _WHITESPACE


def validate_julia_params(text: str) -> bool:
    """Check that ``text`` is an optional sign, digits and at most one dot.

    At least one digit is required.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    has_digit = False
    has_decimal = False
    for ch in body:
        if ch in _DIGITS:
            has_digit = True
        elif ch == "." and not has_decimal:
            has_decimal = True
        else:
            return False
    return has_digit


def parse_float(text: str) -> float:
    """Parse the leading decimal number of ``text``.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first character that is not part of the number. Returns 0.0 when no
    digits are found.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1.0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1
    result = 0.0
    while pos < length and text[pos] in _DIGITS:
        result = result * 10 + int(text[pos])
        pos += 1
    if pos < length and text[pos] == ".":
        pos += 1
        factor = 0.1
        while pos < length and text[pos] in _DIGITS:
            result += int(text[pos]) * factor
            factor *= 0.1
            pos += 1
    return result * sign


def parse_julia(real_text: str, imag_text: str) -> complex:
    """Validate and parse the two Julia set parameters into a complex constant."""
    if not validate_julia_params(real_text) or not validate_julia_params(imag_text):
        raise ParseError("Error: Invalid Julia parameters.\n" + USAGE_MESSAGE)
    return complex(parse_float(real_text), parse_float(imag_text))