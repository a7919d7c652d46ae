"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF


def format_base(n: int, base: int, digits: str) -> str:
    """Render a non-negative integer in ``base`` using the symbols in ``digits``."""
    if n < 0:
        raise ValueError("format_base requires a non-negative integer")
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_pointer(n: int) -> str:
    """Render an address as ``0x`` followed by lowercase hexadecimal."""
    return "0x" + format_base(n, 16, _HEX_LOWER)


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >= (1 << 31) else n


def format_int(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return str(_to_int32(n))


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c expects a single character")
        return arg
    return chr(arg & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return spec
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        return format_pointer(0 if arg is None else arg)
    if spec in "di":
        return format_int(arg)
    if spec == "u":
        return format_base(arg & _UINT_MASK, 10, _DECIMAL)
    if spec == "x":
        return format_base(arg & _UINT_MASK, 16, _HEX_LOWER)
    return format_base(arg & _UINT_MASK, 16, _HEX_UPPER)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    An unknown conversion character is emitted as itself; a lone ``%`` at the
    end of the format produces a NUL character.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            out.append("\0")
            break
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)