"""String and character helpers with C-library semantics."""

from __future__ import annotations

from itertools import islice, zip_longest

_LLONG_MAX = (1 << 63) - 1
_ULLONG_MASK = (1 << 64) - 1
_UINT_MASK = 0xFFFFFFFF
_ATOI_SPACE = frozenset(" \t\n\v\f\r")


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >= (1 << 31) else n


def _code(c: int | str) -> int:
    """Return the character code of ``c``, which is an int or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, returning a signed 32-bit result.

    Leading whitespace is skipped and one sign is accepted. If the value grows
    beyond the range of a signed 64-bit integer, -1 is returned for positive
    input and 0 for negative input.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    n = 0
    while pos < length and "0" <= text[pos] <= "9":
        if n > _LLONG_MAX:
            return -1 if sign == 1 else 0
        n = (n * 10 + int(text[pos])) & _ULLONG_MASK
        pos += 1
    return _to_int32((sign * n) & _ULLONG_MASK)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, n: int) -> int:
    """Return the index of ``needle`` within the first ``n`` characters of
    ``haystack``, or -1 when it does not occur there.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if not needle:
        return 0
    return haystack[:n].find(needle)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when no difference is found.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    for a, b in islice(zip_longest(s1, s2, fillvalue="\0"), n):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def toupper(c: int | str) -> int | str:
    """Convert an ASCII lowercase letter to uppercase; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Convert an ASCII uppercase letter to lowercase; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code