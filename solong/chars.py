"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_MAX_SCANNED = 20


def _code(c: int | str) -> int:
    """Return the integer code of a character given as a one-letter string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _wrap_int(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other characters come back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other characters come back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are skipped, digits are read until the
    first non-digit.  The result wraps like a 32-bit int.  When more than
    twenty characters were consumed, -1 is returned; ``None`` gives 0.
    """
    if text is None:
        return 0
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and text[pos] in _DIGITS:
        value = _wrap_int(value * 10 + int(text[pos]))
        pos += 1
    if pos > _MAX_SCANNED:
        return -1
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(int(n))