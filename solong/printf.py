"""Formatted output supporting the %d %i %u %c %s %x %X %p and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

_UINT32 = 1 << 32
_INT32_MAX = (1 << 31) - 1
_UINTPTR = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a missing format, an unknown conversion or a missing argument.

    ``partial`` holds the text produced before the problem was found; for an
    unknown conversion it ends with the offending ``%`` sequence.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def _signed32(value: Any) -> int:
    number = int(value) % _UINT32
    return number - _UINT32 if number > _INT32_MAX else number


def _unsigned32(value: Any) -> int:
    return int(value) % _UINT32


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _as_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _as_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(int(value) & _UINTPTR, "x")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": lambda value: str(_unsigned32(value)),
    "c": _as_char,
    "s": _as_string,
    "x": lambda value: format(_unsigned32(value), "x"),
    "X": lambda value: format(_unsigned32(value), "X"),
    "p": _as_pointer,
}


def render_format(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    if fmt is None:
        raise FormatError("format string is missing")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            raise FormatError(
                f"unsupported conversion {'%' + spec!r}",
                "".join(pieces) + "%" + spec,
            )
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(
                f"missing argument for {'%' + spec!r}", "".join(pieces)
            ) from None
        pieces.append(converter(value))
    return "".join(pieces)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    On a format error the text produced so far is still written before the
    error propagates.
    """
    try:
        text = render_format(fmt, *args)
    except FormatError as error:
        sys.stdout.write(error.partial)
        raise
    sys.stdout.write(text)
    return len(text)