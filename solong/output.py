"""Writing characters, strings, lines and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``number`` to ``stream``."""
    _target(stream).write(str(int(number)))