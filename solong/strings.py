"""String helpers: searching, comparing, bounded copying, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_TERMINATOR = "\0"


def _code_at(text: str, index: int) -> int:
    """Return the code of the character at ``index``, or 0 past the end."""
    return ord(text[index]) if index < len(text) else 0


def strchr(text: str | None, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the terminator character gives the length of ``text``.
    """
    if text is None:
        return None
    if char == _TERMINATOR:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str | None, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the terminator character gives the length of ``text``.
    """
    if text is None:
        return None
    if char == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str | None, second: str | None, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the codes of the first differing pair, 0 when
    the compared parts are equal.  The end of a string compares as code 0.
    """
    if (first is None and second is None) or count == 0:
        return 0
    if first is None:
        return -_code_at(second, 0)
    if second is None:
        return _code_at(first, 0)
    for index in range(count):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str | None, needle: str | None, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None.  An empty needle matches at 0.
    """
    if not needle:
        return None if haystack is None else 0
    if haystack is None:
        return None
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strlcpy(src: str | None, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``.  A negative size
    copies the whole string.
    """
    if src is None:
        return "", 0
    if size < 0:
        size = len(src) + 1
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str | None, src: str | None, size: int) -> tuple[str | None, int]:
    """Append ``src`` to ``dst`` so the result holds at most ``size - 1`` characters.

    Returns the resulting text and the length the result would have had
    without the limit: the length of ``dst`` (capped at ``size``) plus the
    length of ``src``.
    """
    if dst is None or src is None:
        return dst, 0
    dst_len = min(len(dst), max(size, 0))
    room = max(size - dst_len - 1, 0)
    return dst + src[:room], dst_len + len(src)


def substr(text: str | None, start: int, length: int) -> str | None:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string; a negative length takes the
    rest of the text.
    """
    if text is None:
        return None
    if start >= len(text):
        return ""
    if length < 0 or length > len(text) - start:
        length = len(text) - start
    return text[start:start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; None only when both are None."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strtrim(text: str | None, charset: str | None) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        return None
    return text.strip(charset)


def split(text: str | None, sep: str) -> list[str] | None:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def strmapi(text: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``func(index, char)`` applied to each character."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str] | None,
    func: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``func(index, char)`` on each character and store what it returns.

    A return of None leaves that character unchanged.
    """
    if chars is None or func is None:
        return
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement