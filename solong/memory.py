"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

from collections.abc import Sequence

SIZE_MAX = (1 << 64) - 1


def memset(buffer: bytearray | None, value: int, count: int) -> bytearray | None:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    if buffer is None:
        return None
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray | None, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    if buffer is None:
        return
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A zero count or size gives a one-byte buffer.  A product that would not
    fit in a 64-bit size raises MemoryError.
    """
    if count == 0 or size == 0:
        return bytearray(1)
    if count > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def memchr(data: Sequence[int] | None, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    if data is None:
        return None
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(data[:count]) if byte == target),
        None,
    )


def memcmp(
    first: Sequence[int] | None, second: Sequence[int] | None, count: int
) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair, or 0."""
    if first is None and second is None:
        return 0
    if first is None:
        return -second[0]
    if second is None:
        return first[0]
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(
    dest: bytearray | None, src: Sequence[int] | None, count: int
) -> bytearray | None:
    """Copy ``count`` bytes of ``src`` into the start of ``dest`` and return ``dest``."""
    if dest is None or src is None:
        return dest
    chunk = bytes(src[:count])
    if len(chunk) < count or len(dest) < count:
        raise IndexError("copy runs past the end of a buffer")
    dest[:count] = chunk
    return dest


def memmove(buffer: bytearray | None, dest: int, src: int, count: int) -> bytearray | None:
    """Move ``count`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if buffer is None:
        return None
    if min(dest, src) < 0 or max(dest, src) + count > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    if dest != src:
        buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer