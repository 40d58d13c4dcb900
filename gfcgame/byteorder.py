"""Byte-order swapping helpers for 16, 32 and 64 bit unsigned values."""

from __future__ import annotations

import sys

_LITTLE_ENDIAN = sys.byteorder == "little"


def _swap(value: int, bits: int) -> int:
    if bits not in (16, 32, 64):
        raise ValueError(f"unsupported width: {bits} bits")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value {value} does not fit in {bits} unsigned bits")
    return int.from_bytes(value.to_bytes(bits // 8, "little"), "big")


def swap16(value: int) -> int:
    """Reverse the two bytes of a 16-bit unsigned value."""
    return _swap(value, 16)


def swap32(value: int) -> int:
    """Reverse the four bytes of a 32-bit unsigned value."""
    return _swap(value, 32)


def swap64(value: int) -> int:
    """Reverse the eight bytes of a 64-bit unsigned value."""
    return _swap(value, 64)


def swap_le(value: int, bits: int) -> int:
    """Convert a little-endian value of the given width to native order."""
    if _LITTLE_ENDIAN:
        _swap(value, bits)  # validate only
        return value
    return _swap(value, bits)


def swap_be(value: int, bits: int) -> int:
    """Convert a big-endian value of the given width to native order."""
    if _LITTLE_ENDIAN:
        return _swap(value, bits)
    _swap(value, bits)
    return value