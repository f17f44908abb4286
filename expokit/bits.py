"""Views of numbers as raw bits."""

from __future__ import annotations

import struct


def float_bits(value: float) -> int:
    """Return the IEEE 754 double-precision bit pattern of a float."""
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def to_binary(value: int, width: int) -> str:
    """Format a non-negative integer in binary, zero-padded to width."""
    if value < 0:
        raise ValueError("value must be non-negative")
    return format(value, f"0{width}b")


def main(argv=None) -> int:
    """Print the bits of a float, an integer and that integer's address."""
    bits = float_bits(12.5)
    print(to_binary(bits, 64))
    print(bits)

    number = 233
    address = id(number)
    print(to_binary(number, 32))
    print(hex(address))
    print(to_binary(address, 64))
    return 0