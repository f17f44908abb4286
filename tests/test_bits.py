import struct

import pytest

from expokit.bits import float_bits, main, to_binary


@pytest.mark.parametrize("value", [12.5, 0.0, -1.25, 3.141592653589793, 1e300])
def test_float_bits_round_trip(value):
    bits = float_bits(value)
    assert 0 <= bits < 2**64
    assert struct.unpack(">d", bits.to_bytes(8, "big"))[0] == value


def test_float_bits_zero():
    assert float_bits(0.0) == 0


def test_negative_float_sets_sign_bit():
    assert float_bits(-12.5) >> 63 == 1
    assert float_bits(12.5) >> 63 == 0


def test_binary_and_hex_agree():
    assert to_binary(0xFF, 8) == "11111111"
    assert to_binary(0b1111, 4) == to_binary(0xF, 4)


@pytest.mark.parametrize("value, width", [(233, 32), (0, 8), (12345, 64)])
def test_to_binary_round_trip(value, width):
    text = to_binary(value, width)
    assert len(text) == width
    assert int(text, 2) == value


def test_to_binary_negative_raises():
    with pytest.raises(ValueError):
        to_binary(-1, 8)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines[0]) == 64
    assert int(lines[0], 2) == float_bits(12.5)
    assert int(lines[1]) == float_bits(12.5)
    assert int(lines[2], 2) == 233