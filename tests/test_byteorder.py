import pytest

from gfcgame.byteorder import swap16, swap32, swap64, swap_be, swap_le

SAMPLES_16 = [0, 1, 0x00FF, 0xFF00, 0xABCD, 0xFFFF]
SAMPLES_32 = [0, 1, 0xDEADBEEF, 0x12345678, 0xFFFFFFFF]
SAMPLES_64 = [0, 1, 0x0123456789ABCDEF, 0xFFFFFFFFFFFFFFFF]


def test_swap16_worked_example():
    assert swap16(0x1234) == 0x3412


def test_swap32_worked_example():
    assert swap32(0x12345678) == 0x78563412


@pytest.mark.parametrize("value", SAMPLES_16)
def test_swap16_is_involution(value):
    assert swap16(swap16(value)) == value


@pytest.mark.parametrize("value", SAMPLES_32)
def test_swap32_is_involution(value):
    assert swap32(swap32(value)) == value


@pytest.mark.parametrize("value", SAMPLES_64)
def test_swap64_is_involution(value):
    assert swap64(swap64(value)) == value


@pytest.mark.parametrize("value", SAMPLES_32)
def test_swap32_halves_relate_to_swap16(value):
    swapped = swap32(value)
    assert swapped & 0xFFFF == swap16(value >> 16)
    assert swapped >> 16 == swap16(value & 0xFFFF)


@pytest.mark.parametrize("value", SAMPLES_64)
def test_swap64_halves_relate_to_swap32(value):
    swapped = swap64(value)
    assert swapped & 0xFFFFFFFF == swap32(value >> 32)
    assert swapped >> 32 == swap32(value & 0xFFFFFFFF)


def test_byte_palindromes_unchanged():
    assert swap16(0x7777) == 0x7777
    assert swap32(0xAABBBBAA) == 0xAABBBBAA


@pytest.mark.parametrize(
    "bits,swap,value",
    [(16, swap16, 0xABCD), (32, swap32, 0x12345678), (64, swap64, 0x0123456789ABCDEF)],
)
def test_exactly_one_of_le_be_is_identity(bits, swap, value):
    le = swap_le(value, bits)
    be = swap_be(value, bits)
    assert {le, be} == {value, swap(value)}


@pytest.mark.parametrize("func", [swap16, swap32, swap64])
def test_negative_value_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


def test_overflow_rejected():
    with pytest.raises(ValueError):
        swap16(0x10000)
    with pytest.raises(ValueError):
        swap32(1 << 32)
    with pytest.raises(ValueError):
        swap64(1 << 64)


@pytest.mark.parametrize("func", [swap_le, swap_be])
def test_unsupported_width_rejected(func):
    with pytest.raises(ValueError):
        func(1, 24)


@pytest.mark.parametrize("func", [swap_le, swap_be])
def test_le_be_validate_range(func):
    with pytest.raises(ValueError):
        func(0x10000, 16)