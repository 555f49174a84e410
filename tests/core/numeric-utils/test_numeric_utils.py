from hypothesis import (
    given,
    strategies as st,
)
import pytest

from evm_modexp._utils.numeric import (
    get_highest_bit_index,
    int_to_minimal_big_endian,
    low_256_bits,
)
from evm_modexp.constants import (
    UINT_256_MAX,
)


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, 0),
        (1, 0),
        (2, 1),
        (3, 1),
        (255, 7),
        (256, 8),
        (UINT_256_MAX, 255),
    ),
)
def test_get_highest_bit_index(value, expected):
    actual = get_highest_bit_index(value)
    assert actual == expected


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, 0),
        (UINT_256_MAX, UINT_256_MAX),
        (UINT_256_MAX + 1, 0),
        ((1 << 300) | 5, 5),
    ),
)
def test_low_256_bits(value, expected):
    assert low_256_bits(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, b""),
        (1, b"\x01"),
        (255, b"\xff"),
        (256, b"\x01\x00"),
    ),
)
def test_int_to_minimal_big_endian(value, expected):
    assert int_to_minimal_big_endian(value) == expected


@given(st.integers(min_value=1, max_value=2**2048))
def test_int_to_minimal_big_endian_has_no_leading_zero(value):
    encoded = int_to_minimal_big_endian(value)
    assert encoded[0] != 0
    assert int.from_bytes(encoded, "big") == value


@pytest.mark.parametrize("function", (get_highest_bit_index, int_to_minimal_big_endian))
def test_negative_values_are_rejected(function):
    with pytest.raises(ValueError):
        function(-1)
