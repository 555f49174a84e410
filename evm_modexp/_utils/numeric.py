from evm_modexp.constants import (
    UINT_256_MAX,
)


def get_highest_bit_index(value: int) -> int:
    """
    Return the index of the most significant set bit, or ``0`` when no bit
    is set.
    """
    if value < 0:
        raise ValueError(f"Value cannot be negative: Got: {value}")
    return max(value.bit_length() - 1, 0)


def low_256_bits(value: int) -> int:
    return value & UINT_256_MAX


def int_to_minimal_big_endian(value: int) -> bytes:
    """
    Encode ``value`` using the fewest big endian bytes.  Zero encodes to the
    empty byte string.
    """
    if value < 0:
        raise ValueError(f"Value cannot be negative: Got: {value}")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")
