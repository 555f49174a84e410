from eth_utils.toolz import (
    curry,
)

from evm_modexp.constants import (
    NULL_BYTE,
)


@curry
def zpad_left(value: bytes, to_size: int) -> bytes:
    return value.rjust(to_size, NULL_BYTE)
