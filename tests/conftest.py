from eth_utils import (
    int_to_big_endian,
    setup_DEBUG2_logging,
)
import pytest

from evm_modexp._utils.padding import (
    zpad_left,
)

#
#  Setup DEBUG2 level logging.
#
# This needs to be done before the other imports
setup_DEBUG2_logging()

pad32 = zpad_left(to_size=32)


def _encode_length(value):
    return pad32(int_to_big_endian(value))


def _encode_modexp_input(base, exponent, modulus, *, lengths=None):
    if lengths is None:
        lengths = (len(base), len(exponent), len(modulus))
    header = b"".join(_encode_length(length) for length in lengths)
    return header + base + exponent + modulus


@pytest.fixture(scope="session")
def encode_modexp_input():
    return _encode_modexp_input
