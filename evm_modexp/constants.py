from eth_typing import (
    Address,
)

#
# Big Endian
#
NULL_BYTE = b"\x00"

#
# Integer bounds
#
UINT_64_MAX = 2**64 - 1
UINT_256_MAX = 2**256 - 1

#
# Modexp input layout (EIP-198)
#
MODEXP_LENGTH_FIELD_SIZE = 32
MODEXP_HEADER_SIZE = 3 * MODEXP_LENGTH_FIELD_SIZE

# Upper bound on each declared operand length.  Keeps the gas arithmetic
# inside 64 bits and matches the EVM's 1024 frame limit.
MAX_MODEXP_OPERAND_LENGTH = 1024

#
# Modexp gas
#
GAS_MODEXP_MINIMUM = 200
GAS_MOD_EXP_QUADRATIC_DENOMINATOR = 20
GAS_MOD_EXP_QUADRATIC_DENOMINATOR_EIP_2565 = 3

# the exponent bytes past this many contribute 8 iterations each
MODEXP_EXPONENT_HEAD_SIZE = 32

#
# Addresses
#
MODEXP_PRECOMPILE_ADDRESS = Address(NULL_BYTE * 19 + b"\x05")
