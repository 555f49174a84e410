from evm_modexp import (
    constants,
)
from evm_modexp._utils.numeric import (
    get_highest_bit_index,
)
from evm_modexp.precompiles.modexp import (
    Modexp,
    modexp,
)


def _compute_adjusted_exponent_length(exponent_length: int, exponent: int) -> int:
    head_size = constants.MODEXP_EXPONENT_HEAD_SIZE

    if exponent_length <= head_size:
        return get_highest_bit_index(exponent)
    else:
        # measured on the first 32 bytes of the exponent
        first_32_exponent = exponent >> (8 * (exponent_length - head_size))
        return (
            8 * (exponent_length - head_size)
            + get_highest_bit_index(first_32_exponent)
        )


def _compute_complexity(length: int) -> int:
    if length <= 64:
        return length**2
    elif length <= 1024:
        return length**2 // 4 + 96 * length - 3072
    else:
        return length**2 // 16 + 480 * length - 199680


def compute_modexp_gas_fee_eip_198(
    base_length: int,
    exponent_length: int,
    modulus_length: int,
    exponent: int,
) -> int:
    """
    Price a MODEXP call with the original EIP-198 rule.  There is no
    minimum charge.
    """
    complexity = _compute_complexity(max(base_length, modulus_length))
    adjusted_exponent_length = _compute_adjusted_exponent_length(
        exponent_length, exponent
    )

    return (
        complexity
        * max(adjusted_exponent_length, 1)
        // constants.GAS_MOD_EXP_QUADRATIC_DENOMINATOR
    )


class ByzantiumModexp(Modexp):
    gas_calculator = staticmethod(compute_modexp_gas_fee_eip_198)


byzantium_modexp = modexp(gas_calculator=compute_modexp_gas_fee_eip_198)
