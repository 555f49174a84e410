import math

from evm_modexp import (
    constants,
)
from evm_modexp.precompiles.modexp import (
    Modexp,
    calculate_iteration_count,
    modexp,
)


def _calculate_multiplication_complexity(base_length: int, modulus_length: int) -> int:
    max_length = max(base_length, modulus_length)
    words = math.ceil(max_length / 8)
    return words**2


def compute_modexp_gas_fee_eip_2565(
    base_length: int,
    exponent_length: int,
    modulus_length: int,
    exponent: int,
) -> int:
    """
    Price a MODEXP call with the EIP-2565 rule.

    Lengths are bounded by
    :data:`~evm_modexp.constants.MAX_MODEXP_OPERAND_LENGTH`, which keeps
    every intermediate value below ``2**64``.  A call with an empty base and
    an empty modulus costs exactly the minimum and ``exponent`` is ignored.
    """
    if base_length == 0 and modulus_length == 0:
        return constants.GAS_MODEXP_MINIMUM

    multiplication_complexity = _calculate_multiplication_complexity(
        base_length, modulus_length
    )
    iteration_count = calculate_iteration_count(exponent_length, exponent)

    return max(
        constants.GAS_MODEXP_MINIMUM,
        multiplication_complexity
        * iteration_count
        // constants.GAS_MOD_EXP_QUADRATIC_DENOMINATOR_EIP_2565,
    )


class BerlinModexp(Modexp):
    gas_calculator = staticmethod(compute_modexp_gas_fee_eip_2565)


berlin_modexp = modexp(gas_calculator=compute_modexp_gas_fee_eip_2565)
