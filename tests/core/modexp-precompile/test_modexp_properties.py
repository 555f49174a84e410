from hypothesis import (
    given,
    settings,
    strategies as st,
)

import evm_modexp
from evm_modexp.constants import (
    GAS_MODEXP_MINIMUM,
    MAX_MODEXP_OPERAND_LENGTH,
    UINT_64_MAX,
)
from evm_modexp.forks import (
    compute_modexp_gas_fee_eip_2565,
)

operand_length_st = st.integers(min_value=0, max_value=MAX_MODEXP_OPERAND_LENGTH)


@settings(max_examples=200)
@given(
    base=st.binary(max_size=48),
    exponent=st.binary(max_size=48),
    modulus=st.binary(max_size=48),
)
def test_modexp_matches_pow(encode_modexp_input, base, exponent, modulus):
    data = encode_modexp_input(base, exponent, modulus)

    result = evm_modexp.execute(data, gas_limit=UINT_64_MAX)

    assert len(result.output) == len(modulus)
    assert result.gas_used >= GAS_MODEXP_MINIMUM

    modulus_value = int.from_bytes(modulus, "big")
    if modulus_value <= 1:
        expected = 0
    else:
        expected = pow(
            int.from_bytes(base, "big"),
            int.from_bytes(exponent, "big"),
            modulus_value,
        )
    assert int.from_bytes(result.output, "big") == expected


@given(
    base=st.binary(max_size=48),
    exponent=st.binary(max_size=48),
    modulus=st.binary(max_size=48),
)
def test_execute_is_deterministic(encode_modexp_input, base, exponent, modulus):
    data = encode_modexp_input(base, exponent, modulus)

    assert evm_modexp.execute(data, UINT_64_MAX) == evm_modexp.execute(data, UINT_64_MAX)


@given(
    base_length=operand_length_st,
    exponent_length=operand_length_st,
    modulus_length=operand_length_st,
    exponent=st.integers(min_value=0, max_value=2**300),
)
def test_gas_never_below_minimum(base_length, exponent_length, modulus_length, exponent):
    gas = compute_modexp_gas_fee_eip_2565(
        base_length, exponent_length, modulus_length, exponent
    )
    assert GAS_MODEXP_MINIMUM <= gas <= UINT_64_MAX


@given(
    lengths=st.lists(operand_length_st, min_size=2, max_size=2).map(sorted),
    other_length=operand_length_st,
    exponent_length=operand_length_st,
    exponent=st.integers(min_value=0, max_value=2**300),
)
def test_gas_is_monotonic_in_operand_lengths(
    lengths, other_length, exponent_length, exponent
):
    smaller, larger = lengths

    # growing the modulus
    assert compute_modexp_gas_fee_eip_2565(
        other_length, exponent_length, smaller, exponent
    ) <= compute_modexp_gas_fee_eip_2565(
        other_length, exponent_length, larger, exponent
    )
    # growing the base
    assert compute_modexp_gas_fee_eip_2565(
        smaller, exponent_length, other_length, exponent
    ) <= compute_modexp_gas_fee_eip_2565(
        larger, exponent_length, other_length, exponent
    )


@given(
    exponent_length=operand_length_st,
    exponent_byte=st.integers(min_value=0, max_value=255),
)
def test_empty_base_and_modulus_output(encode_modexp_input, exponent_length, exponent_byte):
    data = encode_modexp_input(b"", bytes([exponent_byte]) * exponent_length, b"")

    result = evm_modexp.execute(data)

    assert result.output == b""
    assert result.gas_used == GAS_MODEXP_MINIMUM
