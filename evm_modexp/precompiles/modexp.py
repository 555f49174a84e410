from typing import (
    Any,
    NamedTuple,
    Optional,
    Tuple,
)

from eth_utils import (
    big_endian_to_int,
    get_extended_debug_logger,
)
from eth_utils.toolz import (
    curry,
)

from evm_modexp import (
    constants,
)
from evm_modexp._utils.numeric import (
    get_highest_bit_index,
    int_to_minimal_big_endian,
    low_256_bits,
)
from evm_modexp._utils.padding import (
    zpad_left,
)
from evm_modexp.abc import (
    ExitSucceed,
    PrecompileAPI,
    PrecompileResult,
)
from evm_modexp.exceptions import (
    InsufficientInput,
    LengthTooLarge,
    MissingGasLimit,
    OutOfGas,
    TooShort,
    UnexpectedOutputSize,
)
from evm_modexp.typing import (
    BytesOrView,
    GasCalculator,
)
from evm_modexp.validation import (
    validate_is_bytes_or_view,
    validate_optional_gas_limit,
)

logger = get_extended_debug_logger("evm_modexp.precompiles.Modexp")


class ModexpInput(NamedTuple):
    """
    The decoded call data.  Operands are views into the caller's buffer and
    are only converted to integers on access.
    """

    base_length: int
    exponent_length: int
    modulus_length: int
    base_bytes: memoryview
    exponent_bytes: memoryview
    modulus_bytes: memoryview

    @property
    def base(self) -> int:
        return big_endian_to_int(self.base_bytes)

    @property
    def exponent(self) -> int:
        return big_endian_to_int(self.exponent_bytes)

    @property
    def modulus(self) -> int:
        return big_endian_to_int(self.modulus_bytes)

    @property
    def is_trivial(self) -> bool:
        # no base and no modulus: the output is empty whatever the exponent
        return self.base_length == 0 and self.modulus_length == 0


#
# Input parsing
#
def _read_length(data: BytesOrView, index: int, operand: str) -> int:
    start = index * constants.MODEXP_LENGTH_FIELD_SIZE
    end = start + constants.MODEXP_LENGTH_FIELD_SIZE
    length = big_endian_to_int(data[start:end])

    if length > constants.MAX_MODEXP_OPERAND_LENGTH:
        raise LengthTooLarge(operand, length)
    return length


def extract_lengths(data: BytesOrView) -> Tuple[int, int, int]:
    """
    Decode the ``(base_length, exponent_length, modulus_length)`` header,
    rejecting any length above
    :data:`~evm_modexp.constants.MAX_MODEXP_OPERAND_LENGTH`.
    """
    if len(data) < constants.MODEXP_HEADER_SIZE:
        raise TooShort(
            f"Input must contain at least {constants.MODEXP_HEADER_SIZE} bytes: "
            f"Got {len(data)}"
        )

    base_length = _read_length(data, 0, "base")
    exponent_length = _read_length(data, 1, "exponent")
    modulus_length = _read_length(data, 2, "modulus")

    return base_length, exponent_length, modulus_length


def parse_modexp_input(data: BytesOrView) -> ModexpInput:
    base_length, exponent_length, modulus_length = extract_lengths(data)

    base_end_idx = constants.MODEXP_HEADER_SIZE + base_length
    exponent_end_idx = base_end_idx + exponent_length
    modulus_end_idx = exponent_end_idx + modulus_length

    if len(data) < modulus_end_idx:
        raise InsufficientInput(
            f"Insufficient input size: need {modulus_end_idx} bytes, got {len(data)}"
        )

    view = memoryview(data)
    return ModexpInput(
        base_length,
        exponent_length,
        modulus_length,
        view[constants.MODEXP_HEADER_SIZE:base_end_idx],
        view[base_end_idx:exponent_end_idx],
        view[exponent_end_idx:modulus_end_idx],
    )


#
# Pricing
#
def calculate_iteration_count(exponent_length: int, exponent: int) -> int:
    """
    Approximate the number of square-and-multiply rounds for ``exponent``.

    Only the low 256 bits of a long exponent are measured; every byte past
    the first 32 adds a flat 8 rounds.  When those low bits are all zero the
    count is one less than the flat part.
    """
    head_size = constants.MODEXP_EXPONENT_HEAD_SIZE

    if exponent_length <= head_size:
        iteration_count = get_highest_bit_index(exponent)
    else:
        iteration_count = (
            8 * (exponent_length - head_size)
            + low_256_bits(exponent).bit_length()
            - 1
        )

    return max(iteration_count, 1)


def price_modexp(modexp_input: ModexpInput, gas_calculator: GasCalculator) -> int:
    if modexp_input.is_trivial:
        # the exponent is never read, however long it claims to be
        return gas_calculator(0, 0, 0, 0)

    return gas_calculator(
        modexp_input.base_length,
        modexp_input.exponent_length,
        modexp_input.modulus_length,
        modexp_input.exponent,
    )


#
# Exponentiation and output
#
def compute_modexp(base: int, exponent: int, modulus: int) -> int:
    if modulus <= 1:
        return 0
    return pow(base, exponent, modulus)


def format_modexp_output(result: int, modulus_length: int) -> bytes:
    """
    Left pad ``result`` with zero bytes to exactly ``modulus_length`` bytes.
    """
    result_bytes = int_to_minimal_big_endian(result)

    if len(result_bytes) > modulus_length:
        raise UnexpectedOutputSize(
            f"Modexp result is {len(result_bytes)} bytes long, "
            f"modulus is only {modulus_length}"
        )
    return zpad_left(result_bytes, modulus_length)


def apply_modexp(modexp_input: ModexpInput) -> bytes:
    if modexp_input.is_trivial:
        return b""

    result = compute_modexp(
        modexp_input.base,
        modexp_input.exponent,
        modexp_input.modulus,
    )
    return format_modexp_output(result, modexp_input.modulus_length)


#
# Call surfaces
#
def execute_modexp(
    data: BytesOrView,
    gas_limit: Optional[int] = None,
    context: Any = None,
    *,
    gas_calculator: GasCalculator = None,
) -> PrecompileResult:
    """
    Parse ``data``, charge for it and compute ``base ** exponent % modulus``.

    The price is checked against ``gas_limit`` before any exponentiation
    happens.  A gas limit may only be omitted for the trivial call with an
    empty base and an empty modulus.  ``context`` is ignored.

    Without a ``gas_calculator`` the call is priced with the EIP-2565 rule.
    """
    if gas_calculator is None:
        from evm_modexp.forks.berlin import compute_modexp_gas_fee_eip_2565
        gas_calculator = compute_modexp_gas_fee_eip_2565

    validate_is_bytes_or_view(data, title="Modexp Input")
    validate_optional_gas_limit(gas_limit)

    modexp_input = parse_modexp_input(data)
    gas_cost = price_modexp(modexp_input, gas_calculator)

    if gas_limit is None:
        if not modexp_input.is_trivial:
            raise MissingGasLimit("A gas limit is required to price MODEXP")
    elif gas_cost > gas_limit:
        raise OutOfGas(
            f"Out of gas: Needed {gas_cost} - Remaining {gas_limit} - "
            "Reason: MODEXP Precompile"
        )

    output = apply_modexp(modexp_input)

    if logger.show_debug2:
        logger.debug2(
            "MODEXP: base=%d exponent=%d modulus=%d bytes -> %d gas",
            modexp_input.base_length,
            modexp_input.exponent_length,
            modexp_input.modulus_length,
            gas_cost,
        )

    return PrecompileResult(ExitSucceed.Returned, output, gas_cost)


@curry
def modexp(computation: Any, gas_calculator: GasCalculator) -> Any:
    """
    Run MODEXP against a py-evm style computation: read ``computation.msg.data``,
    charge through ``computation.consume_gas`` and store the padded result
    in ``computation.output``.
    """
    modexp_input = parse_modexp_input(computation.msg.data)
    gas_fee = price_modexp(modexp_input, gas_calculator)

    computation.consume_gas(gas_fee, reason="MODEXP Precompile")

    computation.output = apply_modexp(modexp_input)
    return computation


class Modexp(PrecompileAPI):
    """
    The MODEXP precompile at address ``0x05``.  Subclasses choose the
    pricing rule by setting :attr:`gas_calculator`.
    """

    address = constants.MODEXP_PRECOMPILE_ADDRESS
    gas_calculator: GasCalculator = None

    @classmethod
    def execute(
        cls,
        data: BytesOrView,
        gas_limit: Optional[int] = None,
        context: Any = None,
    ) -> PrecompileResult:
        if cls.gas_calculator is None:
            raise AttributeError(
                f"No `gas_calculator` has been set for {cls.__name__}"
            )
        return execute_modexp(
            data,
            gas_limit,
            context,
            gas_calculator=cls.gas_calculator,
        )
