class ModexpError(Exception):
    """
    Base class for all evm-modexp errors.
    """


class VMError(ModexpError):
    """
    Base class for errors raised while executing the precompile.  Every
    ``VMError`` is terminal for the call that raised it.
    """

    burns_gas = True
    erases_return_data = True


class InvalidModexpInput(VMError):
    """
    Raised when the input buffer cannot be decoded into modexp operands.
    """


class TooShort(InvalidModexpInput):
    """
    Raised when the input does not contain the full 96 byte length header.
    """


class LengthTooLarge(InvalidModexpInput):
    """
    Raised when one of the declared operand lengths exceeds
    :data:`~evm_modexp.constants.MAX_MODEXP_OPERAND_LENGTH`.
    """

    def __init__(self, operand: str, length: int) -> None:
        super().__init__(
            f"Unreasonably large {operand} length: {length}"
        )
        self.operand = operand
        self.length = length


class InsufficientInput(InvalidModexpInput):
    """
    Raised when the declared operand lengths run past the end of the input.
    """


class MissingGasLimit(VMError):
    """
    Raised when a priced call is made without a gas limit.
    """


class OutOfGas(VMError):
    """
    Raised when the price of the call exceeds the supplied gas limit.
    """


class UnexpectedOutputSize(VMError):
    """
    Raised when the encoded result is longer than the modulus.  This can only
    happen through a bug in the exponentiation step.
    """

    burns_gas = False
