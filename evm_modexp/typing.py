from typing import (
    Callable,
    Union,
)

BytesOrView = Union[bytes, memoryview]

# (base_length, exponent_length, modulus_length, exponent) -> gas
GasCalculator = Callable[[int, int, int, int], int]
