from typing import (
    Optional,
)

from eth_utils import (
    ValidationError,
)

from evm_modexp.constants import (
    UINT_64_MAX,
)
from evm_modexp.typing import (
    BytesOrView,
)


def validate_is_bytes_or_view(value: BytesOrView, title: str = "Value") -> None:
    if isinstance(value, (bytes, memoryview)):
        return
    raise ValidationError(f"{title} must be bytes or memoryview. Got {type(value)}")


def validate_uint64(value: int, title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be an integer: Got: {type(value)}")
    if value < 0:
        raise ValidationError(f"{title} cannot be negative: Got: {value}")
    if value > UINT_64_MAX:
        raise ValidationError(f"{title} exceeds maximum UINT64 size.  Got: {value}")


def validate_optional_gas_limit(value: Optional[int]) -> None:
    if value is not None:
        validate_uint64(value, title="Gas Limit")
