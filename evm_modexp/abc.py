from abc import (
    ABC,
    abstractmethod,
)
import enum
from typing import (
    Any,
    ClassVar,
    NamedTuple,
    Optional,
)

from eth_typing import (
    Address,
)

from evm_modexp.typing import (
    BytesOrView,
)


class ExitSucceed(enum.Enum):
    """
    The ways a successful precompile call can end.
    """

    Returned = "returned"


class PrecompileResult(NamedTuple):
    exit_status: ExitSucceed
    output: bytes
    gas_used: int


class PrecompileAPI(ABC):
    """
    A natively executed contract living at a fixed address.

    Implementations are stateless: every call to :meth:`execute` is
    independent, so a single class may serve concurrent callers.
    """

    address: ClassVar[Address]

    @classmethod
    @abstractmethod
    def execute(
        cls,
        data: BytesOrView,
        gas_limit: Optional[int] = None,
        context: Any = None,
    ) -> PrecompileResult:
        """
        Run the precompile over ``data``, charging no more than ``gas_limit``.

        ``context`` is the host's execution context (caller, callee, value).
        It is accepted so precompiles share one dispatch signature and is
        otherwise passed through untouched.

        Raise a :class:`~evm_modexp.exceptions.VMError` when the call fails.
        """
        ...
