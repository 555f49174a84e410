from importlib.metadata import (
    version as __version,
)
from typing import (
    Any,
    Optional,
)

from evm_modexp.abc import (
    ExitSucceed,
    PrecompileResult,
)
from evm_modexp.forks import (
    BerlinModexp,
    ByzantiumModexp,
)
from evm_modexp.typing import (
    BytesOrView,
)

# mainnet pricing since Berlin
Modexp = BerlinModexp


def execute(
    data: BytesOrView,
    gas_limit: Optional[int] = None,
    context: Any = None,
) -> PrecompileResult:
    return Modexp.execute(data, gas_limit, context)


__version__ = __version("evm-modexp")
