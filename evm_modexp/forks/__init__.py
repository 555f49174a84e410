from .berlin import (
    BerlinModexp,
    compute_modexp_gas_fee_eip_2565,
)
from .byzantium import (
    ByzantiumModexp,
    compute_modexp_gas_fee_eip_198,
)
