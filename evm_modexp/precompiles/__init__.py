from .modexp import (
    Modexp,
    modexp,
)
