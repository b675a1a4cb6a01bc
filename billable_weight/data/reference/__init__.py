"""Reference data: package limits and dimensional weight divisors."""

from .billable_weight import DimDivisor
from .package_limits import (
    MAX_WIDTH_IN,
    MAX_HEIGHT_IN,
    MAX_LENGTH_IN,
    MAX_WEIGHT_LBS,
)

__all__ = [
    "DimDivisor",
    "MAX_WIDTH_IN",
    "MAX_HEIGHT_IN",
    "MAX_LENGTH_IN",
    "MAX_WEIGHT_LBS",
]
