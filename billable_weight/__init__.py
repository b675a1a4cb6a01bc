"""
Billable Weight

Validated package value objects and the billable weight calculation.

Structure:
    - values.py:                     PackageDimensions, Weight
    - calculator.py:                 BillableWeightCalculator
    - calculate_billable_weights.py: DataFrame batch calculation
    - data/:                         Package limits, DimDivisor, CSV loader
    - scripts/:                      Command-line calculator
"""

from .errors import InvalidArgument
from .data import DimDivisor, load_packages
from .values import PackageDimensions, Weight
from .calculator import BillableWeightCalculator, round_half_away_from_zero
from .calculate_billable_weights import calculate_billable_weights
from .version import VERSION

__all__ = [
    # Value objects
    "PackageDimensions",
    "Weight",
    "DimDivisor",
    # Calculation
    "BillableWeightCalculator",
    "round_half_away_from_zero",
    "calculate_billable_weights",
    # Data
    "load_packages",
    # Errors
    "InvalidArgument",
    "VERSION",
]
