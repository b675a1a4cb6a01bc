"""
Billable Weight Calculator

Billable weight is the greater of actual weight and dimensional weight:

    dim_weight      = round(width * height * length / divisor)
    billable_weight = max(weight, dim_weight)

Rounding is half away from zero and done in integer arithmetic, so the
result never depends on float representation of the ratio.

USAGE
-----
    from billable_weight import (
        BillableWeightCalculator, DimDivisor, PackageDimensions, Weight,
    )

    BillableWeightCalculator().calculate(
        PackageDimensions(width=9, height=7, length=15),
        Weight(6),
        DimDivisor.FEDEX,
    )  # -> 7
"""

from .data.reference import DimDivisor
from .errors import InvalidArgument
from .values import PackageDimensions, Weight


def round_half_away_from_zero(numerator: int, denominator: int) -> int:
    """
    Round numerator / denominator to the nearest integer, ties away from zero.

    Both arguments must be positive integers. 5/2 -> 3, 7/2 -> 4, 945/139 -> 7.
    """
    return (2 * numerator + denominator) // (2 * denominator)


class BillableWeightCalculator:
    """Stateless billable weight calculation over validated value objects."""

    def dimensional_weight(
        self,
        dimensions: PackageDimensions,
        divisor: DimDivisor,
    ) -> int:
        """Volume divided by the carrier divisor, rounded to whole pounds."""
        if not isinstance(divisor, DimDivisor):
            raise InvalidArgument(
                "divisor", f"Dim divisor must be a DimDivisor member, got {divisor!r}"
            )
        return round_half_away_from_zero(dimensions.cubic_in, divisor.value)

    def calculate(
        self,
        dimensions: PackageDimensions,
        weight: Weight,
        divisor: DimDivisor,
    ) -> int:
        """Return max(actual weight, dimensional weight) in whole pounds."""
        return max(weight.value, self.dimensional_weight(dimensions, divisor))
