"""
Billable Weight Configuration

Billable weight logic:
    dim_weight = round(cubic_in / divisor)
    billable_weight = max(actual_weight, dim_weight)

No threshold - dimensional weight is always considered.

ROUNDING
--------
Dimensional weight is rounded half away from zero (2.5 -> 3), the usual
freight convention. Python's round() is half-to-even, so the calculator
rounds with integer arithmetic instead of relying on it.

DIVISORS
--------
Divisors are a closed set. Add a carrier by adding a named member below;
callers never pass a raw number.
"""

from enum import IntEnum

from ...errors import InvalidArgument


class DimDivisor(IntEnum):
    """Dimensional weight divisors (cubic inches per pound)."""

    FEDEX = 139

    @classmethod
    def from_name(cls, name: str) -> "DimDivisor":
        """Resolve a divisor by carrier name (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            known = ", ".join(member.name for member in cls)
            raise InvalidArgument(
                "divisor", f"Unknown dim divisor '{name}' (known: {known})"
            ) from None
