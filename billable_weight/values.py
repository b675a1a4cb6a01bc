"""
Package Value Objects

PackageDimensions and Weight are immutable and compared by value. Both
validate on construction and raise InvalidArgument on the first field out
of bounds, so an instance that exists is always valid.

"Changing" a value object means building a new one:

    dims = PackageDimensions(width=9, height=7, length=15)
    wider = dims.increase_width(2)   # dims is untouched
"""

from dataclasses import dataclass, replace

from .data.reference import (
    MAX_WIDTH_IN,
    MAX_HEIGHT_IN,
    MAX_LENGTH_IN,
    MAX_WEIGHT_LBS,
)
from .errors import InvalidArgument


def _require_in_bounds(field: str, value: int, upper: int) -> None:
    """Raise InvalidArgument unless value is an int with 0 < value <= upper."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(field)
    if value <= 0 or value > upper:
        raise InvalidArgument(field)


@dataclass(frozen=True)
class PackageDimensions:
    """Package width, height and length in whole inches."""

    width: int
    height: int
    length: int

    # -------------------------------------------------------------------------
    # THRESHOLDS
    # -------------------------------------------------------------------------
    MAX_WIDTH = MAX_WIDTH_IN
    MAX_HEIGHT = MAX_HEIGHT_IN
    MAX_LENGTH = MAX_LENGTH_IN

    def __post_init__(self) -> None:
        # Order matters: only the first violation is reported
        _require_in_bounds("width", self.width, self.MAX_WIDTH)
        _require_in_bounds("height", self.height, self.MAX_HEIGHT)
        _require_in_bounds("length", self.length, self.MAX_LENGTH)

    @property
    def cubic_in(self) -> int:
        """Volume in cubic inches."""
        return self.width * self.height * self.length

    def increase_width(self, delta: int) -> "PackageDimensions":
        """
        Return a new instance with width + delta.

        The result is validated like a fresh construction, so an increase
        past MAX_WIDTH (or below 1) raises InvalidArgument("width"). A
        non-integer delta raises the same error.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidArgument("width")
        return replace(self, width=self.width + delta)

    def equals(self, other: object) -> bool:
        """True if width, height and length all match."""
        if not isinstance(other, PackageDimensions):
            return False
        return (
            self.width == other.width
            and self.height == other.height
            and self.length == other.length
        )


@dataclass(frozen=True)
class Weight:
    """Actual package weight in whole pounds."""

    value: int

    MAX_VALUE = MAX_WEIGHT_LBS

    def __post_init__(self) -> None:
        _require_in_bounds("weight", self.value, self.MAX_VALUE)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Weight):
            return False
        return self.value == other.value
