"""
Billable Weight Data

Reference configuration and loaders.

Structure:
    - reference/: Static configuration (package limits, divisors)
    - loaders:    CSV package loader for the batch pipeline
"""

from pathlib import Path

import polars as pl

from .reference import (
    DimDivisor,
    MAX_WIDTH_IN,
    MAX_HEIGHT_IN,
    MAX_LENGTH_IN,
    MAX_WEIGHT_LBS,
)


def load_packages(path: str | Path) -> pl.DataFrame:
    """Load a package CSV (width_in, height_in, length_in, weight_lbs, ...)."""
    return pl.read_csv(path)


__all__ = [
    # Loaders
    "load_packages",
    # Package limits
    "MAX_WIDTH_IN",
    "MAX_HEIGHT_IN",
    "MAX_LENGTH_IN",
    "MAX_WEIGHT_LBS",
    # Divisors
    "DimDivisor",
]
