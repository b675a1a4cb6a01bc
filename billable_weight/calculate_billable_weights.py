"""
Batch Billable Weight Calculation

DataFrame in, DataFrame out. The input can come from any source (CSV,
manual creation) as long as it contains the required columns. The output
is the same DataFrame with billable weight columns appended.

REQUIRED INPUT COLUMNS
----------------------
    width_in            - Package width in whole inches
    height_in           - Package height in whole inches
    length_in           - Package length in whole inches
    weight_lbs          - Actual weight in whole pounds

OUTPUT COLUMNS ADDED
--------------------
    cubic_in, dim_weight_lbs, uses_dim_weight, billable_weight_lbs,
    dim_divisor, calculator_version

Rows are validated against the same limits as PackageDimensions and Weight
before anything is calculated. Each row's billable weight equals
BillableWeightCalculator().calculate() on the same values.

USAGE
-----
    from billable_weight.calculate_billable_weights import calculate_billable_weights
    result = calculate_billable_weights(df)
"""

import polars as pl

from .columns import REQUIRED_INPUT_COLS, FIELD_BY_COLUMN
from .data import (
    DimDivisor,
    MAX_WIDTH_IN,
    MAX_HEIGHT_IN,
    MAX_LENGTH_IN,
    MAX_WEIGHT_LBS,
)
from .errors import InvalidArgument
from .version import VERSION


UPPER_BOUND_BY_COLUMN = {
    "width_in": MAX_WIDTH_IN,
    "height_in": MAX_HEIGHT_IN,
    "length_in": MAX_LENGTH_IN,
    "weight_lbs": MAX_WEIGHT_LBS,
}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_billable_weights(
    df: pl.DataFrame,
    divisor: DimDivisor | str = DimDivisor.FEDEX,
) -> pl.DataFrame:
    """
    Calculate dimensional and billable weight for a package DataFrame.

    Args:
        df: Package DataFrame with required columns (see module docstring)
        divisor: DimDivisor member, or its name (e.g. "FEDEX")

    Returns:
        DataFrame with billable weight and metadata columns appended

    Raises:
        InvalidArgument: If the divisor is not a DimDivisor member or name,
            columns are missing, or any row is out of bounds
    """
    if isinstance(divisor, str):
        divisor = DimDivisor.from_name(divisor)
    if not isinstance(divisor, DimDivisor):
        raise InvalidArgument(
            "divisor", f"Dim divisor must be a DimDivisor member or name, got {divisor!r}"
        )

    _validate_packages(df)

    df = _add_billable_weight(df, divisor)
    df = _stamp_metadata(df, divisor)

    return df


# =============================================================================
# VALIDATION
# =============================================================================

def _validate_packages(df: pl.DataFrame) -> None:
    """
    Check required columns exist and every row is within package limits.

    Fields are checked in order width -> height -> length -> weight; the first
    field with any bad row is reported.
    """
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise InvalidArgument(
            "columns",
            f"Missing required column(s): {', '.join(missing)}"
        )

    for col in REQUIRED_INPUT_COLS:
        field = FIELD_BY_COLUMN[col]

        if not df.schema[col].is_integer():
            raise InvalidArgument(
                field,
                f"Invalid package {field}: expected whole numbers in {col}, "
                f"got {df.schema[col]}"
            )

        upper = UPPER_BOUND_BY_COLUMN[col]
        bad_count = df.select(
            (
                pl.col(col).is_null() |
                (pl.col(col) <= 0) |
                (pl.col(col) > upper)
            ).sum()
        ).item()

        if bad_count:
            raise InvalidArgument(
                field,
                f"Invalid package {field}: {bad_count} package(s) out of bounds "
                f"(0 < {col} <= {upper})"
            )


# =============================================================================
# CALCULATION
# =============================================================================

def _add_billable_weight(df: pl.DataFrame, divisor: DimDivisor) -> pl.DataFrame:
    """
    Calculate cubic inches, dimensional weight and billable weight.

    Dimensional weight rounds half away from zero:
        dim_weight = (2 * cubic_in + divisor) // (2 * divisor)
    """
    d = divisor.value

    df = df.with_columns(
        (
            pl.col("width_in").cast(pl.Int64) *
            pl.col("height_in").cast(pl.Int64) *
            pl.col("length_in").cast(pl.Int64)
        ).alias("cubic_in")
    )

    df = df.with_columns(
        ((2 * pl.col("cubic_in") + d) // (2 * d)).alias("dim_weight_lbs")
    )

    # Billable weight is always max(actual, dimensional) - no threshold
    df = df.with_columns([
        (pl.col("dim_weight_lbs") > pl.col("weight_lbs")).alias("uses_dim_weight"),
        pl.max_horizontal(
            pl.col("weight_lbs").cast(pl.Int64),
            "dim_weight_lbs",
        ).alias("billable_weight_lbs"),
    ])

    return df


def _stamp_metadata(df: pl.DataFrame, divisor: DimDivisor) -> pl.DataFrame:
    """Add divisor name and calculator version."""
    return df.with_columns([
        pl.lit(divisor.name).alias("dim_divisor"),
        pl.lit(VERSION).alias("calculator_version"),
    ])
