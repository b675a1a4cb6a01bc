"""
Billable Weight Calculator
==========================

Calculate billable weight for a single package, or for a CSV of packages.

With no arguments the reference package is calculated:
    9 x 7 x 15 in, 6 lbs, FEDEX divisor -> "7 lb"

Usage:
    python -m billable_weight.scripts.calculator
    python -m billable_weight.scripts.calculator --width 20 --height 10 --length 30 --weight 5
    python -m billable_weight.scripts.calculator --csv packages.csv --output results.csv
"""

import argparse
import sys

import polars as pl

from billable_weight.calculate_billable_weights import calculate_billable_weights
from billable_weight.calculator import BillableWeightCalculator
from billable_weight.data import DimDivisor, load_packages
from billable_weight.errors import InvalidArgument
from billable_weight.values import PackageDimensions, Weight
from billable_weight.version import VERSION


# Reference package used when no dimensions are given
DEFAULT_PACKAGE = {
    "weight": 6,
    "dimensions": {
        "width": 9,
        "length": 15,
        "height": 7,
    },
}


# =============================================================================
# SINGLE PACKAGE
# =============================================================================

def calculate_single(
    width: int,
    height: int,
    length: int,
    weight: int,
    divisor: DimDivisor,
) -> int:
    """Build value objects and return the billable weight."""
    dimensions = PackageDimensions(width=width, height=height, length=length)
    return BillableWeightCalculator().calculate(dimensions, Weight(weight), divisor)


def format_billable_weight(billable_weight: int) -> str:
    return f"{billable_weight} lb"


# =============================================================================
# CSV BATCH
# =============================================================================

def run_batch(csv_path: str, divisor: DimDivisor, output_path: str | None = None) -> pl.DataFrame:
    """Calculate billable weights for a package CSV and print a summary."""
    df = load_packages(csv_path)
    print(f"Loaded {len(df):,} packages from {csv_path}")

    result = calculate_billable_weights(df, divisor)

    dim_count = result["uses_dim_weight"].sum()
    print("\n" + "=" * 50)
    print(f"BILLABLE WEIGHT ({divisor.name}, divisor {divisor.value})")
    print("=" * 50)
    print(f"Packages:              {len(result):>10,}")
    print(f"Using dim weight:      {dim_count:>10,}")
    print(f"Total actual weight:   {result['weight_lbs'].sum():>10,} lb")
    print(f"Total billable weight: {result['billable_weight_lbs'].sum():>10,} lb")

    if output_path:
        result.write_csv(output_path)
        print(f"\nResults saved to: {output_path}")

    return result


# =============================================================================
# MAIN
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    dims = DEFAULT_PACKAGE["dimensions"]

    parser = argparse.ArgumentParser(
        description=f"Calculate package billable weight (version {VERSION})",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m billable_weight.scripts.calculator
  python -m billable_weight.scripts.calculator --width 20 --height 10 --length 30 --weight 5
  python -m billable_weight.scripts.calculator --csv packages.csv --output results.csv
        """
    )

    parser.add_argument("--width", type=int, default=dims["width"], help="Width (inches)")
    parser.add_argument("--height", type=int, default=dims["height"], help="Height (inches)")
    parser.add_argument("--length", type=int, default=dims["length"], help="Length (inches)")
    parser.add_argument("--weight", type=int, default=DEFAULT_PACKAGE["weight"], help="Actual weight (lbs)")
    parser.add_argument(
        "--divisor",
        default=DimDivisor.FEDEX.name,
        help=f"Carrier dim divisor, one of: {', '.join(d.name for d in DimDivisor)} (default: FEDEX)"
    )
    parser.add_argument(
        "--csv",
        metavar="PATH",
        help="Calculate every package in a CSV instead of a single package"
    )
    parser.add_argument(
        "--output",
        metavar="PATH",
        help="Write CSV results to PATH (requires --csv)"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.output and not args.csv:
        parser.error("--output requires --csv")

    try:
        divisor = DimDivisor.from_name(args.divisor)

        if args.csv:
            run_batch(args.csv, divisor, args.output)
        else:
            billable_weight = calculate_single(
                width=args.width,
                height=args.height,
                length=args.length,
                weight=args.weight,
                divisor=divisor,
            )
            print(format_billable_weight(billable_weight))

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except InvalidArgument as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
