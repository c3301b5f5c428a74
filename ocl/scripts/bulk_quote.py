"""
Bulk Quote
==========

Prices every parcel in a CSV with the batch calculator and writes the
result to another CSV.

The input needs the columns zone, service_type, length, breadth, height and
actual_weight; unit is optional.

Usage:
    python -m ocl.scripts.bulk_quote parcels.csv
    python -m ocl.scripts.bulk_quote parcels.csv --output priced.csv
"""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl

from ocl.calculate_costs import calculate_costs
from ocl.data import load_rates


logger = logging.getLogger(__name__)


def run(input_path: Path, output_path: Path) -> pl.DataFrame:
    df = pl.read_csv(input_path)
    logger.info("Loaded %d parcels from %s", len(df), input_path)

    result = calculate_costs(df, load_rates())

    output_path.parent.mkdir(parents=True, exist_ok=True)
    result.write_csv(output_path)
    return result


def main():
    parser = argparse.ArgumentParser(
        description="Price a CSV of parcels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ocl.scripts.bulk_quote parcels.csv
  python -m ocl.scripts.bulk_quote parcels.csv --output priced.csv
        """
    )
    parser.add_argument("input", type=Path, help="CSV of parcels")
    parser.add_argument(
        "--output",
        type=Path,
        help="Output CSV (default: <input>_priced.csv next to the input)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    output = args.output or args.input.with_name(f"{args.input.stem}_priced.csv")

    try:
        result = run(args.input, output)
    except (OSError, ValueError, pl.exceptions.PolarsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("=" * 60)
    print("BULK QUOTE SUMMARY")
    print("=" * 60)
    print(f"Parcels priced: {len(result):,}")
    print(f"Total: Rs {result['cost_total'].sum():,.2f}")
    print(f"Avg per parcel: Rs {result['cost_total'].mean():,.2f}")
    print(f"Written to: {output}")


if __name__ == "__main__":
    main()
