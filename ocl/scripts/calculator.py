"""
Rate Calculator
===============

Quotes the shipping rate for one parcel.

Usage:
    python -m ocl.scripts.calculator --length 30 --breadth 20 --height 10 --weight 2.5
    python -m ocl.scripts.calculator -l 30 -b 20 -H 10 -w 2.5 --zone metro --service express
    python -m ocl.scripts.calculator -l 30 -b 20 -H 10 -w 2.5 --compare
    python -m ocl.scripts.calculator -l 30 -b 20 -H 10 -w 2.5 --export quote.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from ocl.data import DEFAULT_SERVICE_TYPE, DEFAULT_UNIT, DEFAULT_ZONE, load_rates
from ocl.rate_calculator import RateBreakdown, compare_services, export_quote, quote_shipment


logger = logging.getLogger(__name__)


def print_breakdown(breakdown: RateBreakdown) -> None:
    print(f"  Service:        {breakdown.service} ({breakdown.delivery_days})")
    print(f"  Zone:           {breakdown.zone}")
    print(f"  Base amount:    Rs {breakdown.base_amount:>10,.2f}")
    print(f"  Fuel surcharge: Rs {breakdown.fuel_surcharge:>10,.2f}")
    print(f"  Subtotal:       Rs {breakdown.subtotal:>10,.2f}")
    print(f"  GST (18%):      Rs {breakdown.gst:>10,.2f}")
    print(f"  Total:          Rs {breakdown.total:>10,.2f}")


def main():
    parser = argparse.ArgumentParser(
        description="Quote the OCL shipping rate for a parcel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-l", "--length", required=True, help="Parcel length")
    parser.add_argument("-b", "--breadth", required=True, help="Parcel breadth")
    parser.add_argument("-H", "--height", required=True, help="Parcel height")
    parser.add_argument("-w", "--weight", required=True, help="Actual weight in kg")
    parser.add_argument("--unit", default=DEFAULT_UNIT, help=f"Dimension unit: cm, mm or in (default: {DEFAULT_UNIT})")
    parser.add_argument("--zone", default=DEFAULT_ZONE, help=f"Zone key (default: {DEFAULT_ZONE})")
    parser.add_argument("--service", default=DEFAULT_SERVICE_TYPE, help=f"Service type (default: {DEFAULT_SERVICE_TYPE})")
    parser.add_argument("--from-pincode", default="", help="Origin pincode (shown on exported quotes)")
    parser.add_argument("--to-pincode", default="", help="Destination pincode (shown on exported quotes)")
    parser.add_argument("--compare", action="store_true", help="Show the rate for every service type")
    parser.add_argument("--export", type=Path, metavar="FILE", help="Write the quote as JSON to FILE")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        rates = load_rates()
        quote = quote_shipment(
            length=args.length,
            breadth=args.breadth,
            height=args.height,
            actual_weight=args.weight,
            zone=args.zone,
            service_type=args.service,
            unit=args.unit,
            from_pincode=args.from_pincode,
            to_pincode=args.to_pincode,
            rates=rates,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("=" * 40)
    print("SHIPPING RATE")
    print("=" * 40)
    print(f"  Volumetric weight: {quote.volumetric_weight:.2f} kg")
    print(f"  Actual weight:     {quote.actual_weight:.2f} kg")
    print(f"  Chargeable weight: {quote.chargeable_weight:.2f} kg")
    print()
    print_breakdown(quote.breakdown)

    if args.compare:
        for service_type, breakdown in compare_services(quote).items():
            if service_type == quote.service_type:
                continue
            print("\n" + "-" * 40)
            print_breakdown(breakdown)

    if args.export:
        args.export.parent.mkdir(parents=True, exist_ok=True)
        args.export.write_text(json.dumps(export_quote(quote), indent=2), encoding="utf-8")
        logger.info("Wrote quote to %s", args.export)
        print(f"\nQuote written to {args.export}")


if __name__ == "__main__":
    main()
