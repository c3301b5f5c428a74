"""
Track Consignment
=================

Fetches a consignment from the OCL API and prints where it is on the
tracker, followed by its movement history.

Usage:
    python -m ocl.scripts.track 100234
    python -m ocl.scripts.track 100234 --no-history
    OCL_API_BASE_URL=https://api.example.com python -m ocl.scripts.track 100234
"""

import argparse
import logging
import sys

from ocl.client import TrackingService
from ocl.tracking import TrackingData
from shared.api import ApiError, close_client


logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Track an OCL consignment")
    parser.add_argument("consignment", help="Consignment number")
    parser.add_argument("--no-history", action="store_true", help="Skip the movement history")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = TrackingService()
    try:
        booking = service.track(args.consignment)
        events = [] if args.no_history else service.movement_history(args.consignment)
    except (ApiError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        close_client()

    print_tracking(args.consignment, booking.to_tracking_data(), events)


def print_tracking(consignment: str, data: TrackingData, events) -> None:
    """Step timeline with timestamps, then the movement history."""
    print("=" * 40)
    print(f"CONSIGNMENT {consignment}")
    print("=" * 40)
    print(f"  Status:   {data.status}")
    print(f"  Location: {data.current_location}")
    print(f"  Delivery: {data.estimated_delivery}")
    print()
    for item in data.timeline:
        mark = "[x]" if item.completed else "[ ]"
        print(f"  {mark} {item.status:<18} {item.timestamp or '-':<26} {item.location}")

    if events:
        print("\nMovement history:")
        for event in events:
            location = f" ({event.location})" if event.location else ""
            print(f"  {event.timestamp}  {event.label}{location}")


if __name__ == "__main__":
    main()
