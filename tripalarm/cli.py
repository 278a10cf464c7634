from __future__ import annotations

import argparse
import logging
import sys

from tripalarm.config import Settings
from tripalarm.core import CoreError
from tripalarm.io.load import load_trip
from tripalarm.processing import process_trip
from tripalarm.report import TRIP_TITLE, channel_title, describe_channel, describe_trip


logger = logging.getLogger("tripalarm.cli")


def _parse_args(argv: list[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute time spent in alarm for a recorded trip")
    parser.add_argument("trip_file", nargs="?", default=settings.trip_file, help="Path to the trip JSON document")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument(
        "--no-details",
        dest="details",
        action="store_false",
        default=settings.show_details,
        help="Only print per-channel totals",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    args = _parse_args(argv, settings)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    if not args.trip_file:
        print("No trip file given (argument or TRIPALARM_TRIP_FILE).", file=sys.stderr)
        return 2

    try:
        trip = load_trip(args.trip_file)
        logger.info("Loaded trip data: %s", trip.name)
        alarms = process_trip(trip)
    except CoreError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(TRIP_TITLE)
    print(describe_trip(alarms))
    for channel_set in alarms.values():
        print()
        print(channel_title(channel_set))
        print(describe_channel(channel_set, details=args.details))
    return 0


if __name__ == "__main__":
    sys.exit(main())
