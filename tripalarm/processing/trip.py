# tripalarm/processing/trip.py
from __future__ import annotations

import logging

from tripalarm.core import TripAlarmSet, TripRecord

from .events import EventIntervalBuilder
from .raw_scan import RawDataScanner


logger = logging.getLogger(__name__)


def process_trip(trip: TripRecord) -> TripAlarmSet:
    """
    Compute the alarm intervals of one trip.

    The event pass runs first: it registers each channel's band and the
    authoritative event-derived intervals that the raw scan merges against.
    Raises EventProcessingError or RawScanError; no partial result is returned.
    """
    alarms = TripAlarmSet(trip_name=trip.name)

    EventIntervalBuilder(trip).build(alarms)
    RawDataScanner(trip).scan(alarms)

    logger.info(
        "Processed trip '%s': %d channels, %d alarm intervals, %.1fs in alarm",
        trip.name, len(alarms), alarms.interval_count, alarms.total_duration,
    )
    return alarms
