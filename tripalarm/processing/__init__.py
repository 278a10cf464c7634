# tripalarm/processing/__init__.py
"""
Passes that turn a TripRecord into a TripAlarmSet.

- EventIntervalBuilder: intervals from the recorder's enter/clear events
- RawDataScanner: intervals inferred from raw readings outside the band
- process_trip: runs both, in that order
"""

from .events import EventCode, EventIntervalBuilder
from .raw_scan import RawDataScanner
from .trip import process_trip


__all__ = [
    "EventCode",
    "EventIntervalBuilder",
    "RawDataScanner",
    "process_trip",
]
