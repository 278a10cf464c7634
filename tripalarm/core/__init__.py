# tripalarm/core/__init__.py
"""
Core domain objects for tripalarm.

This module defines the in-memory model of one trip's alarm results:
- AlarmInterval: one closed alarm condition (source + kind + boundaries)
- ChannelAlarmSet: intervals of one channel, with the merge rules
- TripAlarmSet: all channel sets of a trip, with aggregate durations
- TripRecord & co.: the recorded trip handed over by a loader
- ChannelSeries: numpy view of one channel's raw readings

The core layer is independent from I/O and document formats.
"""

from .interval import AlarmInterval, AlarmKind, AlarmSource, OpenMeasurement
from .channel_alarms import ChannelAlarmSet
from .trip_alarms import TripAlarmSet
from .record import TripRecord, UploadEvent, UploadDataPoint, ChannelSettings
from .series import ChannelSeries
from .exceptions import (
    CoreError,
    InvalidInterval,
    InvalidChannelSeries,
    InvalidTripRecord,
    ChannelNotFound,
    ProcessingError,
    EventProcessingError,
    RawScanError,
)


__all__ = [
    # intervals
    "AlarmInterval",
    "AlarmKind",
    "AlarmSource",
    "OpenMeasurement",

    # result objects
    "ChannelAlarmSet",
    "TripAlarmSet",

    # input
    "TripRecord",
    "UploadEvent",
    "UploadDataPoint",
    "ChannelSettings",
    "ChannelSeries",

    # exceptions
    "CoreError",
    "InvalidInterval",
    "InvalidChannelSeries",
    "InvalidTripRecord",
    "ChannelNotFound",
    "ProcessingError",
    "EventProcessingError",
    "RawScanError",
]
