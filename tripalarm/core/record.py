# tripalarm/core/record.py
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterator, Sequence

from .exceptions import InvalidTripRecord
from .series import ChannelSeries


@dataclass(frozen=True, slots=True)
class UploadEvent:
    """
    One boundary event from the recorder's event log.

    `raw_value` is the reading as the recorder wrote it (numeric text);
    `event_type` is the recorder's integer event code.
    """
    channel: str
    timestamp: float
    raw_value: str
    event_type: int

    def value(self) -> float:
        # Malformed text raises ValueError; callers decide how fatal that is.
        return float(self.raw_value)


@dataclass(frozen=True, slots=True)
class UploadDataPoint:
    channel: str
    timestamp: float
    value: float


@dataclass(frozen=True, slots=True)
class ChannelSettings:
    """Alarm band configured for a channel on this trip."""
    channel_name: str
    data_type: str = ""
    min: float = 0.0
    max: float = 0.0


@dataclass(frozen=True, slots=True)
class TripRecord:
    """
    Everything recorded for one trip, as handed over by a loader.

    Events and data points may arrive in any order; `sorted_events()` and
    `sorted_data_points()` return them grouped by channel, oldest first.
    """
    name: str
    start_time: float
    end_time: float
    events: Sequence[UploadEvent] = field(default_factory=tuple, repr=False)
    data_points: Sequence[UploadDataPoint] = field(default_factory=tuple, repr=False)
    settings: Sequence[ChannelSettings] = field(default_factory=tuple, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidTripRecord("TripRecord.name must be a string.")
        for attr in ("events", "data_points", "settings"):
            items = getattr(self, attr)
            if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
                raise InvalidTripRecord(f"TripRecord.{attr} must be a sequence.")
            object.__setattr__(self, attr, tuple(items))

    def settings_for(self, channel: str) -> ChannelSettings | None:
        for setting in self.settings:
            if setting.channel_name == channel:
                return setting
        return None

    def sorted_events(self) -> list[UploadEvent]:
        return sorted(self.events, key=lambda e: (e.channel, e.timestamp))

    def sorted_data_points(self) -> list[UploadDataPoint]:
        return sorted(self.data_points, key=lambda p: (p.channel, p.timestamp))

    def channel_series(self) -> Iterator[ChannelSeries]:
        """Yield one ChannelSeries per channel, in channel order."""
        for channel, points in groupby(self.sorted_data_points(), key=lambda p: p.channel):
            points = list(points)
            yield ChannelSeries(
                name=channel,
                time=[p.timestamp for p in points],
                values=[p.value for p in points],
            )
