# tripalarm/processing/raw_scan.py
from __future__ import annotations

import logging

from tripalarm.core import (
    AlarmKind,
    AlarmSource,
    ChannelAlarmSet,
    ChannelSeries,
    CoreError,
    OpenMeasurement,
    RawScanError,
    TripAlarmSet,
    TripRecord,
)
from tripalarm.core.series import ABOVE_MAX, BELOW_MIN


logger = logging.getLogger(__name__)

_STATE_KIND = {
    ABOVE_MAX: AlarmKind.EXCEEDED_MAX,
    BELOW_MIN: AlarmKind.EXCEEDED_MIN,
}


class RawDataScanner:
    """
    Find alarm conditions in the raw readings that the event log missed.

    Each channel's readings are compared against its band; every excursion
    becomes an OUTSIDE_EVENT interval that is accumulated into the channel's
    set, so time already covered by a known interval is not reported twice.
    Run it after EventIntervalBuilder: it relies on the thresholds and
    intervals that pass recorded.
    """

    def __init__(self, trip: TripRecord):
        self._trip = trip

    def scan(self, alarms: TripAlarmSet) -> TripAlarmSet:
        try:
            for series in self._trip.channel_series():
                channel_set = alarms.get_or_create(series.name)
                if not channel_set.configured:
                    channel_set.configure(self._trip.settings_for(series.name))
                self.scan_channel(series, channel_set)
        except RawScanError:
            raise
        except CoreError as e:
            raise RawScanError(str(e)) from e
        return alarms

    def scan_channel(self, series: ChannelSeries, channel_set: ChannelAlarmSet) -> None:
        states = series.band_states(channel_set.min, channel_set.max)
        current: OpenMeasurement | None = None
        found = 0

        try:
            for t, value, state in zip(series.time, series.values, states):
                t = float(t)
                value = float(value)
                kind = _STATE_KIND.get(int(state))

                if current is not None and current.kind is kind:
                    # still inside the same excursion
                    continue

                if current is not None:
                    channel_set.accumulate(current.close(t, value))
                    current = None
                    found += 1

                if kind is not None:
                    current = OpenMeasurement(
                        source=AlarmSource.OUTSIDE_EVENT,
                        kind=kind,
                        started_at=t,
                        started_value=value,
                    )

            if current is not None:
                channel_set.accumulate(current.finalize(self._trip.end_time, series.last_value))
                found += 1
        except CoreError as e:
            raise RawScanError(str(e), channel=series.name) from e

        logger.debug(
            "%s: %d raw readings, %d excursions outside [%s, %s]",
            series.name, series.n, found, channel_set.min, channel_set.max,
        )
