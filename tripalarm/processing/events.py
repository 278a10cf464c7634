# tripalarm/processing/events.py
from __future__ import annotations

import logging
from enum import Enum, IntEnum

from tripalarm.core import (
    AlarmKind,
    AlarmSource,
    ChannelAlarmSet,
    CoreError,
    EventProcessingError,
    OpenMeasurement,
    TripAlarmSet,
    TripRecord,
    UploadEvent,
)


logger = logging.getLogger(__name__)


class EventCode(IntEnum):
    """Recorder event codes that mark alarm boundaries."""
    MAX_ALARM_ENTERED = 6
    MIN_ALARM_ENTERED = 7
    MAX_ALARM_CLEARED = 8
    MIN_ALARM_CLEARED = 9


class Transition(Enum):
    OPEN = "open"
    CLOSE = "close"
    IGNORE = "ignore"


_TRANSITIONS: dict[int, tuple[Transition, AlarmKind]] = {
    EventCode.MAX_ALARM_ENTERED: (Transition.OPEN, AlarmKind.EXCEEDED_MAX),
    EventCode.MIN_ALARM_ENTERED: (Transition.OPEN, AlarmKind.EXCEEDED_MIN),
    EventCode.MAX_ALARM_CLEARED: (Transition.CLOSE, AlarmKind.EXCEEDED_MAX),
    EventCode.MIN_ALARM_CLEARED: (Transition.CLOSE, AlarmKind.EXCEEDED_MIN),
}


def transition_for(event_type: int) -> tuple[Transition, AlarmKind]:
    """Map a recorder event code to the state machine transition it triggers."""
    return _TRANSITIONS.get(event_type, (Transition.IGNORE, AlarmKind.UNKNOWN))


class EventIntervalBuilder:
    """
    Rebuild alarm intervals from the recorder's enter/clear events.

    Events are processed grouped by channel, oldest first, with at most one
    open measurement at a time. Measurements left open (no clear event) are
    finalized at the trip's end time.
    """

    def __init__(self, trip: TripRecord):
        self._trip = trip
        self._channel: ChannelAlarmSet | None = None
        self._open: OpenMeasurement | None = None
        self._last_value = 0.0

    def build(self, alarms: TripAlarmSet) -> TripAlarmSet:
        self._channel = None
        self._open = None
        self._last_value = 0.0

        for event in self._trip.sorted_events():
            value = self._parse_value(event)
            if self._channel is None or self._channel.channel_id != event.channel:
                self._start_channel(alarms, event.channel, value)
            try:
                self._apply(event, value)
            except CoreError as e:
                raise EventProcessingError(str(e), channel=event.channel) from e
            self._last_value = value

        if self._channel is not None:
            self._finalize_channel(self._last_value)
        return alarms

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------
    def _start_channel(self, alarms: TripAlarmSet, channel: str, value: float) -> None:
        # The previous channel's open alarm takes the new channel's first reading.
        if self._channel is not None:
            self._finalize_channel(value)
        self._channel = alarms.get_or_create(channel)
        if not self._channel.configured:
            self._channel.configure(self._trip.settings_for(channel))

    def _finalize_channel(self, fallback_value: float) -> None:
        try:
            self._finalize(fallback_value)
        except CoreError as e:
            raise EventProcessingError(str(e), channel=self._channel.channel_id) from e

    def _apply(self, event: UploadEvent, value: float) -> None:
        transition, kind = transition_for(event.event_type)

        if transition is Transition.OPEN:
            self._finalize(value)
            self._open = OpenMeasurement(
                source=AlarmSource.FROM_EVENT,
                kind=kind,
                started_at=event.timestamp,
                started_value=value,
            )
        elif transition is Transition.CLOSE:
            if self._open is None:
                logger.debug(
                    "%s: clear event (code %d) at %s with no open alarm, ignored",
                    event.channel, event.event_type, event.timestamp,
                )
                return
            if self._open.kind is not kind:
                # Accepted as-is: the clear closes whatever alarm is open.
                logger.debug(
                    "%s: %s alarm cleared by code %d at %s",
                    event.channel, self._open.kind.value, event.event_type, event.timestamp,
                )
            self._channel.append(self._open.close(event.timestamp, value))
            self._open = None
        else:
            logger.debug("%s: ignoring event code %d", event.channel, event.event_type)

    def _finalize(self, fallback_value: float) -> None:
        if self._open is None:
            return
        interval = self._open.finalize(self._trip.end_time, fallback_value)
        logger.debug("%s: open alarm finalized at trip end: %s", self._channel.channel_id, interval)
        self._channel.append(interval)
        self._open = None

    @staticmethod
    def _parse_value(event: UploadEvent) -> float:
        try:
            return event.value()
        except (TypeError, ValueError) as e:
            raise EventProcessingError(
                f"cannot parse event value {event.raw_value!r} at {event.timestamp}",
                channel=event.channel,
            ) from e
