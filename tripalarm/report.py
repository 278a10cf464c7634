# tripalarm/report.py
"""Plain-text summaries of alarm results."""
from __future__ import annotations

from datetime import timedelta

from tripalarm.core import AlarmInterval, AlarmKind, AlarmSource, ChannelAlarmSet, TripAlarmSet


_SOURCE_LABELS = {
    AlarmSource.FROM_EVENT: "From Event",
    AlarmSource.OUTSIDE_EVENT: "Outside Event",
}

_KIND_LABELS = {
    AlarmKind.EXCEEDED_MAX: "Exceeded Maximum",
    AlarmKind.EXCEEDED_MIN: "Exceeded Minimum",
}

TRIP_TITLE = "All Alarms"


def format_duration(seconds: float) -> str:
    return str(timedelta(seconds=seconds))


def describe_interval(interval: AlarmInterval) -> str:
    kind = _KIND_LABELS.get(interval.kind, "")
    source = _SOURCE_LABELS.get(interval.source, "")
    return (
        f"* {kind} For {format_duration(interval.duration)} "
        f"Value {interval.started_value} To {interval.ended_value} {source}."
    )


def channel_title(channel_set: ChannelAlarmSet) -> str:
    return f"{channel_set.data_type or channel_set.channel_id} Alarms"


def describe_channel(channel_set: ChannelAlarmSet, *, details: bool = True) -> str:
    lines = [
        f"Total Duration: {format_duration(channel_set.total_duration)}",
        f"Event Duration: {format_duration(channel_set.duration_from_events)}",
        f"Outside Event Duration: {format_duration(channel_set.duration_outside_events)}",
        f"Total Exceeded Maximum: {format_duration(channel_set.total_exceeded_max)}",
        f"Total Exceeded Minimum: {format_duration(channel_set.total_exceeded_min)}",
    ]
    if details:
        lines += ["", "DETAILS"]
        lines += [describe_interval(interval) for interval in channel_set]
    return "\n".join(lines)


def describe_trip(alarms: TripAlarmSet) -> str:
    return "\n".join([
        f"Overall Alarm Duration: {format_duration(alarms.total_duration)}",
        f"Overall Event Duration: {format_duration(alarms.duration_from_events)}",
        f"Overall Outside Event Duration: {format_duration(alarms.duration_outside_events)}",
        f"Overall Exceeded Maximum: {format_duration(alarms.total_exceeded_max)}",
        f"Overall Exceeded Minimum: {format_duration(alarms.total_exceeded_min)}",
    ])
