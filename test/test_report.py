# test/test_report.py
from tripalarm.core import AlarmInterval, AlarmKind, AlarmSource, ChannelAlarmSet, ChannelSettings, TripAlarmSet
from tripalarm.report import (
    TRIP_TITLE,
    channel_title,
    describe_channel,
    describe_interval,
    describe_trip,
    format_duration,
)


def _channel():
    ch = ChannelAlarmSet(channel_id="Temp1")
    ch.configure(ChannelSettings("Temp1", "Temperature", 0.0, 10.0))
    ch.append(AlarmInterval(AlarmSource.FROM_EVENT, AlarmKind.EXCEEDED_MAX, 10.0, 40.0, 5.5, 1.0))
    ch.accumulate(AlarmInterval(AlarmSource.OUTSIDE_EVENT, AlarmKind.EXCEEDED_MIN, 100.0, 3700.0, -1.0, 2.0))
    return ch


def test_format_duration():
    assert format_duration(0.0) == "0:00:00"
    assert format_duration(30.0) == "0:00:30"
    assert format_duration(3600.0) == "1:00:00"


def test_describe_interval():
    iv = AlarmInterval(AlarmSource.FROM_EVENT, AlarmKind.EXCEEDED_MAX, 10.0, 40.0, 5.5, 1.0)
    assert describe_interval(iv) == "* Exceeded Maximum For 0:00:30 Value 5.5 To 1.0 From Event."


def test_channel_title_falls_back_to_channel_id():
    assert channel_title(_channel()) == "Temperature Alarms"
    assert channel_title(ChannelAlarmSet(channel_id="Pressure")) == "Pressure Alarms"


def test_describe_channel_with_and_without_details():
    text = describe_channel(_channel())
    lines = text.splitlines()

    assert lines[0] == "Total Duration: 1:00:30"
    assert "Event Duration: 0:00:30" in lines
    assert "Outside Event Duration: 1:00:00" in lines
    assert "Total Exceeded Maximum: 0:00:30" in lines
    assert "Total Exceeded Minimum: 1:00:00" in lines
    assert "DETAILS" in lines
    assert lines[-1] == "* Exceeded Minimum For 1:00:00 Value -1.0 To 2.0 Outside Event."

    short = describe_channel(_channel(), details=False)
    assert "DETAILS" not in short


def test_describe_trip():
    alarms = TripAlarmSet(trip_name="t")
    alarms.channels["Temp1"] = _channel()

    text = describe_trip(alarms)
    assert text.splitlines()[0] == "Overall Alarm Duration: 1:00:30"
    assert TRIP_TITLE == "All Alarms"
