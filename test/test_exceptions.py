# test/test_exceptions.py
import pytest

from tripalarm.core import (
    CoreError,
    InvalidInterval,
    InvalidChannelSeries,
    InvalidTripRecord,
    ChannelNotFound,
    ProcessingError,
    EventProcessingError,
    RawScanError,
)


def test_exception_inheritance_validation():
    assert issubclass(InvalidInterval, CoreError)
    assert issubclass(InvalidChannelSeries, CoreError)
    assert issubclass(InvalidTripRecord, CoreError)


def test_exception_inheritance_lookup_keyerror():
    assert issubclass(ChannelNotFound, KeyError)
    assert issubclass(ChannelNotFound, CoreError)


def test_lookup_errors_can_be_raised_and_caught_as_keyerror():
    with pytest.raises(KeyError):
        raise ChannelNotFound("Temp1")


def test_processing_errors_name_their_stage():
    assert issubclass(EventProcessingError, ProcessingError)
    assert issubclass(RawScanError, ProcessingError)
    assert issubclass(ProcessingError, CoreError)

    assert EventProcessingError("x").stage == "events"
    assert RawScanError("x").stage == "raw_scan"


def test_processing_error_message_includes_stage_and_channel():
    assert str(RawScanError("bad reading")) == "[raw_scan] bad reading"
    assert str(EventProcessingError("bad value", channel="Temp1")) == "[events] channel 'Temp1': bad value"
