# test/test_interval.py
import pytest

from tripalarm.core import AlarmInterval, AlarmKind, AlarmSource, OpenMeasurement, InvalidInterval


def _iv(start, end, source=AlarmSource.FROM_EVENT, kind=AlarmKind.EXCEEDED_MAX):
    return AlarmInterval(source=source, kind=kind, started_at=start, ended_at=end)


def test_duration_is_end_minus_start():
    iv = AlarmInterval(
        source=AlarmSource.FROM_EVENT,
        kind=AlarmKind.EXCEEDED_MAX,
        started_at=10.0,
        ended_at=40.0,
        started_value=5.5,
        ended_value=1.0,
    )
    assert iv.duration == 30.0


def test_zero_length_interval_allowed():
    assert _iv(5.0, 5.0).duration == 0.0


def test_rejects_end_before_start():
    with pytest.raises(InvalidInterval):
        _iv(10.0, 9.0)


def test_rejects_non_enum_source():
    with pytest.raises(InvalidInterval):
        AlarmInterval(source="from_event", kind=AlarmKind.EXCEEDED_MAX, started_at=0.0, ended_at=1.0)


def test_contains_and_disjoint_use_closed_bounds():
    outer = _iv(10.0, 20.0)
    assert outer.contains(_iv(10.0, 20.0))
    assert outer.contains(_iv(12.0, 15.0))
    assert not outer.contains(_iv(5.0, 15.0))

    assert outer.is_disjoint(_iv(0.0, 9.9))
    assert outer.is_disjoint(_iv(20.1, 30.0))
    # touching endpoints are not disjoint
    assert not outer.is_disjoint(_iv(0.0, 10.0))
    assert not outer.is_disjoint(_iv(20.0, 30.0))


def test_piece_keeps_source_and_kind():
    iv = _iv(0.0, 10.0, source=AlarmSource.OUTSIDE_EVENT, kind=AlarmKind.EXCEEDED_MIN)
    part = iv.piece(2.0, 4.0, 1.0, 2.0)
    assert part.source is AlarmSource.OUTSIDE_EVENT
    assert part.kind is AlarmKind.EXCEEDED_MIN
    assert (part.started_at, part.ended_at) == (2.0, 4.0)
    assert (part.started_value, part.ended_value) == (1.0, 2.0)


def test_open_measurement_close():
    m = OpenMeasurement(AlarmSource.FROM_EVENT, AlarmKind.EXCEEDED_MAX, started_at=10.0, started_value=5.5)
    iv = m.close(40.0, 1.0)
    assert iv.started_at == 10.0 and iv.started_value == 5.5
    assert iv.ended_at == 40.0 and iv.ended_value == 1.0


def test_finalize_uses_trip_end_and_fallback_value():
    m = OpenMeasurement(AlarmSource.FROM_EVENT, AlarmKind.EXCEEDED_MAX, started_at=10.0, started_value=5.5)
    iv = m.finalize(100.0, 7.0)
    assert iv.ended_at == 100.0
    assert iv.ended_value == 7.0


def test_finalize_zero_fallback_keeps_start_value():
    m = OpenMeasurement(AlarmSource.FROM_EVENT, AlarmKind.EXCEEDED_MIN, started_at=5.0, started_value=-2.0)
    iv = m.finalize(100.0)
    assert iv.ended_at == 100.0
    assert iv.ended_value == -2.0

    iv2 = m.finalize(100.0, 0.0)
    assert iv2.ended_value == -2.0


def test_finalize_before_start_is_clamped_to_zero_length():
    m = OpenMeasurement(AlarmSource.OUTSIDE_EVENT, AlarmKind.EXCEEDED_MAX, started_at=101.0, started_value=12.0)
    iv = m.finalize(100.0)
    assert (iv.started_at, iv.ended_at) == (101.0, 101.0)
    assert iv.duration == 0.0
    assert iv.ended_value == 12.0
