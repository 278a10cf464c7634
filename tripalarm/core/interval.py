# tripalarm/core/interval.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidInterval


logger = logging.getLogger(__name__)


class AlarmSource(Enum):
    """Where an alarm interval was detected."""
    UNKNOWN = "unknown"
    FROM_EVENT = "from_event"
    OUTSIDE_EVENT = "outside_event"


class AlarmKind(Enum):
    """Which side of the [min, max] band was crossed."""
    UNKNOWN = "unknown"
    EXCEEDED_MAX = "exceeded_max"
    EXCEEDED_MIN = "exceeded_min"


@dataclass(frozen=True, slots=True)
class AlarmInterval:
    """
    One closed alarm condition on a channel.

    Timestamps are seconds on the trip's time base; values are the readings
    observed at both boundaries.
    """
    source: AlarmSource
    kind: AlarmKind
    started_at: float
    ended_at: float
    started_value: float = 0.0
    ended_value: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.source, AlarmSource):
            raise InvalidInterval("AlarmInterval.source must be an AlarmSource.")
        if not isinstance(self.kind, AlarmKind):
            raise InvalidInterval("AlarmInterval.kind must be an AlarmKind.")
        if self.ended_at < self.started_at:
            raise InvalidInterval(
                f"Interval ends before it starts: {self.ended_at} < {self.started_at}"
            )

    @property
    def duration(self) -> float:
        return self.ended_at - self.started_at

    def contains(self, other: "AlarmInterval") -> bool:
        """True when `other` lies within [started_at, ended_at] (closed)."""
        return (
            self.started_at <= other.started_at <= self.ended_at
            and self.started_at <= other.ended_at <= self.ended_at
        )

    def is_disjoint(self, other: "AlarmInterval") -> bool:
        return other.ended_at < self.started_at or other.started_at > self.ended_at

    def piece(
        self,
        started_at: float,
        ended_at: float,
        started_value: float,
        ended_value: float,
    ) -> "AlarmInterval":
        """Return a sub-interval carrying this interval's source and kind."""
        return AlarmInterval(
            source=self.source,
            kind=self.kind,
            started_at=started_at,
            ended_at=ended_at,
            started_value=started_value,
            ended_value=ended_value,
        )


@dataclass(slots=True)
class OpenMeasurement:
    """An alarm that has started but not yet been observed to end."""
    source: AlarmSource
    kind: AlarmKind
    started_at: float
    started_value: float

    def close(self, ended_at: float, ended_value: float) -> AlarmInterval:
        return AlarmInterval(
            source=self.source,
            kind=self.kind,
            started_at=self.started_at,
            ended_at=ended_at,
            started_value=self.started_value,
            ended_value=ended_value,
        )

    def finalize(self, trip_end: float, fallback_value: float = 0.0) -> AlarmInterval:
        """
        Close a measurement that never saw its end condition.

        Data collection is assumed to have stopped while still in alarm: the
        interval ends at the trip's end time. A zero fallback means the end
        value is unknown, so the start value is assumed to have held.
        An alarm that started after the trip end gets a zero-length interval.
        """
        ended_value = fallback_value if fallback_value != 0.0 else self.started_value
        ended_at = trip_end
        if ended_at < self.started_at:
            logger.warning(
                "%s alarm started at %s, after trip end %s; closing it where it started",
                self.kind.value, self.started_at, trip_end,
            )
            ended_at = self.started_at
        return self.close(ended_at, ended_value)
