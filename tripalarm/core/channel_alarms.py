# tripalarm/core/channel_alarms.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .interval import AlarmInterval, AlarmKind, AlarmSource
from .record import ChannelSettings


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChannelAlarmSet:
    """
    Alarm intervals recorded for one channel, plus the band they were judged against.

    Event-derived intervals are appended as-is. Intervals inferred from raw
    readings go through `accumulate()` so they never re-report time already
    covered by a known interval.
    """
    channel_id: str
    data_type: str = ""
    min: float = 0.0
    max: float = 0.0
    intervals: list[AlarmInterval] = field(default_factory=list, repr=False)
    configured: bool = field(default=False, repr=False)

    def configure(self, settings: ChannelSettings | None) -> None:
        """Copy data type and thresholds from the trip settings (once)."""
        self.configured = True
        if settings is None:
            logger.warning(
                "No settings for channel '%s'; using min=%s max=%s",
                self.channel_id, self.min, self.max,
            )
            return
        self.data_type = settings.data_type
        self.min = settings.min
        self.max = settings.max

    # ---- collection API ----
    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[AlarmInterval]:
        return iter(self.intervals)

    def append(self, interval: AlarmInterval) -> None:
        if interval.source is AlarmSource.UNKNOWN:
            return
        self.intervals.append(interval)

    def accumulate(self, candidate: AlarmInterval) -> None:
        """
        Merge a raw-derived interval against the intervals already recorded.

        The first existing interval that is not disjoint from the candidate
        decides the outcome and the scan stops there:
          - candidate inside existing: dropped
          - existing inside candidate: the parts before and after it are added
          - candidate overlaps existing's start: the part before it is added
          - candidate overlaps existing's end: the part after it is added
        A candidate disjoint from every existing interval is added unchanged.
        """
        if candidate.source is AlarmSource.UNKNOWN:
            return

        for existing in self.intervals:
            if existing.is_disjoint(candidate):
                continue

            if existing.contains(candidate):
                logger.debug("%s: %s covered by %s, dropped", self.channel_id, candidate, existing)
                return

            if candidate.contains(existing):
                self.intervals.append(
                    candidate.piece(
                        candidate.started_at, existing.started_at,
                        candidate.started_value, existing.started_value,
                    )
                )
                self.intervals.append(
                    candidate.piece(
                        existing.ended_at, candidate.ended_at,
                        existing.ended_value, candidate.ended_value,
                    )
                )
                return

            if candidate.started_at < existing.started_at < candidate.ended_at:
                self.intervals.append(
                    candidate.piece(
                        candidate.started_at, existing.started_at,
                        candidate.started_value, existing.started_value,
                    )
                )
                return

            if candidate.started_at < existing.ended_at < candidate.ended_at:
                self.intervals.append(
                    candidate.piece(
                        existing.ended_at, candidate.ended_at,
                        existing.ended_value, candidate.ended_value,
                    )
                )
                return

            # Only a shared endpoint; keep looking.

        self.intervals.append(candidate)

    # ---- derived durations (seconds) ----
    def _total(self, *, source: AlarmSource | None = None, kind: AlarmKind | None = None) -> float:
        total = 0.0
        for interval in self.intervals:
            if source is not None and interval.source is not source:
                continue
            if kind is not None and interval.kind is not kind:
                continue
            total += interval.duration
        return total

    @property
    def duration_from_events(self) -> float:
        return self._total(source=AlarmSource.FROM_EVENT)

    @property
    def duration_outside_events(self) -> float:
        return self._total(source=AlarmSource.OUTSIDE_EVENT)

    @property
    def total_duration(self) -> float:
        return self.duration_from_events + self.duration_outside_events

    @property
    def total_exceeded_max(self) -> float:
        return self._total(kind=AlarmKind.EXCEEDED_MAX)

    @property
    def total_exceeded_min(self) -> float:
        return self._total(kind=AlarmKind.EXCEEDED_MIN)
