# tripalarm/core/trip_alarms.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .channel_alarms import ChannelAlarmSet
from .exceptions import ChannelNotFound


@dataclass(slots=True)
class TripAlarmSet:
    """
    Alarm results for one trip: one ChannelAlarmSet per channel name.

    Design goals:
    - dict-like access: alarms["Temp1"]
    - channel sets created on demand through get_or_create()
    - every total is recomputed from the interval lists on each access
    """
    trip_name: str = ""
    channels: dict[str, ChannelAlarmSet] = field(default_factory=dict, repr=False)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.channels)

    def __contains__(self, name: object) -> bool:
        return name in self.channels

    def keys(self) -> Iterable[str]:
        return self.channels.keys()

    def items(self) -> Iterable[tuple[str, ChannelAlarmSet]]:
        return self.channels.items()

    def values(self) -> Iterable[ChannelAlarmSet]:
        return self.channels.values()

    def __getitem__(self, name: str) -> ChannelAlarmSet:
        try:
            return self.channels[name]
        except KeyError as e:
            raise ChannelNotFound(name) from e

    def get(self, name: str, default: ChannelAlarmSet | None = None) -> ChannelAlarmSet | None:
        return self.channels.get(name, default)

    @property
    def channel_names(self) -> list[str]:
        return list(self.channels)

    def get_or_create(self, name: str) -> ChannelAlarmSet:
        """
        Return the set for `name`, creating an empty one on first use.

        This is the only place channel sets are created, so it is the one
        spot to guard if channels are ever processed concurrently.
        """
        channel_set = self.channels.get(name)
        if channel_set is None:
            channel_set = ChannelAlarmSet(channel_id=name)
            self.channels[name] = channel_set
        return channel_set

    # ---- aggregates (seconds) ----
    @property
    def interval_count(self) -> int:
        return sum(len(ch) for ch in self.channels.values())

    @property
    def duration_from_events(self) -> float:
        return sum((ch.duration_from_events for ch in self.channels.values()), 0.0)

    @property
    def duration_outside_events(self) -> float:
        return sum((ch.duration_outside_events for ch in self.channels.values()), 0.0)

    @property
    def total_duration(self) -> float:
        return self.duration_from_events + self.duration_outside_events

    @property
    def total_exceeded_max(self) -> float:
        return sum((ch.total_exceeded_max for ch in self.channels.values()), 0.0)

    @property
    def total_exceeded_min(self) -> float:
        return sum((ch.total_exceeded_min for ch in self.channels.values()), 0.0)
