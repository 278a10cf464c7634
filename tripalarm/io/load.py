# tripalarm/io/load.py
from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel, to_pascal

from tripalarm.core import (
    ChannelSettings,
    CoreError,
    TripRecord,
    UploadDataPoint,
    UploadEvent,
)


logger = logging.getLogger(__name__)


class TripLoadError(CoreError):
    """Raised when a trip document cannot be read or does not have the expected shape."""


def _field_aliases(name: str) -> AliasChoices:
    # Accept "TripUploadEvents", "tripUploadEvents" and "trip_upload_events".
    return AliasChoices(to_pascal(name), to_camel(name), name)


class _Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=_field_aliases),
        extra="ignore",
    )


class _EventDoc(_Document):
    channel: str
    timestamp: datetime | float
    alarm_data: str | float
    event_type: int


class _DataDoc(_Document):
    channel: str
    timestamp: datetime | float
    data: float


class _SettingDoc(_Document):
    channel_name: str
    data_type: str = ""
    min: float = 0.0
    max: float = 0.0


class _TripDoc(_Document):
    name: str = ""
    start_time: datetime | float
    end_time: datetime | float
    trip_upload_events: list[_EventDoc] = Field(default_factory=list)
    trip_upload_data: list[_DataDoc] = Field(default_factory=list)
    trip_settings: list[_SettingDoc] = Field(default_factory=list)


def _seconds(value: datetime | float) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def parse_trip(data: Mapping[str, Any]) -> TripRecord:
    """Build a TripRecord from an already-decoded trip document."""
    try:
        doc = _TripDoc.model_validate(data)
    except ValidationError as e:
        raise TripLoadError(f"Invalid trip document: {e}") from e

    return TripRecord(
        name=doc.name,
        start_time=_seconds(doc.start_time),
        end_time=_seconds(doc.end_time),
        events=[
            UploadEvent(
                channel=e.channel,
                timestamp=_seconds(e.timestamp),
                raw_value=str(e.alarm_data),
                event_type=e.event_type,
            )
            for e in doc.trip_upload_events
        ],
        data_points=[
            UploadDataPoint(channel=d.channel, timestamp=_seconds(d.timestamp), value=d.data)
            for d in doc.trip_upload_data
        ],
        settings=[
            ChannelSettings(
                channel_name=s.channel_name,
                data_type=s.data_type,
                min=s.min,
                max=s.max,
            )
            for s in doc.trip_settings
        ],
    )


def load_trip(path: str | Path) -> TripRecord:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TripLoadError(f"Cannot read trip document '{path}': {e}") from e

    if not isinstance(data, Mapping):
        raise TripLoadError(f"Trip document '{path}' must contain a JSON object.")

    trip = parse_trip(data)
    logger.info(
        "Loaded trip '%s' from %s: %d events, %d data points, %d channel settings",
        trip.name, path, len(trip.events), len(trip.data_points), len(trip.settings),
    )
    return trip
